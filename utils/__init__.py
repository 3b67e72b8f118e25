"""Shared system helpers."""
