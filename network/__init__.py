"""Interface fact readers: sysfs attributes and assigned addresses."""
