"""Configuration — project config file, process settings, logging."""
