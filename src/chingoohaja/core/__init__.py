"""Core services: lifecycle, errors, validation, config, logging."""
