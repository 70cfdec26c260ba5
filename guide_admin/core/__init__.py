"""Core building blocks: config, models, backend client and services."""
