"""
Core package — cross-cutting concerns.

Modules:
    config          — environment variables & settings
    logging_config  — pretty / JSON logging with dispatch context
    errors          — exception hierarchy
"""
