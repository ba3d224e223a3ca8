"""
===================================================
Core infrastructure package for the query client.
===================================================

This package provides centralized configuration management and logging
infrastructure used throughout the application.

Modules:
    config: Configuration management from environment variables
    logger: Centralized logging configuration and utilities

Example:
    >>> from core.config import config
    >>> from core.logger import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info(f"Opening {config.db_path}")
"""

__version__ = "1.0.0"
__all__ = ['get_logger', 'get_module_logger', 'setup_logging', 'config', 'Config']

from core.config import Config, config
from core.logger import get_logger, get_module_logger, setup_logging
