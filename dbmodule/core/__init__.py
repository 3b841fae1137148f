"""
Core utilities and configuration for dbmodule.

This package provides core functionality including logging configuration,
settings, the error taxonomy and the database layer.
"""

from dbmodule.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
