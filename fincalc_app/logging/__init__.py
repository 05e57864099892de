"""
Logging configuration and utilities for the finance engine.
"""
from .config import configure_logging, get_engine_logger, get_logger

__all__ = ["configure_logging", "get_engine_logger", "get_logger"]
