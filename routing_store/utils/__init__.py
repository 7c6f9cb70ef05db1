"""Utilities package."""

from .logger import get_app_logger, setup_logger, init_app_logger
from .clock import TimeProvider, SystemTimeProvider

__all__ = [
    "get_app_logger",
    "setup_logger",
    "init_app_logger",
    "TimeProvider",
    "SystemTimeProvider",
]
