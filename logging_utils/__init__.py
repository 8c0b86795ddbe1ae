"""Logging utilities for the order cache service."""

from .config import setup_service_logger

__all__ = [
    "setup_service_logger",
]
