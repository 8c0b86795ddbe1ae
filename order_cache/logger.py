"""Logger module for logging messages."""

import os

from logging_utils import setup_service_logger

logger = setup_service_logger(
    "order-cache-service",
    log_level=os.getenv("LOG_LEVEL", "INFO"),
    log_file=os.getenv("LOG_FILE"),
    json_logs=os.getenv("LOG_JSON", "").lower() in ("1", "true", "yes"),
)

__all__ = ["logger"]
