"""Logging configuration shared by the order cache service."""

import sys
from typing import Optional

from loguru import logger as loguru_logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[service]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[service]} | {name}:{line} - {message}"


def setup_service_logger(
    service_name: str,
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    json_logs: bool = False,
) -> loguru_logger:
    """Configure loguru for a request-serving process.

    Every record carries the service name, including records from modules
    that log through the bare loguru logger. Sinks are enqueued so a slow
    stderr or disk never holds up a request.

    Args:
        service_name: Name stamped on every record (e.g., 'order-cache-service')
        log_level: Minimum level to emit (default: INFO)
        log_file: Optional path to a size-rotated log file
        json_logs: Emit one JSON object per line on stderr instead of colored text

    Returns:
        logger: loguru logger bound to the service name
    """
    loguru_logger.remove()
    loguru_logger.configure(extra={"service": service_name})

    if json_logs:
        loguru_logger.add(sys.stderr, level=log_level, serialize=True, enqueue=True)
    else:
        loguru_logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True, enqueue=True)

    if log_file:
        loguru_logger.add(
            log_file,
            level=log_level,
            format=FILE_FORMAT,
            enqueue=True,
            rotation="10 MB",
            retention=5,
        )

    return loguru_logger.bind(service=service_name)
