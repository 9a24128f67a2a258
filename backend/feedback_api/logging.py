"""Process-wide logging configuration.

Called once from the application bootstrap. Every other module obtains its
logger with ``logging.getLogger(__name__)`` and never configures handlers.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR). Unknown names
            fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Suppress per-request access lines
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
