"""
Logging configuration for the application.

One stdout handler with a pipe-separated format. The store logs every
read and write at DEBUG; those lines only appear when store tracing is
switched on, independently of the root level.
Never logs request bodies or question contents.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

STORE_LOGGER = "qa_service.infrastructure"


def _parse_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str = "INFO", trace_store: bool = False) -> None:
    """Configure logging for the service.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
        trace_store: Emit the store's per-operation DEBUG lines.
    """
    root_level = _parse_level(level)
    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    store_level = logging.DEBUG if trace_store else max(root_level, logging.INFO)
    logging.getLogger(STORE_LOGGER).setLevel(store_level)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    # Limit breaches are already logged by the error mapper
    logging.getLogger("slowapi").setLevel(logging.ERROR)
