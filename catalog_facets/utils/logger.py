"""
Logging for the filter engine.

Every module logs through a child of the "catalog_facets" logger. Dropped
filter keys and defaulted values are logged at DEBUG, so LOG_LEVEL=DEBUG
shows why a shared link lost its selections.
"""
import logging
import os
import sys

# Get log level from environment variable (default: INFO)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logger = logging.getLogger("catalog_facets")
logger.setLevel(LOG_LEVEL)

if not logger.handlers:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(LOG_LEVEL)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

# Keep filter chatter out of the host application's root handlers
logger.propagate = False


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Module path below the package, e.g. "filtering.validator"

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"catalog_facets.{name}")
    return logger
