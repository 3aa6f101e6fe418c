# src/hexweave/log.py
# Library modules only ask for loggers; handlers are the driver's business.

import logging
import sys

ROOT_NAME = "hexweave"
LOG_FORMAT = "[%(asctime)s] - [%(name)s] - [%(levelname)s] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(ROOT_NAME).addHandler(logging.NullHandler())


def get_logger(name=None):
    """
    Get a logger instance for a specific module.

    Args:
        name: Name of the logger (typically __name__)

    Returns:
        logging.Logger instance
    """
    return logging.getLogger(name or ROOT_NAME)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Console logging for the command-line tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    return get_logger()
