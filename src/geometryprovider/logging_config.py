"""
Logging Configuration
The package only logs; it installs a NullHandler on import and leaves output
to the host. Hosts without their own setup can call `setup_logging`.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "geometryprovider"
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def install_null_handler() -> None:
    """Silences the 'no handlers could be found' fallback for library use."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    fmt: str = DEFAULT_FORMAT,
    datefmt: Optional[str] = '%H:%M:%S'
) -> logging.Logger:
    """
    Routes the 'geometryprovider' logger to stdout and optionally a file.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        fmt: Record format, for hosts that want their own layout.
        datefmt: Timestamp format passed to the formatter.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Replace our own handlers (NullHandler included) on repeated setup
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt, datefmt=datefmt)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger
