import logging
import sys
from pathlib import Path
from typing import Union

LOGGER_NAME = "draughts_engine"


def setup_logger(debug: bool = False, log_file: Union[str, Path, None] = None) -> logging.Logger:
    """
    Setup the package logger.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Write to this file instead of stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    handler: logging.Handler
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, mode='w')
    else:
        handler = logging.StreamHandler(sys.stderr)

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
