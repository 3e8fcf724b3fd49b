"""
Logging utilities for the Iris chart pipeline.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Union


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper())


def setup_logger(
    name: str = 'irisplot',
    log_dir: Optional[str] = None,
    log_file: Optional[str] = None,
    level: Union[str, int] = 'INFO',
    console_output: bool = True
) -> logging.Logger:
    """
    Configure a logger with console and optional file handlers.

    Parameters
    ----------
    name : str
        Logger name
    log_dir : str, optional
        Directory for log files (no file handler when omitted)
    log_file : str, optional
        Log file name (``<name>_<timestamp>.log`` if not provided)
    level : str or int
        Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    console_output : bool
        Whether to log to stdout

    Returns
    -------
    logging.Logger
        Configured logger instance
    """
    numeric_level = _resolve_level(level)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Drop handlers from a previous call so repeated setup does not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        if log_file is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = f"{name}_{timestamp}.log"

        file_handler = logging.FileHandler(log_path / log_file, encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


class LoggerMixin:
    """
    Mixin giving each class a logger under the ``irisplot`` namespace.
    """

    @property
    def logger(self) -> logging.Logger:
        """Get or create the logger for this class."""
        if not hasattr(self, '_logger'):
            self._logger = logging.getLogger(f"irisplot.{self.__class__.__name__}")
        return self._logger
