"""
Utility functions and helpers.
"""

from .logger import setup_logger, LoggerMixin
from .config_loader import ConfigLoader, DEFAULT_CONFIG, merge_config
from .errors import DataFormatError
from .helpers import *

__all__ = [
    'setup_logger',
    'LoggerMixin',
    'ConfigLoader',
    'DEFAULT_CONFIG',
    'merge_config',
    'DataFormatError',
]
