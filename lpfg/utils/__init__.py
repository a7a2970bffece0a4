"""
Utilities module for logging and spectrum analysis.
"""

from .analysis import DipCharacteristics, characterize_dip
from .logging import get_logger, init_logging, JsonFormatter

__all__ = [
    'DipCharacteristics',
    'characterize_dip',
    'get_logger',
    'init_logging',
    'JsonFormatter',
]
