"""
Core module for the LPFG spectra system.

This module provides value types, configuration, exceptions and interfaces
shared by the parser, the model evaluator and the batch driver.
"""

from .config import IngestConfig, LoggingConfig
from .data_structures import (
    WavelengthAxis, ModelParameters, SpectrumPoint, MeasuredSpectrum,
    SimulatedSpectrum, as_axis
)
from .exceptions import (
    SpectraError, SourceUnavailableError, MalformedRecordError, ConfigurationError
)
from .interfaces import IRecordLoader

__all__ = [
    'IngestConfig',
    'LoggingConfig',
    'WavelengthAxis',
    'ModelParameters',
    'SpectrumPoint',
    'MeasuredSpectrum',
    'SimulatedSpectrum',
    'as_axis',
    'SpectraError',
    'SourceUnavailableError',
    'MalformedRecordError',
    'ConfigurationError',
    'IRecordLoader',
]
