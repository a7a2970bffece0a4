"""
LPFG spectra: ingestion of spectrum record files and closed-form Lorentzian /
Gaussian models of long-period fiber grating dip spectra.
"""

from .core import (
    IngestConfig, LoggingConfig, WavelengthAxis, ModelParameters, SpectrumPoint,
    MeasuredSpectrum, SimulatedSpectrum, SpectraError, SourceUnavailableError,
    MalformedRecordError, ConfigurationError
)
from .models import transmission_spectra, my_gauss, transmission_spectra_2, evaluate_parameters
from .data import (
    RecordFormat, load_records, read_parameter_table, read_raw_pairs,
    evaluate_parameter_file, report_measured_file
)
from .utils import characterize_dip
from .shell import select_and_ingest, evaluate, IngestionResult

__version__ = "0.1.0"

__all__ = [
    'IngestConfig',
    'LoggingConfig',
    'WavelengthAxis',
    'ModelParameters',
    'SpectrumPoint',
    'MeasuredSpectrum',
    'SimulatedSpectrum',
    'SpectraError',
    'SourceUnavailableError',
    'MalformedRecordError',
    'ConfigurationError',
    'transmission_spectra',
    'my_gauss',
    'transmission_spectra_2',
    'evaluate_parameters',
    'RecordFormat',
    'load_records',
    'read_parameter_table',
    'read_raw_pairs',
    'evaluate_parameter_file',
    'report_measured_file',
    'characterize_dip',
    'select_and_ingest',
    'evaluate',
    'IngestionResult',
]
