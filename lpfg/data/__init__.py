"""
Data module for reading spectrum record files and driving batch evaluation.
"""

from .loader import (
    RecordFormat, ParameterTableLoader, RawPairsLoader, get_loader, detect_format,
    load_records, read_parameter_table, read_raw_pairs, validate_format
)
from .batch import (
    ParameterEvaluation, evaluate_parameter_file, report_measured_file,
    show_measured, show_parameters
)

__all__ = [
    'RecordFormat',
    'ParameterTableLoader',
    'RawPairsLoader',
    'get_loader',
    'detect_format',
    'load_records',
    'read_parameter_table',
    'read_raw_pairs',
    'validate_format',
    'ParameterEvaluation',
    'evaluate_parameter_file',
    'report_measured_file',
    'show_measured',
    'show_parameters',
]
