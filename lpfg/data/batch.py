"""
Batch driver: runs whole files through the parser and, optionally, a model.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, TextIO, Union

from ..core.config import IngestConfig
from ..core.data_structures import MeasuredSpectrum, ModelParameters, SimulatedSpectrum
from ..core.exceptions import ConfigurationError
from ..models.registry import evaluate_parameters
from ..utils.logging import get_logger
from .loader import read_parameter_table, read_raw_pairs

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class ParameterEvaluation:
    """One parsed parameter row and, when requested, its simulated spectrum."""

    parameters: ModelParameters
    spectrum: Optional[SimulatedSpectrum] = None


def evaluate_parameter_file(filepath: Union[str, Path],
                            axis=None,
                            model: Optional[str] = None,
                            fcn: Optional[float] = None,
                            config: Optional[IngestConfig] = None) -> List[ParameterEvaluation]:
    """
    Parse a parameter table and optionally evaluate every row.

    Without ``axis`` and ``model`` the rows are logged and returned with no
    spectrum, leaving evaluation to the caller. A malformed row aborts the
    whole file.

    Args:
        filepath: Path to the parameter table
        axis: Wavelength axis to evaluate over
        model: Registered model name
        fcn: Selector for models that take one
        config: Ingestion configuration

    Returns:
        One ParameterEvaluation per data row, in file order
    """
    if (axis is None) != (model is None):
        raise ConfigurationError("axis and model must be given together")

    rows = read_parameter_table(filepath, config)
    results = []
    for index, parameters in enumerate(rows, start=1):
        logger.info(
            "%s row %d: %s", filepath, index, parameters,
            extra={'extra_fields': {'row': index, 'parameters': parameters.as_tuple()}}
        )
        spectrum = None
        if model is not None:
            spectrum = evaluate_parameters(model, axis, parameters, fcn)
        results.append(ParameterEvaluation(parameters=parameters, spectrum=spectrum))

    return results


def report_measured_file(filepath: Union[str, Path],
                         config: Optional[IngestConfig] = None) -> MeasuredSpectrum:
    """
    Parse a raw pairs file into a measured spectrum.

    Args:
        filepath: Path to the raw pairs file
        config: Ingestion configuration

    Returns:
        MeasuredSpectrum with the points in file order
    """
    points = read_raw_pairs(filepath, config)
    logger.info("%s: %d spectrum points", filepath, len(points))
    return MeasuredSpectrum(points=points, source=str(filepath))


def show_measured(filepath: Union[str, Path],
                  stream: Optional[TextIO] = None,
                  config: Optional[IngestConfig] = None) -> MeasuredSpectrum:
    """Write a numbered ``i: wavelength, transmission`` listing of a raw pairs file."""
    stream = stream or sys.stdout
    spectrum = report_measured_file(filepath, config)
    for i, point in enumerate(spectrum, start=1):
        stream.write(f"{i}: {point.wavelength}, {point.transmission}\n")
    return spectrum


def show_parameters(filepath: Union[str, Path],
                    stream: Optional[TextIO] = None,
                    config: Optional[IngestConfig] = None) -> List[ModelParameters]:
    """Write one line per parameter row of a parameter table."""
    stream = stream or sys.stdout
    rows = [result.parameters for result in evaluate_parameter_file(filepath, config=config)]
    for parameters in rows:
        stream.write(f"{parameters}\n")
    return rows
