"""
Entry points for a desktop or web front end.

The front end owns file choosing and rendering; it hands a path (or a chooser
callback) to :func:`select_and_ingest` and parameter sets to :func:`evaluate`.
Errors the user can act on come back as diagnostic strings rather than
exceptions.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Union

from .core.config import IngestConfig
from .core.data_structures import MeasuredSpectrum, ModelParameters, SimulatedSpectrum
from .core.exceptions import MalformedRecordError, SourceUnavailableError
from .data.loader import RecordFormat, detect_format, load_records
from .models.registry import evaluate_parameters
from .utils.logging import get_logger

logger = get_logger(__name__)

NO_FILE_SELECTED = "No file was selected."


@dataclass(frozen=True)
class IngestionResult:
    """Records read from one file."""

    path: str
    record_format: RecordFormat
    records: tuple

    @property
    def parameters(self) -> List[ModelParameters]:
        if self.record_format is not RecordFormat.PARAMETER_TABLE:
            return []
        return list(self.records)

    @property
    def spectrum(self) -> Optional[MeasuredSpectrum]:
        if self.record_format is not RecordFormat.RAW_PAIRS:
            return None
        return MeasuredSpectrum(points=self.records, source=self.path)

    def __len__(self) -> int:
        return len(self.records)

    def summary(self) -> str:
        kind = "parameter rows" if self.record_format is RecordFormat.PARAMETER_TABLE else "spectrum points"
        return f"File: {self.path} ({len(self.records)} {kind})"


def select_and_ingest(path_hint: Optional[str],
                      chooser: Optional[Callable[[], Optional[str]]] = None,
                      record_format: Optional[Union[RecordFormat, str]] = None,
                      config: Optional[IngestConfig] = None) -> Union[IngestionResult, str]:
    """
    Resolve a file path and read its records.

    Args:
        path_hint: Path typed, dropped or pasted by the user. When blank,
            ``chooser`` is asked for one.
        chooser: Callback that opens a file chooser and returns a path or None
        record_format: Declared format; detected from the extension when None
        config: Ingestion configuration

    Returns:
        IngestionResult on success, otherwise a human-readable diagnostic
    """
    path = (path_hint or "").strip()
    if not path and chooser is not None:
        path = (chooser() or "").strip()
    if not path:
        logger.warning(NO_FILE_SELECTED)
        return NO_FILE_SELECTED

    path = str(Path(path).expanduser())
    record_format = RecordFormat(record_format) if record_format else detect_format(path)

    try:
        records = load_records(path, record_format, config)
    except SourceUnavailableError as e:
        logger.warning("Could not open %s: %s", path, e.reason)
        return f"Could not open {path}: {e.reason}"
    except MalformedRecordError as e:
        logger.warning("Malformed record in %s: %s", path, e)
        return f"Could not read {path}: row {e.row}, column {e.column}: {e.reason}"

    logger.info("Ingested %d records from %s", len(records), path)
    return IngestionResult(path=path, record_format=record_format, records=tuple(records))


def evaluate(model_kind: str,
             axis,
             parameters: ModelParameters,
             fcn: Optional[float] = None) -> SimulatedSpectrum:
    """
    Evaluate a dip model for display.

    Args:
        model_kind: ``lorentzian``, ``gaussian`` or ``hybrid``
        axis: Wavelength axis
        parameters: Dip parameters
        fcn: Selector, required by ``hybrid``

    Returns:
        SimulatedSpectrum aligned with ``axis``
    """
    return evaluate_parameters(model_kind, axis, parameters, fcn)
