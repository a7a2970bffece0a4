"""
Record loaders for delimited LPFG spectrum files.

Two formats are supported:

- parameter tables: comma separated, one header row, columns ``a, x0, w, bias``;
  standard CSV double quotes around a field are removed
- raw pairs: semicolon separated, no header, ``wavelength; transmission``

Files are read whole and parsed fail-fast: the first malformed row aborts the
load and nothing is returned for that file.
"""

import csv
from abc import abstractmethod
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..core.config import IngestConfig
from ..core.data_structures import ModelParameters, SpectrumPoint
from ..core.exceptions import MalformedRecordError, SourceUnavailableError
from ..core.interfaces import IRecordLoader
from ..utils.logging import get_logger

logger = get_logger(__name__)

# Literals that legitimately parse to NaN, as opposed to coercion failures
NAN_LITERALS = ('nan', '+nan', '-nan')


class RecordFormat(Enum):
    """Declared layout of a record file."""

    PARAMETER_TABLE = 'parameters'
    RAW_PAIRS = 'pairs'


class DelimitedRecordLoader(IRecordLoader):
    """
    Base loader for fixed-width numeric rows.

    Subclasses set the record type, the column names and whether the first
    row is a header, and build records from validated float rows.
    """

    columns: Tuple[str, ...] = ()
    quoting: int = csv.QUOTE_NONE

    def __init__(self, delimiter: str, has_header: bool, config: Optional[IngestConfig] = None):
        """
        Initialize loader.

        Args:
            delimiter: Single-character column separator
            has_header: Skip the first non-blank row
            config: Ingestion configuration (encoding)
        """
        self.config = config or IngestConfig()
        self.config.validate()
        self.delimiter = delimiter
        self.has_header = has_header

    def load_file(self, filepath: Union[str, Path]) -> List:
        """
        Load every record of a file.

        Args:
            filepath: Path to the file

        Returns:
            Records in file order

        Raises:
            SourceUnavailableError: If the file cannot be read
            MalformedRecordError: If any row has the wrong shape or a non-numeric field
        """
        filepath = Path(filepath)
        text = self._read_text(filepath)
        line_numbers, lines = self._non_blank_lines(text)

        if self.has_header and lines:
            self._check_header(filepath, lines[0])
            line_numbers, lines = line_numbers[1:], lines[1:]

        if not lines:
            logger.debug("No records in %s", filepath)
            return []

        count_error = self._find_field_count_error(filepath, line_numbers, lines)
        checked = len(lines) if count_error is None else count_error[0]
        values = self._to_numeric(filepath, line_numbers[:checked], lines[:checked])
        if count_error is not None:
            raise count_error[1]
        records = [self.make_record(row) for row in values]

        logger.debug("Read %d records from %s", len(records), filepath)
        return records

    def validate_format(self, filepath: Union[str, Path]) -> bool:
        """
        Validate file format.

        Args:
            filepath: Path to the file

        Returns:
            True if the whole file loads without errors
        """
        try:
            self.load_file(filepath)
        except (SourceUnavailableError, MalformedRecordError):
            return False
        return True

    @abstractmethod
    def make_record(self, row: Sequence[float]):
        """Build one record from a row of floats in column order."""
        pass

    def _read_text(self, filepath: Path) -> str:
        """Read the whole file, mapping I/O and decoding failures to SourceUnavailableError."""
        try:
            with open(filepath, 'r', encoding=self.config.encoding, newline='') as fh:
                return fh.read()
        except FileNotFoundError as e:
            raise SourceUnavailableError(filepath, "file not found") from e
        except PermissionError as e:
            raise SourceUnavailableError(filepath, "permission denied") from e
        except IsADirectoryError as e:
            raise SourceUnavailableError(filepath, "is a directory") from e
        except UnicodeDecodeError as e:
            raise SourceUnavailableError(
                filepath, f"not valid {self.config.encoding} text"
            ) from e
        except OSError as e:
            raise SourceUnavailableError(filepath, e.strerror or str(e)) from e

    def _split(self, line: str) -> List[str]:
        return next(csv.reader([line], delimiter=self.delimiter, quoting=self.quoting))

    @staticmethod
    def _non_blank_lines(text: str) -> Tuple[List[int], List[str]]:
        numbered = [
            (number, line)
            for number, line in enumerate(text.splitlines(), start=1)
            if line.strip()
        ]
        return [n for n, _ in numbered], [line for _, line in numbered]

    def _check_header(self, filepath: Path, header: str):
        names = tuple(name.strip() for name in self._split(header))
        if names != self.columns:
            logger.warning(
                "Unexpected header in %s: %s (reading columns as %s)",
                filepath, ', '.join(names), ', '.join(self.columns)
            )

    def _find_field_count_error(self, filepath: Path, line_numbers: List[int],
                                lines: List[str]) -> Optional[Tuple[int, MalformedRecordError]]:
        """Locate the first row whose field count differs from the column count."""
        expected = len(self.columns)
        for index, (number, line) in enumerate(zip(line_numbers, lines)):
            count = len(self._split(line))
            if count < expected:
                return index, MalformedRecordError(
                    filepath, number, count + 1,
                    f"expected {expected} fields, found {count} "
                    f"(missing '{self.columns[count]}')"
                )
            if count > expected:
                return index, MalformedRecordError(
                    filepath, number, expected + 1,
                    f"expected {expected} fields, found {count}"
                )
        return None

    def _to_numeric(self, filepath: Path, line_numbers: List[int], lines: List[str]) -> np.ndarray:
        """Convert validated rows to floats, reporting the first non-numeric cell."""
        if not lines:
            return np.empty((0, len(self.columns)), dtype=np.float64)
        frame = pd.DataFrame(
            [self._split(line) for line in lines],
            columns=list(self.columns),
            dtype=object
        )
        cells = frame.astype(object).apply(lambda col: col.str.strip())
        numeric = cells.apply(lambda col: pd.to_numeric(col, errors='coerce'))
        nan_literals = cells.apply(lambda col: col.str.lower().isin(NAN_LITERALS))

        bad = (numeric.isna() & ~nan_literals).to_numpy()
        if bad.any():
            row, col = (int(i[0]) for i in np.nonzero(bad))
            value = frame.iat[row, col]
            raise MalformedRecordError(
                filepath, line_numbers[row], col + 1,
                f"'{self.columns[col]}' is not a number: {value!r}"
            )

        # to_numeric only flags bad cells; float() per cell gives the correctly rounded value
        return cells.to_numpy(dtype=object).astype(np.float64)


class ParameterTableLoader(DelimitedRecordLoader):
    """Loader for model-parameter tables (``a, x0, w, bias``)."""

    columns = ModelParameters.FIELDS
    quoting = csv.QUOTE_MINIMAL

    def __init__(self, config: Optional[IngestConfig] = None):
        config = config or IngestConfig()
        super().__init__(config.parameter_delimiter, config.parameter_header, config)

    def make_record(self, row: Sequence[float]) -> ModelParameters:
        a, x0, w, bias = (float(v) for v in row)
        return ModelParameters(a=a, x0=x0, w=w, bias=bias)


class RawPairsLoader(DelimitedRecordLoader):
    """Loader for raw measured spectra (``wavelength; transmission``)."""

    columns = SpectrumPoint.FIELDS

    def __init__(self, config: Optional[IngestConfig] = None):
        config = config or IngestConfig()
        super().__init__(config.pairs_delimiter, False, config)

    def make_record(self, row: Sequence[float]) -> SpectrumPoint:
        wavelength, transmission = (float(v) for v in row)
        return SpectrumPoint(wavelength=wavelength, transmission=transmission)


_LOADERS = {
    RecordFormat.PARAMETER_TABLE: ParameterTableLoader,
    RecordFormat.RAW_PAIRS: RawPairsLoader,
}


def get_loader(record_format: RecordFormat,
               config: Optional[IngestConfig] = None) -> DelimitedRecordLoader:
    """Create the loader for a record format."""
    return _LOADERS[RecordFormat(record_format)](config)


def detect_format(filepath: Union[str, Path]) -> RecordFormat:
    """Guess the record format from the file extension (``.csv`` is a parameter table)."""
    if Path(filepath).suffix.lower() == '.csv':
        return RecordFormat.PARAMETER_TABLE
    return RecordFormat.RAW_PAIRS


def load_records(filepath: Union[str, Path],
                 record_format: RecordFormat,
                 config: Optional[IngestConfig] = None) -> List:
    """Load a file in the declared format."""
    return get_loader(record_format, config).load_file(filepath)


def read_parameter_table(filepath: Union[str, Path],
                         config: Optional[IngestConfig] = None) -> List[ModelParameters]:
    """Read a parameter table into ModelParameters, in file order."""
    return ParameterTableLoader(config).load_file(filepath)


def read_raw_pairs(filepath: Union[str, Path],
                   config: Optional[IngestConfig] = None) -> List[SpectrumPoint]:
    """Read a raw pairs file into SpectrumPoints, in file order."""
    return RawPairsLoader(config).load_file(filepath)


def validate_format(filepath: Union[str, Path],
                    record_format: RecordFormat,
                    config: Optional[IngestConfig] = None) -> bool:
    """Check whether a file loads cleanly in the declared format."""
    return get_loader(record_format, config).validate_format(filepath)
