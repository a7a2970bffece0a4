"""
Custom exceptions for the LPFG spectra system.
"""


class SpectraError(Exception):
    """Base exception for spectrum ingestion and modelling errors."""
    pass


class SourceUnavailableError(SpectraError):
    """Raised when an input file cannot be opened or read."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not read {self.path}: {reason}")


class MalformedRecordError(SpectraError):
    """Raised when a row does not match the expected record shape."""

    def __init__(self, path, row: int, column: int, reason: str):
        self.path = str(path)
        self.row = row
        self.column = column
        self.reason = reason
        super().__init__(
            f"Malformed record in {self.path} at row {row}, column {column}: {reason}"
        )


class ConfigurationError(SpectraError):
    """Raised when configuration or model selection is invalid."""
    pass
