"""
Interfaces for the LPFG spectra system.

Defines contracts for pluggable record loaders.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union


class IRecordLoader(ABC):
    """Interface for delimited record loaders."""

    @abstractmethod
    def load_file(self, filepath: Union[str, Path]) -> List:
        """Load every record of a file, in file order."""
        pass

    @abstractmethod
    def validate_format(self, filepath: Union[str, Path]) -> bool:
        """Check whether a file loads cleanly with this loader."""
        pass
