"""
Core data structures for LPFG spectrum handling.

Provides immutable value containers for wavelength axes, model parameters,
measured spectra and simulated spectra.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple, Union

import numpy as np
import pandas as pd


def _frozen_array(values) -> np.ndarray:
    array = np.array(values, dtype=np.float64, copy=True)
    array.setflags(write=False)
    return array


class WavelengthAxis:
    """Immutable, ordered sequence of wavelength samples."""

    __slots__ = ("_values",)

    def __init__(self, values):
        values = _frozen_array(values)
        if values.ndim != 1:
            raise ValueError(f"Wavelength axis must be one-dimensional, got shape {values.shape}")
        self._values = values

    @classmethod
    def from_range(cls, start: float, stop: float, step: float) -> 'WavelengthAxis':
        """
        Build an evenly spaced axis from ``start`` to ``stop``.

        ``stop`` is included when it falls on the grid.
        """
        if step <= 0:
            raise ValueError("step must be positive")
        if stop < start:
            raise ValueError("stop must not be lower than start")
        n_steps = int(np.floor((stop - start) / step + 1e-9))
        return cls(start + step * np.arange(n_steps + 1))

    @classmethod
    def linspace(cls, start: float, stop: float, num: int) -> 'WavelengthAxis':
        """Build an axis of ``num`` evenly spaced samples, both ends included."""
        if num < 1:
            raise ValueError("num must be at least 1")
        return cls(np.linspace(start, stop, num))

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the samples."""
        return self._values

    def __array__(self, dtype=None, copy=None):
        if dtype is None or np.dtype(dtype) == self._values.dtype:
            return self._values.copy() if copy else self._values
        if copy is False:
            raise ValueError(f"Cannot convert WavelengthAxis to {np.dtype(dtype)} without a copy")
        return self._values.astype(dtype)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, WavelengthAxis):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    __hash__ = None

    def __repr__(self) -> str:
        if len(self._values) == 0:
            return "WavelengthAxis(points=0)"
        return (f"WavelengthAxis(points={len(self._values)}, "
                f"range=[{self._values[0]:.3f}-{self._values[-1]:.3f}])")


def as_axis(values: Union[WavelengthAxis, Any]) -> WavelengthAxis:
    """Return ``values`` as a WavelengthAxis, reusing it when it already is one."""
    if isinstance(values, WavelengthAxis):
        return values
    return WavelengthAxis(values)


@dataclass(frozen=True)
class ModelParameters:
    """Parameters of one dip model: attenuation, resonance, FWHM and insertion loss."""

    a: float
    x0: float
    w: float
    bias: float

    FIELDS = ("a", "x0", "w", "bias")

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.a, self.x0, self.w, self.bias)


@dataclass(frozen=True)
class SpectrumPoint:
    """A single measured (wavelength, transmission) sample."""

    wavelength: float
    transmission: float

    FIELDS = ("wavelength", "transmission")


@dataclass(frozen=True)
class MeasuredSpectrum:
    """Ordered spectrum points read from a raw two-column file."""

    points: Tuple[SpectrumPoint, ...]
    source: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'points', tuple(self.points))

    @property
    def wavelengths(self) -> np.ndarray:
        return np.array([p.wavelength for p in self.points], dtype=np.float64)

    @property
    def transmission(self) -> np.ndarray:
        return np.array([p.transmission for p in self.points], dtype=np.float64)

    def axis(self) -> WavelengthAxis:
        return WavelengthAxis(self.wavelengths)

    def to_frame(self) -> pd.DataFrame:
        """Convert to a two-column DataFrame."""
        return pd.DataFrame({
            'wavelength': self.wavelengths,
            'transmission': self.transmission,
        })

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[SpectrumPoint]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]


@dataclass(frozen=True, eq=False)
class SimulatedSpectrum:
    """Transmission values evaluated by a model over a wavelength axis."""

    axis: WavelengthAxis
    transmission: np.ndarray
    model: str
    parameters: ModelParameters
    selector: Optional[float] = None

    def __post_init__(self):
        """Validate data after initialization."""
        object.__setattr__(self, 'axis', as_axis(self.axis))
        object.__setattr__(self, 'transmission', _frozen_array(self.transmission))
        if len(self.axis) != len(self.transmission):
            raise ValueError(
                f"Axis and transmission must have same length "
                f"({len(self.axis)} != {len(self.transmission)})"
            )

    def to_frame(self) -> pd.DataFrame:
        """Convert to a two-column DataFrame."""
        return pd.DataFrame({
            'wavelength': np.asarray(self.axis),
            'transmission': self.transmission,
        })

    def __len__(self) -> int:
        return len(self.transmission)

    def __repr__(self) -> str:
        return (f"SimulatedSpectrum(model={self.model}, points={len(self)}, "
                f"parameters={self.parameters})")


__all__ = [
    'WavelengthAxis',
    'as_axis',
    'ModelParameters',
    'SpectrumPoint',
    'MeasuredSpectrum',
    'SimulatedSpectrum',
]
