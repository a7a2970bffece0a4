"""
Closed-form dip models for long-period fiber grating (LPFG) spectra.

Each function maps a wavelength axis and the dip parameters to a transmission
array of the same length:

- ``transmission_spectra``: asymmetric Lorentzian dip
- ``my_gauss``: Gaussian dip
- ``transmission_spectra_2``: Lorentzian, or a Lorentzian/Gaussian blend

Evaluation follows IEEE-754 throughout. Degenerate parameters (``a == 3`` for
the Lorentzian, ``a == 3.01`` for the Gaussian, zero or negative widths) give
whatever Inf/NaN values the formulas produce; nothing is clamped or replaced.
"""

import numpy as np


def _as_array(x) -> np.ndarray:
    return np.asarray(x, dtype=np.float64)


def transmission_spectra(x, a: float, x0: float, w: float, bias: float) -> np.ndarray:
    """
    Approximate an LPFG spectrum with an asymmetric Lorentzian dip.

    Args:
        x: Wavelengths for the simulation
        a: Attenuation intensity
        x0: Resonant wavelength
        w: FWHM
        bias: Insertion loss

    Returns:
        Transmission array aligned with ``x``
    """
    x = _as_array(x)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        factor = np.float64(w) / (2.0 * np.sqrt(np.abs(a / 3.0 - 1.0)))
        return -a * np.power(1.0 + ((x - x0) / factor) ** 2, -1.0) - bias


def my_gauss(x, a: float, x0: float, w: float, bias: float) -> np.ndarray:
    """
    Approximate an LPFG spectrum with a Gaussian dip.

    Args:
        x: Wavelengths for the simulation
        a: Attenuation intensity
        x0: Resonant wavelength
        w: FWHM
        bias: Insertion loss

    Returns:
        Transmission array aligned with ``x``
    """
    x = _as_array(x)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        s = np.float64(w) / (2.0 * np.sqrt(4.0 * np.abs(np.log(np.float64(a) / 3.01))))
        arg = -((x - x0) ** 2 / (2.0 * s ** 2))
        return -a * np.exp(arg) - bias


def transmission_spectra_2(x, a: float, x0: float, w: float, bias: float,
                           fcn: float) -> np.ndarray:
    """
    Lorentzian dip, or a blend of half-strength Lorentzian and Gaussian dips.

    ``fcn < 0.5`` selects the plain Lorentzian. Any other value (0.5 included)
    sums a Lorentzian and a Gaussian, each with ``a/2`` and ``w/2``, and adds
    ``bias`` back once.

    Note:
        Each sub-model subtracts ``bias`` on its own, and the trailing
        ``+ bias`` is applied on top of both. The term is kept exactly as the
        model was published.
    """
    if fcn < 0.5:
        return transmission_spectra(x, a, x0, w, bias)

    ts = transmission_spectra(x, a / 2.0, x0, w / 2.0, bias)
    mg = my_gauss(x, a / 2.0, x0, w / 2.0, bias)
    return ts + mg + bias


__all__ = ['transmission_spectra', 'my_gauss', 'transmission_spectra_2']
