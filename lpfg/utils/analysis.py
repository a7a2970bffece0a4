"""
Dip characterization for measured and simulated transmission spectra.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
from scipy.signal import find_peaks, peak_widths


@dataclass(frozen=True)
class DipCharacteristics:
    """Location and shape of the most prominent attenuation dip."""

    resonant_wavelength: float
    depth: float
    fwhm: float
    minimum: float
    baseline: float
    index: int


def characterize_dip(axis, transmission, rel_height: float = 0.5) -> Optional[DipCharacteristics]:
    """
    Locate the most prominent dip and measure it.

    Args:
        axis: Wavelength samples, increasing
        transmission: Transmission values aligned with ``axis``
        rel_height: Relative height at which the width is measured
            (0.5 gives the full width at half maximum)

    Returns:
        DipCharacteristics, or None when the data has fewer than three
        points, contains non-finite values, or shows no dip
    """
    wavelengths = np.asarray(axis, dtype=np.float64)
    values = np.asarray(transmission, dtype=np.float64)
    if wavelengths.shape != values.shape:
        raise ValueError("Axis and transmission must have same length")

    if len(values) < 3 or not np.all(np.isfinite(values)):
        return None

    # Dips are peaks of the inverted signal
    inverted = -values
    peaks, props = find_peaks(inverted, prominence=0)
    if len(peaks) == 0:
        return None

    best = int(np.argmax(props['prominences']))
    peak = peaks[best]
    widths, _, left_ips, right_ips = peak_widths(
        inverted, [peak], rel_height=rel_height,
        prominence_data=(props['prominences'][[best]],
                         props['left_bases'][[best]],
                         props['right_bases'][[best]])
    )

    # Interpolated sample positions back onto the wavelength axis
    samples = np.arange(len(wavelengths))
    left = np.interp(left_ips[0], samples, wavelengths)
    right = np.interp(right_ips[0], samples, wavelengths)

    depth = float(props['prominences'][best])
    minimum = float(values[peak])
    return DipCharacteristics(
        resonant_wavelength=float(wavelengths[peak]),
        depth=depth,
        fwhm=float(right - left),
        minimum=minimum,
        baseline=minimum + depth,
        index=int(peak)
    )
