import math
import unittest

import numpy as np

from lpfg.core.data_structures import WavelengthAxis
from lpfg.models.lineshapes import my_gauss, transmission_spectra
from lpfg.utils.analysis import characterize_dip


class CharacterizeDipTests(unittest.TestCase):
    def setUp(self):
        self.axis = WavelengthAxis.from_range(1500.0, 1600.0, 0.01)

    def test_gaussian_dip(self):
        a, x0, w, bias = 2.0, 1550.0, 4.0, 0.1
        dip = characterize_dip(self.axis, my_gauss(self.axis, a, x0, w, bias))
        s = w / (2 * math.sqrt(4 * abs(math.log(a / 3.01))))
        self.assertAlmostEqual(dip.resonant_wavelength, x0, delta=0.01)
        self.assertAlmostEqual(dip.depth, a, places=3)
        self.assertAlmostEqual(dip.minimum, -a - bias, places=6)
        self.assertAlmostEqual(dip.baseline, -bias, places=3)
        self.assertAlmostEqual(dip.fwhm, 2 * math.sqrt(2 * math.log(2)) * s, delta=0.02)
        self.assertEqual(self.axis[dip.index], dip.resonant_wavelength)

    def test_lorentzian_dip(self):
        a, x0, w, bias = 2.0, 1550.0, 4.0, 0.1
        dip = characterize_dip(self.axis, transmission_spectra(self.axis, a, x0, w, bias))
        factor = w / (2 * math.sqrt(abs(a / 3 - 1)))
        self.assertAlmostEqual(dip.resonant_wavelength, x0, delta=0.01)
        # finite window: the wings have not fully recovered at the edges
        self.assertAlmostEqual(dip.fwhm, 2 * factor, delta=0.1)

    def test_flat_spectrum_has_no_dip(self):
        self.assertIsNone(characterize_dip([1.0, 2.0, 3.0, 4.0], [-0.1, -0.1, -0.1, -0.1]))

    def test_non_finite_values(self):
        self.assertIsNone(characterize_dip([1.0, 2.0, 3.0], [0.0, np.nan, 0.0]))
        self.assertIsNone(characterize_dip([1.0, 2.0, 3.0], [0.0, -np.inf, 0.0]))

    def test_too_few_points(self):
        self.assertIsNone(characterize_dip([1.0, 2.0], [0.0, -1.0]))

    def test_length_mismatch(self):
        with self.assertRaises(ValueError):
            characterize_dip([1.0, 2.0, 3.0], [0.0, -1.0])


if __name__ == "__main__":
    unittest.main()
