import unittest

import numpy as np
from numpy.testing import assert_array_equal

from lpfg.core.data_structures import ModelParameters, SimulatedSpectrum, WavelengthAxis
from lpfg.core.exceptions import ConfigurationError
from lpfg.models import MODEL_KINDS
from lpfg.models.lineshapes import my_gauss, transmission_spectra, transmission_spectra_2
from lpfg.models.registry import ModelRegistry, evaluate_parameters


def flat(x, a, x0, w, bias):
    """Constant transmission."""
    return np.full(len(np.asarray(x)), -bias)


class RegistryTests(unittest.TestCase):
    def test_default_models(self):
        registry = ModelRegistry()
        self.assertEqual(MODEL_KINDS, ("lorentzian", "gaussian", "hybrid"))
        self.assertIs(registry.get_model("lorentzian"), transmission_spectra)
        self.assertIs(registry.get_model("gaussian"), my_gauss)
        self.assertIs(registry.get_model("hybrid"), transmission_spectra_2)

    def test_singleton(self):
        self.assertIs(ModelRegistry(), ModelRegistry())

    def test_selector_metadata(self):
        registry = ModelRegistry()
        self.assertTrue(registry.takes_selector("hybrid"))
        self.assertFalse(registry.takes_selector("gaussian"))
        self.assertEqual(registry.get_metadata("gaussian")["function"], "my_gauss")

    def test_unknown_model(self):
        with self.assertRaises(KeyError):
            ModelRegistry().get_model("voigt")
        with self.assertRaises(KeyError):
            evaluate_parameters("voigt", [1550.0], ModelParameters(1, 1550, 1, 0))

    def test_register_and_unregister(self):
        registry = ModelRegistry()
        registry.register("flat", flat)
        try:
            self.assertTrue(registry.has_model("flat"))
            self.assertEqual(registry.get_metadata("flat")["description"], "Constant transmission.")
            spectrum = evaluate_parameters("flat", [1.0, 2.0], ModelParameters(1, 1, 1, 0.5))
            assert_array_equal(spectrum.transmission, [-0.5, -0.5])
        finally:
            registry.unregister("flat")
        self.assertFalse(registry.has_model("flat"))

    def test_register_rejects_non_callable(self):
        with self.assertRaises(TypeError):
            ModelRegistry().register("bad", 42)


class EvaluateParametersTests(unittest.TestCase):
    def setUp(self):
        self.axis = WavelengthAxis.from_range(1540.0, 1560.0, 0.5)
        self.params = ModelParameters(a=2.0, x0=1550.0, w=10.0, bias=0.1)

    def test_returns_aligned_spectrum(self):
        spectrum = evaluate_parameters("lorentzian", self.axis, self.params)
        self.assertIsInstance(spectrum, SimulatedSpectrum)
        self.assertIs(spectrum.axis, self.axis)
        self.assertEqual(len(spectrum), len(self.axis))
        self.assertIsNone(spectrum.selector)
        assert_array_equal(spectrum.transmission, transmission_spectra(self.axis, 2.0, 1550.0, 10.0, 0.1))

    def test_hybrid_requires_selector(self):
        with self.assertRaises(ConfigurationError):
            evaluate_parameters("hybrid", self.axis, self.params)

    def test_selector_rejected_for_plain_models(self):
        with self.assertRaises(ConfigurationError):
            evaluate_parameters("gaussian", self.axis, self.params, fcn=0.7)

    def test_hybrid_with_selector(self):
        spectrum = evaluate_parameters("hybrid", self.axis, self.params, fcn=0.5)
        assert_array_equal(
            spectrum.transmission,
            transmission_spectra_2(self.axis, 2.0, 1550.0, 10.0, 0.1, 0.5)
        )


if __name__ == "__main__":
    unittest.main()
