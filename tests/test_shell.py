import tempfile
import unittest
from pathlib import Path

import numpy as np

from lpfg.core.data_structures import MeasuredSpectrum, ModelParameters, SimulatedSpectrum
from lpfg.core.exceptions import ConfigurationError
from lpfg.data.loader import RecordFormat
from lpfg.shell import NO_FILE_SELECTED, IngestionResult, evaluate, select_and_ingest


class SelectAndIngestTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = Path(self._tmp.name)
        self.params = self.tmpdir / "params.csv"
        self.params.write_text("a,x0,w,bias\n2.0,1550.0,10.0,0.1\n", encoding="utf-8")
        self.pairs = self.tmpdir / "spectrum.txt"
        self.pairs.write_text("1550.0;-0.5\n1551.0;-0.7\n", encoding="utf-8")

    def tearDown(self):
        self._tmp.cleanup()

    def test_blank_hint_without_chooser(self):
        with self.assertLogs("lpfg.shell", level="WARNING"):
            self.assertEqual(select_and_ingest("  "), NO_FILE_SELECTED)

    def test_chooser_cancelled(self):
        with self.assertLogs("lpfg.shell", level="WARNING"):
            self.assertEqual(select_and_ingest("", chooser=lambda: None), NO_FILE_SELECTED)

    def test_chooser_supplies_path(self):
        result = select_and_ingest(None, chooser=lambda: str(self.pairs))
        self.assertIsInstance(result, IngestionResult)
        self.assertIs(result.record_format, RecordFormat.RAW_PAIRS)
        self.assertEqual(len(result), 2)

    def test_hint_takes_precedence_over_chooser(self):
        def chooser():
            raise AssertionError("chooser should not be called")

        result = select_and_ingest(str(self.params), chooser=chooser)
        self.assertIs(result.record_format, RecordFormat.PARAMETER_TABLE)
        self.assertEqual(result.parameters, [ModelParameters(2.0, 1550.0, 10.0, 0.1)])
        self.assertIsNone(result.spectrum)
        self.assertIn("1 parameter rows", result.summary())

    def test_pairs_result_exposes_spectrum(self):
        result = select_and_ingest(str(self.pairs))
        self.assertIsInstance(result.spectrum, MeasuredSpectrum)
        self.assertEqual(result.spectrum.source, str(self.pairs))
        self.assertEqual(result.parameters, [])

    def test_declared_format_overrides_extension(self):
        other = self.tmpdir / "spectrum.csv"
        other.write_text("1550.0;-0.5\n", encoding="utf-8")
        result = select_and_ingest(str(other), record_format="pairs")
        self.assertIs(result.record_format, RecordFormat.RAW_PAIRS)

    def test_missing_file_is_a_diagnostic(self):
        with self.assertLogs("lpfg.shell", level="WARNING"):
            message = select_and_ingest(str(self.tmpdir / "missing.txt"))
        self.assertIsInstance(message, str)
        self.assertTrue(message.startswith("Could not open"))
        self.assertIn("file not found", message)

    def test_malformed_file_is_a_diagnostic(self):
        bad = self.tmpdir / "bad.csv"
        bad.write_text("a,x0,w,bias\n1.0,2.0,abc,4.0\n", encoding="utf-8")
        with self.assertLogs("lpfg.shell", level="WARNING"):
            message = select_and_ingest(str(bad))
        self.assertIn("row 2, column 3", message)


class EvaluateTests(unittest.TestCase):
    def test_evaluate_lorentzian(self):
        spectrum = evaluate("lorentzian", [1550.0], ModelParameters(2.0, 1550.0, 10.0, 0.1))
        self.assertIsInstance(spectrum, SimulatedSpectrum)
        self.assertAlmostEqual(spectrum.transmission[0], -2.1, places=12)

    def test_evaluate_hybrid_needs_selector(self):
        with self.assertRaises(ConfigurationError):
            evaluate("hybrid", np.array([1550.0]), ModelParameters(2.0, 1550.0, 10.0, 0.1))


if __name__ == "__main__":
    unittest.main()
