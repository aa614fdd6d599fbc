import tempfile
import unittest
from pathlib import Path

import numpy as np

from pwvd_analyzer.errors import InvalidShapeError
from pwvd_analyzer.ingest.signal_reader import read_signal


class TestSignalReader(unittest.TestCase):
    def test_one_column_text_is_real(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "sig.txt"
            p.write_text("# real samples\n1.0\n2.5\n-3.0\n4\n", encoding="utf-8")
            x = read_signal(p)
            self.assertEqual(x.dtype, np.float64)
            np.testing.assert_array_equal(x, [1.0, 2.5, -3.0, 4.0])

    def test_two_column_whitespace_is_complex(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "sig.txt"
            p.write_text("1.0 0.5\n2.0\t-1.0\n3.0 0\n", encoding="utf-8")
            z = read_signal(p)
            self.assertTrue(np.iscomplexobj(z))
            np.testing.assert_array_equal(z, [1.0 + 0.5j, 2.0 - 1.0j, 3.0 + 0.0j])

    def test_two_column_csv_is_complex(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "sig.csv"
            p.write_text("1.0,0.5\n2.0,-1.0\n3.0,0.0\n", encoding="utf-8")
            z = read_signal(p)
            np.testing.assert_array_equal(z, [1.0 + 0.5j, 2.0 - 1.0j, 3.0 + 0.0j])

    def test_npy_vector(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "sig.npy"
            src = np.exp(1j * np.arange(6))
            np.save(p, src.reshape(6, 1))
            z = read_signal(p)
            self.assertEqual(z.shape, (6,))
            np.testing.assert_array_equal(z, src)

    def test_npy_matrix_rejected(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "sig.npy"
            np.save(p, np.zeros((3, 4)))
            with self.assertRaises(InvalidShapeError):
                read_signal(p)

    def test_three_columns_rejected(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "sig.txt"
            p.write_text("1 2 3\n4 5 6\n", encoding="utf-8")
            with self.assertRaises(InvalidShapeError):
                read_signal(p)

    def test_empty_file_rejected(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "sig.txt"
            p.write_text("", encoding="utf-8")
            with self.assertRaises(ValueError):
                read_signal(p)

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(FileNotFoundError):
                read_signal(Path(d) / "nope.txt")


if __name__ == "__main__":
    unittest.main()
