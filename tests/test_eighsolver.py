import unittest
from itertools import product

from householderqr import HouseholderQR
from householderqr.typing import HouseholderEigHSolver, MatrixEigenvalueDecomposition
from utils import backends, symmetric_with_spectrum, max_abs

class TestEigHSolver(unittest.TestCase):

    def setUp(self):
        self.hqr = [HouseholderQR(backend) for backend in backends]
        self.spectra = [[3.0, -1.0, 0.5], [9.0, 7.0, 5.0, 3.0, 1.0, -2.0]]
        self.shifts = ["none", "double"]

    def test_against_eigh(self) -> None:
        for ts, spectrum, shift in product(self.hqr, self.spectra, self.shifts):
            xp = ts.namespace
            n = len(spectrum)
            mat = symmetric_with_spectrum(xp, spectrum, seed=n)
            solver: MatrixEigenvalueDecomposition = ts.eighsolver(eps=1e-12, shift=shift)
            vals, vecs = solver(mat)
            ref_vals, ref_vecs = xp.linalg.eigh(mat)

            self.assertLess(max_abs(xp, vals - ref_vals), 1e-9)
            # eigenvectors agree up to sign
            overlap = xp.abs(vecs.T @ ref_vecs)
            self.assertLess(max_abs(xp, overlap - xp.eye(n, dtype=mat.dtype)), 1e-6)

    def test_eigh(self) -> None:
        for ts in self.hqr:
            xp = ts.namespace
            mat = symmetric_with_spectrum(xp, [2.0, 4.0, 8.0])
            vals, vecs = ts.eigh(mat)
            self.assertEqual([round(float(v), 8) for v in vals], [2.0, 4.0, 8.0])
            self.assertLess(max_abs(xp, mat @ vecs - vecs * vals[xp.newaxis, :]), 1e-8)

    def test_eig(self) -> None:
        for ts, shift in product(self.hqr, self.shifts):
            xp = ts.namespace
            mat = symmetric_with_spectrum(xp, [2.0, 4.0, 8.0])
            res = ts.eig(mat, shift=shift)
            self.assertTrue(res.converged)
            with self.assertRaises(ValueError):
                ts.eig(mat, shift="single")

    def test_invalid(self) -> None:
        with self.assertRaises(ValueError):
            HouseholderEigHSolver(shift="single")
        with self.assertRaises(ValueError):
            HouseholderEigHSolver(eps=-1e-3)
        with self.assertRaises(ValueError):
            HouseholderEigHSolver(eps=float("nan"))

if __name__ == "__main__":
    unittest.main()
