import unittest

from spectralpower import SpectralPower, PowerIteration
from utils import backends, symmetric_matrix

class TestPowerIteration(unittest.TestCase):

    def setUp(self):
        self.spectralpower = [SpectralPower(backend) for backend in backends]
        self.sizes = [2, 16, 128]

    def get_eigvals(self, size: int) -> list[float]:
        return [10.0] + [8.0 * (size - i) / size for i in range(1, size)]

    def test_solve(self) -> None:
        for sp in self.spectralpower:
            xp = sp.namespace
            for size in self.sizes:
                mat, ref_vec = symmetric_matrix(xp, self.get_eigvals(size), seed=size)
                solver = sp.power_iteration(nsteps=1000, eps=1e-8)

                res = solver(sp.matrix_operator(mat), seed=0)
                self.assertTrue(res.converged)
                self.assertEqual(res.iterations, len(res.residuals))
                self.assertLess(res.residuals[-1], 1e-8)
                self.assertGreaterEqual(res.time, 0.0)
                self.assertAlmostEqual(res.value, 10.0, places=7)
                overlap = abs(float(xp.sum(res.array*ref_vec)))
                self.assertAlmostEqual(overlap, 1.0, places=7)

                # linear map as function with a guess
                guess = sp.random_vector(size, seed=1)
                res = solver(lambda x: mat @ x, guess)
                self.assertTrue(res.converged)
                self.assertAlmostEqual(res.value, 10.0, places=7)

    def test_budget(self) -> None:
        for sp in self.spectralpower:
            mat, _ = symmetric_matrix(sp.namespace, [1.0, 0.999, 0.5], seed=0)
            res = sp.power_iteration(nsteps=5, eps=1e-12)(sp.matrix_operator(mat), seed=0)
            self.assertFalse(res.converged)
            self.assertEqual(res.iterations, 5)
            self.assertEqual(len(res.residuals), 5)

    def test_numpy_instance(self) -> None:
        import numpy as np
        from spectralpower.numpy import spectralpower as sp

        op = sp.linear_map("ij,j->i", np.diag([1.0, -7.0, 3.0]), 3)
        res = sp.power_iteration(nsteps=500, eps=1e-10)(op, seed=0)
        self.assertTrue(res.converged)
        self.assertAlmostEqual(res.value, -7.0, places=9)
        self.assertAlmostEqual(abs(float(res.array[1])), 1.0, places=9)

    def test_zero_steps(self) -> None:
        for sp in self.spectralpower:
            xp = sp.namespace
            op = sp.matrix_operator(xp.asarray([[3.0, 0.0], [0.0, 1.0]]))
            guess = xp.asarray([1.0, 1.0])

            res = sp.power_iteration(nsteps=0, eps=1e-6)(op, guess)
            self.assertFalse(res.converged)
            self.assertEqual(res.iterations, 0)
            self.assertEqual(res.residuals, [])

            res = sp.power_iteration(nsteps=0, eps=10.0)(op, guess)
            self.assertTrue(res.converged)
            self.assertEqual(res.iterations, 0)

    def test_validation(self) -> None:
        with self.assertRaisesRegex(ValueError, "non-negative"):
            PowerIteration(nsteps=-1)
        with self.assertRaisesRegex(ValueError, "non-negative"):
            PowerIteration(eps=-1.0)
        solver = PowerIteration()
        with self.assertRaises(ValueError):
            solver.nsteps = -3
        with self.assertRaises(ValueError):
            solver(lambda x: x)

if __name__ == "__main__":
    unittest.main()
