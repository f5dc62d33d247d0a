"""
Unit tests for the dense linear algebra primitives of gpzoo.num.
"""

import math
import unittest
from unittest import mock

import numpy as np

import gpzoo.num as gnp
from gpzoo.config import get_config, reset_numerics
from gpzoo.kernel import covariance


def spd_matrix(n=6, lengthscale=0.7):
    x = gnp.linspace(0.0, 3.0, n)
    return gnp.add_diag(covariance(x, None, "rbf", lengthscale, 1.3), 1e-3)


class TestConstructors(unittest.TestCase):

    def test_full_and_eye(self):
        A = gnp.full(2, 3, 7.0)
        self.assertEqual(A.shape, (2, 3))
        self.assertTrue(gnp.all(A == 7.0))
        I = gnp.eye(3)
        self.assertTrue(gnp.allclose(I, np.diag([1.0, 1.0, 1.0])))

    def test_full_and_eye_reject_empty(self):
        with self.assertRaises(ValueError):
            gnp.full(0, 2, 1.0)
        with self.assertRaises(ValueError):
            gnp.eye(0)

    def test_linspace_exact(self):
        x = gnp.linspace(0, 10, 5)
        self.assertEqual(x.tolist(), [0.0, 2.5, 5.0, 7.5, 10.0])

    def test_linspace_requires_two_points(self):
        with self.assertRaises(ValueError):
            gnp.linspace(0.0, 1.0, 1)
        self.assertEqual(gnp.linspace(-1.0, 1.0, 2).tolist(), [-1.0, 1.0])


class TestProducts(unittest.TestCase):

    def test_transpose(self):
        A = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
        At = gnp.transpose(A)
        self.assertEqual(At.shape, (3, 2))
        self.assertEqual(At.tolist(), [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]])

    def test_transpose_rejects_ragged_and_empty(self):
        with self.assertRaises(ValueError):
            gnp.transpose([[1.0, 2.0], [3.0]])
        with self.assertRaises(ValueError):
            gnp.transpose([])

    def test_matvec(self):
        A = [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
        self.assertEqual(gnp.matvec(A, [1.0, -1.0]).tolist(), [-1.0, -1.0, -1.0])
        with self.assertRaises(ValueError):
            gnp.matvec(A, [1.0, 2.0, 3.0])

    def test_matmul(self):
        A = np.arange(6.0).reshape(2, 3)
        B = np.arange(12.0).reshape(3, 4)
        self.assertTrue(gnp.allclose(gnp.matmul(A, B), A @ B))
        with self.assertRaises(ValueError):
            gnp.matmul(A, A)

    def test_add_diag(self):
        A = np.ones((3, 3))
        B = gnp.add_diag(A, 0.5)
        self.assertTrue(gnp.allclose(gnp.diag(B), [1.5, 1.5, 1.5]))
        self.assertTrue(gnp.allclose(B - gnp.diag(gnp.diag(B)), A - np.eye(3)))
        # input left untouched
        self.assertTrue(gnp.all(A == 1.0))
        with self.assertRaises(ValueError):
            gnp.add_diag(np.ones((2, 3)), 1.0)


class TestCholesky(unittest.TestCase):

    def tearDown(self):
        reset_numerics()

    def test_reconstruction(self):
        A = spd_matrix()
        L = gnp.cholesky(A)
        self.assertTrue(gnp.allclose(L, np.tril(L)))
        self.assertTrue(gnp.allclose(L @ L.T, A, atol=1e-6))

    def test_matches_lapack_on_spd_matrix(self):
        A = spd_matrix(8, lengthscale=0.3)
        self.assertTrue(gnp.allclose(gnp.cholesky(A), np.linalg.cholesky(A)))

    def test_kernel_matrix_with_small_shift(self):
        x = gnp.linspace(-1.0, 1.0, 10)
        for kernel in ("rbf", "matern12", "matern32", "matern52"):
            A = gnp.add_diag(covariance(x, None, kernel, 0.5, 2.0), 1e-6)
            L = gnp.cholesky(A)
            self.assertTrue(gnp.allclose(L @ L.T, A, atol=1e-6), kernel)

    def test_pivots_are_floored(self):
        L = gnp.cholesky(np.zeros((2, 2)))
        self.assertTrue(gnp.allclose(L, math.sqrt(1e-10) * np.eye(2), rtol=0, atol=1e-15))
        self.assertFalse(gnp.any(gnp.isnan(L)))

    def test_clamped_pivots_are_logged(self):
        with self.assertLogs("gpzoo", level="DEBUG") as cm:
            gnp.cholesky(np.zeros((2, 2)))
        self.assertTrue(any("clamped 2 of 2 pivots" in line for line in cm.output))

    def test_floor_from_config(self):
        get_config().update(cholesky_floor=1e-4)
        L = gnp.cholesky(-np.eye(1))
        self.assertAlmostEqual(L[0, 0], 1e-2)

    def test_strict_mode_raises(self):
        A = np.array([[1.0, 2.0], [2.0, 1.0]])
        with self.assertRaises(np.linalg.LinAlgError):
            gnp.cholesky(A, strict=True)
        get_config().update(strict_cholesky=True)
        with self.assertRaises(np.linalg.LinAlgError):
            gnp.cholesky(A)
        # a positive definite matrix goes through
        gnp.cholesky(spd_matrix())

    def test_rejects_non_square(self):
        with self.assertRaises(ValueError):
            gnp.cholesky(np.ones((2, 3)))


class TestTriangularSolves(unittest.TestCase):

    def setUp(self):
        self.A = spd_matrix(5)
        self.L = gnp.cholesky(self.A)
        self.b = np.array([1.0, -2.0, 0.5, 3.0, -1.0])

    def test_forward_substitution(self):
        x = gnp.solve_l(self.L, self.b)
        self.assertTrue(gnp.allclose(self.L @ x, self.b))

    def test_backward_substitution(self):
        x = gnp.solve_lt(self.L, self.b)
        self.assertTrue(gnp.allclose(self.L.T @ x, self.b))

    def test_cholesky_solve_round_trip(self):
        x = gnp.cholesky_solve(self.L, self.b)
        self.assertTrue(gnp.allclose(self.L @ (self.L.T @ x), self.b, atol=1e-8))

    def test_matrix_right_hand_side(self):
        B = np.arange(10.0).reshape(5, 2)
        X = gnp.solve_l(self.L, B)
        self.assertEqual(X.shape, (5, 2))
        self.assertTrue(gnp.allclose(X[:, 1], gnp.solve_l(self.L, B[:, 1])))

    def test_dimension_mismatch(self):
        with self.assertRaises(ValueError):
            gnp.solve_l(self.L, [1.0, 2.0])
        with self.assertRaises(ValueError):
            gnp.solve_lt(self.L, np.ones((4, 2)))


class TestRandom(unittest.TestCase):

    def test_seed_reproducibility(self):
        gnp.set_seed(42)
        a = gnp.randn(5, 3)
        gnp.set_seed(42)
        b = gnp.randn(5, 3)
        self.assertEqual(a.shape, (5, 3))
        self.assertTrue(gnp.all(a == b))

    def test_scalar_draw(self):
        z = gnp.randn()
        self.assertIsInstance(z, float)
        self.assertTrue(math.isfinite(z))

    def test_moments(self):
        gnp.set_seed(0)
        z = gnp.randn(20000)
        self.assertLess(abs(gnp.mean(z)), 0.05)
        self.assertLess(abs(gnp.std(z) - 1.0), 0.05)

    def test_box_muller_resamples_zero_uniforms(self):
        draws = [
            np.array([0.0, 0.5]),  # u, first entry rejected
            np.array([0.25]),  # redraw for the rejected entry
            np.array([0.5, 0.5]),  # v
        ]
        with mock.patch("gpzoo.num.numpy_backend.rand", side_effect=draws):
            z = gnp.randn(2)
        expected = -np.sqrt(-2.0 * np.log(np.array([0.25, 0.5])))
        self.assertTrue(gnp.allclose(z, expected))

    def test_box_muller_resamples_zero_angle_uniforms(self):
        draws = [
            np.array([0.5, 0.5]),  # u
            np.array([0.0, 0.5]),  # v, first entry rejected
            np.array([0.5]),  # redraw for the rejected entry
        ]
        with mock.patch("gpzoo.num.numpy_backend.rand", side_effect=draws):
            z = gnp.randn(2)
        expected = -np.sqrt(-2.0 * np.log(np.array([0.5, 0.5])))
        self.assertTrue(gnp.allclose(z, expected))


if __name__ == "__main__":
    unittest.main()
