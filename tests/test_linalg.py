import numpy as np
import pytest
from signal_quality.linalg import (
    SingularMatrixError,
    inverse,
    inverse_with_status,
    multiply,
    multiply_vector,
    transpose,
)


class TestTranspose:
    """Tests for `transpose`."""

    def test_rectangular(self):
        M = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
        np.testing.assert_array_equal(
            transpose(M), [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]
        )

    def test_round_trip(self):
        M = np.random.default_rng(seed=1).normal(size=(4, 7))
        np.testing.assert_array_equal(transpose(transpose(M)), M)

    def test_does_not_share_memory(self):
        M = np.ones((2, 3))
        Mt = transpose(M)
        Mt[0, 0] = 5.0
        assert M[0, 0] == 1.0

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            transpose([])
        with pytest.raises(ValueError):
            transpose([[]])

    def test_ragged_raises(self):
        with pytest.raises(ValueError):
            transpose([[1.0, 2.0], [3.0]])


class TestMultiply:
    """Tests for `multiply` and `multiply_vector`."""

    def test_matrix_product(self):
        A = [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
        B = [[7.0, 8.0, 9.0], [10.0, 11.0, 12.0]]
        np.testing.assert_allclose(multiply(A, B), np.array(A) @ np.array(B))

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError):
            multiply(np.ones((2, 3)), np.ones((2, 3)))

    def test_matrix_vector_product(self):
        M = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
        v = [1.0, 0.0, -1.0]
        np.testing.assert_allclose(multiply_vector(M, v), [-2.0, -2.0])

    def test_matrix_vector_dimension_mismatch(self):
        with pytest.raises(ValueError):
            multiply_vector(np.ones((2, 3)), np.ones(2))


class TestInverse:
    """Tests for `inverse` and `inverse_with_status`."""

    def test_two_by_two(self):
        M = np.array([[4.0, 7.0], [2.0, 6.0]])
        expected = np.array([[0.6, -0.7], [-0.2, 0.4]])
        np.testing.assert_allclose(inverse(M), expected, rtol=1e-12)

    def test_inverse_times_matrix_is_identity(self):
        rng = np.random.default_rng(seed=2)
        for n in [1, 3, 7]:
            M = rng.normal(size=(n, n)) + n * np.eye(n)
            np.testing.assert_allclose(
                multiply(inverse(M), M), np.eye(n), atol=1e-10
            )

    def test_requires_row_swap(self):
        """A zero on the diagonal is handled by pivoting."""
        M = np.array([[0.0, 1.0], [1.0, 0.0]])
        np.testing.assert_allclose(inverse(M), M)

    def test_small_leading_pivot(self):
        """The largest entry in the column is chosen as pivot."""
        M = np.array([[1e-12, 1.0], [1.0, 1.0]])
        M_inv, is_singular = inverse_with_status(M)
        assert not is_singular
        np.testing.assert_allclose(M_inv, np.linalg.inv(M), rtol=1e-9)

    def test_matches_numpy(self):
        M = np.random.default_rng(seed=3).uniform(-5, 5, size=(7, 7))
        np.testing.assert_allclose(inverse(M), np.linalg.inv(M), rtol=1e-8, atol=1e-10)

    def test_singular_returns_identity(self):
        M = np.array([[1.0, 2.0, 3.0], [0.0, 0.0, 0.0], [4.0, 5.0, 6.0]])
        M_inv, is_singular = inverse_with_status(M)
        assert is_singular
        np.testing.assert_array_equal(M_inv, np.eye(3))
        np.testing.assert_array_equal(inverse(M), np.eye(3))

    def test_rank_deficient_returns_identity(self):
        M = np.array([[1.0, 2.0], [2.0, 4.0]])
        np.testing.assert_array_equal(inverse(M), np.eye(2))

    def test_singular_strict_raises(self):
        M = np.zeros((3, 3))
        with pytest.raises(SingularMatrixError):
            inverse(M, strict=True)

    def test_tolerance(self):
        M = np.diag([1.0, 1e-11])
        assert inverse_with_status(M)[1]
        np.testing.assert_allclose(inverse(M, tol=1e-12), np.diag([1.0, 1e11]))

    def test_input_not_modified(self):
        M = np.array([[0.0, 2.0], [3.0, 1.0]])
        M_copy = M.copy()
        inverse(M)
        np.testing.assert_array_equal(M, M_copy)

    def test_non_square_raises(self):
        with pytest.raises(ValueError):
            inverse(np.ones((2, 3)))
