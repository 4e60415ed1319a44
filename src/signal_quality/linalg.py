"""
Dense matrix routines used to solve the normal equations.

Matrices are `numpy.ndarray` objects (or anything `numpy.asarray` accepts,
such as nested lists). All routines validate shapes and raise `ValueError`
on malformed input.
"""

import numpy as np
from typing import Tuple


SINGULAR_TOLERANCE = 1e-10


class SingularMatrixError(ValueError):
    """Raised when a pivot falls below the singularity tolerance."""


def _as_matrix(M, name: str = "matrix") -> np.ndarray:
    try:
        M = np.asarray(M, dtype=float)
    except ValueError as e:  # ragged nested lists
        raise ValueError(f"{name} must be rectangular: {e}") from e
    if M.ndim != 2:
        raise ValueError(f"{name} must be 2-dimensional, got {M.ndim} dimension(s).")
    if M.shape[0] == 0 or M.shape[1] == 0:
        raise ValueError(f"{name} must be non-empty, got shape {M.shape}.")
    return M


def transpose(M) -> np.ndarray:
    """
    Return the transpose of a non-empty rectangular matrix.

    Args:
        M: Matrix of shape (n, m)

    Returns:
        Mt: Matrix of shape (m, n)
    """
    M = _as_matrix(M)
    return M.T.copy()


def multiply(A, B) -> np.ndarray:
    """
    Return the matrix product `A @ B`.

    Args:
        A: Matrix of shape (n, m)
        B: Matrix of shape (m, p)

    Returns:
        C: Matrix of shape (n, p)
    """
    A = _as_matrix(A, "A")
    B = _as_matrix(B, "B")
    if A.shape[1] != B.shape[0]:
        raise ValueError(
            f"Dimensions of A {A.shape} and B {B.shape} do not match."
        )
    return np.einsum("ik,kj->ij", A, B)


def multiply_vector(M, v) -> np.ndarray:
    """
    Return the matrix-vector product `M @ v`.

    Args:
        M: Matrix of shape (n, m)
        v: Vector of shape (m,)

    Returns:
        Mv: Vector of shape (n,)
    """
    M = _as_matrix(M)
    v = np.asarray(v, dtype=float)
    if v.ndim != 1 or M.shape[1] != len(v):
        raise ValueError(
            f"Dimensions of matrix {M.shape} and vector {v.shape} do not match."
        )
    return np.einsum("ij,j->i", M, v)


def inverse_with_status(
    M, tol: float = SINGULAR_TOLERANCE
) -> Tuple[np.ndarray, bool]:
    """
    Invert a square matrix by Gauss-Jordan elimination with partial pivoting.

    The augmented matrix [M | I] is reduced column by column. At step i the
    row in [i, n) with the largest absolute value in column i becomes the
    pivot row. If that value is smaller than `tol` the matrix is treated as
    singular and the identity matrix is returned in place of the inverse.

    Args:
        M: Square matrix of shape (n, n)
        tol: Pivot magnitude below which the matrix is singular. Default: 1e-10.

    Returns:
        inverse: Inverse of M, or the identity matrix if M is singular
        is_singular: True if the identity fallback was used
    """
    M = _as_matrix(M)
    n = M.shape[0]
    if M.shape[1] != n:
        raise ValueError(f"Matrix must be square, got shape {M.shape}.")

    identity = np.eye(n)
    augmented = np.hstack([M, identity])

    for i in range(n):
        # argmax returns the first row on ties
        pivot_row = i + int(np.argmax(np.abs(augmented[i:, i])))
        if pivot_row != i:
            augmented[[i, pivot_row]] = augmented[[pivot_row, i]]

        pivot = augmented[i, i]
        if abs(pivot) < tol:
            return identity, True

        augmented[i] = augmented[i] / pivot

        for j in range(n):
            if j != i:
                augmented[j] = augmented[j] - augmented[j, i] * augmented[i]

    return augmented[:, n:], False


def inverse(M, tol: float = SINGULAR_TOLERANCE, strict: bool = False) -> np.ndarray:
    """
    Return the inverse of a square matrix.

    A singular matrix yields the identity matrix, which is not an inverse.
    Pass `strict=True` to raise `SingularMatrixError` instead.

    Args:
        M: Square matrix of shape (n, n)
        tol: Singularity tolerance on pivot magnitudes. Default: 1e-10.
        strict: Raise on singular input instead of returning the identity.
    """
    M_inv, is_singular = inverse_with_status(M, tol=tol)
    if is_singular and strict:
        raise SingularMatrixError(
            f"Matrix is singular to within tolerance {tol}."
        )
    return M_inv
