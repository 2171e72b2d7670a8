# cachematrix/_internal/solvers.py

from __future__ import annotations

from typing import Any

import numpy as np

from .errors import SingularMatrixError

__all__ = [
    "METHODS",
    "invert",
    "reciprocal_condition",
]

METHODS = ("inv", "solve", "pinv")


def reciprocal_condition(a: np.ndarray) -> float:
    """Reciprocal 2-norm condition number; 0.0 for an all-zero matrix."""
    s = np.linalg.svd(a, compute_uv=False)
    if s[0] == 0:
        return 0.0
    return float(s[-1] / s[0])


def invert(matrix: Any, *, method: str = "inv", tol: float | None = None) -> np.ndarray:
    """
    Invert a square matrix with NumPy.

    Parameters:
        matrix: Square matrix to invert.
        method (str): 'inv', 'solve' or 'pinv'. 'pinv' returns the
            Moore-Penrose pseudo-inverse and never fails on singular input.
        tol (float): Optional lower bound on the reciprocal condition
            number; worse-conditioned matrices raise SingularMatrixError.

    Returns:
        Inverse of ``matrix`` as a new ndarray.

    Raises:
        numpy.linalg.LinAlgError: NumPy rejected the matrix (singular,
            non-square or not 2D).
    """
    if method not in METHODS:
        raise ValueError(f"Unknown method: {method}")

    a = np.asarray(matrix)

    if tol is not None and a.ndim == 2 and a.shape[0] == a.shape[1] and a.size:
        rcond = reciprocal_condition(a)
        if rcond < tol:
            raise SingularMatrixError(
                f"Matrix is computationally singular: reciprocal condition number = {rcond:.6g}"
            )

    if method == "inv":
        return np.linalg.inv(a)
    if method == "solve":
        if a.ndim != 2:
            raise np.linalg.LinAlgError(
                f"{a.ndim}-dimensional array given. Array must be two-dimensional"
            )
        return np.linalg.solve(a, np.eye(a.shape[0]))
    return np.linalg.pinv(a)
