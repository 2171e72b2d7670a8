from __future__ import annotations

from typing import Any

import numpy as np


def _matrix_shape(value: Any) -> tuple[int, ...] | None:
    if isinstance(value, np.ndarray) and value.ndim == 2:
        return value.shape
    return None


def is_same_matrix(a: Any, b: Any) -> bool:
    """True iff both are 2D arrays of identical shape with equal entries.

    Never raises; anything that is not a 2D array, or a comparison NumPy
    refuses to perform, counts as different. NaN entries never compare equal.
    """
    shape_a = _matrix_shape(a)
    shape_b = _matrix_shape(b)
    if shape_a is None or shape_b is None:
        return False
    if shape_a != shape_b:
        return False
    try:
        return bool(np.all(a == b))
    except (TypeError, ValueError):
        return False
