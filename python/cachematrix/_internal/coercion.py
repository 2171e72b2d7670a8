from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from .errors import InvalidInputError
from .warnings import CoercionWarning

# bool, signed/unsigned int, float, complex
_NUMERIC_KINDS = "biufc"


def _check_contents(array: np.ndarray) -> np.ndarray:
    if array.dtype.kind not in _NUMERIC_KINDS:
        raise InvalidInputError(
            f"Matrix entries must be numeric (got dtype {array.dtype})."
        )
    if array.size == 0:
        raise InvalidInputError("Matrix data must not be empty.")
    return array


def _as_2d(candidate: Any) -> np.ndarray:
    try:
        array = np.asarray(candidate)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(
            "Matrix data must be a rectangular nested sequence or a NumPy array."
        ) from exc

    if array.ndim == 0:
        array = array.reshape(1, 1)
    elif array.ndim == 1:
        # Same convention as R's as.matrix: a plain vector becomes one column.
        array = array.reshape(-1, 1)
    elif array.ndim != 2:
        raise InvalidInputError(
            f"Matrix input must be at most 2D (got {array.ndim} dimensions)."
        )
    return _check_contents(array)


def coerce_matrix(candidate: Any, *, stacklevel: int = 2) -> np.ndarray:
    """Return ``candidate`` as a 2D ndarray suitable for holding in a cache.

    2D arrays pass through untouched. Anything else is converted and a
    :class:`CoercionWarning` is emitted once the conversion succeeded.
    """
    if candidate is None:
        raise InvalidInputError("Matrix input must not be None.")

    if isinstance(candidate, np.matrix):
        return _check_contents(np.asarray(candidate))

    if isinstance(candidate, np.ndarray) and candidate.ndim == 2:
        return _check_contents(candidate)

    array = _as_2d(candidate)
    warnings.warn(
        f"Input is not a matrix ({type(candidate).__name__}); "
        f"coerced to a {array.shape[0]}x{array.shape[1]} array.",
        CoercionWarning,
        stacklevel=stacklevel + 1,
    )
    return array
