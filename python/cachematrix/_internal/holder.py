from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .coercion import coerce_matrix
from .observability import CacheObservability, default_instance
from .sameness import is_same_matrix

_log = logging.getLogger(__name__)


def _owned(array: np.ndarray) -> np.ndarray:
    """Private read-only copy, so edits to the caller's array never reach the cache."""
    out = np.array(array, copy=True)
    out.flags.writeable = False
    return out


class CacheMatrix:
    """A matrix together with a lazily filled cache of its inverse.

    The inverse starts out empty. ``set_matrix`` clears it whenever the new
    value differs from the held one (see ``is_same_matrix``); replacing the
    matrix with an equal value keeps the cached inverse.

    Not safe for concurrent mutation; guard with an external lock if shared
    between threads.
    """

    def __init__(self, initial: Any, *, observability: CacheObservability | None = None) -> None:
        self._matrix = _owned(coerce_matrix(initial))
        self._inverse: np.ndarray | None = None
        self._observability = observability if observability is not None else default_instance()

    @property
    def observability(self) -> CacheObservability:
        return self._observability

    @property
    def shape(self) -> tuple[int, ...] | None:
        shape = getattr(self._matrix, "shape", None)
        return shape if isinstance(shape, tuple) else None

    def set_matrix(self, value: Any) -> None:
        if is_same_matrix(self._matrix, value):
            self._observability.record("set_matrix", "keep", value)
            return
        # Non-array values are stored as given; they never compare equal.
        self._matrix = _owned(value) if isinstance(value, np.ndarray) else value
        self._inverse = None
        _log.debug("matrix replaced; cached inverse cleared")
        self._observability.record("set_matrix", "invalidate", value)

    def get_matrix(self) -> Any:
        # Read-only; replace the matrix through set_matrix.
        return self._matrix

    def set_inverse(self, inverse: Any) -> None:
        # No validation: callers (cache_solve) are responsible for correctness.
        self._inverse = inverse

    def get_inverse(self) -> Any:
        return self._inverse

    def has_inverse(self) -> bool:
        return self._inverse is not None

    def __repr__(self) -> str:
        state = "cached" if self.has_inverse() else "empty"
        return f"CacheMatrix(shape={self.shape}, inverse={state})"
