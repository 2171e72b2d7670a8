"""Memoized matrix inversion: a matrix holder that caches its own inverse."""
from __future__ import annotations

import logging as _logging
from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _dist_version
from typing import Any, Callable

try:
    __version__ = _dist_version("cachematrix")
except _PackageNotFoundError:
    __version__ = "unknown"

from ._internal import memo as _memo
from ._internal import observability as _observability
from ._internal import runtime as _runtime_mod
from ._internal import solvers as _solvers
from ._internal.errors import (
    CacheMatrixError,
    InvalidInputError,
    SingularMatrixError,
)
from ._internal.holder import CacheMatrix
from ._internal.observability import CacheObservability
from ._internal.sameness import is_same_matrix
from ._internal.warnings import (
    CacheMatrixWarning,
    CoercionWarning,
)

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_runtime = _runtime_mod.Runtime(
    observability=_observability.default_instance(),
    methods=_solvers.METHODS,
)


def _debug_last_cache_trace() -> str:
    """Internal/test helper: last recorded cache event ("hit", "miss", ...)."""
    record = _observability.default_instance().last()
    if record is None:
        return ""
    return str(record["event"])


def _debug_clear_cache_trace() -> None:
    """Internal/test helper: forget recorded cache events."""
    _observability.default_instance().clear()


def trace() -> CacheObservability:
    """The default recorder of cache hit/miss/invalidate events."""
    return _observability.default_instance()


def set_trace_enabled(value: bool | None) -> None:
    """Turn trace recording on or off; ``None`` restores the CACHEMATRIX_TRACE setting."""
    _runtime.set_trace_enabled(value)


def invert(matrix: Any, *, method: str | None = None, tol: float | None = None) -> Any:
    """
    Compute the inverse of a square matrix.

    Args:
        matrix: The matrix to invert.
        method: 'inv', 'solve' or 'pinv'. Defaults to CACHEMATRIX_INVERT_METHOD,
            or 'inv' when that is unset.
        tol: Reject matrices whose reciprocal condition number is below this.

    Returns:
        The inverse matrix.

    Raises:
        numpy.linalg.LinAlgError: If the matrix is singular or not square.
        SingularMatrixError: If ``tol`` rejects the matrix.
    """
    if method is None:
        method = _runtime.invert_method()
    return _solvers.invert(matrix, method=method, tol=tol)


def make_cache_matrix(x: Any = None) -> CacheMatrix:
    """Create a CacheMatrix; ``x`` is required even though it has a default."""
    return CacheMatrix(x)


def cache_solve(x: Any, *args: Any, solver: Callable[..., Any] | None = None, **kwargs: Any) -> Any:
    """Return the inverse of the matrix held by ``x``, reusing the cached one if present.

    Any extra arguments are forwarded to ``solver`` (``invert`` by default) on a
    cache miss, e.g. ``cache_solve(h, tol=1e-12)``.
    """
    obs = getattr(x, "observability", None)
    if obs is None:
        obs = _observability.default_instance()
    return _memo.cache_solve(
        x,
        *args,
        solver=invert if solver is None else solver,
        observability=obs,
        **kwargs,
    )


__all__ = [
    "CacheMatrix",
    "CacheMatrixError",
    "CacheMatrixWarning",
    "CacheObservability",
    "CoercionWarning",
    "InvalidInputError",
    "SingularMatrixError",
    "cache_solve",
    "invert",
    "is_same_matrix",
    "make_cache_matrix",
    "set_trace_enabled",
    "trace",
]
