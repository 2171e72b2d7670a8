from __future__ import annotations

import logging
from typing import Any, Callable

import numpy as np

from .observability import CacheObservability

_log = logging.getLogger(__name__)


def cache_solve(
    holder: Any,
    *args: Any,
    solver: Callable[..., Any],
    observability: CacheObservability,
    **kwargs: Any,
) -> Any:
    """Return the cached inverse of ``holder``, computing and storing it on a miss.

    Extra arguments go to ``solver`` untouched. Solver exceptions propagate
    as-is and leave the holder's cache empty.
    """
    inv = holder.get_inverse()
    if inv is not None:
        _log.debug("getting cached data")
        observability.record("cache_solve", "hit", inv)
        return inv

    data = holder.get_matrix()
    inv = solver(data, *args, **kwargs)
    if isinstance(inv, np.ndarray):
        # Handed out on every hit; in-place edits would corrupt the cache.
        inv.flags.writeable = False
    holder.set_inverse(inv)
    observability.record("cache_solve", "miss", inv)
    return inv
