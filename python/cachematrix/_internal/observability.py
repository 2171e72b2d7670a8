from __future__ import annotations

import time
from collections import Counter
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

EVENTS = ("hit", "miss", "invalidate", "keep")


@dataclass
class CacheRecord:
    op: str
    event: str
    trace_tag: str
    shape: Tuple[int, ...] | None
    timestamp: float


def _shape(obj: Any) -> Tuple[int, ...] | None:
    try:
        shape_attr = getattr(obj, "shape", None)
        if isinstance(shape_attr, tuple):
            return tuple(int(n) for n in shape_attr)
    except (TypeError, ValueError):
        pass
    return None


class CacheObservability:
    """Keeps the latest cache trace records, overall and per operation."""

    def __init__(self, *, enabled: bool = True) -> None:
        self.enabled = enabled
        self._counter = 0
        self._last: dict[str, dict[str, Any]] = {}
        self._counts: Counter[str] = Counter()

    def clear(self) -> None:
        self._last.clear()
        self._counts.clear()

    def _record(self, record: CacheRecord) -> dict[str, Any]:
        payload = asdict(record)
        self._last["__latest__"] = payload
        self._last[record.op] = payload
        self._counts[record.event] += 1
        return payload

    def record(self, op: str, event: str, matrix: Any = None) -> dict[str, Any] | None:
        if event not in EVENTS:
            raise ValueError(f"Unknown cache event: {event!r}")
        if not self.enabled:
            return None

        self._counter += 1
        return self._record(
            CacheRecord(
                op=op,
                event=event,
                trace_tag=f"{op}:{self._counter}",
                shape=_shape(matrix),
                timestamp=time.time(),
            )
        )

    def last(self, op: str | None = None) -> dict[str, Any] | None:
        key = op or "__latest__"
        payload = self._last.get(key)
        if payload is None:
            return None
        return dict(payload)

    def counts(self) -> Dict[str, int]:
        return {event: self._counts.get(event, 0) for event in EVENTS}


# Module-level singleton helpers (optional convenience)
_default_observability = CacheObservability()


def default_instance() -> CacheObservability:
    return _default_observability
