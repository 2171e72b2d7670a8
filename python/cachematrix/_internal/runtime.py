from __future__ import annotations

import os
from typing import Any, Sequence

_FALSY = ("0", "false", "off", "no")


class Runtime:
    """Resolves package settings from the environment, with runtime overrides."""

    def __init__(
        self,
        *,
        observability: Any,
        methods: Sequence[str],
        default_method: str = "inv",
        method_env_var: str = "CACHEMATRIX_INVERT_METHOD",
        trace_env_var: str = "CACHEMATRIX_TRACE",
    ) -> None:
        self._observability = observability
        self._methods = tuple(methods)
        self._default_method = default_method
        self._method_env_var = method_env_var
        self._trace_env_var = trace_env_var
        self._method_cache: str | None = None
        self._trace_override: bool | None = None
        self.sync_trace()

    def invert_method(self) -> str:
        if self._method_cache is not None:
            return self._method_cache

        raw = os.environ.get(self._method_env_var, "").strip().lower()
        method = raw or self._default_method
        if method not in self._methods:
            raise ValueError(
                f"{self._method_env_var}={raw!r} is not a supported inversion method "
                f"(expected one of {', '.join(self._methods)})"
            )
        self._method_cache = method
        return method

    def trace_enabled(self) -> bool:
        if self._trace_override is not None:
            return self._trace_override
        raw = os.environ.get(self._trace_env_var)
        if raw is None:
            return True
        return raw.strip().lower() not in _FALSY

    def set_trace_enabled(self, value: bool | None) -> None:
        """Force tracing on/off; ``None`` falls back to the environment."""
        self._trace_override = None if value is None else bool(value)
        self.sync_trace()

    def sync_trace(self) -> None:
        self._observability.enabled = self.trace_enabled()

    def reset(self) -> None:
        self._method_cache = None
        self._trace_override = None
        self.sync_trace()
