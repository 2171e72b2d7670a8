import pytest

import cachematrix


@pytest.fixture
def default_trace():
    """Default trace recorder, enabled and empty for the duration of a test."""
    cachematrix.set_trace_enabled(True)
    cachematrix._debug_clear_cache_trace()
    yield cachematrix.trace()
    cachematrix._debug_clear_cache_trace()
    cachematrix.set_trace_enabled(None)
