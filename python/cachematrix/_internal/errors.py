"""cachematrix error taxonomy."""
from __future__ import annotations

import numpy as np


class CacheMatrixError(Exception):
    """Base error for cachematrix."""


class InvalidInputError(CacheMatrixError, ValueError):
    """Construction input is None or cannot be coerced to a matrix."""


class SingularMatrixError(np.linalg.LinAlgError):
    """Matrix rejected as computationally singular before inversion.

    Subclasses NumPy's LinAlgError so callers handling solver failures
    catch both with a single except clause.
    """
