import numpy as np
import pytest

import cachematrix
from cachematrix import SingularMatrixError


A = np.array([[4.0, 7.0], [2.0, 6.0]])
A_INV = np.array([[0.6, -0.7], [-0.2, 0.4]])


@pytest.mark.parametrize("method", ["inv", "solve", "pinv"])
def test_methods_agree(method):
    np.testing.assert_allclose(cachematrix.invert(A, method=method), A_INV, atol=1e-12)


def test_accepts_nested_sequences():
    np.testing.assert_allclose(cachematrix.invert([[4, 7], [2, 6]]), A_INV, atol=1e-12)


def test_integer_input_gives_float_inverse():
    inv = cachematrix.invert(np.array([[2, 0], [0, 4]]))
    assert inv.dtype.kind == "f"
    np.testing.assert_array_equal(inv, [[0.5, 0.0], [0.0, 0.25]])


@pytest.mark.parametrize("method", ["inv", "solve"])
def test_singular_matrix_raises_linalg_error(method):
    with pytest.raises(np.linalg.LinAlgError):
        cachematrix.invert(np.zeros((2, 2)), method=method)


@pytest.mark.parametrize("method", ["inv", "solve"])
def test_non_square_raises_linalg_error(method):
    with pytest.raises(np.linalg.LinAlgError):
        cachematrix.invert(np.ones((2, 3)), method=method)


def test_one_dimensional_input_raises_linalg_error():
    with pytest.raises(np.linalg.LinAlgError):
        cachematrix.invert(np.ones(4), method="solve")


def test_pinv_tolerates_singular_input():
    inv = cachematrix.invert(np.zeros((2, 2)), method="pinv")
    np.testing.assert_array_equal(inv, np.zeros((2, 2)))


def test_tol_rejects_ill_conditioned_matrix():
    nearly = np.array([[1.0, 1.0], [1.0, 1.0 + 1e-12]])
    with pytest.raises(SingularMatrixError, match="computationally singular"):
        cachematrix.invert(nearly, tol=1e-8)


def test_tol_rejects_zero_matrix_before_numpy():
    with pytest.raises(SingularMatrixError):
        cachematrix.invert(np.zeros((3, 3)), tol=1e-15)


def test_tol_accepts_well_conditioned_matrix():
    np.testing.assert_allclose(cachematrix.invert(A, tol=1e-3), A_INV, atol=1e-12)


def test_singular_matrix_error_is_a_linalg_error():
    assert issubclass(SingularMatrixError, np.linalg.LinAlgError)


def test_unknown_method():
    with pytest.raises(ValueError, match="Unknown method"):
        cachematrix.invert(A, method="gauss")
