import pytest

from raychallenge.matrix import (
    Matrix,
    cofactor,
    determinant,
    identity,
    inverse,
    minor,
    submatrix,
    transpose,
)
from raychallenge.tuples import Tuple, point


def test_constructing_and_inspecting_4x4():
    m = Matrix(
        [
            [1, 2, 3, 4],
            [5.5, 6.5, 7.5, 8.5],
            [9, 10, 11, 12],
            [13.5, 14.5, 15.5, 16.5],
        ]
    )
    assert m.at(0, 0) == 1.0
    assert m.at(0, 3) == 4.0
    assert m.at(1, 0) == 5.5
    assert m.at(1, 2) == 7.5
    assert m.at(2, 2) == 11.0
    assert m.at(3, 0) == 13.5
    assert m.at(3, 2) == 15.5


def test_2x2_is_representable():
    m = Matrix([[-3, 5], [1, -2]])
    assert m.at(0, 0) == -3.0
    assert m.at(0, 1) == 5.0
    assert m.at(1, 0) == 1.0
    assert m.at(1, 1) == -2.0


def test_3x3_is_representable():
    m = Matrix([[-3, 5, 0], [1, -2, -7], [0, 1, 1]])
    assert m.at(0, 0) == -3.0
    assert m.at(1, 1) == -2.0
    assert m.at(2, 2) == 1.0


def test_non_square_matrix_is_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2, 3], [4, 5]])


def test_equality_with_identical_matrices():
    a = Matrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 8, 7, 6], [5, 4, 3, 2]])
    b = Matrix(
        [
            [1.0, 2.0, 3.0, 4.0],
            [5.0, 6.0, 7.0, 8.0],
            [9.0, 8.0, 7.0, 6.0],
            [5.0, 4.0, 3.0, 2.0],
        ]
    )
    assert (a == b) is True
    assert b.at(2, 0) == 9.0


def test_equality_within_tolerance():
    a = Matrix([[1, 0], [0, 1]])
    b = Matrix([[1.00001, 0], [0, 0.99999]])
    assert (a == b) is True
    assert (a == Matrix([[1.01, 0], [0, 1]])) is False


def test_equality_with_different_matrices():
    a = Matrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 8, 7, 6], [5, 4, 3, 2]])
    b = Matrix([[2, 3, 4, 5], [6, 7, 8, 9], [8, 7, 6, 5], [4, 3, 2, 1]])
    assert (a == b) is False


def test_matrices_of_different_size_are_not_equal():
    assert (Matrix([[1, 0], [0, 1]]) == identity()) is False


def test_multiplying_two_matrices():
    a = Matrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 8, 7, 6], [5, 4, 3, 2]])
    b = Matrix([[-2, 1, 2, 3], [3, 2, 1, -1], [4, 3, 6, 5], [1, 2, 7, 8]])
    expected = Matrix(
        [[20, 22, 50, 48], [44, 54, 114, 108], [40, 58, 110, 102], [16, 26, 46, 42]]
    )
    assert a @ b == expected
    assert a * b == expected


def test_matrix_multiplied_by_tuple():
    a = Matrix([[1, 2, 3, 4], [2, 4, 4, 2], [8, 6, 4, 1], [0, 0, 0, 1]])
    result = a @ Tuple(1, 2, 3, 1)
    assert result == Tuple(18, 24, 33, 1)
    assert result.w == 1.0


def test_multiplying_by_identity():
    a = Matrix([[0, 1, 2, 4], [1, 2, 4, 8], [2, 4, 8, 16], [4, 8, 16, 32]])
    assert a @ identity() == a


def test_identity_times_tuple():
    a = Tuple(1, 2, 3, 4)
    result = identity() @ a
    assert result == a
    assert result.w == 4.0


def test_multiplying_non_4x4_raises():
    m = Matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    with pytest.raises(ValueError):
        m @ point(1, 2, 3)
    with pytest.raises(ValueError):
        identity() @ m


def test_transposing_a_matrix():
    a = Matrix([[0, 9, 3, 0], [9, 8, 0, 8], [1, 8, 5, 3], [0, 0, 5, 8]])
    assert transpose(a) == Matrix(
        [[0, 9, 1, 0], [9, 8, 8, 0], [3, 0, 5, 5], [0, 8, 3, 8]]
    )


def test_transposing_identity():
    assert transpose(identity()) == identity()


def test_determinant_2x2():
    assert determinant(Matrix([[1, 5], [-3, 2]])) == 17.0


def test_submatrix_of_3x3():
    a = Matrix([[1, 5, 0], [-3, 2, 7], [0, 6, -3]])
    assert submatrix(a, 0, 2) == Matrix([[-3, 2], [0, 6]])


def test_submatrix_of_4x4():
    a = Matrix([[-6, 1, 1, 6], [-8, 5, 8, 6], [-1, 0, 8, 2], [-7, 1, -1, 1]])
    assert submatrix(a, 2, 1) == Matrix([[-6, 1, 6], [-8, 8, 6], [-7, -1, 1]])


def test_submatrix_of_2x2_is_unsupported():
    with pytest.raises(ValueError):
        submatrix(Matrix([[1, 2], [3, 4]]), 0, 0)


def test_minor_of_3x3():
    a = Matrix([[3, 5, 0], [2, -1, -7], [6, -1, 5]])
    assert determinant(submatrix(a, 1, 0)) == 25.0
    assert minor(a, 1, 0) == 25.0


def test_cofactor_of_3x3():
    a = Matrix([[3, 5, 0], [2, -1, -7], [6, -1, 5]])
    assert minor(a, 0, 0) == -12.0
    assert cofactor(a, 0, 0) == -12.0
    assert minor(a, 1, 0) == 25.0
    assert cofactor(a, 1, 0) == -25.0


def test_determinant_3x3():
    a = Matrix([[1, 2, 6], [-5, 8, -4], [2, 6, 4]])
    assert cofactor(a, 0, 0) == 56.0
    assert cofactor(a, 0, 1) == 12.0
    assert cofactor(a, 0, 2) == -46.0
    assert determinant(a) == -196.0


def test_determinant_4x4():
    a = Matrix([[-2, -8, 3, 5], [-3, 1, 7, 3], [1, 2, -9, 6], [-6, 7, 7, -9]])
    assert cofactor(a, 0, 0) == 690.0
    assert cofactor(a, 0, 1) == 447.0
    assert cofactor(a, 0, 2) == 210.0
    assert cofactor(a, 0, 3) == 51.0
    assert determinant(a) == -4071.0


def test_invertible_matrix():
    a = Matrix([[6, 4, 4, 4], [5, 5, 7, 6], [4, -9, 3, -7], [9, 1, 7, -6]])
    assert determinant(a) == -2120.0
    assert a.is_invertible()


def test_noninvertible_matrix():
    a = Matrix([[-4, 2, -2, -3], [0, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]])
    assert determinant(a) == 0.0
    assert not a.is_invertible()


def test_inverse_of_noninvertible_matrix_raises():
    a = Matrix([[-4, 2, -2, -3], [0, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]])
    with pytest.raises(ValueError):
        inverse(a)


def test_inverse_of_a_matrix():
    a = Matrix([[-5, 2, 6, -8], [1, -5, 1, 8], [7, 7, -6, -7], [1, -3, 7, 4]])
    b = inverse(a)
    assert determinant(a) == 532.0
    assert cofactor(a, 2, 3) == -160.0
    assert b.at(3, 2) == pytest.approx(-160.0 / 532.0)
    assert cofactor(a, 3, 2) == 105.0
    assert b.at(2, 3) == pytest.approx(105.0 / 532.0)
    assert b == Matrix(
        [
            [0.21805, 0.45113, 0.24060, -0.04511],
            [-0.80827, -1.45677, -0.44361, 0.52068],
            [-0.07895, -0.22368, -0.05263, 0.19737],
            [-0.52256, -0.81391, -0.30075, 0.30639],
        ]
    )


def test_inverse_of_another_matrix():
    a = Matrix([[8, -5, 9, 2], [7, 5, 6, 1], [-6, 0, 9, 6], [-3, 0, -9, -4]])
    assert inverse(a) == Matrix(
        [
            [-0.15385, -0.15385, -0.28205, -0.53846],
            [-0.07692, 0.12308, 0.02564, 0.03077],
            [0.35897, 0.35897, 0.43590, 0.92308],
            [-0.69231, -0.69231, -0.76923, -1.92308],
        ]
    )


def test_inverse_of_third_matrix():
    a = Matrix([[9, 3, 0, 9], [-5, -2, -6, -3], [-4, 9, 6, 4], [-7, 6, 6, 2]])
    assert inverse(a) == Matrix(
        [
            [-0.04074, -0.07778, 0.14444, -0.22222],
            [-0.07778, 0.03333, 0.36667, -0.33333],
            [-0.02901, -0.14630, -0.10926, 0.12963],
            [0.17778, 0.06667, -0.26667, 0.33333],
        ]
    )


def test_multiplying_product_by_its_inverse():
    a = Matrix([[3, -9, 7, 3], [3, -8, 2, -9], [-4, 4, 4, 1], [-6, 5, -1, 1]])
    b = Matrix([[8, 2, 2, 2], [3, -1, 7, 0], [7, 0, 5, 4], [6, -2, 0, 5]])
    c = a @ b
    assert c @ inverse(b) == a