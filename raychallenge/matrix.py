"""Small square matrices for 3D transformations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .tuples import EPS, Tuple


class Matrix:
    """An immutable square matrix."""

    __slots__ = ("_rows", "size")

    def __init__(self, rows: Iterable[Sequence[float]]):
        rows_t = tuple(tuple(float(v) for v in row) for row in rows)
        size = len(rows_t)
        if size == 0 or any(len(row) != size for row in rows_t):
            raise ValueError("a matrix must be square and non-empty")
        self._rows = rows_t
        self.size = size

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        return self._rows

    def at(self, row: int, col: int) -> float:
        return self._rows[row][col]

    def is_invertible(self) -> bool:
        return determinant(self) != 0.0

    def __matmul__(self, other: Matrix | Tuple) -> Matrix | Tuple:
        if self.size != 4:
            raise ValueError("only 4x4 matrices can be multiplied")
        if isinstance(other, Tuple):
            x, y, z, w = (
                row[0] * other.x + row[1] * other.y + row[2] * other.z + row[3] * other.w
                for row in self._rows
            )
            return Tuple(x, y, z, w)
        if isinstance(other, Matrix):
            if other.size != 4:
                raise ValueError("only 4x4 matrices can be multiplied")
            columns = list(zip(*other._rows))
            return Matrix(
                [sum(a * b for a, b in zip(row, col)) for col in columns] for row in self._rows
            )
        return NotImplemented

    __mul__ = __matmul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.size != other.size:
            return False
        return all(
            abs(a - b) <= EPS
            for row_a, row_b in zip(self._rows, other._rows)
            for a, b in zip(row_a, row_b)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({[list(r) for r in self._rows]!r})"


def identity() -> Matrix:
    """The 4x4 identity matrix."""
    return Matrix([[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)])


def transpose(m: Matrix) -> Matrix:
    return Matrix(zip(*m.rows))


def determinant(m: Matrix) -> float:
    if m.size == 2:
        return m.at(0, 0) * m.at(1, 1) - m.at(0, 1) * m.at(1, 0)
    return sum(m.at(0, col) * cofactor(m, 0, col) for col in range(m.size))


def submatrix(m: Matrix, row: int, col: int) -> Matrix:
    """Drop one row and one column from a 3x3 or 4x4 matrix."""
    if m.size not in (3, 4):
        raise ValueError("Unsupported size")
    return Matrix(
        [v for j, v in enumerate(r) if j != col] for i, r in enumerate(m.rows) if i != row
    )


def minor(m: Matrix, row: int, col: int) -> float:
    return determinant(submatrix(m, row, col))


def cofactor(m: Matrix, row: int, col: int) -> float:
    if m.size not in (3, 4):
        raise ValueError("cofactors are defined for 3x3 and 4x4 matrices")
    sign = -1.0 if (row + col) % 2 else 1.0
    return minor(m, row, col) * sign


def inverse(m: Matrix) -> Matrix:
    det = determinant(m)
    if det == 0.0:
        raise ValueError("matrix is not invertible")
    return Matrix(
        [cofactor(m, row, col) / det for row in range(m.size)] for col in range(m.size)
    )