"""Dense linear algebra on lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

EPS = 1e-12

Matrix = Sequence[Sequence[float]]


def _require_square(matrix: Matrix) -> None:
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")


def gauss(matrix: Matrix) -> tuple[list[list[float]], float]:
    """Gauss-Jordan elimination of a copy of ``matrix``.

    Returns the reduced matrix and, for a square input, its determinant.
    """
    a = [[float(x) for x in row] for row in matrix]
    rows = len(a)
    cols = len(a[0]) if a else 0
    det = 1.0
    for i in range(min(rows, cols)):
        pivot = next((j for j in range(i, rows) if abs(a[j][i]) > EPS), None)
        if pivot is None:
            det = 0.0
            continue
        if pivot != i:
            a[i], a[pivot] = a[pivot], a[i]
            det = -det
        d = a[i][i]
        det *= d
        a[i] = [x / d for x in a[i]]
        pivot_row = a[i]
        for j, row in enumerate(a):
            if j != i and row[i] != 0.0:
                factor = row[i]
                a[j] = [x - factor * y for x, y in zip(row, pivot_row)]
    return a, det


def determinant(matrix: Matrix) -> float:
    """Determinant of a square matrix by Gaussian elimination."""
    _require_square(matrix)
    return gauss(matrix)[1]


def determinant_exact(matrix: Matrix) -> int:
    """Determinant of a square matrix by cofactor expansion, exact for integers."""
    _require_square(matrix)
    n = len(matrix)

    def expand(row: int, columns: tuple[int, ...]):
        if row >= n:
            return 1
        total = 0
        for position, column in enumerate(columns):
            sign = 1 if position % 2 == 0 else -1
            rest = columns[:position] + columns[position + 1 :]
            total += sign * matrix[row][column] * expand(row + 1, rest)
        return total

    return expand(0, tuple(range(n)))


def solve_linear(matrix: Matrix, rhs: Sequence[float]) -> list[float]:
    """Solve ``matrix @ x = rhs``.

    Raises ValueError when the system has no solution or more than one.
    """
    if len(matrix) != len(rhs):
        raise ValueError("right-hand side length does not match the matrix")
    reduced, _ = gauss([list(row) + [b] for row, b in zip(matrix, rhs)])
    unknowns = len(reduced[0]) - 1 if reduced else 0
    for row in reduced:
        if all(abs(x) <= EPS for x in row[:-1]) and abs(row[-1]) > EPS:
            raise ValueError("system has no solution")
    if len(reduced) < unknowns or any(
        abs(reduced[i][i] - 1.0) > EPS for i in range(unknowns)
    ):
        raise ValueError("system has no unique solution")
    return [row[-1] for row in reduced[:unknowns]]


def inverse(matrix: Matrix) -> list[list[float]]:
    """Inverse of a square matrix; raises ValueError if it is singular."""
    _require_square(matrix)
    n = len(matrix)
    augmented = [
        list(row) + [1.0 if i == j else 0.0 for j in range(n)]
        for i, row in enumerate(matrix)
    ]
    reduced, _ = gauss(augmented)
    if any(abs(reduced[i][i] - 1.0) > EPS for i in range(n)):
        raise ValueError("matrix is singular")
    return [row[n:] for row in reduced]


def matmul(a: Matrix, b: Matrix) -> list[list]:
    """Product of an ``n x m`` and an ``m x k`` matrix."""
    if any(len(row) != len(b) for row in a):
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]