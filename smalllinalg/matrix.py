"""Dense matrices with BLAS-style products and a Jacobi eigen-solver."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Sequence


class Layout(enum.Enum):
    """Storage order of a matrix's elements."""

    ROW_MAJOR = "row-major"
    COL_MAJOR = "col-major"


class Matrix:
    """A dense ``rows`` x ``cols`` matrix of floats, initialised to zero.

    A vector is simply an N x 1 matrix.
    """

    def __init__(self, rows: int, cols: int, layout: Layout = Layout.ROW_MAJOR) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self.rows = rows
        self.cols = cols
        self.layout = layout
        self._data = [0.0] * (rows * cols)

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[float]], layout: Layout = Layout.ROW_MAJOR
    ) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        n_rows = len(rows)
        n_cols = len(rows[0]) if n_rows else 0
        if any(len(row) != n_cols for row in rows):
            raise ValueError("all rows must have the same length")
        matrix = cls(n_rows, n_cols, layout)
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                matrix[i, j] = value
        return matrix

    @classmethod
    def vector(cls, values: Iterable[float]) -> Matrix:
        """Build an N x 1 column vector."""
        return cls.from_rows([[value] for value in values])

    def _offset(self, index: tuple[int, int]) -> int:
        i, j = index
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(
                f"index ({i}, {j}) out of range for {self.rows}x{self.cols} matrix"
            )
        if self.layout is Layout.ROW_MAJOR:
            return i * self.cols + j
        return j * self.rows + i

    def __getitem__(self, index: tuple[int, int]) -> float:
        return self._data[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        self._data[self._offset(index)] = float(value)

    def _row_values(self, i: int) -> list[float]:
        return [self[i, j] for j in range(self.cols)]

    def __str__(self) -> str:
        return "\n".join(
            "[ " + ", ".join(format(v, "g") for v in self._row_values(i)) + " ]"
            for i in range(self.rows)
        )

    def __repr__(self) -> str:
        rows = [self._row_values(i) for i in range(self.rows)]
        return f"Matrix.from_rows({rows!r}, {self.layout})"

    def _copy(self) -> Matrix:
        clone = Matrix(self.rows, self.cols, self.layout)
        clone._data = list(self._data)
        return clone

    def transpose(self) -> Matrix:
        """Return a new matrix that is the transpose of this one."""
        result = Matrix(self.cols, self.rows, self.layout)
        for i in range(self.rows):
            for j in range(self.cols):
                result[j, i] = self[i, j]
        return result

    def trace(self) -> float:
        """Sum of the diagonal elements; the matrix must be square."""
        if self.rows != self.cols:
            raise ValueError("Trace of non-square matrix")
        return sum((self[i, i] for i in range(self.rows)), 0.0)

    def frobenius_norm(self) -> float:
        """Square root of the sum of squares of all elements."""
        return math.sqrt(sum((v * v for v in self._data), 0.0))


def gemv(
    a: Matrix, x: Matrix, y: Matrix, alpha: float = 1.0, beta: float = 0.0
) -> Matrix:
    """Update ``y`` in place to ``alpha * a @ x + beta * y`` and return it."""
    if a.cols != x.rows or a.rows != y.rows:
        raise ValueError("Dimension mismatch in Gemv")
    for i in range(y.rows):
        y[i, 0] = beta * y[i, 0]
    for i in range(a.rows):
        total = sum((a[i, j] * x[j, 0] for j in range(a.cols)), 0.0)
        y[i, 0] += alpha * total
    return y


def gemm(
    a: Matrix, b: Matrix, c: Matrix, alpha: float = 1.0, beta: float = 0.0
) -> Matrix:
    """Update ``c`` in place to ``alpha * a @ b + beta * c`` and return it."""
    if a.cols != b.rows or a.rows != c.rows or b.cols != c.cols:
        raise ValueError("Dimension mismatch in Gemm")
    for i in range(c.rows):
        for j in range(c.cols):
            c[i, j] = beta * c[i, j]
    for i in range(a.rows):
        for k in range(a.cols):
            a_ik = a[i, k]
            for j in range(b.cols):
                c[i, j] += alpha * a_ik * b[k, j]
    return c


def norm2(x: Matrix) -> float:
    """Euclidean norm of a column vector."""
    return math.sqrt(sum((x[i, 0] * x[i, 0] for i in range(x.rows)), 0.0))


def jacobi_eigen(
    a: Matrix, max_iter: int = 100, tol: float = 1e-10
) -> tuple[Matrix, Matrix]:
    """Eigen-decompose a symmetric matrix by Jacobi rotations.

    Returns ``(vectors, values)``: the eigenvectors as the columns of a square
    matrix and the eigenvalues as a column vector, in matching order.
    """
    if a.rows != a.cols:
        raise ValueError("JacobiEigen requires square matrix")
    n = a.rows
    d = a._copy()
    v = Matrix(n, n)
    for i in range(n):
        v[i, i] = 1.0

    if n >= 2:
        for _ in range(max_iter):
            p, q = 0, 1
            max_off = abs(d[0, 1])
            for i in range(n):
                for j in range(i + 1, n):
                    val = abs(d[i, j])
                    if val > max_off:
                        max_off, p, q = val, i, j
            if max_off < tol:
                break

            app, aqq, apq = d[p, p], d[q, q], d[p, q]
            phi = (aqq - app) / (2 * apq)
            t = (1.0 if phi >= 0 else -1.0) / (abs(phi) + math.sqrt(phi * phi + 1))
            c = 1 / math.sqrt(t * t + 1)
            s = t * c

            for i in range(n):
                if i not in (p, q):
                    dip, diq = d[i, p], d[i, q]
                    d[i, p] = d[p, i] = c * dip - s * diq
                    d[i, q] = d[q, i] = c * diq + s * dip
            d[p, p] = c * c * app - 2 * c * s * apq + s * s * aqq
            d[q, q] = s * s * app + 2 * c * s * apq + c * c * aqq
            d[p, q] = d[q, p] = 0.0

            for i in range(n):
                vip, viq = v[i, p], v[i, q]
                v[i, p] = c * vip - s * viq
                v[i, q] = s * vip + c * viq

    values = Matrix.vector(d[i, i] for i in range(n))
    return v, values