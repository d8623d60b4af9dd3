# smalllinalg

A small, dependency-free dense linear algebra package written in pure Python.

## What it provides

All of the following live in `smalllinalg.matrix`:

- `Matrix(rows, cols, layout=Layout.ROW_MAJOR)` is a dense matrix of floats.
  Every element starts at zero. The elements are stored row-major or
  column-major, as chosen by `Layout.ROW_MAJOR` or `Layout.COL_MAJOR`.
  - `Matrix.from_rows(rows, layout=...)` builds a matrix from equally long rows.
  - `Matrix.vector(values)` builds an N x 1 column vector.
  - `m[i, j]` reads an element and `m[i, j] = value` writes one. An index
    outside the matrix raises `IndexError`.
  - `transpose()`, `trace()` and `frobenius_norm()`.
  - `str(m)` gives one line per row, for example `[ 1, 2 ]`.
- `gemv(a, x, y, alpha=1.0, beta=0.0)` sets `y` to `alpha·a·x + beta·y`.
  It works in place and also returns `y`.
- `gemm(a, b, c, alpha=1.0, beta=0.0)` sets `c` to `alpha·a·b + beta·c`.
  It works in place and also returns `c`.
- `norm2(x)` is the Euclidean norm of a column vector.
- `jacobi_eigen(a, max_iter=100, tol=1e-10)` eigen-decomposes a symmetric
  matrix by Jacobi rotations. It returns `(vectors, values)`. The eigenvectors
  are the columns of `vectors` and the eigenvalues form the column vector
  `values`, in matching order.

Errors:

- `trace()` and `jacobi_eigen` raise `ValueError` for a matrix that is not square.
- `gemv` and `gemm` raise `ValueError` when the dimensions do not match.
- `Matrix` raises `ValueError` for negative dimensions.
- `Matrix.from_rows` raises `ValueError` for rows of unequal length.

## Installation

```
pip install .
```

## Usage

```python
from smalllinalg.matrix import Matrix, gemv, jacobi_eigen, norm2

m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
print(m)
# [ 1, 2 ]
# [ 3, 4 ]

print(m.trace())           # 5.0
print(m.frobenius_norm())  # 5.477...

v = Matrix.vector([1.0, 1.0])
print(norm2(v))            # 1.414...

y = Matrix(2, 1)
gemv(m, v, y)              # y now holds m times v
print(y)
# [ 3 ]
# [ 7 ]

s = Matrix.from_rows([[2.0, 1.0], [1.0, 2.0]])
vectors, values = jacobi_eigen(s)
print(values)              # eigenvalues 1 and 3, as a column vector
```

## Demo

This command prints a short walk-through of the features. It shows a matrix,
its trace and Frobenius norm, a vector norm, a GEMV and a GEMM product, and
the eigenvalues of a symmetric 2 x 2 matrix:

```
smalllinalg-demo
```

`smalllinalg.demo.run()` returns the same text as a string.

## What it does not do

- `Matrix` has no arithmetic operators. All products go through `gemv` and `gemm`.
- No decompositions are available other than `jacobi_eigen`. That function is
  meant only for symmetric matrices, and it does not sort its eigenvalues.

## Tests

```
pip install .[test]
pytest
```