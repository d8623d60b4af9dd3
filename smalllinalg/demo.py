"""Walk through the library's operations on small example matrices."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from smalllinalg.matrix import Matrix, gemm, gemv, jacobi_eigen, norm2


def run() -> str:
    """Return the demonstration's output text."""
    m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
    lines = [str(m)]

    m.transpose()
    lines.append(f"Trace(M)        = {m.trace():g}")
    lines.append(f"FrobeniusNorm  = {m.frobenius_norm():g}")

    v = Matrix.vector([1.0, 1.0])
    lines.append(f"Vector Norm2   = {norm2(v):g}")

    y = gemv(m, v, Matrix(2, 1))
    lines.append(f"GEMV result    = \n{y}")

    identity = Matrix.from_rows([[1.0, 0.0], [0.0, 1.0]])
    c = gemm(m, identity, Matrix(2, 2))
    lines.append(f"GEMM result    = \n{c}")

    s = Matrix.from_rows([[2.0, 1.0], [1.0, 2.0]])
    _, values = jacobi_eigen(s)
    lines.append(f"Eigenvalues    = \n{values}")

    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration and return the exit status."""
    sys.stdout.write(run())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())