"""Small dense linear algebra: matrices, BLAS-style products, norms and Jacobi eigen-decomposition."""

__version__ = "0.1.0"