[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smalllinalg"
version = "0.1.0"
description = "Small dense linear algebra: matrices, BLAS-style products, norms and Jacobi eigen-decomposition"
requires-python = ">=3.10"
dependencies = []
keywords = ["linear algebra", "matrix", "blas", "gemm", "gemv", "eigenvalues", "jacobi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smalllinalg-demo = "smalllinalg.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["smalllinalg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
