"""Generic dense matrices with pluggable pure-Python and NumPy kernels."""

from importlib.metadata import PackageNotFoundError, version

from .builders import mx, mx_rows, parse_literal
from .errors import (
    AdditiveShapeMismatchError,
    MatrixLiteralError,
    MultiplicativeShapeMismatchError,
    RaggedMatrixError,
    ShapeMismatchError,
)
from .matrix import Matrix, add, mul_scalar, multiply, subtract, transpose
from .numeric import Numeric, zero_for_type, zero_of


try:  # pragma: no cover - metadata is provided at build time
    __version__ = version("densematrix")
except PackageNotFoundError:  # pragma: no cover - fallback during development
    __version__ = "0.0.0.dev0"


__all__ = [
    "AdditiveShapeMismatchError",
    "Matrix",
    "MatrixLiteralError",
    "MultiplicativeShapeMismatchError",
    "Numeric",
    "RaggedMatrixError",
    "ShapeMismatchError",
    "__version__",
    "add",
    "mul_scalar",
    "multiply",
    "mx",
    "mx_rows",
    "parse_literal",
    "subtract",
    "transpose",
    "zero_for_type",
    "zero_of",
]
