"""Exceptions raised by the matrix operators and constructors."""

from __future__ import annotations

from typing import Sequence, Tuple


def shape_to_text(shape: Sequence[int]) -> str:
    return "×".join(str(dim) for dim in shape)


class ShapeMismatchError(ValueError):
    """Operands of a binary operator have incompatible shapes.

    This signals a programmer error; the library never catches it.
    """

    summary = "Matrix shapes are incompatible"

    def __init__(self, operation: str, left_shape: Tuple[int, int], right_shape: Tuple[int, int]):
        self.operation = operation
        self.left_shape = tuple(left_shape)
        self.right_shape = tuple(right_shape)
        super().__init__(
            "%s: %s and %s" % (self.summary, shape_to_text(self.left_shape), shape_to_text(self.right_shape))
        )


class AdditiveShapeMismatchError(ShapeMismatchError):
    """Raised by add/subtract when row or column counts differ."""

    def __init__(self, operation: str, left_shape: Tuple[int, int], right_shape: Tuple[int, int]):
        verb = "subtract" if operation == "subtract" else "add"
        self.summary = "Cannot %s matrices with different sizes" % verb
        super().__init__(operation, left_shape, right_shape)


class MultiplicativeShapeMismatchError(ShapeMismatchError):
    """Raised by the product when lhs columns differ from rhs rows."""

    summary = "Number of columns in lhs and number of rows in rhs differs"


class RaggedMatrixError(ValueError):
    """Rows of a matrix do not share one non-zero length."""


class MatrixLiteralError(ValueError):
    """A textual matrix literal could not be parsed."""

    def __init__(self, message: str, row: int | None = None, col: int | None = None):
        self.row = row
        self.col = col
        if row is not None and col is not None:
            message = "%s (row %d, column %d)" % (message, row, col)
        super().__init__(message)


__all__ = [
    "AdditiveShapeMismatchError",
    "MatrixLiteralError",
    "MultiplicativeShapeMismatchError",
    "RaggedMatrixError",
    "ShapeMismatchError",
    "shape_to_text",
]
