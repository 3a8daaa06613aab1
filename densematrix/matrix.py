"""Dense rectangular matrix value type.

A :class:`Matrix` stores its cells as a list of row lists.  Operators always
return a new matrix; only :meth:`Matrix.set` mutates an existing one.  Shape
validation for the binary operators happens here, before any kernel runs, so
backends never see incompatible operands.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Generic, Iterable, List, Tuple

from . import backends
from .errors import (
    AdditiveShapeMismatchError,
    MultiplicativeShapeMismatchError,
    RaggedMatrixError,
)
from .numeric import Numeric, T, zero_for_type


def _check_rectangular(rows: List[List[Any]]) -> None:
    if not rows:
        raise RaggedMatrixError("matrix must have at least one row")
    width = len(rows[0])
    if width == 0:
        raise RaggedMatrixError("matrix rows must not be empty")
    for idx, row in enumerate(rows):
        if len(row) != width:
            raise RaggedMatrixError("row %d has %d columns; expected %d" % (idx, len(row), width))


class Matrix(Generic[T]):
    """Rectangular grid of numeric values indexed by ``(row, col)``.

    Rectangularity is the caller's responsibility: constructors copy the data
    they are given but do not check it unless asked to.
    """

    __slots__ = ("_rows",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Iterable[Iterable[T]]):
        self._rows: List[List[T]] = [list(row) for row in rows]

    # construction ----------------------------------------------------
    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[T]], validate: bool = False) -> "Matrix[T]":
        """Build a matrix from explicit row data.

        With ``validate=True`` a ragged, row-less or column-less table raises
        :class:`~densematrix.errors.RaggedMatrixError`.
        """

        matrix = cls(rows)
        if validate:
            _check_rectangular(matrix._rows)
        return matrix

    @classmethod
    def fill(
        cls,
        rows: int,
        cols: int,
        value: T | None = None,
        *,
        dtype: Callable[[int], T] = int,
    ) -> "Matrix[T]":
        """Return a ``rows × cols`` matrix with every cell set to ``value``.

        ``value`` defaults to the zero of ``dtype``.
        """

        if value is None:
            value = zero_for_type(dtype)
        return cls._wrap([[value] * cols for _ in range(rows)])

    @classmethod
    def _wrap(cls, rows: List[List[T]]) -> "Matrix[T]":
        # Takes ownership of freshly built rows without copying them again.
        matrix = cls.__new__(cls)
        matrix._rows = rows
        return matrix

    def copy(self) -> "Matrix[T]":
        return type(self)(self._rows)

    __copy__ = copy

    def to_list(self) -> List[List[T]]:
        return [list(row) for row in self._rows]

    def tolist(self) -> List[List[T]]:
        return self.to_list()

    # accessors -------------------------------------------------------
    def rows(self) -> int:
        """Returns the number of rows in the matrix."""

        return len(self._rows)

    def cols(self) -> int:
        """Returns the number of columns in the matrix."""

        return len(self._rows[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows(), self.cols()

    def get(self, row: int, col: int) -> T:
        """Returns the value at given row, column."""

        return self._rows[row][col]

    def set(self, row: int, col: int, value: T) -> None:
        """Sets the value at given row, column."""

        self._rows[row][col] = value

    def __getitem__(self, index: Tuple[int, int]) -> T:
        row, col = index
        return self.get(row, col)

    def __setitem__(self, index: Tuple[int, int], value: T) -> None:
        row, col = index
        self.set(row, col, value)

    # shape-changing --------------------------------------------------
    def transpose(self) -> "Matrix[T]":
        """Returns a transposed matrix of the original matrix."""

        return type(self)._wrap(backends.backend_call("transpose", self._rows))

    def tp(self) -> "Matrix[T]":
        """Alias for :meth:`transpose`."""

        return self.transpose()

    @property
    def T(self) -> "Matrix[T]":
        return self.transpose()

    # arithmetic ------------------------------------------------------
    def _check_additive(self, other: "Matrix[T]", operation: str) -> None:
        if self.rows() != other.rows() or self.cols() != other.cols():
            raise AdditiveShapeMismatchError(operation, self.shape, other.shape)

    def add(self, other: "Matrix[T]") -> "Matrix[T]":
        self._check_additive(other, "add")
        return type(self)._wrap(backends.backend_call("add", self._rows, other._rows))

    def subtract(self, other: "Matrix[T]") -> "Matrix[T]":
        self._check_additive(other, "subtract")
        return type(self)._wrap(backends.backend_call("subtract", self._rows, other._rows))

    def multiply(self, other: "Matrix[T]") -> "Matrix[T]":
        """Performs the matrix dot product operation."""

        if self.cols() != other.rows():
            raise MultiplicativeShapeMismatchError("multiply", self.shape, other.shape)
        return type(self)._wrap(backends.backend_call("matmul", self._rows, other._rows))

    def mul_scalar(self, scalar: T) -> "Matrix[T]":
        """Performs scalar multiplication to the matrix."""

        return type(self)._wrap(backends.backend_call("mul_scalar", self._rows, scalar))

    @staticmethod
    def dot_prod(m1: "Matrix[T]", m2: "Matrix[T]") -> "Matrix[T]":
        """Performs the matrix dot product operation.

        .. deprecated:: 0.2.0
           Use the ``*`` operator instead.
        """

        warnings.warn("Please use '*' operator instead.", DeprecationWarning, stacklevel=2)
        return m1.multiply(m2)

    def __add__(self, other: Any):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if not isinstance(other, Numeric):
            return NotImplemented
        return self.mul_scalar(other)

    def __rmul__(self, other: Any):
        if not isinstance(other, Numeric):
            return NotImplemented
        return self.mul_scalar(other)

    def __matmul__(self, other: Any):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    # comparison / display --------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return "%s(%r)" % (type(self).__name__, self._rows)


def add(a: Matrix[T], b: Matrix[T]) -> Matrix[T]:
    return a.add(b)


def subtract(a: Matrix[T], b: Matrix[T]) -> Matrix[T]:
    return a.subtract(b)


def multiply(a: Matrix[T], b: Matrix[T]) -> Matrix[T]:
    return a.multiply(b)


def mul_scalar(matrix: Matrix[T], scalar: T) -> Matrix[T]:
    return matrix.mul_scalar(scalar)


def transpose(matrix: Matrix[T]) -> Matrix[T]:
    return matrix.transpose()


__all__ = ["Matrix", "add", "mul_scalar", "multiply", "subtract", "transpose"]
