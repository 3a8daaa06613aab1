"""Concise matrix construction.

``mx`` accepts the same shapes of input as the core constructors plus a
compact text form where ``;`` separates rows and ``,`` separates cells::

    mx(2, 3, 1)                # fill
    mx([[1, 2], [3, 4]])       # literal rows
    mx("1, 2, 3; 4, 5, 6;")    # text literal
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any, List, Sequence

from .errors import MatrixLiteralError, RaggedMatrixError
from .matrix import Matrix


def _parse_token(token: str, row: int, col: int) -> Any:
    text = token.strip()
    if not text:
        raise MatrixLiteralError("empty cell", row, col)
    for parser in (int, float, Fraction):
        try:
            return parser(text)
        except (ValueError, ZeroDivisionError):
            continue
    raise MatrixLiteralError("cannot parse %r as a number" % text, row, col)


def parse_literal(text: str) -> List[List[Any]]:
    """Parse ``"a, b; c, d"`` into nested rows.

    A single trailing ``;`` is allowed.  Cells parse as ``int``, then
    ``float``, then ``Fraction`` (``"1/3"``).
    """

    chunks = text.strip().split(";")
    if len(chunks) > 1 and not chunks[-1].strip():
        chunks.pop()
    rows: List[List[Any]] = []
    for row_idx, chunk in enumerate(chunks):
        if not chunk.strip():
            raise MatrixLiteralError("row %d is empty" % row_idx)
        rows.append([_parse_token(token, row_idx, col_idx) for col_idx, token in enumerate(chunk.split(","))])
    width = len(rows[0])
    for row_idx, row in enumerate(rows):
        if len(row) != width:
            raise RaggedMatrixError("row %d has %d columns; expected %d" % (row_idx, len(row), width))
    return rows


def mx(*args: Any, dtype: Any = int) -> Matrix:
    """Build a matrix from fill arguments, explicit rows, or a text literal."""

    if len(args) == 1:
        (source,) = args
        if isinstance(source, Matrix):
            return source.copy()
        if isinstance(source, str):
            return Matrix(parse_literal(source))
        return Matrix(source)
    if len(args) in (2, 3):
        rows, cols = args[0], args[1]
        value = args[2] if len(args) == 3 else None
        return Matrix.fill(rows, cols, value, dtype=dtype)
    raise TypeError("mx expects (rows), (rows, cols) or (rows, cols, value); got %d arguments" % len(args))


def mx_rows(*rows: Sequence[Any]) -> Matrix:
    """Build a matrix from rows passed as separate arguments."""

    return Matrix(rows)


__all__ = ["mx", "mx_rows", "parse_literal"]
