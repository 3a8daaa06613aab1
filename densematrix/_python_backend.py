"""Pure-Python matrix kernels.

These functions operate on row-major nested lists and never coerce element
types, so any value implementing the ``Numeric`` protocol flows through
unchanged.  They are the reference semantics the accelerated kernels must
reproduce, and intentionally avoid importing ``matrix`` so backends can call
into them without creating import cycles.
"""

from __future__ import annotations

from typing import Any, List

from .numeric import zero_of

Rows = List[List[Any]]


def is_available() -> bool:
    return True


def add(a: Rows, b: Rows) -> Rows:
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def subtract(a: Rows, b: Rows) -> Rows:
    return [[x - y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def mul_scalar(a: Rows, scalar: Any) -> Rows:
    return [[x * scalar for x in row] for row in a]


def transpose(a: Rows) -> Rows:
    return [list(col) for col in zip(*a)]


def matmul(a: Rows, b: Rows) -> Rows:
    terms = len(b)
    cols = len(b[0]) if b else 0
    result: Rows = []
    for row in a:
        out_row = []
        for c in range(cols):
            acc = zero_of(row[0])
            for t in range(terms):
                acc += row[t] * b[t][c]
            out_row.append(acc)
        result.append(out_row)
    return result


__all__ = ["add", "is_available", "matmul", "mul_scalar", "subtract", "transpose"]
