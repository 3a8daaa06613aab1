"""NumPy kernels for matrices holding plain ``int`` or ``float`` values.

Each kernel returns ``None`` when NumPy cannot reproduce the pure-Python
result: element types other than builtin ``int``/``float`` (``bool``
included), a matrix mixing both, or integers that could overflow ``int64``.
The product additionally requires integer operands on both sides, since
float products must match the zero-seeded left-to-right sum exactly.  The
dispatcher then runs the pure-Python kernel instead.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

import numpy as _np

Rows = List[List[Any]]

_INT64_LIMIT = 2**63 - 1


def is_available() -> bool:
    return True


def _profile(rows: Rows) -> Optional[Tuple[type, int]]:
    """Return ``(element type, largest integer magnitude)`` for homogeneous
    ``int`` or ``float`` data, else ``None``."""

    kind: type | None = None
    largest = 0
    for row in rows:
        for value in row:
            value_type = type(value)
            if kind is None:
                if value_type is not int and value_type is not float:
                    return None
                kind = value_type
            elif value_type is not kind:
                return None
            if kind is int:
                magnitude = -value if value < 0 else value
                if magnitude > largest:
                    largest = magnitude
    if kind is None or largest > _INT64_LIMIT:
        return None
    return kind, largest


def _scalar_profile(scalar: Any) -> Optional[Tuple[type, int]]:
    return _profile([[scalar]])


def _elementwise(op, a: Rows, b: Rows) -> Optional[Rows]:
    left = _profile(a)
    right = _profile(b)
    if left is None or right is None or left[1] + right[1] > _INT64_LIMIT:
        return None
    return op(_np.array(a), _np.array(b)).tolist()


def add(a: Rows, b: Rows) -> Optional[Rows]:
    return _elementwise(_np.add, a, b)


def subtract(a: Rows, b: Rows) -> Optional[Rows]:
    return _elementwise(_np.subtract, a, b)


def mul_scalar(a: Rows, scalar: Any) -> Optional[Rows]:
    left = _profile(a)
    right = _scalar_profile(scalar)
    if left is None or right is None or left[1] * right[1] > _INT64_LIMIT:
        return None
    return _np.multiply(_np.array(a), scalar).tolist()


def transpose(a: Rows) -> Optional[Rows]:
    profile = _profile(a)
    if profile is None:
        return None
    return _np.array(a).T.tolist()


def matmul(a: Rows, b: Rows) -> Optional[Rows]:
    left = _profile(a)
    right = _profile(b)
    # Integer operands only; float sums must equal the left-to-right fold.
    if left is None or right is None or left[0] is not int or right[0] is not int:
        return None
    if left[1] * right[1] * len(b) > _INT64_LIMIT:
        return None
    return _np.matmul(_np.array(a), _np.array(b)).tolist()


__all__ = ["add", "is_available", "matmul", "mul_scalar", "subtract", "transpose"]
