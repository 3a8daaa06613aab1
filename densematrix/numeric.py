"""Element capability protocol shared by the matrix kernels.

A matrix element only needs the three arithmetic operators and a constructor
that accepts a small integer.  ``int``, ``float``, ``complex``,
``fractions.Fraction``, ``decimal.Decimal`` and NumPy scalars all qualify.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Numeric(Protocol):
    """Values supporting ``+``, ``-`` and ``*`` against their own type."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...


T = TypeVar("T", bound=Numeric)


def zero_for_type(dtype: Callable[[int], T]) -> T:
    """Return the additive identity of ``dtype`` by constructing it from ``0``."""

    return dtype(0)


def zero_of(value: T) -> T:
    """Return the additive identity of ``value``'s type."""

    return zero_for_type(type(value))


__all__ = ["Numeric", "T", "zero_for_type", "zero_of"]
