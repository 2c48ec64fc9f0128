"""Comparators built on ``==`` and ``>`` only."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Compare(Generic[T]):
    """Compares values using only their ``==`` and ``>`` operators."""

    def eq(self, a: T, b: T) -> bool:
        """True when ``a`` equals ``b``."""
        return a == b

    def lt(self, a: T, b: T) -> bool:
        """True when ``a`` is less than ``b``."""
        return b > a

    def mt(self, a: T, b: T) -> bool:
        """True when ``a`` is more than ``b``."""
        return a > b


class CompareReverse(Compare[T]):
    """Comparator with the order reversed."""

    def eq(self, a: T, b: T) -> bool:
        return a == b

    def lt(self, a: T, b: T) -> bool:
        return a > b

    def mt(self, a: T, b: T) -> bool:
        return b > a


def _compare_ncase(a: str, b: str) -> int:
    la, lb = a.lower(), b.lower()
    return (la > lb) - (la < lb)


class CompareStringNCase(Compare[str]):
    """Compares strings without regard to case."""

    def eq(self, a: str, b: str) -> bool:
        return _compare_ncase(a, b) == 0

    def lt(self, a: str, b: str) -> bool:
        return _compare_ncase(a, b) < 0

    def mt(self, a: str, b: str) -> bool:
        return _compare_ncase(a, b) > 0