"""Binary data size units."""

from __future__ import annotations

from enum import Enum


class SizeUnit(Enum):
    """A 1024-based data size unit.

    Each member's value is its power of 1024. ``UNBOUNDED`` covers sizes
    too large (or otherwise unrepresentable) for any other unit.
    """

    B = 0
    KB = 1
    MB = 2
    GB = 3
    TB = 4
    PB = 5
    EB = 6
    UNBOUNDED = 7

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def factor(self) -> int | None:
        """Number of bytes in one of this unit, or None for ``UNBOUNDED``."""
        if self is SizeUnit.UNBOUNDED:
            return None
        return 1024**self.value

    @classmethod
    def for_bytes(cls, size: int) -> SizeUnit:
        """Return the largest unit in which *size* is at least 1."""
        if size < 0:
            return cls.UNBOUNDED
        for unit in cls:
            if unit is cls.UNBOUNDED:
                break
            if size < 1024 ** (unit.value + 1):
                return unit
        return cls.UNBOUNDED

    def scale(self, size: int) -> float | None:
        """Express *size* bytes in this unit."""
        factor = self.factor
        if factor is None:
            return None
        return size / factor
