"""Stat query result dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class StatResult:
    """Value of a size or permission query on a single path.

    When the path could not be stat'd, ``value`` holds the fallback and
    ``error`` is set.
    """

    path: str
    value: int
    error: str = ""

    @property
    def degraded(self) -> bool:
        return bool(self.error)
