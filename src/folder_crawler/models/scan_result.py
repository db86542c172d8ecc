"""Scan result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field

from folder_crawler.models.size_unit import SizeUnit


@dataclass(slots=True)
class ScanResult:
    """Entries discovered under a root directory.

    ``root`` is stored exactly as the caller passed it. When the root could
    not be opened ``entries`` is empty and ``error`` describes why; callers
    that only look at ``entries`` cannot tell this apart from an empty
    directory, so check ``degraded`` when the difference matters.
    """

    root: str
    entries: list[str] = field(default_factory=list)
    error: str = ""
    skipped: int = 0

    @property
    def degraded(self) -> bool:
        """True when the root could not be traversed."""
        return bool(self.error)

    @property
    def paths(self) -> list[str]:
        """Return a copy of the discovered entry paths."""
        return list(self.entries)

    @property
    def total_entries(self) -> int:
        return len(self.entries)

    def append(self, path: str) -> None:
        self.entries.append(path)

    def clear(self) -> None:
        self.entries.clear()


@dataclass(slots=True)
class ListingRow:
    """Single listed entry with its size and permissions.

    ``sized`` is False when the size is the scanner's fallback value
    rather than a measured one (directories, unreadable paths).
    """

    path: str
    size_bytes: int
    sized: bool
    unit: SizeUnit
    scaled: float | None
    permissions: int
    mode: str
