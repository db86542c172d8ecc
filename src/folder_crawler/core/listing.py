"""Turn scan results into printable rows."""

from __future__ import annotations

import logging

from folder_crawler.core.scanner import DirectoryScanner
from folder_crawler.models.scan_result import ListingRow, ScanResult
from folder_crawler.models.size_unit import SizeUnit
from folder_crawler.utils import format_permissions, round_half_away

log = logging.getLogger(__name__)


def build_row(path: str, scanner: DirectoryScanner) -> ListingRow:
    """Stat a single path and describe it."""
    size = scanner.query_entry_size(path)
    permissions = scanner.get_entry_permissions(path)
    unit = SizeUnit.for_bytes(size.value)
    scaled = unit.scale(size.value)
    return ListingRow(
        path=path,
        size_bytes=size.value,
        sized=not size.degraded,
        unit=unit,
        scaled=round_half_away(scaled) if scaled is not None else None,
        permissions=permissions,
        mode=format_permissions(permissions),
    )


def build_listing(result: ScanResult, scanner: DirectoryScanner | None = None) -> list[ListingRow]:
    """Describe every entry of *result*, in entry order."""
    scanner = scanner or DirectoryScanner()
    rows = [build_row(path, scanner) for path in result.entries]
    log.debug("Described %d entries under %s", len(rows), result.root)
    return rows
