"""Folder crawler data models."""

from folder_crawler.models.scan_result import ListingRow, ScanResult
from folder_crawler.models.size_unit import SizeUnit
from folder_crawler.models.stat_result import StatResult

__all__ = [
    "ListingRow",
    "ScanResult",
    "SizeUnit",
    "StatResult",
]
