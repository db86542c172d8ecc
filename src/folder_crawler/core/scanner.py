"""Directory enumeration and single-path stat queries."""

from __future__ import annotations

import logging
import os
import stat
from typing import Iterator

from folder_crawler.models.scan_result import ScanResult
from folder_crawler.models.stat_result import StatResult

log = logging.getLogger(__name__)

# Reported for anything that cannot be sized (directories included).
FALLBACK_SIZE = 4 * 1024
NO_PERMISSIONS = 0

# os.fspath raises TypeError for values that are not paths at all, and
# os.scandir / os.stat raise ValueError for an embedded NUL.
_PATH_ERRORS = (OSError, TypeError, ValueError)


def _label(path: object) -> str:
    """Printable form of *path*, also for values that are not paths."""
    try:
        return os.fspath(path)
    except TypeError:
        return str(path)


class DirectoryScanner:
    """Lists directory entries and answers size and permission queries.

    Every method blocks until the filesystem answers and none of them
    raise.  Failures degrade to an empty listing, ``FALLBACK_SIZE`` or
    ``NO_PERMISSIONS``; the ``degraded`` flag on the returned result tells
    the caller when that happened.

    Directory symlinks are listed but never followed during recursive
    scans, so symlink cycles cannot make a scan loop.  Each directory is
    read completely and closed before the next one is opened, so deep
    trees never hold more than one directory handle.
    """

    def scan_shallow(self, root: str | os.PathLike[str]) -> ScanResult:
        """List the immediate children of *root*."""
        result = ScanResult(root=_label(root))
        try:
            children = self._list_dir(os.fspath(root), result)
        except _PATH_ERRORS as e:
            return self._root_failed(result, e)

        for path, _ in children:
            result.append(path)
        return result

    def scan_recursive(self, root: str | os.PathLike[str]) -> ScanResult:
        """List every file and directory below *root*, depth first.

        A directory is listed before its contents, and its contents are
        exhausted before moving on to its next sibling.
        """
        result = ScanResult(root=_label(root))
        try:
            children = self._list_dir(os.fspath(root), result)
        except _PATH_ERRORS as e:
            return self._root_failed(result, e)

        # Pending (path, is_dir) pairs, next entry on top.
        stack = children[::-1]
        while stack:
            path, is_dir = stack.pop()
            result.append(path)
            if not is_dir:
                continue
            try:
                children = self._list_dir(path, result)
            except OSError as e:
                log.debug("Skipping subtree %s: %s", path, e)
                result.skipped += 1
                continue
            stack.extend(reversed(children))
        return result

    def get_entry_size(self, path: str | os.PathLike[str]) -> int:
        """Return the byte size of a regular file, else ``FALLBACK_SIZE``."""
        return self.query_entry_size(path).value

    def get_entry_permissions(self, path: str | os.PathLike[str]) -> int:
        """Return the permission bits of *path*, else ``NO_PERMISSIONS``."""
        return self.query_entry_permissions(path).value

    def query_entry_size(self, path: str | os.PathLike[str]) -> StatResult:
        try:
            st = os.stat(os.fspath(path))
        except _PATH_ERRORS as e:
            return self._stat_failed(_label(path), FALLBACK_SIZE, e)
        if not stat.S_ISREG(st.st_mode):
            return self._stat_failed(_label(path), FALLBACK_SIZE, "not a regular file")
        return StatResult(path=_label(path), value=st.st_size)

    def query_entry_permissions(self, path: str | os.PathLike[str]) -> StatResult:
        try:
            st = os.stat(os.fspath(path))
        except _PATH_ERRORS as e:
            return self._stat_failed(_label(path), NO_PERMISSIONS, e)
        return StatResult(path=_label(path), value=stat.S_IMODE(st.st_mode))

    def _list_dir(self, path: str, result: ScanResult) -> list[tuple[str, bool]]:
        """Read a whole directory and return ``(path, is_dir)`` per entry.

        Raises whatever ``os.scandir`` raises when *path* cannot be opened.
        An entry whose type cannot be determined is kept as a non-directory.
        """
        children: list[tuple[str, bool]] = []
        with os.scandir(path) as it:
            for entry in self._read_dir(it, path, result):
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError as e:
                    log.debug("Cannot tell whether %s is a directory: %s", entry.path, e)
                    result.skipped += 1
                    is_dir = False
                children.append((entry.path, is_dir))
        return children

    @staticmethod
    def _read_dir(
        it: Iterator[os.DirEntry[str]],
        path: str,
        result: ScanResult,
    ) -> Iterator[os.DirEntry[str]]:
        """Yield entries from an open scandir iterator.

        A read error ends the directory early; entries yielded before it
        are kept.
        """
        while True:
            try:
                entry = next(it)
            except StopIteration:
                return
            except OSError as e:
                log.debug("Stopped reading %s: %s", path, e)
                result.skipped += 1
                return
            yield entry

    @staticmethod
    def _root_failed(result: ScanResult, error: Exception) -> ScanResult:
        log.debug("Could not open %s: %s", result.root, error)
        result.clear()
        result.error = str(error)
        return result

    @staticmethod
    def _stat_failed(path: str, fallback: int, error: Exception | str) -> StatResult:
        log.debug("Could not stat %s: %s", path, error)
        return StatResult(path=path, value=fallback, error=str(error))


_default_scanner = DirectoryScanner()


def scan_shallow(root: str | os.PathLike[str]) -> ScanResult:
    """List the immediate children of *root*."""
    return _default_scanner.scan_shallow(root)


def scan_recursive(root: str | os.PathLike[str]) -> ScanResult:
    """List every file and directory below *root*."""
    return _default_scanner.scan_recursive(root)


def get_entry_size(path: str | os.PathLike[str]) -> int:
    return _default_scanner.get_entry_size(path)


def get_entry_permissions(path: str | os.PathLike[str]) -> int:
    return _default_scanner.get_entry_permissions(path)
