"""Pre-crawl validation of the folder a user asked to list."""

from __future__ import annotations

import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)


class FolderError(Exception):
    """Raised when a folder cannot be crawled."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(message)
        self.path = str(path)


class FolderNotFoundError(FolderError):
    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"Folder {path} is invalid or missing")


class NotAFolderError(FolderError):
    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"The specified path {path} is not a directory")


class FolderPermissionError(FolderError):
    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"Invalid permissions to enumerate files of this folder {path}")


def check_folder(path: Path | str) -> Path:
    """Make sure *path* is an existing, listable directory.

    The scanner itself never raises, so callers that want to tell a user
    why a listing came back empty check the folder first.

    Raises:
        FolderNotFoundError: Nothing exists at *path*.
        NotAFolderError: *path* exists but is not a directory.
        FolderPermissionError: The directory cannot be listed.
    """
    folder = Path(path)
    if not folder.exists():
        raise FolderNotFoundError(path)
    if not folder.is_dir():
        raise NotAFolderError(path)
    try:
        with os.scandir(folder):
            pass
    except OSError as e:
        log.debug("Cannot list %s: %s", folder, e)
        raise FolderPermissionError(path) from e
    return folder
