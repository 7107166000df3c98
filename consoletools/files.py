"""In-memory file handles and whole-file I/O.

``FileHandle`` pairs a path with an owned byte buffer. Its setters validate
paths against the live filesystem but never raise; the module-level
``read_file``/``write_file``/``create_file`` functions do the actual I/O and
report failures as ``FileOpenError``.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

TEMPORARY_FILENAME = "temporary_file.txt"

PathLike = Union[str, os.PathLike]
BytesLike = Union[bytes, bytearray, memoryview, str]


class FileOpenError(OSError):
    """A file could not be opened for reading or writing."""

    action = "open"

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
        self.name = self.path.name
        super().__init__(f"Cannot {self.action} file: {self.name}")


class FileCreateError(FileOpenError):
    """A file could not be created."""

    action = "create"


class WriteMode(Enum):
    APPEND = "ab"
    OVERWRITE = "wb"


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def safe_exists(path: Path) -> bool:
    """Return whether ``path`` exists, treating stat failures as missing."""
    try:
        return path.exists()
    except OSError:
        return False


def safe_is_dir(path: Path) -> bool:
    """Return whether ``path`` is a directory, treating stat failures as ``False``."""
    try:
        return path.is_dir()
    except OSError:
        return False


def is_existing_file(path: Path) -> bool:
    return safe_exists(path) and not safe_is_dir(path)


class FileHandle:
    """A path plus the bytes that belong to it.

    ``size`` always equals ``len(contents)``. Paths are only replaced through
    ``set_path``, which ignores targets whose parent directory is missing and
    redirects existing directories to ``<dir>/temporary_file.txt``.
    """

    def __init__(self, path: PathLike | None = None, contents: BytesLike = b"") -> None:
        self._path = Path.cwd() / TEMPORARY_FILENAME
        self._contents = b""
        self._size = 0
        if path is not None:
            self.set_path(path)
        self.set_contents(contents)

    def __repr__(self) -> str:
        return f"FileHandle(path={str(self._path)!r}, size={self._size})"

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> int:
        return self._contents[index]

    @property
    def path(self) -> Path:
        return self._path

    @property
    def contents(self) -> bytes:
        return self._contents

    @property
    def size(self) -> int:
        return self._size

    @property
    def empty(self) -> bool:
        return self._size == 0

    @property
    def filename(self) -> str:
        return self._path.name

    @property
    def directory(self) -> Path:
        return self._path.parent

    def text(self, encoding: str = "utf-8", errors: str = "replace") -> str:
        return self._contents.decode(encoding, errors=errors)

    def set_path(self, new_path: PathLike) -> bool:
        """Point the handle at ``new_path`` when its parent directory exists.

        Returns whether the path was applied; a missing parent leaves the
        previous path in place.
        """
        candidate = Path(new_path)
        if not safe_exists(candidate.parent):
            logger.debug("ignoring path with missing parent: %s", candidate)
            return False
        if safe_is_dir(candidate):
            candidate = candidate / TEMPORARY_FILENAME
        self._path = candidate
        return True

    def set_filename(self, name: str) -> bool:
        """Replace the final path segment, keeping the directory."""
        try:
            self._path = self._path.with_name(name)
        except ValueError:
            return False
        return True

    def set_contents(self, data: BytesLike) -> None:
        contents = _as_bytes(data)
        self._contents, self._size = contents, len(contents)

    def exists(self) -> bool:
        """Live check that the path names an existing non-directory."""
        return is_existing_file(self._path)


def read_file(path: PathLike) -> FileHandle:
    """Load the full contents of ``path`` into a new handle."""
    target = Path(path)
    if not is_existing_file(target):
        raise FileOpenError(target)
    try:
        data = target.read_bytes()
    except OSError as exc:
        raise FileOpenError(target) from exc
    logger.debug("read %d bytes from %s", len(data), target)
    return FileHandle(target, data)


def write_file(path: PathLike, data: BytesLike, mode: WriteMode = WriteMode.APPEND) -> None:
    """Write ``data`` to an existing regular file."""
    target = Path(path)
    if not is_existing_file(target):
        raise FileOpenError(target)
    payload = _as_bytes(data)
    try:
        with open(target, mode.value) as stream:
            stream.write(payload)
    except OSError as exc:
        raise FileOpenError(target) from exc
    logger.debug("wrote %d bytes to %s (%s)", len(payload), target, mode.name.lower())


def create_file(target: FileHandle | PathLike) -> FileHandle:
    """Create (or truncate) a file and fill it with the handle's contents.

    A plain path is wrapped in an empty handle first, so an existing
    directory resolves to ``<dir>/temporary_file.txt``.
    """
    if isinstance(target, FileHandle):
        handle = target
    else:
        handle = FileHandle()
        if not handle.set_path(target):
            raise FileCreateError(target)
    try:
        with open(handle.path, "wb") as stream:
            stream.write(handle.contents)
    except OSError as exc:
        raise FileCreateError(handle.path) from exc
    logger.debug("created %s (%d bytes)", handle.path, handle.size)
    return handle


__all__ = [
    "TEMPORARY_FILENAME",
    "FileOpenError",
    "FileCreateError",
    "WriteMode",
    "safe_exists",
    "safe_is_dir",
    "is_existing_file",
    "FileHandle",
    "read_file",
    "write_file",
    "create_file",
]
