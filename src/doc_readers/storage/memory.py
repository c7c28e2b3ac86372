"""Dict-backed file system for tests and callers that already hold the bytes."""

from __future__ import annotations

import errno
import os
import posixpath
from collections.abc import Mapping

from doc_readers.storage.base import FileSystemBase
from doc_readers.storage.local import _to_bytes


def _normalise(path: str | os.PathLike[str]) -> str:
    return posixpath.normpath(os.fspath(path).replace("\\", "/"))


class InMemoryFileSystem(FileSystemBase):
    """Keeps files in a ``{path: bytes}`` dict.

    Parameters
    ----------
    files:
        Optional initial contents.  ``str`` values are UTF-8 encoded.
    """

    def __init__(self, files: Mapping[str, bytes | str] | None = None) -> None:
        self._files: dict[str, bytes] = {}
        self._dirs: set[str] = set()
        for path, content in (files or {}).items():
            self._store(path, content)

    def _store(self, path: str | os.PathLike[str], content: bytes | str) -> None:
        key = _normalise(path)
        self._files[key] = _to_bytes(content)
        self._mark_dir(posixpath.dirname(key))

    def _mark_dir(self, key: str) -> None:
        while key and key not in self._dirs:
            self._dirs.add(key)
            parent = posixpath.dirname(key)
            key = parent if parent != key else ""

    async def read_file(self, path: str | os.PathLike[str]) -> bytes:
        key = _normalise(path)
        if key in self._files:
            return self._files[key]
        if key in self._dirs:
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), os.fspath(path))
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), os.fspath(path))

    async def write_file(self, path: str | os.PathLike[str], content: bytes | str) -> None:
        self._store(path, content)

    async def exists(self, path: str | os.PathLike[str]) -> bool:
        key = _normalise(path)
        return key in self._files or key in self._dirs

    async def mkdir(self, path: str | os.PathLike[str]) -> None:
        self._mark_dir(_normalise(path))
