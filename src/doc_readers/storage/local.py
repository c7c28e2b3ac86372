"""Local-disk implementation of the file-system abstraction."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from doc_readers.storage.base import FileSystemBase

logger = logging.getLogger(__name__)


def _to_bytes(content: bytes | str) -> bytes:
    return content.encode("utf-8") if isinstance(content, str) else bytes(content)


class LocalFileSystem(FileSystemBase):
    """Reads and writes the local file system.

    Blocking calls run in a worker thread via :func:`asyncio.to_thread`
    so the event loop stays responsive while large files are read.
    """

    async def read_file(self, path: str | os.PathLike[str]) -> bytes:
        data = await asyncio.to_thread(Path(path).read_bytes)
        logger.debug("Read %d bytes from %s", len(data), path)
        return data

    async def write_file(self, path: str | os.PathLike[str], content: bytes | str) -> None:
        await asyncio.to_thread(Path(path).write_bytes, _to_bytes(content))

    async def exists(self, path: str | os.PathLike[str]) -> bool:
        return await asyncio.to_thread(Path(path).exists)

    async def mkdir(self, path: str | os.PathLike[str]) -> None:
        await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)


# Process-wide default for callers that pass no file system. Never mutated.
default_fs = LocalFileSystem()
