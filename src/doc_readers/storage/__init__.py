"""
Storage — the file-access capability consumed by the readers.

Readers never touch the disk directly; they receive a
:class:`FileSystemBase` instance per call and fall back to
:data:`default_fs` when the caller passes none.
"""

from doc_readers.storage.base import FileSystemBase
from doc_readers.storage.local import LocalFileSystem, default_fs
from doc_readers.storage.memory import InMemoryFileSystem

__all__ = [
    "FileSystemBase",
    "InMemoryFileSystem",
    "LocalFileSystem",
    "default_fs",
]
