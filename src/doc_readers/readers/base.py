"""Abstract base class for file readers.

A reader turns one file into a list of :class:`~doc_readers.models.Document`
objects.  Readers are stateless between calls: everything they produce is
created fresh and handed over to the caller.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod

from doc_readers.models import Document
from doc_readers.storage import FileSystemBase, default_fs


class ReaderError(Exception):
    """Base class for errors raised by the readers themselves.

    File-system failures are *not* wrapped; they surface as the
    :class:`OSError` raised by the file system.
    """


class BaseReader(ABC):
    """Reader interface shared by every file format."""

    @abstractmethod
    async def load_data(
        self,
        file: str | os.PathLike[str],
        fs: FileSystemBase = default_fs,
    ) -> list[Document]:
        """Load *file* through *fs* and return the documents it contains.

        Parameters
        ----------
        file:
            Path/name of the file to load.
        fs:
            File-system capability used to read the bytes.  Defaults to the
            process-wide local file system.
        """
        ...
