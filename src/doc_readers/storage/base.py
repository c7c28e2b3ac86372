"""Abstract base class for file-system backends.

Adding a new backend (S3, GCS, a zip archive …) only requires subclassing
:class:`FileSystemBase` and implementing the abstract methods.  The readers
are backend-agnostic.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod


class FileSystemBase(ABC):
    """Backend-agnostic, asynchronous file-access interface.

    Failures are reported with the built-in :class:`OSError` family
    (``FileNotFoundError``, ``PermissionError``, …) so callers can handle
    every backend the same way.
    """

    # -- required overrides ---------------------------------------------------

    @abstractmethod
    async def read_file(self, path: str | os.PathLike[str]) -> bytes:
        """Return the full contents of *path*.

        Raises
        ------
        FileNotFoundError
            When *path* does not exist.
        PermissionError
            When the backend refuses access.
        """
        ...

    @abstractmethod
    async def write_file(self, path: str | os.PathLike[str], content: bytes | str) -> None:
        """Write *content* to *path*, replacing it. ``str`` is UTF-8 encoded."""
        ...

    @abstractmethod
    async def exists(self, path: str | os.PathLike[str]) -> bool:
        """Return ``True`` when *path* exists."""
        ...

    @abstractmethod
    async def mkdir(self, path: str | os.PathLike[str]) -> None:
        """Create directory *path* and its parents; no error if present."""
        ...

    # -- optional overrides ---------------------------------------------------

    async def read_raw_file(self, path: str | os.PathLike[str]) -> bytes:
        """Return the undecoded bytes of *path*.  Defaults to :meth:`read_file`."""
        return await self.read_file(path)
