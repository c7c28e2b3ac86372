"""
Readers — convert raw files into :class:`~doc_readers.models.Document` lists.

Public surface
--------------
- :class:`BaseReader` — abstract reader (subclass for new formats).
- :class:`ImageReader` — one binary document per image file.
- :class:`PDFReader` — one content-addressed document per PDF page.
- :data:`FILE_EXT_TO_READER` / :func:`get_reader` — pick a reader by extension.
"""

from __future__ import annotations

import os
from pathlib import PurePath

from doc_readers.readers.base import BaseReader, ReaderError
from doc_readers.readers.image import ImageReader

__all__ = [
    "BaseReader",
    "FILE_EXT_TO_READER",
    "ImageReader",
    "PDFParseError",
    "PDFReader",
    "ReaderError",
    "get_reader",
]


def _pdf_reader() -> BaseReader:
    from doc_readers.readers.pdf import PDFReader

    return PDFReader()


FILE_EXT_TO_READER = {
    "pdf": _pdf_reader,
    "jpg": ImageReader,
    "jpeg": ImageReader,
    "png": ImageReader,
    "gif": ImageReader,
    "bmp": ImageReader,
    "tif": ImageReader,
    "tiff": ImageReader,
    "webp": ImageReader,
}


def get_reader(file: str | os.PathLike[str]) -> BaseReader:
    """Return a fresh reader for *file*, chosen by its extension.

    Raises
    ------
    ValueError
        When the extension has no registered reader.
    """
    ext = PurePath(file).suffix.lower().lstrip(".")
    factory = FILE_EXT_TO_READER.get(ext)
    if factory is None:
        raise ValueError(f"Unsupported file type: {os.fspath(file)!r}")
    return factory()


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import the PDF reader to avoid pulling in pypdf at import time."""
    if name in ("PDFReader", "PDFParseError"):
        from doc_readers.readers.pdf import PDFParseError, PDFReader

        return PDFReader if name == "PDFReader" else PDFParseError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
