"""
doc_readers — adapt raw files (images, PDFs) into in-memory documents.

Public surface
--------------
- :class:`Document`, :class:`ImageDocument` — the document model.
- :class:`ImageReader`, :class:`PDFReader` — stateless file readers.
- :func:`get_reader` — pick a reader by file extension.
- :class:`FileSystemBase`, :data:`default_fs` — the file-access capability.
"""

from doc_readers.models import Document, ImageDocument, content_hash
from doc_readers.readers import FILE_EXT_TO_READER, BaseReader, ImageReader, ReaderError, get_reader
from doc_readers.storage import FileSystemBase, InMemoryFileSystem, LocalFileSystem, default_fs

__all__ = [
    "BaseReader",
    "Document",
    "FILE_EXT_TO_READER",
    "FileSystemBase",
    "ImageDocument",
    "ImageReader",
    "InMemoryFileSystem",
    "LocalFileSystem",
    "PDFParseError",
    "PDFReader",
    "ReaderError",
    "content_hash",
    "default_fs",
    "get_reader",
]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import the PDF reader to avoid pulling in pypdf at import time."""
    if name in ("PDFReader", "PDFParseError"):
        from doc_readers.readers.pdf import PDFParseError, PDFReader

        return PDFReader if name == "PDFReader" else PDFParseError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
