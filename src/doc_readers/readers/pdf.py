"""PDF reader — one content-addressed document per page.

Text extraction is delegated to :mod:`pypdf`.  The extraction routine
returns every page followed by a page-break marker::

    <page 0 text>----------------Page (0) Break----------------<page 1 text>...

and the reader splits that blob back into pages.  Each page becomes a
:class:`~doc_readers.models.Document` whose id is the SHA-256 digest of its
text, so identical pages share an id.

Usage::

    from doc_readers.readers.pdf import PDFReader

    docs = asyncio.run(PDFReader().load_data("report.pdf"))
"""

from __future__ import annotations

import asyncio
import io
import logging
import os
import re

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from doc_readers.config import settings
from doc_readers.models import Document
from doc_readers.readers.base import BaseReader, ReaderError
from doc_readers.storage import FileSystemBase, default_fs

logger = logging.getLogger(__name__)

PAGE_BREAK_TEMPLATE = "----------------Page ({index}) Break----------------"
PAGE_BREAK_PATTERN = re.compile(r"----------------Page \(\d+\) Break----------------")


class PDFParseError(ReaderError):
    """The PDF could not be parsed (malformed, empty or encrypted)."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


def page_break(index: int) -> str:
    """Return the page-break marker emitted after page *index*."""
    return PAGE_BREAK_TEMPLATE.format(index=index)


def extract_pdf_text(data: bytes, *, strict: bool = False) -> str:
    """Parse *data* and return all page texts, each followed by its marker.

    Raises
    ------
    PDFParseError
        When pypdf rejects the document or fails on a malformed structure.
        Parsing works on an in-memory buffer, so every failure here is a
        parse failure.
    """
    try:
        reader = PdfReader(io.BytesIO(data), strict=strict)
        parts: list[str] = []
        for index, page in enumerate(reader.pages):
            parts.append(page.extract_text() or "")
            parts.append(page_break(index))
    except PyPdfError as exc:
        raise PDFParseError(f"Could not parse PDF: {exc}") from exc
    except Exception as exc:
        raise PDFParseError(f"Internal parser error ({type(exc).__name__}): {exc}") from exc
    return "".join(parts)


async def read_pdf(data: bytes, *, strict: bool = False) -> str:
    """Run :func:`extract_pdf_text` in a worker thread."""
    return await asyncio.to_thread(extract_pdf_text, data, strict=strict)


def split_pages(text: str) -> list[str]:
    """Split extracted text on page-break markers, keeping empty segments."""
    return PAGE_BREAK_PATTERN.split(text)


class PDFReader(BaseReader):
    """Reads the text of a PDF, one document per page.

    Parameters
    ----------
    skip_empty_pages:
        Drop zero-length segments of the split (blank pages and the segment
        after the final marker).  Whitespace-only pages are kept.
    strict:
        Forwarded to :class:`pypdf.PdfReader`.

    Both defaults come from :data:`~doc_readers.config.settings` as it was
    when this module was imported; pass them explicitly to pick up later
    changes.
    """

    def __init__(
        self,
        *,
        skip_empty_pages: bool = settings.pdf_skip_empty_pages,
        strict: bool = settings.pdf_strict,
    ) -> None:
        self.skip_empty_pages = skip_empty_pages
        self.strict = strict

    async def load_data(
        self,
        file: str | os.PathLike[str],
        fs: FileSystemBase = default_fs,
    ) -> list[Document]:
        path = os.fspath(file)
        content = await fs.read_raw_file(path)
        try:
            text = await read_pdf(content, strict=self.strict)
        except PDFParseError as exc:
            exc.path = path
            logger.warning("Failed to parse %s: %s", path, exc)
            raise

        pages = split_pages(text)
        documents = [
            Document.from_text(page, metadata={"source": path, "page": index})
            for index, page in enumerate(pages)
            if page or not self.skip_empty_pages
        ]
        logger.info("Loaded %d page(s) from %s", len(documents), path)
        return documents
