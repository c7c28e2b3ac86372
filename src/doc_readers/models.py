"""Document models produced by the readers."""

from __future__ import annotations

import hashlib
from typing import Any
from uuid import uuid4

from langchain_core.documents import Document as LCDocument
from langchain_core.documents.base import Blob
from pydantic import BaseModel, Field


def content_hash(text: str) -> str:
    """Return the SHA-256 hex digest of the UTF-8 encoding of *text*."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


class Document(BaseModel):
    """A unit of loaded content.

    Attributes
    ----------
    id:
        Identifier of the document. Content-derived documents (see
        :meth:`from_text`) carry the SHA-256 digest of their text, so the
        same text always yields the same id. Otherwise any unique string,
        e.g. a file path.
    text:
        Textual content; empty for binary documents.
    metadata:
        Arbitrary extra metadata (``source``, ``page``, …).
    """

    id: str = Field(default_factory=lambda: uuid4().hex)
    text: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_text(cls, text: str, metadata: dict[str, Any] | None = None) -> Document:
        return cls(id=content_hash(text), text=text, metadata=metadata or {})

    def to_langchain(self) -> LCDocument:
        """Convert to a LangChain ``Document`` for downstream chunking/embedding."""
        return LCDocument(page_content=self.text, metadata=dict(self.metadata), id=self.id)

    def __str__(self) -> str:  # noqa: D105
        return f"[{self.id[:12]}] {self.text[:120]}"


class ImageDocument(Document):
    """A document whose payload is binary image data rather than text."""

    image: Blob

    @property
    def size(self) -> int:
        """Byte length of the image payload."""
        return len(self.image.as_bytes())

    def __str__(self) -> str:  # noqa: D105
        return f"[{self.id}] <image {self.image.mimetype or 'unknown'}, {self.size} bytes>"
