"""Unit tests for the image reader."""

from __future__ import annotations

import asyncio
import mimetypes
import os
from pathlib import Path

import pytest

from doc_readers.models import ImageDocument
from doc_readers.readers.image import ImageReader
from doc_readers.storage import FileSystemBase, InMemoryFileSystem

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(64))


class DeniedFileSystem(FileSystemBase):
    """Refuses every read with the same error instance."""

    def __init__(self) -> None:
        self.error = PermissionError(13, "Permission denied", "secret.png")

    async def read_file(self, path: str | os.PathLike[str]) -> bytes:
        raise self.error

    async def write_file(self, path: str | os.PathLike[str], content: bytes | str) -> None:
        raise self.error

    async def exists(self, path: str | os.PathLike[str]) -> bool:
        return True

    async def mkdir(self, path: str | os.PathLike[str]) -> None:
        raise self.error


@pytest.fixture()
def image_fs() -> InMemoryFileSystem:
    return InMemoryFileSystem({"photos/cat.png": PNG_BYTES, "scan.bin": b"\x01\x02\x03"})


def test_returns_exactly_one_image_document(image_fs: InMemoryFileSystem) -> None:
    docs = asyncio.run(ImageReader().load_data("photos/cat.png", image_fs))
    assert len(docs) == 1
    doc = docs[0]
    assert isinstance(doc, ImageDocument)
    assert doc.id == "photos/cat.png"
    assert doc.text == ""


def test_payload_matches_file_bytes(image_fs: InMemoryFileSystem) -> None:
    (doc,) = asyncio.run(ImageReader().load_data("photos/cat.png", image_fs))
    assert doc.image.as_bytes() == PNG_BYTES
    assert doc.size == len(PNG_BYTES)


def test_metadata_and_mime_type(image_fs: InMemoryFileSystem) -> None:
    (doc,) = asyncio.run(ImageReader().load_data("photos/cat.png", image_fs))
    assert doc.image.mimetype == "image/png"
    assert doc.metadata == {"source": "photos/cat.png", "mime_type": "image/png"}


def test_unknown_extension_uses_default_mime_type(
    image_fs: InMemoryFileSystem, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(mimetypes, "guess_type", lambda *args, **kwargs: (None, None))
    reader = ImageReader(default_mime_type="image/x-unknown")
    (doc,) = asyncio.run(reader.load_data("scan.bin", image_fs))
    assert doc.image.mimetype == "image/x-unknown"


def test_repeated_loads_produce_independent_documents(image_fs: InMemoryFileSystem) -> None:
    reader = ImageReader()
    (first,) = asyncio.run(reader.load_data("photos/cat.png", image_fs))
    (second,) = asyncio.run(reader.load_data("photos/cat.png", image_fs))
    assert first.id == second.id
    assert first is not second
    assert first.image is not second.image
    first.metadata["tag"] = "edited"
    assert "tag" not in second.metadata


def test_missing_file_propagates(memory_fs: InMemoryFileSystem) -> None:
    with pytest.raises(FileNotFoundError):
        asyncio.run(ImageReader().load_data("missing.png", memory_fs))


def test_read_error_is_not_translated() -> None:
    fs = DeniedFileSystem()
    with pytest.raises(PermissionError) as exc_info:
        asyncio.run(ImageReader().load_data("secret.png", fs))
    assert exc_info.value is fs.error


@pytest.mark.integration
def test_default_file_system_reads_local_disk(tmp_path: Path) -> None:
    target = tmp_path / "pic.jpg"
    target.write_bytes(PNG_BYTES)
    (doc,) = asyncio.run(ImageReader().load_data(target))
    assert doc.id == str(target)
    assert doc.size == len(PNG_BYTES)
    assert doc.image.mimetype == "image/jpeg"
