"""Image reader — wraps an image file as a single binary document."""

from __future__ import annotations

import logging
import mimetypes
import os

from langchain_core.documents.base import Blob

from doc_readers.config import settings
from doc_readers.models import Document, ImageDocument
from doc_readers.readers.base import BaseReader
from doc_readers.storage import FileSystemBase, default_fs

logger = logging.getLogger(__name__)


class ImageReader(BaseReader):
    """Reads the content of an image file into one :class:`ImageDocument`.

    The image is not decoded; its bytes are stored as an opaque
    :class:`~langchain_core.documents.base.Blob` and the document id is the
    source path.

    Parameters
    ----------
    default_mime_type:
        MIME type recorded when none can be guessed from the extension.
        Defaults to :data:`~doc_readers.config.settings` as it was when this
        module was imported.
    """

    def __init__(self, *, default_mime_type: str = settings.image_default_mime_type) -> None:
        self.default_mime_type = default_mime_type

    async def load_data(
        self,
        file: str | os.PathLike[str],
        fs: FileSystemBase = default_fs,
    ) -> list[Document]:
        path = os.fspath(file)
        data = await fs.read_file(path)

        mime_type = mimetypes.guess_type(path)[0] or self.default_mime_type
        blob = Blob.from_data(data, mime_type=mime_type, path=path)
        logger.info("Loaded image %s (%d bytes, %s)", path, len(data), mime_type)
        return [
            ImageDocument(
                id=path,
                image=blob,
                metadata={"source": path, "mime_type": mime_type},
            )
        ]
