"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Reader defaults, populated from env vars or .env file."""

    # PDF
    pdf_skip_empty_pages: bool = Field(
        default=True,
        description=(
            "Drop zero-length page segments produced by the page-break split. "
            "Disable to keep the exact split count, including the trailing "
            "segment after the last marker."
        ),
    )
    pdf_strict: bool = Field(default=False, description="Forwarded to pypdf.PdfReader(strict=...)")

    # Images
    image_default_mime_type: str = "application/octet-stream"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import `settings` wherever needed.
settings = Settings()
