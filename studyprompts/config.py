"""Configuration for the pipeline and the application shell.

ExtractorConfig is passed explicitly into the extractor and never reads the
environment. AppSettings covers the HTTP and UI shell and is loaded from
environment variables (and a .env file when present).
"""

import logging
import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class ExtractorConfig(BaseModel):
    """Decoder settings for the page text extractor.

    Attributes:
        strict: Use pypdf strict parsing (reject recoverable structure errors).
        password: Password tried on encrypted documents.
        extraction_mode: pypdf text extraction mode ("plain" or "layout").
    """

    model_config = {"frozen": True}

    strict: bool = False
    password: str = ""
    extraction_mode: Literal["plain", "layout"] = "plain"


class AppSettings(BaseModel):
    """Settings for the HTTP service and the web page.

    Attributes:
        host: Interface the server binds to.
        port: Port the server listens on.
        log_level: Root logging level name.
        max_upload_size_mb: Largest accepted upload in megabytes.
        decode_timeout: Seconds allowed for one PDF decode.
        api_base_url: Base URL the web page posts uploads to.
    """

    # Environment values arrive through default_factory; validate them too
    model_config = {"validate_default": True}

    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(
        default_factory=lambda: os.getenv("PORT", "8000"),
        ge=1,
        le=65535,
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    max_upload_size_mb: int = Field(
        default_factory=lambda: os.getenv("MAX_UPLOAD_SIZE_MB", "10"),
        ge=1,
        description="Maximum accepted upload size in MB",
    )
    decode_timeout: float = Field(
        default_factory=lambda: os.getenv("DECODE_TIMEOUT", "30"),
        gt=0,
        description="Seconds allowed for decoding one document",
    )
    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:8000"),
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def max_upload_size(self) -> int:
        """Maximum upload size in bytes."""
        return self.max_upload_size_mb * 1024 * 1024


def get_settings() -> AppSettings:
    """Create application settings from environment.

    Returns:
        Configured AppSettings instance.

    Raises:
        ValueError: If an environment value is invalid.
    """
    return AppSettings()
