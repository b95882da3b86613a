"""Environment-driven application settings.

Values are loaded from environment variables (prefix ``LIFECONV_``) or a
``.env`` file in the working directory.  The defaults reproduce the
canonical output of the converter, so nothing needs to be set.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CodecSettings(BaseSettings):
    """Knobs for the serialisers."""

    model_config = SettingsConfigDict(env_prefix="LIFECONV_")

    rle_line_width: int = Field(default=70, ge=1, le=1000)
    """Maximum characters per line of RLE body output."""
    rle_rule: str = "B3/S23"
    """Rule written into the RLE header (never interpreted)."""


class Settings(BaseSettings):
    """Top-level settings aggregator."""

    model_config = SettingsConfigDict(
        env_prefix="LIFECONV_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    codec: CodecSettings = Field(default_factory=CodecSettings)

    force_overwrite: bool = False
    """Overwrite existing output files without ``--force``."""


# Module-level singleton; import and use directly.
settings = Settings()


def get_settings() -> Settings:
    """Return the module-level Settings singleton."""
    return settings
