from __future__ import annotations

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PREVIEW_IMAGE_MAX_BYTES = 20 * 1024 * 1024
DEFAULT_UNSUPPORTED_IMAGE_MIME_TYPES = (
    "image/vnd.adobe.photoshop",
    "image/tiff",
    "image/vnd.dwg",
)


def _split_origins(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = Field(default="development", validation_alias="ENVIRONMENT")

    preview_image_max_bytes: int = Field(
        default=DEFAULT_PREVIEW_IMAGE_MAX_BYTES,
        ge=0,
        validation_alias="PREVIEW_IMAGE_MAX_BYTES",
    )
    unsupported_image_mime_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_UNSUPPORTED_IMAGE_MIME_TYPES),
        validation_alias="UNSUPPORTED_IMAGE_MIME_TYPES",
    )

    # Bucket id -> base URL, e.g. {"QNY1": "https://s1.example.com/"}.
    storage_hosts: dict[str, str] = Field(default_factory=dict, validation_alias="STORAGE_HOSTS")

    frontend_origins: str = Field(
        default="http://localhost:3000",
        validation_alias="FRONTEND_ORIGINS",
    )

    @computed_field
    @property
    def frontend_origin_list(self) -> list[str]:
        return _split_origins(self.frontend_origins)


@lru_cache
def get_settings() -> Settings:
    return Settings()
