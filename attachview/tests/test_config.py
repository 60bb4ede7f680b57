from __future__ import annotations

from attachview.core.config import (
    DEFAULT_PREVIEW_IMAGE_MAX_BYTES,
    DEFAULT_UNSUPPORTED_IMAGE_MIME_TYPES,
    Settings,
)


def test_settings_defaults(monkeypatch) -> None:
    for name in ("PREVIEW_IMAGE_MAX_BYTES", "UNSUPPORTED_IMAGE_MIME_TYPES", "STORAGE_HOSTS", "FRONTEND_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.preview_image_max_bytes == DEFAULT_PREVIEW_IMAGE_MAX_BYTES == 20 * 1024 * 1024
    assert settings.unsupported_image_mime_types == list(DEFAULT_UNSUPPORTED_IMAGE_MIME_TYPES)
    assert settings.storage_hosts == {}
    assert settings.frontend_origin_list == ["http://localhost:3000"]


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("PREVIEW_IMAGE_MAX_BYTES", "1048576")
    monkeypatch.setenv("UNSUPPORTED_IMAGE_MIME_TYPES", '["image/x-icon"]')
    monkeypatch.setenv("STORAGE_HOSTS", '{"QNY1": "https://s1.example.com/"}')
    monkeypatch.setenv("FRONTEND_ORIGINS", "http://a.test, http://b.test,")

    settings = Settings(_env_file=None)

    assert settings.preview_image_max_bytes == 1_048_576
    assert settings.unsupported_image_mime_types == ["image/x-icon"]
    assert settings.storage_hosts == {"QNY1": "https://s1.example.com/"}
    assert settings.frontend_origin_list == ["http://a.test", "http://b.test"]
