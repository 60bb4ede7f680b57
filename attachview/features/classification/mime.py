from __future__ import annotations

import mimetypes
from collections.abc import Mapping
from functools import lru_cache

# Entries the interpreter's built-in table lacks or maps differently than browsers and
# upload clients do.
_EXTRA_TYPES: dict[str, str] = {
    ".7z": "application/x-7z-compressed",
    ".csv": "text/csv",
    ".docm": "application/vnd.ms-word.document.macroEnabled.12",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".dotx": "application/vnd.openxmlformats-officedocument.wordprocessingml.template",
    ".dwg": "image/vnd.dwg",
    ".flac": "audio/x-flac",
    ".heic": "image/heic",
    ".m4a": "audio/mp4",
    ".md": "text/markdown",
    ".mkv": "video/x-matroska",
    ".potm": "application/vnd.ms-powerpoint.template.macroEnabled.12",
    ".potx": "application/vnd.openxmlformats-officedocument.presentationml.template",
    ".ppam": "application/vnd.ms-powerpoint.addin.macroEnabled.12",
    ".ppsm": "application/vnd.ms-powerpoint.slideshow.macroEnabled.12",
    ".ppsx": "application/vnd.openxmlformats-officedocument.presentationml.slideshow",
    ".pptm": "application/vnd.ms-powerpoint.presentation.macroEnabled.12",
    ".pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    ".psd": "image/vnd.adobe.photoshop",
    ".rar": "application/x-rar-compressed",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
    ".ts": "video/mp2t",
    ".webm": "video/webm",
    ".webp": "image/webp",
    ".xlam": "application/vnd.ms-excel.addin.macroEnabled.12",
    ".xlsb": "application/vnd.ms-excel.sheet.binary.macroEnabled.12",
    ".xlsm": "application/vnd.ms-excel.sheet.macroEnabled.12",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".xltm": "application/vnd.ms-excel.template.macroEnabled.12",
    ".xltx": "application/vnd.openxmlformats-officedocument.spreadsheetml.template",
    ".zip": "application/zip",
}


def _normalize_extension(value: str) -> str:
    cleaned = value.strip().lower()
    if not cleaned:
        return ""
    return cleaned if cleaned.startswith(".") else f".{cleaned}"


def file_extension(name: str) -> str:
    """Return the lower-cased extension of ``name``.

    A bare name without a dot or a directory part (``"docx"``) is read as the extension itself.
    """
    _, separator, base = name.strip().rpartition("/")
    _, dot, suffix = base.rpartition(".")
    if dot:
        candidate = suffix
    elif separator:
        candidate = ""
    else:
        candidate = base
    return _normalize_extension(candidate)


class MimeRegistry:
    """Extension -> MIME lookup.

    Lookups read only the interpreter's bundled ``mimetypes`` table plus the overlay above,
    so results do not change between machines. Constructing ``mimetypes.MimeTypes()`` still
    runs the global ``mimetypes.init()``, which reads the host's system MIME files into the
    module-level ``mimetypes`` state as a side effect.
    """

    def __init__(
        self,
        extra_types: Mapping[str, str] | None = None,
        *,
        include_defaults: bool = True,
    ) -> None:
        types: dict[str, str] = {}
        if include_defaults:
            bundled = mimetypes.MimeTypes()
            # Index 0 holds non-standard types, index 1 the standard ones; standard wins.
            for table in bundled.types_map:
                types.update(table)
            types.update(_EXTRA_TYPES)
        for extension, mime_type in (extra_types or {}).items():
            key = _normalize_extension(extension)
            if key and mime_type.strip():
                types[key] = mime_type.strip().lower()
        self._types = {_normalize_extension(key): value.lower() for key, value in types.items()}

    def infer_type(self, name: str) -> str | None:
        extension = file_extension(name or "")
        if not extension:
            return None
        return self._types.get(extension)


@lru_cache
def get_default_registry() -> MimeRegistry:
    return MimeRegistry()


def infer_type(name: str) -> str | None:
    return get_default_registry().infer_type(name)


__all__ = [
    "MimeRegistry",
    "file_extension",
    "get_default_registry",
    "infer_type",
]
