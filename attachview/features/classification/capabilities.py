from __future__ import annotations

from typing import Protocol

from .mime import MimeRegistry, get_default_registry
from .patterns import PatternTable, matches, pattern_table
from .types import FileDescriptor

_IMAGE_TYPES = pattern_table("image/*")
_PDF_TYPES = pattern_table("application/pdf")
_WEBP_TYPES = pattern_table("image/webp")


class FileCapabilities(Protocol):
    def is_image(self, file: FileDescriptor) -> bool: ...

    def is_pdf(self, file: FileDescriptor) -> bool: ...

    def is_webp(self, file: FileDescriptor) -> bool: ...


class MimeCapabilities:
    """Checks the declared type first, then the type inferred from the file name."""

    def __init__(self, registry: MimeRegistry | None = None) -> None:
        self._registry = registry or get_default_registry()

    def _check(self, file: FileDescriptor, table: PatternTable) -> bool:
        if matches(file.declared_type, table):
            return True
        return matches(self._registry.infer_type(file.name), table)

    def is_image(self, file: FileDescriptor) -> bool:
        return self._check(file, _IMAGE_TYPES)

    def is_pdf(self, file: FileDescriptor) -> bool:
        return self._check(file, _PDF_TYPES)

    def is_webp(self, file: FileDescriptor) -> bool:
        return self._check(file, _WEBP_TYPES)
