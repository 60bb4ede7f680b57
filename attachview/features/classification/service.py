from __future__ import annotations

import logging
from functools import lru_cache

from .capabilities import FileCapabilities, MimeCapabilities
from .mime import MimeRegistry, get_default_registry
from .patterns import PatternTable, matches
from .types import ClassificationTables, DocumentSubtype, FileCategory, FileDescriptor

logger = logging.getLogger(__name__)


class FileClassifier:
    """Assigns a display category and document subtype to a file.

    Pure over its inputs and the injected tables; instances are safe to share.
    """

    def __init__(
        self,
        *,
        tables: ClassificationTables | None = None,
        registry: MimeRegistry | None = None,
        capabilities: FileCapabilities | None = None,
    ) -> None:
        self.tables = tables or ClassificationTables()
        self.registry = registry or get_default_registry()
        self.capabilities = capabilities or MimeCapabilities(self.registry)

    def infer_type(self, name: str) -> str | None:
        return self.registry.infer_type(name)

    def _declared_or_inferred(self, file: FileDescriptor, table: PatternTable) -> bool:
        return matches(file.declared_type, table) or matches(self.infer_type(file.name), table)

    def _category(self, file: FileDescriptor) -> FileCategory:
        tables = self.tables
        if self.capabilities.is_image(file):
            return FileCategory.IMAGE
        if self.capabilities.is_pdf(file):
            return FileCategory.PDF
        if self._declared_or_inferred(file, tables.documents):
            return FileCategory.DOCUMENT
        if matches(file.declared_type, tables.media) and not matches(
            self.infer_type(file.name), tables.media_denylist
        ):
            return FileCategory.MEDIA
        if matches(file.declared_type, tables.archive):
            return FileCategory.ARCHIVE
        if matches(file.declared_type, tables.text):
            return FileCategory.TEXT
        return FileCategory.OTHER

    def classify(self, file: FileDescriptor) -> FileCategory:
        category = self._category(file)
        logger.debug(
            "Classified %r (declared_type=%r) as %s.",
            file.name,
            file.declared_type,
            category.value,
        )
        return category

    def classify_subtype(self, file: FileDescriptor) -> DocumentSubtype:
        tables = self.tables
        if self._declared_or_inferred(file, tables.word):
            return DocumentSubtype.WORD
        if self._declared_or_inferred(file, tables.presentation):
            return DocumentSubtype.PRESENTATION
        if self._declared_or_inferred(file, tables.excel):
            return DocumentSubtype.EXCEL
        return DocumentSubtype.NONE


@lru_cache
def get_default_classifier() -> FileClassifier:
    return FileClassifier()


def classify(file: FileDescriptor) -> FileCategory:
    return get_default_classifier().classify(file)


def classify_subtype(file: FileDescriptor) -> DocumentSubtype:
    return get_default_classifier().classify_subtype(file)
