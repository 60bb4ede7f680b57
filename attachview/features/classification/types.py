from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .patterns import PatternTable, pattern_table


class FileCategory(str, Enum):
    OTHER = "other"
    IMAGE = "image"
    DOCUMENT = "document"
    PDF = "pdf"
    MEDIA = "media"
    ARCHIVE = "archive"
    TEXT = "text"


class DocumentSubtype(str, Enum):
    WORD = "word"
    EXCEL = "excel"
    PRESENTATION = "presentation"
    NONE = "none"


class FileDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    declared_type: str = ""


WORD_MIME_TYPES = pattern_table(
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.template",
    "application/vnd.ms-word.document.macroEnabled.12",
)

PRESENTATION_MIME_TYPES = pattern_table(
    "application/vnd.ms-powerpoint",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "application/vnd.openxmlformats-officedocument.presentationml.template",
    "application/vnd.openxmlformats-officedocument.presentationml.slideshow",
    "application/vnd.ms-powerpoint.addin.macroEnabled.12",
    "application/vnd.ms-powerpoint.presentation.macroEnabled.12",
    "application/vnd.ms-powerpoint.template.macroEnabled.12",
    "application/vnd.ms-powerpoint.slideshow.macroEnabled.12",
)

EXCEL_MIME_TYPES = pattern_table(
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.template",
    "application/vnd.ms-excel.sheet.macroEnabled.12",
    "application/vnd.ms-excel.template.macroEnabled.12",
    "application/vnd.ms-excel.addin.macroEnabled.12",
    "application/vnd.ms-excel.sheet.binary.macroEnabled.12",
    "text/csv",
)

MEDIA_MIME_TYPES = pattern_table("audio/*", "video/*")

# ``.ts`` names infer to MPEG transport streams but are almost always TypeScript or subtitle text.
MEDIA_DENYLIST_MIME_TYPES = pattern_table("video/mp2t")

ARCHIVE_MIME_TYPES = pattern_table(
    "application/zip",
    "application/x-7z-compressed",
    "application/x-rar-compressed",
)

TEXT_MIME_TYPES = pattern_table("text/plain")


@dataclass(frozen=True)
class ClassificationTables:
    word: PatternTable = WORD_MIME_TYPES
    excel: PatternTable = EXCEL_MIME_TYPES
    presentation: PatternTable = PRESENTATION_MIME_TYPES
    media: PatternTable = MEDIA_MIME_TYPES
    media_denylist: PatternTable = MEDIA_DENYLIST_MIME_TYPES
    archive: PatternTable = ARCHIVE_MIME_TYPES
    text: PatternTable = TEXT_MIME_TYPES
    documents: PatternTable = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "documents", self.word + self.excel + self.presentation)
