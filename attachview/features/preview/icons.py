from __future__ import annotations

from enum import Enum

from attachview.features.classification.service import FileClassifier, get_default_classifier
from attachview.features.classification.types import DocumentSubtype, FileCategory, FileDescriptor


class IconId(str, Enum):
    IMAGE = "attachment_img_small_placeholder_filled"
    TEXT = "datasheet_img_attachment_text_placeholder"
    ARCHIVE = "datasheet_img_attachment_compressed_placeholder"
    WORD = "datasheet_img_attachment_word_placeholder"
    EXCEL = "datasheet_img_attachment_excel_placeholder"
    PRESENTATION = "datasheet_img_attachment_ppt_placeholder"
    PDF = "datasheet_img_attachment_pdf_placeholder"
    MEDIA = "datasheet_img_attachment_video_placeholder"
    OTHER = "datasheet_img_attachment_other_placeholder"


_CATEGORY_ICONS: dict[FileCategory, IconId] = {
    FileCategory.IMAGE: IconId.IMAGE,
    FileCategory.MEDIA: IconId.MEDIA,
    FileCategory.PDF: IconId.PDF,
    FileCategory.ARCHIVE: IconId.ARCHIVE,
    FileCategory.TEXT: IconId.TEXT,
    FileCategory.OTHER: IconId.OTHER,
}

_DOCUMENT_ICONS: dict[DocumentSubtype, IconId] = {
    DocumentSubtype.WORD: IconId.WORD,
    DocumentSubtype.EXCEL: IconId.EXCEL,
    DocumentSubtype.PRESENTATION: IconId.PRESENTATION,
    DocumentSubtype.NONE: IconId.OTHER,
}


def icon_for(category: FileCategory, subtype: DocumentSubtype = DocumentSubtype.NONE) -> IconId:
    category = FileCategory(category)
    if category is FileCategory.DOCUMENT:
        return _DOCUMENT_ICONS[DocumentSubtype(subtype)]
    return _CATEGORY_ICONS[category]


def render_file_icon(file: FileDescriptor, *, classifier: FileClassifier | None = None) -> IconId:
    active = classifier or get_default_classifier()
    category = active.classify(file)
    if category is FileCategory.DOCUMENT:
        return icon_for(category, active.classify_subtype(file))
    return icon_for(category)
