from __future__ import annotations

import pytest

from attachview.features.classification import (
    ClassificationTables,
    DocumentSubtype,
    FileCategory,
    FileClassifier,
    FileDescriptor,
    MimeRegistry,
    classify,
    classify_subtype,
    pattern_table,
)

DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PPTX = "application/vnd.openxmlformats-officedocument.presentationml.presentation"


class _NoCapabilities:
    def is_image(self, _file) -> bool:
        return False

    def is_pdf(self, _file) -> bool:
        return False

    def is_webp(self, _file) -> bool:
        return False


def _file(name: str, declared_type: str = "") -> FileDescriptor:
    return FileDescriptor(name=name, declared_type=declared_type)


def test_word_document_classifies_as_document_with_word_subtype() -> None:
    file = _file("report.docx", DOCX)
    assert classify(file) == FileCategory.DOCUMENT
    assert classify_subtype(file) == DocumentSubtype.WORD


def test_video_classifies_as_media() -> None:
    assert classify(_file("clip.mp4", "video/mp4")) == FileCategory.MEDIA
    assert classify(_file("song.mp3", "audio/mpeg")) == FileCategory.MEDIA


def test_ts_named_transport_stream_is_not_media() -> None:
    assert classify(_file("subtitle.ts", "video/mp2t")) == FileCategory.OTHER


@pytest.mark.parametrize(
    ("name", "declared_type", "expected"),
    [
        ("photo.png", "image/png", FileCategory.IMAGE),
        ("photo.png", "", FileCategory.IMAGE),
        ("scan.bin", "image/jpeg", FileCategory.IMAGE),
        ("manual.pdf", "application/pdf", FileCategory.PDF),
        ("manual.pdf", "application/octet-stream", FileCategory.PDF),
        ("budget.csv", "text/csv", FileCategory.DOCUMENT),
        ("deck.pptx", "", FileCategory.DOCUMENT),
        ("bundle.zip", "application/zip", FileCategory.ARCHIVE),
        ("bundle.7z", "application/x-7z-compressed", FileCategory.ARCHIVE),
        ("notes.txt", "text/plain", FileCategory.TEXT),
        ("notes.md", "text/markdown", FileCategory.OTHER),
        ("mystery", "", FileCategory.OTHER),
    ],
)
def test_classify_covers_each_category(name: str, declared_type: str, expected: FileCategory) -> None:
    assert classify(_file(name, declared_type)) == expected


def test_archive_and_text_only_consult_declared_type() -> None:
    assert classify(_file("bundle.zip", "")) == FileCategory.OTHER
    assert classify(_file("notes.txt", "")) == FileCategory.OTHER


def test_image_predicate_wins_over_document_tables() -> None:
    tables = ClassificationTables(word=pattern_table("image/png"))
    classifier = FileClassifier(tables=tables)

    assert classifier.classify(_file("diagram.png", "image/png")) == FileCategory.IMAGE


def test_injected_tables_replace_defaults() -> None:
    tables = ClassificationTables(
        word=pattern_table(),
        excel=pattern_table(),
        presentation=pattern_table(),
        media=pattern_table(),
        media_denylist=pattern_table(),
        archive=pattern_table("application/x-tar"),
        text=pattern_table("text/*"),
    )
    classifier = FileClassifier(tables=tables, capabilities=_NoCapabilities())

    assert classifier.classify(_file("report.docx", DOCX)) == FileCategory.OTHER
    assert classifier.classify(_file("clip.mp4", "video/mp4")) == FileCategory.OTHER
    assert classifier.classify(_file("backup.tar", "application/x-tar")) == FileCategory.ARCHIVE
    assert classifier.classify(_file("notes.md", "text/markdown")) == FileCategory.TEXT
    assert classifier.classify(_file("photo.png", "image/png")) == FileCategory.OTHER


def test_documents_table_is_union_of_subtype_tables() -> None:
    tables = ClassificationTables()
    assert tables.documents == tables.word + tables.excel + tables.presentation


def test_document_falls_back_to_inferred_type() -> None:
    registry = MimeRegistry({".wps": "application/msword"}, include_defaults=False)
    classifier = FileClassifier(registry=registry)
    file = _file("legacy.wps", "application/octet-stream")

    assert classifier.classify(file) == FileCategory.DOCUMENT
    assert classifier.classify_subtype(file) == DocumentSubtype.WORD


def test_media_denylist_is_injectable() -> None:
    registry = MimeRegistry({".vtt": "video/x-vtt"}, include_defaults=False)
    tables = ClassificationTables(media_denylist=pattern_table("video/x-vtt"))
    classifier = FileClassifier(tables=tables, registry=registry)

    assert classifier.classify(_file("captions.vtt", "video/x-vtt")) == FileCategory.OTHER
    assert classifier.classify(_file("subtitle.ts", "video/mp2t")) == FileCategory.MEDIA


@pytest.mark.parametrize(
    ("name", "declared_type", "expected"),
    [
        ("report.docx", "", DocumentSubtype.WORD),
        ("deck.pptx", PPTX, DocumentSubtype.PRESENTATION),
        ("budget.xlsx", "", DocumentSubtype.EXCEL),
        ("budget.csv", "text/csv", DocumentSubtype.EXCEL),
        ("photo.png", "image/png", DocumentSubtype.NONE),
        ("", "", DocumentSubtype.NONE),
    ],
)
def test_classify_subtype(name: str, declared_type: str, expected: DocumentSubtype) -> None:
    assert classify_subtype(_file(name, declared_type)) == expected


def test_subtype_checks_word_before_presentation() -> None:
    assert classify_subtype(_file("deck.pptx", DOCX)) == DocumentSubtype.WORD


@pytest.mark.parametrize(
    ("name", "declared_type"),
    [
        ("", ""),
        (".", "/"),
        ("folder/", "application/"),
        ("???", "not a mime type"),
        ("UPPER.PDF", "IMAGE/PNG"),
        ("a" * 500, "x" * 500),
        ("emoji-\U0001f600.bin", "video"),
    ],
)
def test_classification_is_total_and_deterministic(name: str, declared_type: str) -> None:
    file = _file(name, declared_type)
    first = classify(file)
    assert isinstance(first, FileCategory)
    assert all(classify(file) == first for _ in range(3))
    assert isinstance(classify_subtype(file), DocumentSubtype)
