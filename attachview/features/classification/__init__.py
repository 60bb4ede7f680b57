from __future__ import annotations

from .capabilities import FileCapabilities, MimeCapabilities
from .mime import MimeRegistry, file_extension, get_default_registry, infer_type
from .patterns import PatternKind, PatternTable, TypePattern, matches, pattern_table
from .service import FileClassifier, classify, classify_subtype, get_default_classifier
from .types import ClassificationTables, DocumentSubtype, FileCategory, FileDescriptor

__all__ = [
    "ClassificationTables",
    "DocumentSubtype",
    "FileCapabilities",
    "FileCategory",
    "FileClassifier",
    "FileDescriptor",
    "MimeCapabilities",
    "MimeRegistry",
    "PatternKind",
    "PatternTable",
    "TypePattern",
    "classify",
    "classify_subtype",
    "file_extension",
    "get_default_classifier",
    "get_default_registry",
    "infer_type",
    "matches",
    "pattern_table",
]
