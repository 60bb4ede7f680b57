from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from attachview.features.classification.types import DocumentSubtype, FileCategory
from attachview.features.preview.browser import ClientBrowser
from attachview.features.preview.icons import IconId
from attachview.features.preview.types import DisplaySource, PreviewDecision
from attachview.features.storage.types import AttachmentDescriptor


class FileClassification(BaseModel):
    category: FileCategory
    subtype: DocumentSubtype
    inferred_type: str | None
    icon: IconId


class PreviewRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    attachment: AttachmentDescriptor
    browser: ClientBrowser | None = None
    format_to_jpg: bool = False


class AttachmentPresentation(BaseModel):
    classification: FileClassification
    decision: PreviewDecision
    source: DisplaySource


class AttachmentLinks(BaseModel):
    download_url: str
    probe_url: str
