from __future__ import annotations

from attachview.features.classification.service import FileClassifier, get_default_classifier
from attachview.features.classification.types import DocumentSubtype, FileCategory, FileDescriptor
from attachview.features.preview.browser import BrowserCapability
from attachview.features.preview.icons import icon_for
from attachview.features.preview.service import PreviewResolver, get_default_preview_resolver
from attachview.features.storage.hosts import HostResolver
from attachview.features.storage.links import download_url, probe_url
from attachview.features.storage.types import AttachmentDescriptor

from .schemas import AttachmentLinks, AttachmentPresentation, FileClassification


def describe_file(
    file: FileDescriptor,
    *,
    classifier: FileClassifier | None = None,
) -> FileClassification:
    active = classifier or get_default_classifier()
    category = active.classify(file)
    subtype = (
        active.classify_subtype(file) if category is FileCategory.DOCUMENT else DocumentSubtype.NONE
    )
    return FileClassification(
        category=category,
        subtype=subtype,
        inferred_type=active.infer_type(file.name),
        icon=icon_for(category, subtype),
    )


def describe_attachment(
    attachment: AttachmentDescriptor,
    *,
    browser: BrowserCapability | None = None,
    format_to_jpg: bool = False,
    resolver: PreviewResolver | None = None,
    host_for: HostResolver | None = None,
) -> AttachmentPresentation:
    active = resolver or get_default_preview_resolver()
    classification = describe_file(attachment.as_file(), classifier=active.classifier)
    decision = active.decide_preview(attachment, browser, category=classification.category)
    source = active.resolve_display_source(
        attachment,
        browser,
        format_to_jpg=format_to_jpg,
        host_for=host_for,
        category=classification.category,
        decision=decision,
    )
    return AttachmentPresentation(
        classification=classification,
        decision=decision,
        source=source,
    )


def build_attachment_links(
    attachment: AttachmentDescriptor,
    *,
    host_for: HostResolver | None = None,
) -> AttachmentLinks:
    return AttachmentLinks(
        download_url=download_url(attachment, host_for=host_for),
        probe_url=probe_url(attachment, host_for=host_for),
    )
