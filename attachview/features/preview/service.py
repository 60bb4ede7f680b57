from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache

from attachview.core.config import get_settings
from attachview.features.classification.service import FileClassifier, get_default_classifier
from attachview.features.classification.types import DocumentSubtype, FileCategory
from attachview.features.storage.hosts import HostResolver
from attachview.features.storage.links import object_url
from attachview.features.storage.types import AttachmentDescriptor

from .browser import BrowserCapability
from .icons import icon_for
from .types import DisplaySource, PreviewDecision

logger = logging.getLogger(__name__)

# Environments that cannot decode webp natively.
_WEBP_UNSUPPORTED_BROWSERS = {"safari": "<14"}
_WEBP_UNSUPPORTED_PLATFORM = "iOS"


def image_size_exceeded(size_bytes: int, threshold_bytes: int) -> bool:
    return size_bytes >= threshold_bytes


def is_supported_image(mime_type: str, unsupported_image_types: Iterable[str]) -> bool:
    normalized = (mime_type or "").strip().lower()
    return normalized not in {item.strip().lower() for item in unsupported_image_types}


def _needs_webp_conversion(browser: BrowserCapability | None) -> bool:
    if browser is None:
        return False
    return browser.satisfies(_WEBP_UNSUPPORTED_BROWSERS) or browser.is_platform(
        _WEBP_UNSUPPORTED_PLATFORM
    )


class PreviewResolver:
    """Decides whether an attachment is shown as its own content or as a category icon."""

    def __init__(
        self,
        *,
        classifier: FileClassifier | None = None,
        size_threshold_bytes: int | None = None,
        unsupported_image_types: Iterable[str] | None = None,
    ) -> None:
        settings = get_settings()
        self.classifier = classifier or get_default_classifier()
        self.size_threshold_bytes = (
            settings.preview_image_max_bytes if size_threshold_bytes is None else size_threshold_bytes
        )
        self.unsupported_image_types = frozenset(
            item.strip().lower()
            for item in (
                settings.unsupported_image_mime_types
                if unsupported_image_types is None
                else unsupported_image_types
            )
        )

    def _use_original_content(self, attachment: AttachmentDescriptor, category: FileCategory) -> bool:
        if category == FileCategory.PDF:
            return True
        if category != FileCategory.IMAGE:
            return False
        if image_size_exceeded(attachment.size_bytes, self.size_threshold_bytes):
            return False
        # Both the declared and the name-inferred type must clear the denylist.
        inferred_type = self.classifier.infer_type(attachment.name) or ""
        return is_supported_image(
            attachment.declared_type, self.unsupported_image_types
        ) and is_supported_image(inferred_type, self.unsupported_image_types)

    def decide_preview(
        self,
        attachment: AttachmentDescriptor,
        browser: BrowserCapability | None = None,
        *,
        category: FileCategory | None = None,
    ) -> PreviewDecision:
        file = attachment.as_file()
        resolved_category = (
            FileCategory(category) if category is not None else self.classifier.classify(file)
        )
        decision = PreviewDecision(
            use_original_content=self._use_original_content(attachment, resolved_category),
            force_format_conversion=(
                self.classifier.capabilities.is_webp(file) and _needs_webp_conversion(browser)
            ),
        )
        logger.debug(
            "Preview decision for %r (%s, %d bytes): original=%s convert=%s.",
            attachment.name,
            resolved_category.value,
            attachment.size_bytes,
            decision.use_original_content,
            decision.force_format_conversion,
        )
        return decision

    def resolve_display_source(
        self,
        attachment: AttachmentDescriptor,
        browser: BrowserCapability | None = None,
        *,
        format_to_jpg: bool = False,
        host_for: HostResolver | None = None,
        category: FileCategory | None = None,
        decision: PreviewDecision | None = None,
    ) -> DisplaySource:
        file = attachment.as_file()
        category = FileCategory(category) if category is not None else self.classifier.classify(file)
        if decision is None:
            decision = self.decide_preview(attachment, browser, category=category)
        if decision.use_original_content:
            return DisplaySource(
                kind="original",
                url=object_url(attachment, host_for=host_for),
                format_to_jpg=decision.force_format_conversion or format_to_jpg,
            )

        subtype = (
            self.classifier.classify_subtype(file)
            if category == FileCategory.DOCUMENT
            else DocumentSubtype.NONE
        )
        return DisplaySource(kind="icon", icon=icon_for(category, subtype))


@lru_cache
def get_default_preview_resolver() -> PreviewResolver:
    return PreviewResolver()


def decide_preview(
    attachment: AttachmentDescriptor,
    *,
    browser: BrowserCapability | None = None,
    size_threshold_bytes: int | None = None,
    unsupported_image_types: Iterable[str] | None = None,
) -> PreviewDecision:
    if size_threshold_bytes is None and unsupported_image_types is None:
        resolver = get_default_preview_resolver()
    else:
        resolver = PreviewResolver(
            size_threshold_bytes=size_threshold_bytes,
            unsupported_image_types=unsupported_image_types,
        )
    return resolver.decide_preview(attachment, browser)
