from __future__ import annotations

from .browser import BrowserCapability, ClientBrowser, version_matches
from .icons import IconId, icon_for, render_file_icon
from .service import (
    PreviewResolver,
    decide_preview,
    get_default_preview_resolver,
    image_size_exceeded,
    is_supported_image,
)
from .types import DisplaySource, DisplaySourceKind, PreviewDecision

__all__ = [
    "BrowserCapability",
    "ClientBrowser",
    "DisplaySource",
    "DisplaySourceKind",
    "IconId",
    "PreviewDecision",
    "PreviewResolver",
    "decide_preview",
    "get_default_preview_resolver",
    "icon_for",
    "image_size_exceeded",
    "is_supported_image",
    "render_file_icon",
    "version_matches",
]
