from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .icons import IconId

DisplaySourceKind = Literal["original", "icon"]


class PreviewDecision(BaseModel):
    model_config = ConfigDict(frozen=True)

    use_original_content: bool
    force_format_conversion: bool


class DisplaySource(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: DisplaySourceKind
    url: str | None = None
    icon: IconId | None = None
    format_to_jpg: bool = False
