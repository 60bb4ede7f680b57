from __future__ import annotations

from fastapi import APIRouter, HTTPException

from attachview.features.attachments import (
    AttachmentLinks,
    AttachmentPresentation,
    FileClassification,
    PreviewRequest,
    build_attachment_links,
    describe_attachment,
    describe_file,
)
from attachview.features.classification import FileDescriptor
from attachview.features.storage import AttachmentDescriptor, UnresolvableStorageHostError

router = APIRouter(prefix="/api/attachments", tags=["attachments"])


def _raise_http_error(exc: Exception) -> None:
    if isinstance(exc, UnresolvableStorageHostError):
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    raise exc


@router.post("/classify", response_model=FileClassification)
async def classify_file(payload: FileDescriptor) -> FileClassification:
    return describe_file(payload)


@router.post("/preview", response_model=AttachmentPresentation)
async def preview_attachment(payload: PreviewRequest) -> AttachmentPresentation:
    try:
        return describe_attachment(
            payload.attachment,
            browser=payload.browser,
            format_to_jpg=payload.format_to_jpg,
        )
    except Exception as exc:
        _raise_http_error(exc)


@router.post("/links", response_model=AttachmentLinks)
async def attachment_links(payload: AttachmentDescriptor) -> AttachmentLinks:
    try:
        return build_attachment_links(payload)
    except Exception as exc:
        _raise_http_error(exc)
