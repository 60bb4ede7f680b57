from .schemas import AttachmentLinks, AttachmentPresentation, FileClassification, PreviewRequest
from .service import build_attachment_links, describe_attachment, describe_file

__all__ = [
    "AttachmentLinks",
    "AttachmentPresentation",
    "FileClassification",
    "PreviewRequest",
    "build_attachment_links",
    "describe_attachment",
    "describe_file",
]
