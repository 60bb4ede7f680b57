from __future__ import annotations

from urllib.parse import quote

from .hosts import HostResolver, host_for as default_host_for
from .types import AttachmentDescriptor

# Characters encodeURIComponent leaves alone on top of quote()'s letters, digits and "_.-~".
_URI_COMPONENT_SAFE = "!'()*"


def percent_encode(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def object_url(attachment: AttachmentDescriptor, *, host_for: HostResolver | None = None) -> str:
    resolve = host_for or default_host_for
    return f"{resolve(attachment.storage_bucket)}{attachment.storage_token}"


def download_url(attachment: AttachmentDescriptor, *, host_for: HostResolver | None = None) -> str:
    base = object_url(attachment, host_for=host_for)
    return f"{base}?attname={percent_encode(attachment.name)}"


def probe_url(attachment: AttachmentDescriptor, *, host_for: HostResolver | None = None) -> str:
    """URL of the storage service's audio/video metadata probe for this object."""
    return f"{object_url(attachment, host_for=host_for)}?avinfo"
