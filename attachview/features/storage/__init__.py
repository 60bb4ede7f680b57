from __future__ import annotations

from .errors import StorageDomainError, UnresolvableStorageHostError
from .hosts import HostResolver, StorageHostResolver, get_storage_host_resolver, host_for
from .links import download_url, object_url, percent_encode, probe_url
from .types import AttachmentDescriptor

__all__ = [
    "AttachmentDescriptor",
    "HostResolver",
    "StorageDomainError",
    "StorageHostResolver",
    "UnresolvableStorageHostError",
    "download_url",
    "get_storage_host_resolver",
    "host_for",
    "object_url",
    "percent_encode",
    "probe_url",
]
