from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from functools import lru_cache

from attachview.core.config import get_settings

from .errors import UnresolvableStorageHostError

logger = logging.getLogger(__name__)

HostResolver = Callable[[str], str]


class StorageHostResolver:
    def __init__(self, hosts: Mapping[str, str]):
        self._hosts = {bucket.strip(): host.strip() for bucket, host in hosts.items()}

    def host_for(self, bucket: str) -> str:
        host = self._hosts.get(bucket.strip()) if bucket else None
        if not host:
            logger.warning("Storage host lookup failed for bucket %r.", bucket)
            raise UnresolvableStorageHostError(bucket)
        return host

    def __call__(self, bucket: str) -> str:
        return self.host_for(bucket)


@lru_cache
def get_storage_host_resolver() -> StorageHostResolver:
    return StorageHostResolver(get_settings().storage_hosts)


def host_for(bucket: str) -> str:
    return get_storage_host_resolver().host_for(bucket)
