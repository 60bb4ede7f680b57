from __future__ import annotations


class StorageDomainError(Exception):
    """Base exception for attachment storage lookups."""


class UnresolvableStorageHostError(StorageDomainError):
    def __init__(self, bucket: str):
        super().__init__(f"No storage host is configured for bucket '{bucket}'.")
        self.bucket = bucket
