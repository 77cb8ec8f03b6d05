"""
BlobStorePort - Driven Port

實作者: S3BlobStoreAdapter, FileBlobStoreAdapter, BlobStoreFakeAdapter
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class BlobStorePort(Protocol):
    """Key-value blob storage

    All methods raise CacheError on any failure other than a missing key.
    """

    def put_object(self, key: str, data: bytes) -> None:
        """Write ``data`` under ``key``, overwriting unconditionally"""
        ...

    def get_object(self, key: str) -> bytes | None:
        """Read ``key``; None when it does not exist"""
        ...

    def delete_object(self, key: str) -> bool:
        """Delete ``key``; False when it did not exist"""
        ...

    def exists(self, key: str) -> bool:
        ...
