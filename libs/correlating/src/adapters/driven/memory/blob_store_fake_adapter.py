"""Blob Store Fake Adapter"""

from libs.correlating.src.ports.blob_store_port import BlobStorePort
from libs.shared.src.errors.cache_error import CacheError


class BlobStoreFakeAdapter(BlobStorePort):
    """In-memory blob store"""

    def __init__(self) -> None:
        self.objects: dict[str, bytes] = {}
        self.put_calls: list[str] = []
        self.get_calls: list[str] = []
        self._read_error: str | None = None
        self._write_error: str | None = None

    def put_object(self, key: str, data: bytes) -> None:
        self.put_calls.append(key)
        if self._write_error:
            raise CacheError(key, self._write_error)
        self.objects[key] = data

    def get_object(self, key: str) -> bytes | None:
        self.get_calls.append(key)
        if self._read_error:
            raise CacheError(key, self._read_error)
        return self.objects.get(key)

    def delete_object(self, key: str) -> bool:
        return self.objects.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        return key in self.objects

    # Setters for testing
    def fail_reads(self, reason: str = "read failed") -> None:
        self._read_error = reason

    def fail_writes(self, reason: str = "write failed") -> None:
        self._write_error = reason
