"""Correlation Result Cache Adapter

Wrapper pattern: wraps any BlobStorePort (S3, local files, memory)
One JSON document per canonical ticker-set key, overwritten on refresh
Staleness is age-based: entries stay physically present until overwritten
"""

import asyncio
import json
import logging
from datetime import datetime, timedelta, timezone

from libs.correlating.src.domain.services.freshness import is_fresh, parse_timestamp
from libs.correlating.src.ports.blob_store_port import BlobStorePort
from libs.correlating.src.ports.result_cache_port import ResultCachePort
from libs.shared.src.dtos.correlation.cache_entry_dto import CacheEntryDTO
from libs.shared.src.dtos.correlation.correlation_result_dto import (
    CorrelationResultDTO,
)
from libs.shared.src.errors.cache_error import CacheError

_RESULT_FIELDS = ("stocks", "matrix", "edges", "calculated_at")


class CorrelationResultCacheAdapter(ResultCachePort):
    """Result Cache over a blob store

    Stored payload: {"key", "written_at", "result"}
    """

    def __init__(self, blob_store: BlobStorePort) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._blob_store = blob_store

    async def get(self, key: str) -> CacheEntryDTO | None:
        """Load a cache entry; None when the key does not exist"""
        data = await asyncio.to_thread(self._blob_store.get_object, key)
        if data is None:
            return None
        return self._decode(key, data)

    async def put(self, key: str, value: CorrelationResultDTO) -> None:
        """Overwrite unconditionally (no versioning, last writer wins)"""
        data = self._encode(key, value)
        await asyncio.to_thread(self._blob_store.put_object, key, data)
        self._logger.info(f"Cached {len(value['stocks'])} stocks under {key}")

    async def delete(self, key: str) -> bool:
        return await asyncio.to_thread(self._blob_store.delete_object, key)

    def is_fresh(
        self,
        entry: CacheEntryDTO,
        max_age: timedelta,
        now: datetime | None = None,
    ) -> bool:
        return is_fresh(entry["result"]["calculated_at"], max_age, now)

    def _encode(self, key: str, value: CorrelationResultDTO) -> bytes:
        result = {field: value[field] for field in _RESULT_FIELDS}
        payload = {
            "key": key,
            "written_at": datetime.now(timezone.utc).isoformat(),
            "result": result,
        }
        try:
            return json.dumps(payload, ensure_ascii=False, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise CacheError(key, f"result is not serializable: {e}") from e

    def _decode(self, key: str, data: bytes) -> CacheEntryDTO:
        try:
            payload = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CacheError(key, f"malformed payload: {e}") from e

        result = payload.get("result") if isinstance(payload, dict) else None
        if not isinstance(result, dict):
            raise CacheError(key, "payload has no result")

        missing = [field for field in _RESULT_FIELDS if field not in result]
        if missing:
            raise CacheError(key, f"result is missing {', '.join(missing)}")

        try:
            parse_timestamp(result["calculated_at"])
        except (TypeError, ValueError, AttributeError) as e:
            raise CacheError(key, f"bad calculated_at: {e}") from e

        return {
            "key": payload.get("key", key),
            "written_at": payload.get("written_at", result["calculated_at"]),
            "result": {field: result[field] for field in _RESULT_FIELDS},
        }
