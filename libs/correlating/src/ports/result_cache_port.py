"""
ResultCachePort - Driven Port

實作者: CorrelationResultCacheAdapter
"""

from datetime import datetime, timedelta
from typing import Protocol

from libs.shared.src.dtos.correlation.cache_entry_dto import CacheEntryDTO
from libs.shared.src.dtos.correlation.correlation_result_dto import (
    CorrelationResultDTO,
)


class ResultCachePort(Protocol):
    """Correlation result cache keyed by canonical ticker set"""

    async def get(self, key: str) -> CacheEntryDTO | None:
        """None when absent

        Raises:
            CacheError: read failure or malformed stored payload
        """
        ...

    async def put(self, key: str, value: CorrelationResultDTO) -> None:
        """Last writer wins

        Raises:
            CacheError: write failure
        """
        ...

    async def delete(self, key: str) -> bool:
        ...

    def is_fresh(
        self,
        entry: CacheEntryDTO,
        max_age: timedelta,
        now: datetime | None = None,
    ) -> bool:
        """now - entry.calculated_at < max_age"""
        ...
