"""取得相關性 Query

實作 GetCorrelationsPort (Correlation Service)
CHECK_CACHE → (HIT_FRESH | HIT_STALE | MISS) → [COMPUTE] → WRITE_CACHE → RESPOND
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from libs.correlating.src.config.correlating_config import CorrelatingConfig
from libs.correlating.src.domain.services.ticker_set import (
    canonical_key,
    normalize_tickers,
    validate_tickers,
)
from libs.correlating.src.ports.compute_correlation_matrix_port import (
    ComputeCorrelationMatrixPort,
)
from libs.correlating.src.ports.get_correlations_port import GetCorrelationsPort
from libs.correlating.src.ports.result_cache_port import ResultCachePort
from libs.shared.src.dtos.correlation.cache_entry_dto import CacheEntryDTO
from libs.shared.src.dtos.correlation.correlation_result_dto import (
    CorrelationResultDTO,
)
from libs.shared.src.errors.cache_error import CacheError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GetCorrelationsQuery(GetCorrelationsPort):
    """相關性結果：新鮮快取優先，否則重新計算並寫回快取"""

    def __init__(
        self,
        engine: ComputeCorrelationMatrixPort,
        cache: ResultCachePort,
        config: CorrelatingConfig,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._engine = engine
        self._cache = cache
        self._config = config
        self._clock = clock

    async def execute(
        self,
        tickers: list[str] | None = None,
        force_refresh: bool = False,
    ) -> CorrelationResultDTO:
        """執行查詢

        Raises:
            InvalidInputError: 在任何 I/O 之前拒絕
        """
        requested = (
            self._config.default_tickers()
            if tickers is None
            else normalize_tickers(tickers)
        )
        validate_tickers(requested)
        key = canonical_key(requested)

        if not force_refresh:
            entry = await self._read_cache(key)
            if entry is None:
                self._logger.info(f"No cache found for {key}, calculating...")
            elif self._cache.is_fresh(entry, self._config.max_age, now=self._clock()):
                self._logger.info(f"Using cached correlations for {key}")
                return {**entry["result"], "from_cache": True}
            else:
                self._logger.info(f"Cache expired for {key}, recalculating...")
        else:
            self._logger.info(f"Force refreshing correlations for {key}")

        result = await self._engine.execute(requested)
        await self._write_cache(key, result)
        return {**result, "from_cache": False}

    async def _read_cache(self, key: str) -> CacheEntryDTO | None:
        """讀取失敗視為 cache miss"""
        try:
            return await self._cache.get(key)
        except CacheError as e:
            self._logger.warning(f"Cache read failed, treating as miss: {e.message}")
            return None

    async def _write_cache(self, key: str, result: CorrelationResultDTO) -> None:
        """Best-effort 寫入 (含退化結果)；失敗只記錄，不影響回應"""
        try:
            await self._cache.put(key, result)
        except CacheError as e:
            self._logger.warning(f"Cache write failed: {e.message}")
