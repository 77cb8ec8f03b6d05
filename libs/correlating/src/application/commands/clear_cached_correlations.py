"""清除快取 Command

實作 ClearCachedCorrelationsPort
"""

import logging

from libs.correlating.src.config.correlating_config import CorrelatingConfig
from libs.correlating.src.domain.services.ticker_set import (
    canonical_key,
    normalize_tickers,
    validate_tickers,
)
from libs.correlating.src.ports.clear_cached_correlations_port import (
    ClearCachedCorrelationsPort,
)
from libs.correlating.src.ports.result_cache_port import ResultCachePort


class ClearCachedCorrelationsCommand(ClearCachedCorrelationsPort):
    """刪除單一 ticker 組合的快取"""

    def __init__(self, cache: ResultCachePort, config: CorrelatingConfig) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._cache = cache
        self._config = config

    async def execute(self, tickers: list[str] | None = None) -> bool:
        requested = (
            self._config.default_tickers()
            if tickers is None
            else normalize_tickers(tickers)
        )
        validate_tickers(requested)
        key = canonical_key(requested)

        deleted = await self._cache.delete(key)
        if deleted:
            self._logger.info(f"Deleted cached correlations: {key}")
        else:
            self._logger.info(f"No cached correlations for {key}")
        return deleted
