"""計算相關性矩陣 Query

實作 ComputeCorrelationMatrixPort (Correlation Engine)
各 ticker 併發抓取 (scatter-gather)，單一失敗不影響其他 ticker
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable

from libs.correlating.src.config.correlating_config import CorrelatingConfig
from libs.correlating.src.domain.services.correlation_matrix_builder import (
    build_correlation_matrix,
    derive_edges,
    filter_valid_histories,
)
from libs.correlating.src.ports.compute_correlation_matrix_port import (
    ComputeCorrelationMatrixPort,
)
from libs.correlating.src.ports.price_history_provider_port import (
    PriceHistoryProviderPort,
)
from libs.shared.src.dtos.correlation.correlation_result_dto import (
    CorrelationResultDTO,
)
from libs.shared.src.dtos.correlation.price_history_dto import PriceHistoryDTO
from libs.shared.src.errors.provider_error import ProviderError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ComputeCorrelationMatrixQuery(ComputeCorrelationMatrixPort):
    """計算 ticker 組合的 Pearson 相關性矩陣與邊"""

    def __init__(
        self,
        price_history_provider: PriceHistoryProviderPort,
        config: CorrelatingConfig,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._price_history_provider = price_history_provider
        self._config = config
        self._clock = clock

    async def execute(self, tickers: list[str]) -> CorrelationResultDTO:
        """執行計算

        有效 ticker 少於 2 檔時仍回傳 (0x0 或 1x1 矩陣、無邊)

        Returns:
            CorrelationResultDTO: stocks 依輸入順序 (過濾後)
        """
        self._logger.info(f"Fetching historical data for {len(tickers)} stocks...")

        semaphore = asyncio.Semaphore(self._config.max_concurrency)
        # gather 依輸入順序回傳，與完成順序無關
        histories = await asyncio.gather(
            *(self._fetch_history(ticker, semaphore) for ticker in tickers)
        )

        valid = filter_valid_histories(list(histories))
        stocks = [h["ticker"] for h in valid]
        self._logger.info(f"Calculating correlations for {len(stocks)} stocks...")

        matrix = build_correlation_matrix([h["prices"] for h in valid])
        sector_of = self._config.sector_of if self._config.same_sector_only else None
        edges = derive_edges(stocks, matrix, self._config.threshold, sector_of)

        self._logger.info(f"Generated {len(edges)} edges from {len(stocks)} stocks")

        return {
            "stocks": stocks,
            "matrix": matrix,
            "edges": edges,
            "calculated_at": self._clock().isoformat(),
        }

    async def _fetch_history(
        self, ticker: str, semaphore: asyncio.Semaphore
    ) -> PriceHistoryDTO:
        """抓取單一 ticker；失敗或逾時回傳空序列"""
        async with semaphore:
            try:
                prices = await asyncio.wait_for(
                    self._price_history_provider.fetch_history(
                        ticker, self._config.lookback_days
                    ),
                    timeout=self._config.provider_timeout_seconds,
                )
            except ProviderError as e:
                self._logger.warning(f"Failed to get history for {ticker}: {e.message}")
                prices = []
            except asyncio.TimeoutError:
                self._logger.warning(
                    f"Timed out fetching history for {ticker} "
                    f"after {self._config.provider_timeout_seconds}s"
                )
                prices = []
            except Exception as e:
                self._logger.warning(f"Unexpected error fetching {ticker}: {e}")
                prices = []

        return {"ticker": ticker, "prices": prices}
