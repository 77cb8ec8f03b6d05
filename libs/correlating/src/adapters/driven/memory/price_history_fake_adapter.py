"""Price History Fake Adapter"""

import asyncio

from libs.correlating.src.ports.price_history_provider_port import (
    PriceHistoryProviderPort,
)
from libs.shared.src.errors.provider_error import ProviderError


class PriceHistoryFakeAdapter(PriceHistoryProviderPort):
    """固定價格序列的 Fake 實作

    未設定的 ticker 視為上游錯誤
    """

    def __init__(self, prices: dict[str, list[float]] | None = None) -> None:
        self._prices: dict[str, list[float]] = dict(prices or {})
        self._failures: set[str] = set()
        self._delays: dict[str, float] = {}
        self.calls: list[tuple[str, int]] = []

    async def fetch_history(self, ticker: str, days: int) -> list[float]:
        self.calls.append((ticker, days))
        delay = self._delays.get(ticker)
        if delay:
            await asyncio.sleep(delay)
        if ticker in self._failures or ticker not in self._prices:
            raise ProviderError(ticker, "fake upstream failure")
        return list(self._prices[ticker])

    # Setters for testing
    def set_prices(self, ticker: str, prices: list[float]) -> None:
        self._prices[ticker] = prices

    def set_failure(self, ticker: str) -> None:
        self._failures.add(ticker)

    def set_delay(self, ticker: str, seconds: float) -> None:
        self._delays[ticker] = seconds
