"""
PriceHistoryProviderPort - Driven Port

實作者: PriceHistoryYahooAdapter, PriceHistoryFakeAdapter
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PriceHistoryProviderPort(Protocol):
    """歷史收盤價提供者"""

    async def fetch_history(self, ticker: str, days: int) -> list[float]:
        """取得最近 ``days`` 個日曆天的日收盤價 (舊 → 新)

        缺值 (非交易日、null) 直接剔除，不做插補

        Raises:
            ProviderError: 上游錯誤、逾時或無收盤價欄位
        """
        ...
