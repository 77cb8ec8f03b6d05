"""歷史收盤價 Yahoo Adapter

使用 yfinance 取得日收盤價，實作 PriceHistoryProviderPort
"""

import asyncio
import logging
from datetime import date, timedelta

import yfinance as yf

from libs.correlating.src.ports.price_history_provider_port import (
    PriceHistoryProviderPort,
)
from libs.shared.src.constants.correlation_settings import PROVIDER_TIMEOUT_SECONDS
from libs.shared.src.errors.provider_error import ProviderError


class PriceHistoryYahooAdapter(PriceHistoryProviderPort):
    """Price History Fetcher - Yahoo Finance 實作

    無快取：快取只做在整體 CorrelationResult 上
    """

    def __init__(self, timeout: float = PROVIDER_TIMEOUT_SECONDS) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._timeout = timeout

    async def fetch_history(self, ticker: str, days: int) -> list[float]:
        """yfinance 為同步 SDK，放到 worker thread 執行"""
        return await asyncio.to_thread(self._fetch_history_sync, ticker, days)

    def _fetch_history_sync(self, ticker: str, days: int) -> list[float]:
        end_date = date.today() + timedelta(days=1)  # end 為不含
        start_date = end_date - timedelta(days=days + 1)

        try:
            hist = yf.Ticker(ticker).history(
                start=start_date,
                end=end_date,
                interval="1d",
                timeout=self._timeout,
            )
        except Exception as e:
            raise ProviderError(ticker, str(e)) from e

        if hist is None or "Close" not in hist.columns:
            raise ProviderError(ticker, "response has no close prices")

        closes = hist["Close"].dropna()
        self._logger.debug(f"{ticker}: {len(closes)} closes")
        return [float(price) for price in closes]
