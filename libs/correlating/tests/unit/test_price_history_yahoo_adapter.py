"""PriceHistoryYahooAdapter 單元測試"""

from unittest.mock import patch

import numpy as np
import pandas as pd
import pytest

from libs.correlating.src.adapters.driven.yahoo.price_history_yahoo_adapter import (
    PriceHistoryYahooAdapter,
)
from libs.shared.src.errors.provider_error import ProviderError

TICKER_PATH = "libs.correlating.src.adapters.driven.yahoo.price_history_yahoo_adapter.yf.Ticker"


class TestPriceHistoryYahooAdapter:
    """測試 Yahoo 歷史收盤價"""

    @pytest.mark.asyncio
    async def test_drops_gaps(self) -> None:
        """null 收盤價應剔除，不插補"""
        df = pd.DataFrame({"Close": [10.0, np.nan, 11.5, 12.0, np.nan]})
        with patch(TICKER_PATH) as ticker:
            ticker.return_value.history.return_value = df
            prices = await PriceHistoryYahooAdapter().fetch_history("AAPL", 60)

        assert prices == [10.0, 11.5, 12.0]

    @pytest.mark.asyncio
    async def test_requests_daily_interval_with_timeout(self) -> None:
        df = pd.DataFrame({"Close": [1.0, 2.0]})
        with patch(TICKER_PATH) as ticker:
            ticker.return_value.history.return_value = df
            await PriceHistoryYahooAdapter(timeout=5.0).fetch_history("MSFT", 60)

        ticker.assert_called_once_with("MSFT")
        kwargs = ticker.return_value.history.call_args.kwargs
        assert kwargs["interval"] == "1d"
        assert kwargs["timeout"] == 5.0
        assert (kwargs["end"] - kwargs["start"]).days == 61

    @pytest.mark.asyncio
    async def test_upstream_error_raises_provider_error(self) -> None:
        """上游錯誤應轉為 ProviderError"""
        with patch(TICKER_PATH) as ticker:
            ticker.return_value.history.side_effect = ConnectionError("reset")
            with pytest.raises(ProviderError) as exc:
                await PriceHistoryYahooAdapter().fetch_history("AAPL", 60)

        assert exc.value.ticker == "AAPL"
        assert exc.value.code == "PROVIDER_ERROR"

    @pytest.mark.asyncio
    async def test_missing_close_column_raises(self) -> None:
        """無收盤價欄位應拋出 ProviderError"""
        with patch(TICKER_PATH) as ticker:
            ticker.return_value.history.return_value = pd.DataFrame()
            with pytest.raises(ProviderError, match="no close prices"):
                await PriceHistoryYahooAdapter().fetch_history("BOGUS", 60)
