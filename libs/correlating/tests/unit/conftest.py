"""Correlating 單元測試共用 fixtures"""

import pytest

from libs.correlating.src.adapters.driven.cache.correlation_result_cache_adapter import (
    CorrelationResultCacheAdapter,
)
from libs.correlating.src.adapters.driven.memory.blob_store_fake_adapter import (
    BlobStoreFakeAdapter,
)
from libs.correlating.src.adapters.driven.memory.price_history_fake_adapter import (
    PriceHistoryFakeAdapter,
)
from libs.correlating.src.config.correlating_config import CorrelatingConfig
from libs.correlating.tests.price_series import linear, zigzag


@pytest.fixture
def series() -> dict[str, list[float]]:
    return {
        "AAPL": linear(100.0, 1.0),
        "MSFT": linear(300.0, 2.0),
        "NVDA": linear(50.0, 0.5, n=40),
        "XOM": linear(120.0, -1.0),
        "KO": zigzag(),
    }


@pytest.fixture
def fake_provider(series: dict[str, list[float]]) -> PriceHistoryFakeAdapter:
    return PriceHistoryFakeAdapter(series)


@pytest.fixture
def blob_store() -> BlobStoreFakeAdapter:
    return BlobStoreFakeAdapter()


@pytest.fixture
def cache(blob_store: BlobStoreFakeAdapter) -> CorrelationResultCacheAdapter:
    return CorrelationResultCacheAdapter(blob_store=blob_store)


@pytest.fixture
def config() -> CorrelatingConfig:
    return CorrelatingConfig(
        default_universe={
            "tech": ["AAPL", "MSFT", "NVDA"],
            "energy": ["XOM"],
            "consumer": ["KO"],
        },
        threshold=0.6,
        provider_timeout_seconds=1.0,
        cache_backend="memory",
    )
