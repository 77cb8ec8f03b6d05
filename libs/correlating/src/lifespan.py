"""
Correlating Context Lifecycle Management

Provides dependency injection startup and shutdown
Follows P&A architecture: Driving Port → Application Service
"""

import logging

from injector import Injector, Module, provider, singleton

from libs.correlating.src.config.correlating_config import CorrelatingConfig

# Driving Ports
from libs.correlating.src.ports.compute_correlation_matrix_port import (
    ComputeCorrelationMatrixPort,
)
from libs.correlating.src.ports.get_correlations_port import GetCorrelationsPort
from libs.correlating.src.ports.refresh_correlations_port import (
    RefreshCorrelationsPort,
)
from libs.correlating.src.ports.clear_cached_correlations_port import (
    ClearCachedCorrelationsPort,
)

# Application Services
from libs.correlating.src.application.queries.compute_correlation_matrix import (
    ComputeCorrelationMatrixQuery,
)
from libs.correlating.src.application.queries.get_correlations import (
    GetCorrelationsQuery,
)
from libs.correlating.src.application.commands.refresh_correlations import (
    RefreshCorrelationsCommand,
)
from libs.correlating.src.application.commands.clear_cached_correlations import (
    ClearCachedCorrelationsCommand,
)

# Driven Ports
from libs.correlating.src.ports.price_history_provider_port import (
    PriceHistoryProviderPort,
)
from libs.correlating.src.ports.blob_store_port import BlobStorePort
from libs.correlating.src.ports.result_cache_port import ResultCachePort

from libs.correlating.src.adapters.driven.yahoo.price_history_yahoo_adapter import (
    PriceHistoryYahooAdapter,
)
from libs.correlating.src.adapters.driven.s3.s3_blob_store_adapter import (
    S3BlobStoreAdapter,
)
from libs.correlating.src.adapters.driven.file.file_blob_store_adapter import (
    FileBlobStoreAdapter,
)
from libs.correlating.src.adapters.driven.memory.blob_store_fake_adapter import (
    BlobStoreFakeAdapter,
)
from libs.correlating.src.adapters.driven.cache.correlation_result_cache_adapter import (
    CorrelationResultCacheAdapter,
)


class CorrelatingModule(Module):
    """Correlating dependency injection module"""

    def __init__(self, config: CorrelatingConfig | None = None) -> None:
        self._config = config

    @singleton
    @provider
    def provide_config(self) -> CorrelatingConfig:
        return self._config or CorrelatingConfig.from_env()

    @singleton
    @provider
    def provide_compute_correlation_matrix(
        self,
        price_history: PriceHistoryProviderPort,
        config: CorrelatingConfig,
    ) -> ComputeCorrelationMatrixPort:
        return ComputeCorrelationMatrixQuery(
            price_history_provider=price_history,
            config=config,
        )

    @singleton
    @provider
    def provide_get_correlations(
        self,
        engine: ComputeCorrelationMatrixPort,
        cache: ResultCachePort,
        config: CorrelatingConfig,
    ) -> GetCorrelationsPort:
        return GetCorrelationsQuery(engine=engine, cache=cache, config=config)

    @singleton
    @provider
    def provide_refresh_correlations(
        self, get_correlations: GetCorrelationsPort
    ) -> RefreshCorrelationsPort:
        return RefreshCorrelationsCommand(get_correlations=get_correlations)

    @singleton
    @provider
    def provide_clear_cached_correlations(
        self, cache: ResultCachePort, config: CorrelatingConfig
    ) -> ClearCachedCorrelationsPort:
        return ClearCachedCorrelationsCommand(cache=cache, config=config)

    # ============================================
    # Driven Ports → Real Adapters
    # ============================================

    @singleton
    @provider
    def provide_price_history(self, config: CorrelatingConfig) -> PriceHistoryProviderPort:
        return PriceHistoryYahooAdapter(timeout=config.provider_timeout_seconds)

    @singleton
    @provider
    def provide_blob_store(self, config: CorrelatingConfig) -> BlobStorePort:
        """Select the blob backend from config.cache_backend"""
        if config.cache_backend == "s3":
            return S3BlobStoreAdapter(bucket=config.s3_bucket, region=config.s3_region)
        if config.cache_backend == "memory":
            return BlobStoreFakeAdapter()
        return FileBlobStoreAdapter(base_dir=config.cache_dir)

    @singleton
    @provider
    def provide_result_cache(self, blob_store: BlobStorePort) -> ResultCachePort:
        return CorrelationResultCacheAdapter(blob_store=blob_store)


_injector: Injector | None = None


def startup(config: CorrelatingConfig | None = None) -> Injector:
    """Start dependency injection container"""
    global _injector

    # Suppress noisy third-party loggers
    logging.getLogger("yfinance").setLevel(logging.CRITICAL)
    for name in ("botocore", "boto3", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _injector = Injector([CorrelatingModule(config)])
    return _injector


def shutdown() -> None:
    """Shutdown and release resources"""
    global _injector
    _injector = None


def get_injector() -> Injector:
    """Get dependency injection container"""
    if _injector is None:
        raise RuntimeError("Injector not initialized. Call startup() first.")
    return _injector


# Alias for libs composition
configure = CorrelatingModule()
