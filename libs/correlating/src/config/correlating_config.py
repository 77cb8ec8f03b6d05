"""Correlating Context 設定

預設股票池、邊閾值、快取新鮮度等參數在啟動時建立一次，
再注入 Correlation Engine 與 Correlation Service
"""

import os
from datetime import timedelta
from typing import Mapping

from libs.shared.src.constants.correlation_settings import (
    CACHE_MAX_AGE_HOURS,
    DEFAULT_CORRELATION_THRESHOLD,
    DEFAULT_LOOKBACK_DAYS,
    PROVIDER_MAX_CONCURRENCY,
    PROVIDER_TIMEOUT_SECONDS,
)
from libs.shared.src.errors.invalid_input_error import InvalidInputError

# 跨產業分散股票池
DEFAULT_UNIVERSE: dict[str, list[str]] = {
    "tech": ["AAPL", "GOOGL", "NVDA", "MSFT", "AMZN", "META", "TSLA", "AMD"],
    "energy": ["XOM", "CVX", "COP", "SLB", "OXY"],
    "finance": ["JPM", "BAC", "GS", "V", "MA"],
    "healthcare": ["JNJ", "PFE", "UNH", "MRK", "ABBV"],
    "consumer": ["WMT", "KO", "PEP", "MCD", "NKE"],
}

CACHE_BACKENDS = ("s3", "file", "memory")


class CorrelatingConfig:
    """相關性管線設定"""

    def __init__(
        self,
        default_universe: Mapping[str, list[str]] | None = None,
        threshold: float = DEFAULT_CORRELATION_THRESHOLD,
        same_sector_only: bool = False,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        max_age_hours: float = CACHE_MAX_AGE_HOURS,
        provider_timeout_seconds: float = PROVIDER_TIMEOUT_SECONDS,
        max_concurrency: int = PROVIDER_MAX_CONCURRENCY,
        cache_backend: str = "file",
        s3_bucket: str | None = None,
        s3_region: str | None = None,
        cache_dir: str = "data/cache",
    ) -> None:
        if cache_backend not in CACHE_BACKENDS:
            raise InvalidInputError(
                f"Unknown cache backend {cache_backend!r}, expected one of {CACHE_BACKENDS}"
            )
        if cache_backend == "s3" and not s3_bucket:
            raise InvalidInputError("S3 cache backend requires a bucket name")
        if lookback_days <= 0 or max_concurrency <= 0:
            raise InvalidInputError("lookback_days and max_concurrency must be positive")

        universe = DEFAULT_UNIVERSE if default_universe is None else default_universe
        self._universe = {
            sector: [t.strip().upper() for t in tickers]
            for sector, tickers in universe.items()
        }
        self.threshold = threshold
        self.same_sector_only = same_sector_only
        self.lookback_days = lookback_days
        self.max_age = timedelta(hours=max_age_hours)
        self.provider_timeout_seconds = provider_timeout_seconds
        self.max_concurrency = max_concurrency
        self.cache_backend = cache_backend
        self.s3_bucket = s3_bucket
        self.s3_region = s3_region
        self.cache_dir = cache_dir

    @property
    def default_universe(self) -> dict[str, list[str]]:
        return {sector: list(tickers) for sector, tickers in self._universe.items()}

    def default_tickers(self) -> list[str]:
        """Flatten the universe in sector order, first occurrence wins"""
        tickers: list[str] = []
        for sector_tickers in self._universe.values():
            for ticker in sector_tickers:
                if ticker not in tickers:
                    tickers.append(ticker)
        return tickers

    def sector_of(self, ticker: str) -> str:
        for sector, tickers in self._universe.items():
            if ticker in tickers:
                return sector
        return "unknown"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CorrelatingConfig":
        """從環境變數建立設定

        CORRELATION_UNIVERSE 格式: "tech:AAPL,MSFT;energy:XOM,CVX"
        """
        env = os.environ if environ is None else environ

        universe = None
        if env.get("CORRELATION_UNIVERSE"):
            universe = parse_universe(env["CORRELATION_UNIVERSE"])

        return cls(
            default_universe=universe,
            threshold=_float(env, "CORRELATION_THRESHOLD", DEFAULT_CORRELATION_THRESHOLD),
            same_sector_only=_bool(env, "CORRELATION_SAME_SECTOR_ONLY"),
            lookback_days=_int(env, "CORRELATION_LOOKBACK_DAYS", DEFAULT_LOOKBACK_DAYS),
            max_age_hours=_float(env, "CORRELATION_CACHE_MAX_AGE_HOURS", CACHE_MAX_AGE_HOURS),
            provider_timeout_seconds=_float(
                env, "CORRELATION_PROVIDER_TIMEOUT", PROVIDER_TIMEOUT_SECONDS
            ),
            max_concurrency=_int(env, "CORRELATION_MAX_CONCURRENCY", PROVIDER_MAX_CONCURRENCY),
            cache_backend=env.get("CORRELATION_CACHE_BACKEND", "file"),
            s3_bucket=env.get("S3_BUCKET_NAME") or None,
            s3_region=env.get("AWS_REGION") or None,
            cache_dir=env.get("CORRELATION_CACHE_DIR", "data/cache"),
        )


def parse_universe(raw: str) -> dict[str, list[str]]:
    """解析 "sector:T1,T2;sector2:T3" 字串"""
    universe: dict[str, list[str]] = {}
    for group in raw.split(";"):
        if not group.strip():
            continue
        sector, sep, tickers = group.partition(":")
        if not sep or not sector.strip():
            raise InvalidInputError(f"Malformed universe group {group!r}")
        universe[sector.strip()] = [t.strip().upper() for t in tickers.split(",") if t.strip()]
    return universe


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    value = env.get(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError as e:
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from e


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    value = env.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError as e:
        raise InvalidInputError(f"{name} must be an integer, got {value!r}") from e


def _bool(env: Mapping[str, str], name: str) -> bool:
    return env.get(name, "").strip().lower() in ("1", "true", "yes", "on")
