"""Correlation Pipeline Settings

Defaults for the correlation matrix pipeline. Runtime overrides live in
CorrelatingConfig.
"""

DEFAULT_LOOKBACK_DAYS = 60  # Calendar days of daily closes
MIN_VALID_POINTS = 10  # Series with <= this many closes are excluded
DEFAULT_CORRELATION_THRESHOLD = 0.6  # Edge emitted when correlation > threshold
EDGE_DECIMALS = 2

CACHE_MAX_AGE_HOURS = 24.0
CACHE_KEY_PREFIX = "correlations/"
CACHE_KEY_SEPARATOR = ","

PROVIDER_TIMEOUT_SECONDS = 10.0
PROVIDER_MAX_CONCURRENCY = 8

MAX_TICKER_LENGTH = 10
MIN_TICKERS = 2
