"""Ticker Set 工具

正規化、驗證 ticker 清單，並推導與順序無關的快取鍵
"""

from libs.shared.src.constants.correlation_settings import (
    CACHE_KEY_PREFIX,
    CACHE_KEY_SEPARATOR,
    MAX_TICKER_LENGTH,
    MIN_TICKERS,
)
from libs.shared.src.errors.invalid_input_error import InvalidInputError


def normalize_tickers(tickers: list[str]) -> list[str]:
    """Strip, upper-case and de-duplicate tickers, keeping first occurrence

    Raises:
        InvalidInputError: if an entry is not a string
    """
    normalized: list[str] = []
    seen: set[str] = set()
    for ticker in tickers:
        if not isinstance(ticker, str):
            raise InvalidInputError(
                f"Ticker must be a string, got {type(ticker).__name__}",
                tickers=[str(t) for t in tickers],
            )
        symbol = ticker.strip().upper()
        if symbol in seen:
            continue
        seen.add(symbol)
        normalized.append(symbol)
    return normalized


def is_valid_ticker(ticker: str) -> bool:
    """Basic symbol format check: non-empty, at most 10 characters"""
    return 0 < len(ticker) <= MAX_TICKER_LENGTH


def validate_tickers(tickers: list[str], min_count: int = MIN_TICKERS) -> None:
    """Reject insufficient or malformed ticker lists

    Raises:
        InvalidInputError: fewer than ``min_count`` tickers, or a symbol
            that fails the format check
    """
    if len(tickers) < min_count:
        raise InvalidInputError(
            f"At least {min_count} tickers are required, got {len(tickers)}",
            tickers=tickers,
        )

    invalid = [t for t in tickers if not is_valid_ticker(t)]
    if invalid:
        raise InvalidInputError(
            f"Invalid ticker symbols: {', '.join(repr(t) for t in invalid)}",
            tickers=tickers,
        )


def canonicalize(tickers: list[str], separator: str = CACHE_KEY_SEPARATOR) -> str:
    """Sort ascending and join; does not de-duplicate"""
    return separator.join(sorted(tickers))


def canonical_key(
    tickers: list[str],
    prefix: str = CACHE_KEY_PREFIX,
    separator: str = CACHE_KEY_SEPARATOR,
) -> str:
    """Cache key for a ticker set, independent of input order

    Examples:
        >>> canonical_key(["MSFT", "AAPL"])
        'correlations/AAPL,MSFT'
    """
    return prefix + canonicalize(tickers, separator)
