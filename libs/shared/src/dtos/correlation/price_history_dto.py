"""Price History DTO"""

from typing import TypedDict


class PriceHistoryDTO(TypedDict):
    """Closing prices for one ticker, oldest to newest

    ``prices`` is empty when the fetch failed.
    """

    ticker: str
    prices: list[float]
