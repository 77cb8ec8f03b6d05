"""Correlation Result DTO"""

from typing import NotRequired, TypedDict

from libs.shared.src.dtos.correlation.edge_dto import EdgeDTO


class CorrelationResultDTO(TypedDict):
    """Correlation Result

    Unit persisted to and read from the result cache.
    """

    stocks: list[str]
    """Valid tickers, in input order after filtering"""

    matrix: list[list[float | None]]
    """Pearson matrix indexed like ``stocks``; None where undefined"""

    edges: list[EdgeDTO]

    calculated_at: str
    """ISO-8601 timestamp (UTC)"""

    from_cache: NotRequired[bool]

    refreshed: NotRequired[bool]
