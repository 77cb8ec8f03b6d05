"""Correlation Edge DTO"""

from typing import TypedDict


class EdgeDTO(TypedDict):
    """Graph edge between two correlated tickers

    ``source`` always precedes ``target`` in the result's stock ordering.
    """

    source: str
    target: str
    correlation: float
    """Rounded to 2 decimals for display"""
