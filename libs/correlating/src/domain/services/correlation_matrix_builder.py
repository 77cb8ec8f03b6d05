"""相關性矩陣建構器

- 對角線固定為 1.0
- 上三角計算後鏡射至下三角 (保證對稱)
- 邊 (edge) 只在 i < j 且相關係數 > 閾值時產生
"""

import logging
from typing import Callable

from libs.correlating.src.domain.services.pearson_correlation import (
    pearson_correlation,
)
from libs.shared.src.constants.correlation_settings import (
    EDGE_DECIMALS,
    MIN_VALID_POINTS,
)
from libs.shared.src.dtos.correlation.edge_dto import EdgeDTO
from libs.shared.src.dtos.correlation.price_history_dto import PriceHistoryDTO
from libs.shared.src.errors.compute_error import ComputeError

logger = logging.getLogger(__name__)


def filter_valid_histories(
    histories: list[PriceHistoryDTO],
    min_points: int = MIN_VALID_POINTS,
) -> list[PriceHistoryDTO]:
    """Keep histories with more than ``min_points`` closes, in input order"""
    return [h for h in histories if len(h["prices"]) > min_points]


def build_correlation_matrix(series: list[list[float]]) -> list[list[float | None]]:
    """建立 n x n 相關性矩陣

    Args:
        series: 各 ticker 的價格序列，順序即矩陣索引

    Returns:
        對稱矩陣；無法計算的格子為 None
    """
    n = len(series)
    matrix: list[list[float | None]] = [[None] * n for _ in range(n)]

    for i in range(n):
        matrix[i][i] = 1.0
        for j in range(i + 1, n):
            try:
                corr = pearson_correlation(series[i], series[j])
            except ComputeError as e:
                logger.warning(f"Correlation ({i}, {j}) undefined: {e.message}")
                corr = None
            matrix[i][j] = corr
            matrix[j][i] = corr

    return matrix


def derive_edges(
    stocks: list[str],
    matrix: list[list[float | None]],
    threshold: float,
    sector_of: Callable[[str], str] | None = None,
) -> list[EdgeDTO]:
    """從矩陣推導圖形邊

    Args:
        stocks: 與矩陣索引對應的 ticker
        matrix: 相關性矩陣
        threshold: 未四捨五入的相關係數須嚴格大於此值
            (0.603 仍成邊，輸出值為 0.6)
        sector_of: 若提供，僅保留同產業的配對 ("unknown" 不配對)

    Returns:
        list[EdgeDTO]: source 一定排在 target 之前
    """
    edges: list[EdgeDTO] = []
    n = len(stocks)

    for i in range(n):
        for j in range(i + 1, n):
            corr = matrix[i][j]
            if corr is None or corr <= threshold:
                continue

            if sector_of is not None:
                sector = sector_of(stocks[i])
                if sector == "unknown" or sector != sector_of(stocks[j]):
                    continue

            edges.append(
                {
                    "source": stocks[i],
                    "target": stocks[j],
                    "correlation": round(corr, EDGE_DECIMALS),
                }
            )

    return edges
