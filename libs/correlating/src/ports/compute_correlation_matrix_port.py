"""計算相關性矩陣 Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.correlation.correlation_result_dto import (
    CorrelationResultDTO,
)


class ComputeCorrelationMatrixPort(Protocol):
    """Correlation Engine

    抓取價格 → 過濾無效序列 → 矩陣 → 邊
    """

    async def execute(self, tickers: list[str]) -> CorrelationResultDTO:
        """
        計算相關性矩陣

        Returns:
            CorrelationResultDTO: stocks / matrix / edges / calculated_at
        """
        ...
