"""強制重算相關性 Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.correlation.correlation_result_dto import (
    CorrelationResultDTO,
)


class RefreshCorrelationsPort(Protocol):
    """忽略快取重新計算，並覆寫快取

    CLI Entry: correlations refresh
    """

    async def execute(self, tickers: list[str] | None = None) -> CorrelationResultDTO:
        ...
