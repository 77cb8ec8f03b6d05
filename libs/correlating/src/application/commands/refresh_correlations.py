"""強制重算相關性 Command

實作 RefreshCorrelationsPort
略過新鮮度檢查，計算後仍覆寫快取
"""

import logging

from libs.correlating.src.ports.get_correlations_port import GetCorrelationsPort
from libs.correlating.src.ports.refresh_correlations_port import (
    RefreshCorrelationsPort,
)
from libs.shared.src.dtos.correlation.correlation_result_dto import (
    CorrelationResultDTO,
)


class RefreshCorrelationsCommand(RefreshCorrelationsPort):
    """強制重算"""

    def __init__(self, get_correlations: GetCorrelationsPort) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._get_correlations = get_correlations

    async def execute(self, tickers: list[str] | None = None) -> CorrelationResultDTO:
        self._logger.info("Force refreshing correlations...")
        result = await self._get_correlations.execute(tickers, force_refresh=True)
        return {**result, "refreshed": True}
