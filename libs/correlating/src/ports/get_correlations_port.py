"""取得相關性 Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.correlation.correlation_result_dto import (
    CorrelationResultDTO,
)


class GetCorrelationsPort(Protocol):
    """取得 ticker 組合的相關性結果 (優先使用快取)

    CLI Entry: correlations get
    """

    async def execute(
        self,
        tickers: list[str] | None = None,
        force_refresh: bool = False,
    ) -> CorrelationResultDTO:
        """
        Args:
            tickers: ticker 清單；None 表示使用預設股票池
            force_refresh: 略過新鮮度檢查，仍會寫入快取

        Returns:
            CorrelationResultDTO: 一定包含 from_cache

        Raises:
            InvalidInputError: 少於 2 檔或代碼格式錯誤
        """
        ...
