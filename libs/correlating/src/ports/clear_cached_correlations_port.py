"""清除快取 Driving Port"""

from typing import Protocol


class ClearCachedCorrelationsPort(Protocol):
    """刪除某 ticker 組合的快取結果

    CLI Entry: correlations clear
    """

    async def execute(self, tickers: list[str] | None = None) -> bool:
        """
        Returns:
            bool: 快取原本存在並已刪除

        Raises:
            InvalidInputError: 少於 2 檔或代碼格式錯誤
        """
        ...
