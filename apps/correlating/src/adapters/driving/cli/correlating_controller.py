"""Correlating CLI Controller

Driving Adapter — 將 CLI 指令轉換為 Use Case 調用
"""

import json

from injector import Injector

from libs.correlating.src.ports.clear_cached_correlations_port import (
    ClearCachedCorrelationsPort,
)
from libs.correlating.src.ports.get_correlations_port import GetCorrelationsPort
from libs.correlating.src.ports.refresh_correlations_port import (
    RefreshCorrelationsPort,
)
from libs.shared.src.dtos.correlation.correlation_result_dto import (
    CorrelationResultDTO,
)
from libs.shared.src.errors.domain_error import DomainError
from libs.shared.src.errors.invalid_input_error import InvalidInputError


class CorrelatingController:
    """相關性 CLI 控制器

    不帶 ticker 時使用設定的預設股票池
    """

    def __init__(self, injector: Injector) -> None:
        self._injector = injector

    async def get(self, *tickers: str, force: bool = False, as_json: bool = False) -> None:
        """取得相關性 (優先使用快取)

        Args:
            tickers: 股票代碼，例如 AAPL MSFT NVDA
            force: 略過快取新鮮度檢查
            as_json: 輸出完整 JSON
        """
        use_case = self._injector.get(GetCorrelationsPort)
        try:
            result = await use_case.execute(_to_list(tickers), force_refresh=force)
        except InvalidInputError as e:
            self._print_error(e, as_json)
            return
        self._print_result(result, as_json)

    async def refresh(self, *tickers: str, as_json: bool = False) -> None:
        """強制重算並覆寫快取"""
        use_case = self._injector.get(RefreshCorrelationsPort)
        try:
            result = await use_case.execute(_to_list(tickers))
        except InvalidInputError as e:
            self._print_error(e, as_json)
            return
        self._print_result(result, as_json)

    async def clear(self, *tickers: str) -> None:
        """刪除 ticker 組合的快取"""
        use_case = self._injector.get(ClearCachedCorrelationsPort)
        try:
            deleted = await use_case.execute(_to_list(tickers))
        except InvalidInputError as e:
            self._print_error(e)
            return
        print("✅ 快取已刪除" if deleted else "○ 無快取可刪除")

    def _print_error(self, error: DomainError, as_json: bool = False) -> None:
        if as_json:
            print(json.dumps({"error": error.to_dict()}, ensure_ascii=False))
            return
        print(f"❌ {error.code}: {error.message}")

    def _print_result(self, result: CorrelationResultDTO, as_json: bool) -> None:
        if as_json:
            print(json.dumps(result, ensure_ascii=False, indent=2))
            return

        source = "快取" if result.get("from_cache") else "重新計算"
        print("\n" + "=" * 50)
        print(f"📊 相關性摘要 ({source})")
        print("=" * 50)
        print(f"計算時間: {result['calculated_at']}")
        print(f"有效標的: {len(result['stocks'])} ({', '.join(result['stocks'])})")
        print(f"相關邊數: {len(result['edges'])}")

        edges = sorted(result["edges"], key=lambda e: e["correlation"], reverse=True)
        for i, edge in enumerate(edges[:10], 1):  # 只顯示前 10
            print(f"   {i}. {edge['source']} ↔ {edge['target']} | ρ={edge['correlation']:.2f}")


def _to_list(tickers: tuple[str, ...]) -> list[str] | None:
    # fire 會將純數字代碼轉為 int
    return [str(t) for t in tickers] if tickers else None
