"""Pearson 相關係數

以收盤價水位 (非報酬率) 計算樣本相關係數
長度不同時，兩序列皆取最近 N 筆對齊 (align-by-recency)
"""

import numpy as np
from numpy.typing import NDArray

from libs.shared.src.errors.compute_error import ComputeError


def align_trailing(
    prices_a: list[float], prices_b: list[float]
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Trim both series to the shorter length, keeping the most recent points"""
    min_len = min(len(prices_a), len(prices_b))
    if min_len == 0:
        return np.array([], dtype=np.float64), np.array([], dtype=np.float64)

    a = np.asarray(prices_a[-min_len:], dtype=np.float64)
    b = np.asarray(prices_b[-min_len:], dtype=np.float64)
    return a, b


def pearson_correlation(prices_a: list[float], prices_b: list[float]) -> float | None:
    """計算兩價格序列的 Pearson 相關係數

    Args:
        prices_a: 價格序列 A (舊 → 新)
        prices_b: 價格序列 B (舊 → 新)

    Returns:
        相關係數 (-1 到 1)；任一序列為常數時回傳 None

    Raises:
        ComputeError: 對齊後不足 2 筆資料
    """
    a, b = align_trailing(prices_a, prices_b)
    if len(a) < 2:
        raise ComputeError(f"Need at least 2 aligned points, got {len(a)}")

    # 常數序列變異數為 0，相關係數無定義
    if np.ptp(a) == 0 or np.ptp(b) == 0:
        return None

    corr = np.corrcoef(a, b)[0, 1]
    if not np.isfinite(corr):
        return None
    return float(np.clip(corr, -1.0, 1.0))
