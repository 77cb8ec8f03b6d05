"""Pearson 相關係數單元測試"""

import numpy as np
import pytest

from libs.correlating.src.domain.services.pearson_correlation import (
    align_trailing,
    pearson_correlation,
)
from libs.shared.src.errors.compute_error import ComputeError


class TestAlignTrailing:
    """測試 align_trailing"""

    def test_keeps_most_recent_points(self) -> None:
        """長度不同時取最近的 N 筆"""
        a, b = align_trailing([1.0, 2.0, 3.0, 4.0, 5.0], [10.0, 20.0, 30.0])

        assert a.tolist() == [3.0, 4.0, 5.0]
        assert b.tolist() == [10.0, 20.0, 30.0]

    def test_empty_input(self) -> None:
        a, b = align_trailing([], [1.0, 2.0])
        assert len(a) == 0
        assert len(b) == 0


class TestPearsonCorrelation:
    """測試 pearson_correlation"""

    def test_perfect_positive(self) -> None:
        """同向線性序列相關係數為 1"""
        corr = pearson_correlation([1.0, 2.0, 3.0, 4.0], [2.0, 4.0, 6.0, 8.0])
        assert corr == pytest.approx(1.0)

    def test_perfect_negative(self) -> None:
        """反向線性序列相關係數為 -1"""
        corr = pearson_correlation([1.0, 2.0, 3.0, 4.0], [8.0, 6.0, 4.0, 2.0])
        assert corr == pytest.approx(-1.0)

    def test_matches_numpy_on_trailing_window(self) -> None:
        """應等於 numpy 對尾端對齊序列的計算結果"""
        rng = np.random.default_rng(7)
        a = (100 + rng.normal(size=50).cumsum()).tolist()
        b = (80 + rng.normal(size=35).cumsum()).tolist()

        expected = np.corrcoef(a[-35:], b)[0, 1]
        assert pearson_correlation(a, b) == pytest.approx(expected)

    def test_constant_series_is_undefined(self) -> None:
        """常數序列回傳 None 而非拋錯"""
        assert pearson_correlation([5.0] * 20, list(range(20))) is None

    def test_too_short_raises(self) -> None:
        """對齊後不足 2 筆應拋出 ComputeError"""
        with pytest.raises(ComputeError):
            pearson_correlation([1.0], [1.0, 2.0, 3.0])

    def test_symmetric(self) -> None:
        a = [1.0, 3.0, 2.0, 5.0, 4.0]
        b = [2.0, 1.0, 4.0, 3.0, 6.0]
        assert pearson_correlation(a, b) == pytest.approx(pearson_correlation(b, a))
