"""
Spearman秩相关比较器

对每张牌取 (原位置, 新位置)，计算52对位置的Spearman秩相关系数。
接近0表示洗得充分，接近1表示洗牌基本保留了原顺序。
"""

from typing import Tuple

import numpy as np

from ..deck import Card
from .base_comparator import RankComparator

__all__ = ['SpearmanRankCompare', 'spearman_rho']


def spearman_rho(x: np.ndarray, y: np.ndarray) -> float:
    """无并列秩时的Spearman系数: 1 - 6Σd² / (n(n²-1))"""
    n = len(x)
    d = x.astype(np.int64) - y.astype(np.int64)
    return 1.0 - 6.0 * float(np.sum(d * d)) / (n * (n * n - 1))


class SpearmanRankCompare(RankComparator):
    """Spearman秩相关比较器"""

    name = "spearman"

    def _score(self, origin: Tuple[Card, ...], result: Tuple[Card, ...]) -> float:
        result_positions = {card: i for i, card in enumerate(result)}
        x = np.arange(len(origin))
        y = np.fromiter((result_positions[card] for card in origin), dtype=np.int64, count=len(origin))
        return spearman_rho(x, y)
