"""
牌组差异比较器

统计同一位置上牌发生变化的位置数，范围 [0, 52]。
"""

from typing import Tuple

from ..deck import Card
from .base_comparator import RankComparator

__all__ = ['DeckDifference']


class DeckDifference(RankComparator):
    """位置差异计数（汉明距离）"""

    name = "deck_difference"

    def _score(self, origin: Tuple[Card, ...], result: Tuple[Card, ...]) -> float:
        return sum(1 for before, after in zip(origin, result) if before != after)
