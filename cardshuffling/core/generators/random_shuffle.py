"""
均匀随机洗牌.

对新牌顺序做Fisher-Yates洗牌，作为统计比较的零模型.
"""

import random
from typing import List

from ..deck import Card, Deck, CANONICAL_CARDS
from ..shuffles import Trial
from .base import ShuffleGenerator

__all__ = ['RandomShuffle']


class RandomShuffle(ShuffleGenerator):
    """
    均匀随机洗牌生成器.

    Examples:
        >>> generator = RandomShuffle(random.Random(42))
        >>> trial = generator.next_trial()
        >>> trial.origin == Deck.canonical()
        True
    """

    name = "random"

    def __init__(self, rng: random.Random) -> None:
        """
        Args:
            rng: 随机数生成器
        """
        self._rng = rng
        self._origin = Deck.canonical()

    def next_trial(self) -> Trial:
        cards: List[Card] = list(CANONICAL_CARDS)
        # random.shuffle 即Fisher-Yates算法
        self._rng.shuffle(cards)
        return Trial(self._origin, Deck(cards))
