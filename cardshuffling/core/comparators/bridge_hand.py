"""
桥牌手牌比较器

把牌组按桥牌发牌顺序轮流发给4个座位（第i张牌发给座位 i % 4），
每个座位13张。洗牌不充分时，很多牌会留在原来的座位上，
各座位的大牌点也变化不大。

Classes:
    BridgeHandCompare: 留在原座位的牌数
    BridgeHandValue: 各座位大牌点变化量之和
"""

from typing import Dict, List, Sequence, Tuple

import numpy as np

from ..deck import Card, Rank
from .base_comparator import RankComparator

__all__ = [
    'BridgeHandCompare',
    'BridgeHandValue',
    'SEATS',
    'HAND_SIZE',
    'HIGH_CARD_POINTS',
    'deal_hands',
    'seat_of_positions',
    'high_card_points',
    'hand_values',
]

SEATS = 4
HAND_SIZE = 13

# 标准大牌点: A=4, K=3, Q=2, J=1
HIGH_CARD_POINTS: Dict[Rank, int] = {
    Rank.ACE: 4,
    Rank.KING: 3,
    Rank.QUEEN: 2,
    Rank.JACK: 1,
}


def deal_hands(cards: Sequence[Card]) -> List[Tuple[Card, ...]]:
    """按桥牌发牌顺序把52张牌分成4手"""
    return [tuple(cards[seat::SEATS]) for seat in range(SEATS)]


def seat_of_positions(cards: Sequence[Card]) -> Dict[Card, int]:
    """每张牌被发到的座位"""
    return {card: position % SEATS for position, card in enumerate(cards)}


def high_card_points(hand: Sequence[Card]) -> int:
    return sum(HIGH_CARD_POINTS.get(card.rank, 0) for card in hand)


def hand_values(cards: Sequence[Card]) -> np.ndarray:
    """4个座位各自的大牌点"""
    return np.array([high_card_points(hand) for hand in deal_hands(cards)], dtype=np.int64)


class BridgeHandCompare(RankComparator):
    """比较洗牌前后每张牌所在的座位

    得分为洗牌前后座位相同的牌数。恒等洗牌得52，均匀随机洗牌期望为13。
    """

    name = "bridge_hand_compare"

    def _score(self, origin: Tuple[Card, ...], result: Tuple[Card, ...]) -> float:
        before = seat_of_positions(origin)
        after = seat_of_positions(result)
        return sum(1 for card, seat in before.items() if after[card] == seat)


class BridgeHandValue(RankComparator):
    """比较洗牌前后各座位的大牌点

    得分为4个座位大牌点变化绝对值之和，恒等洗牌得0。
    """

    name = "bridge_hand_value"

    def _score(self, origin: Tuple[Card, ...], result: Tuple[Card, ...]) -> float:
        return int(np.sum(np.abs(hand_values(result) - hand_values(origin))))
