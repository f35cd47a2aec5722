"""
牌组排列运算.

排列用52个原位置下标的元组表示：perm[j] 是结果牌组第j张牌在原牌组中的位置.
恒等排列 perm[j] == j 表示洗牌没有移动任何牌.
"""

from typing import Sequence, Tuple, Union

from ..deck import Card, Deck, DECK_SIZE, MalformedDeckError, as_sequence

__all__ = [
    'Permutation',
    'derive_permutation',
    'apply_permutation',
    'identity_permutation',
    'fixed_points',
]

Permutation = Tuple[int, ...]

DeckLike = Union[Deck, Sequence[Card]]


def derive_permutation(origin: DeckLike, result: DeckLike) -> Permutation:
    """
    从洗牌前后的两副牌推导排列.

    Args:
        origin: 洗牌前的牌组
        result: 洗牌后的牌组

    Returns:
        Permutation: 结果牌组每个位置对应的原位置

    Raises:
        MalformedDeckError: 任一输入不是合法牌组时
    """
    origin_cards = as_sequence(origin)
    positions = {card: i for i, card in enumerate(origin_cards)}
    return tuple(positions[card] for card in as_sequence(result))


def apply_permutation(permutation: Permutation, deck: DeckLike) -> Deck:
    """
    把排列作用到一副牌上，重放同一种位置映射.

    Raises:
        MalformedDeckError: 排列不是0..51的双射时
    """
    if sorted(permutation) != list(range(DECK_SIZE)):
        raise MalformedDeckError(f"排列必须是0..{DECK_SIZE - 1}的双射")
    cards = as_sequence(deck)
    return Deck(cards[origin_index] for origin_index in permutation)


def identity_permutation() -> Permutation:
    return tuple(range(DECK_SIZE))


def fixed_points(permutation: Permutation) -> int:
    """位置不变的牌数"""
    return sum(1 for position, origin_index in enumerate(permutation) if position == origin_index)
