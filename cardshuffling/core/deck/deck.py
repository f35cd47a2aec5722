"""
扑克牌组.

定义不可变的Deck类. 一副合法的牌组恰好是标准52张牌的一个排列，
每张牌出现一次且仅一次.
"""

import re
from typing import FrozenSet, Iterable, Iterator, Sequence, Tuple, Union

from .card import Card
from .types import get_all_suits, get_all_ranks

__all__ = ['Deck', 'MalformedDeckError', 'DECK_SIZE', 'CANONICAL_CARDS', 'validate_cards', 'as_sequence']

DECK_SIZE = 52

CANONICAL_CARDS: Tuple[Card, ...] = tuple(
    Card(suit, rank)
    for suit in get_all_suits()
    for rank in get_all_ranks()
)

_CANONICAL_SET: FrozenSet[Card] = frozenset(CANONICAL_CARDS)

_TOKEN_SEPARATOR = re.compile(r"[\s,]+")


class MalformedDeckError(ValueError):
    """牌组不是标准52张牌的排列"""
    pass


def validate_cards(cards: Iterable[Card]) -> Tuple[Card, ...]:
    """
    校验一组牌是标准52张牌的排列.

    Args:
        cards: 待校验的牌

    Returns:
        Tuple[Card, ...]: 校验通过的牌（保持原顺序）

    Raises:
        MalformedDeckError: 数量不对、有重复、缺牌或含非Card元素时
    """
    ordered = tuple(cards)
    if len(ordered) != DECK_SIZE:
        raise MalformedDeckError(f"牌组必须是{DECK_SIZE}张牌，实际: {len(ordered)}")

    for i, card in enumerate(ordered):
        if not isinstance(card, Card):
            raise MalformedDeckError(f"第{i}张牌必须是Card类型，实际: {type(card)}")

    seen = set(ordered)
    if len(seen) != DECK_SIZE:
        raise MalformedDeckError(f"牌组中有重复的牌，仅有{len(seen)}张不同的牌")
    if seen != _CANONICAL_SET:
        raise MalformedDeckError("牌组与标准52张牌不一致")

    return ordered


class Deck:
    """
    表示一副有序的扑克牌.

    不可变，构造时校验. 支持len、下标、迭代以及按牌查找位置.

    Examples:
        >>> deck = Deck.canonical()
        >>> len(deck)
        52
        >>> deck.index(deck[10])
        10
    """

    __slots__ = ('_cards', '_positions')

    def __init__(self, cards: Iterable[Card]) -> None:
        """
        初始化牌组.

        Args:
            cards: 52张不重复的牌，顺序即牌组顺序（下标0为顶牌）

        Raises:
            MalformedDeckError: 牌不是标准52张牌的排列时
        """
        self._cards = validate_cards(cards)
        self._positions = {card: i for i, card in enumerate(self._cards)}

    @classmethod
    def canonical(cls) -> 'Deck':
        """新牌顺序：按花色枚举顺序，每种花色点数从小到大."""
        return cls(CANONICAL_CARDS)

    @classmethod
    def from_text(cls, text: str) -> 'Deck':
        """
        从牌面文本解析牌组.

        Args:
            text: 以空白或逗号分隔的牌面，如"as 2s 3s ..."

        Returns:
            Deck: 解析得到的牌组

        Raises:
            CardParseError: 某个牌面无法解析时
            MalformedDeckError: 解析结果不是合法牌组时
        """
        tokens = [token for token in _TOKEN_SEPARATOR.split(text.strip()) if token]
        return cls(Card.from_text(token) for token in tokens)

    def to_text(self) -> str:
        """编码为以空格分隔的牌面文本."""
        return " ".join(card.to_text() for card in self._cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    def index(self, card: Card) -> int:
        """
        查找牌在牌组中的位置.

        Raises:
            ValueError: 牌不在牌组中时
        """
        try:
            return self._positions[card]
        except KeyError:
            raise ValueError(f"{card!r} 不在牌组中") from None

    def __len__(self) -> int:
        return len(self._cards)

    def __getitem__(self, index: Union[int, slice]) -> Union[Card, Tuple[Card, ...]]:
        return self._cards[index]

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Deck):
            return self._cards == other._cards
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._cards)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Deck(top={self._cards[0]!r}, bottom={self._cards[-1]!r})"


def as_sequence(cards: Union[Deck, Sequence[Card]]) -> Tuple[Card, ...]:
    """把Deck或牌序列统一为元组，Deck不再重复校验."""
    if isinstance(cards, Deck):
        return cards.cards
    return validate_cards(cards)
