"""
扑克牌数据结构.

定义不可变的Card类以及牌面文本的解析与编码.
"""

from dataclasses import dataclass

from .types import Suit, Rank, RANK_TEXT, TEXT_RANK, TEXT_SUIT

__all__ = ['Card', 'CardParseError']


class CardParseError(ValueError):
    """牌面文本无法解析"""

    def __init__(self, text: str, reason: str):
        super().__init__(f"无法解析的牌面 '{text}': {reason}")
        self.text = text
        self.reason = reason


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，按值比较和哈希.

    Attributes:
        suit: 花色
        rank: 点数

    Examples:
        >>> card = Card(Suit.SPADES, Rank.KING)
        >>> card.to_text()
        'ks'
        >>> Card.from_text("KS") == card
        True
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")

    def to_text(self) -> str:
        """
        编码为牌面文本.

        Returns:
            str: 点数字符加一个花色字符，如"ks"、"10h"
        """
        return f"{RANK_TEXT[self.rank]}{self.suit.value}"

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_text(cls, text: str) -> 'Card':
        """
        从牌面文本创建扑克牌.

        文本格式为点数字符后跟一个花色字符，大小写不敏感，首尾空白忽略.

        Args:
            text: 牌面文本，如"ks"、"10D"、"Th"

        Returns:
            Card: 对应的扑克牌

        Raises:
            CardParseError: 点数或花色无法识别时
        """
        if not isinstance(text, str):
            raise CardParseError(repr(text), "输入必须是字符串")

        normalized = text.strip().lower()
        if len(normalized) < 2:
            raise CardParseError(text, "长度不足")

        rank_text, suit_text = normalized[:-1], normalized[-1]
        if suit_text not in TEXT_SUIT:
            raise CardParseError(text, f"无效的花色 '{suit_text}'")
        if rank_text not in TEXT_RANK:
            raise CardParseError(text, f"无效的点数 '{rank_text}'")

        return cls(TEXT_SUIT[suit_text], TEXT_RANK[rank_text])
