"""
扑克牌与牌组模块.

提供Card和Deck类，以及牌面文本编码（点数字符后跟一个花色字符，如"ks"）.
"""

from .types import Suit, Rank
from .card import Card, CardParseError
from .deck import Deck, MalformedDeckError, DECK_SIZE, CANONICAL_CARDS, validate_cards, as_sequence

__all__ = [
    'Suit',
    'Rank',
    'Card',
    'CardParseError',
    'Deck',
    'MalformedDeckError',
    'DECK_SIZE',
    'CANONICAL_CARDS',
    'validate_cards',
    'as_sequence',
]
