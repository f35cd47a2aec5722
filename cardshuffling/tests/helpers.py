"""
测试辅助函数

提供确定性的洗牌操作，用于构造已知排列的测试数据。
"""

from cardshuffling.core.deck import Deck


def riffle_once(deck: Deck) -> Deck:
    """完美鸽尾洗牌：上下两半逐张交错"""
    cards = list(deck)
    top, bottom = cards[:26], cards[26:]
    return Deck(card for pair in zip(top, bottom) for card in pair)


def cut(deck: Deck, at: int) -> Deck:
    """切牌：把前at张移到底部"""
    cards = list(deck)
    return Deck(cards[at:] + cards[:at])


def swap(deck: Deck, first: int, second: int) -> Deck:
    """交换两个位置的牌"""
    cards = list(deck)
    cards[first], cards[second] = cards[second], cards[first]
    return Deck(cards)
