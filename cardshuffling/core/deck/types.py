"""
扑克牌相关类型定义.

定义扑克牌的花色、点数枚举，以及牌面文本编码所用的映射表.
"""

from enum import Enum, IntEnum
from typing import Dict, List


class Suit(Enum):
    """
    扑克牌花色枚举.

    枚举值即文本编码中的花色字符.
    """

    HEARTS = "h"      # 红桃
    DIAMONDS = "d"    # 方块
    CLUBS = "c"       # 梅花
    SPADES = "s"      # 黑桃


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    数值越大表示点数越大，A为最大.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


# 点数 -> 文本
RANK_TEXT: Dict[Rank, str] = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "j", Rank.QUEEN: "q",
    Rank.KING: "k", Rank.ACE: "a"
}

# 文本 -> 点数，"t"是10的旧写法
TEXT_RANK: Dict[str, Rank] = {text: rank for rank, text in RANK_TEXT.items()}
TEXT_RANK["t"] = Rank.TEN

TEXT_SUIT: Dict[str, Suit] = {suit.value: suit for suit in Suit}


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 包含所有四种花色的列表
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 包含所有13种点数的列表
    """
    return list(Rank)
