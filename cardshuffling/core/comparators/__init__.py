"""
Comparators Module - 排名比较器

每个比较器输入洗牌前后的两副牌，输出一个随机性得分。
模拟框架只依赖 RankComparator.compare 和 name，新增比较器无需改动框架。

Classes:
    RankComparator: 比较器基类
    SpearmanRankCompare: Spearman秩相关系数
    DeckDifference: 位置变化计数
    BridgeHandCompare: 留在原桥牌座位的牌数
    BridgeHandValue: 各座位大牌点变化量
"""

from typing import List

from .base_comparator import RankComparator
from .spearman import SpearmanRankCompare, spearman_rho
from .deck_difference import DeckDifference
from .bridge_hand import BridgeHandCompare, BridgeHandValue, deal_hands, high_card_points, hand_values


def default_comparators() -> List[RankComparator]:
    """全部内置比较器，各一个实例"""
    return [SpearmanRankCompare(), DeckDifference(), BridgeHandCompare(), BridgeHandValue()]


__all__ = [
    'RankComparator',
    'SpearmanRankCompare',
    'DeckDifference',
    'BridgeHandCompare',
    'BridgeHandValue',
    'default_comparators',
    'spearman_rho',
    'deal_hands',
    'high_card_points',
    'hand_values',
]
