"""
经验洗牌推导.

从按时间排序的牌组状态中，为每一对相邻且同类别的状态推导一次实体洗牌变换.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Sequence

from .classifier import same_type
from .types import EmpiricalShuffle, ShuffleState, ShuffleType

__all__ = ['derive_shuffles', 'count_by_type', 'describe_counts']

logger = logging.getLogger(__name__)


def derive_shuffles(states: Sequence[ShuffleState], pair_unknown: bool = False) -> List[EmpiricalShuffle]:
    """
    推导经验洗牌变换.

    对每一对相邻状态 (s_i, s_{i+1})，当序号严格递增且两者描述属于同一
    洗牌类别时产出一次变换，描述取自后一个状态. 其余情况直接跳过.

    Args:
        states: 按记录顺序排列的牌组状态
        pair_unknown: 是否允许两个UNKNOWN状态配对

    Returns:
        List[EmpiricalShuffle]: 推导出的洗牌变换，保持输入顺序
    """
    shuffles: List[EmpiricalShuffle] = []
    for before, after in zip(states, states[1:]):
        if before.sequence_number >= after.sequence_number:
            logger.debug(f"跳过非递增序号: {before} -> {after}")
            continue
        if not same_type(before.description, after.description, pair_unknown):
            logger.debug(f"跳过类别不同的状态: {before} -> {after}")
            continue
        shuffles.append(EmpiricalShuffle(after.description, before.deck, after.deck))
    return shuffles


def count_by_type(shuffles: Iterable[EmpiricalShuffle]) -> Dict[ShuffleType, int]:
    """按洗牌类别统计数量"""
    return dict(Counter(shuffle.type for shuffle in shuffles))


def describe_counts(counts: Dict[ShuffleType, int]) -> str:
    """生成推导统计摘要，如 "Derived 5 shuffles; 3 riffle, 2 overhand" """
    total = sum(counts.values())
    parts = ", ".join(f"{count} {shuffle_type}" for shuffle_type, count in counts.items())
    return f"Derived {total} shuffles; {parts}" if parts else f"Derived {total} shuffles"
