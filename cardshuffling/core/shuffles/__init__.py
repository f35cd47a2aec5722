"""
洗牌模块.

提供洗牌类别分类、牌组排列运算，以及从记录的牌组状态推导经验洗牌变换.
"""

from .permutation import (
    Permutation,
    derive_permutation,
    apply_permutation,
    identity_permutation,
    fixed_points,
)
from .types import ShuffleType, ShuffleState, EmpiricalShuffle, Trial
from .classifier import classify, same_type
from .deriver import derive_shuffles, count_by_type, describe_counts

__all__ = [
    # 类型
    'ShuffleType',
    'ShuffleState',
    'EmpiricalShuffle',
    'Trial',
    'Permutation',

    # 排列运算
    'derive_permutation',
    'apply_permutation',
    'identity_permutation',
    'fixed_points',

    # 分类与推导
    'classify',
    'same_type',
    'derive_shuffles',
    'count_by_type',
    'describe_counts',
]
