"""
洗牌描述分类器.

把自由文本的洗牌描述归一化后映射到固定的洗牌类别. 无法识别的文本
归入UNKNOWN，分类永不失败.
"""

from typing import Tuple

from .types import ShuffleType

__all__ = ['classify', 'same_type']

# 按顺序匹配，先命中者生效
_KEYWORD_RULES: Tuple[Tuple[ShuffleType, Tuple[str, ...]], ...] = (
    (ShuffleType.RIFFLE, ("riffle",)),
    (ShuffleType.OVERHAND, ("overhand",)),
    (ShuffleType.TABLE, ("table", "wash", "smoosh", "scramble")),
)


def classify(text: str) -> ShuffleType:
    """
    对洗牌描述进行分类.

    Args:
        text: 自由文本描述，如"Riffle shuffle #3"

    Returns:
        ShuffleType: 对应的洗牌类别，无法识别时为UNKNOWN
    """
    if not isinstance(text, str):
        return ShuffleType.UNKNOWN

    normalized = text.strip().casefold()
    for shuffle_type, keywords in _KEYWORD_RULES:
        if any(keyword in normalized for keyword in keywords):
            return shuffle_type
    return ShuffleType.UNKNOWN


def same_type(first: str, second: str, pair_unknown: bool = False) -> bool:
    """
    判断两段描述是否属于同一洗牌类别.

    两者都是UNKNOWN时只有pair_unknown为True才视为相同，
    因为UNKNOWN可能涵盖互不相关的实体操作.
    """
    first_type = classify(first)
    if first_type != classify(second):
        return False
    # pair_unknown=True 恢复按值比较：UNKNOWN与UNKNOWN也算同类
    return pair_unknown or first_type is not ShuffleType.UNKNOWN
