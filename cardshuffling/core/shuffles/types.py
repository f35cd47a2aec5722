"""
洗牌相关类型定义.

定义洗牌类别枚举、记录的牌组状态、经验洗牌变换以及单次试验结果.
"""

from dataclasses import dataclass
from enum import Enum, auto

from ..deck import Deck
from .permutation import Permutation, derive_permutation

__all__ = ['ShuffleType', 'ShuffleState', 'EmpiricalShuffle', 'Trial']


class ShuffleType(Enum):
    """洗牌类别枚举"""
    RIFFLE = auto()         # 鸽尾式洗牌
    OVERHAND = auto()       # 手上切洗
    TABLE = auto()          # 桌面搓洗
    UNKNOWN = auto()        # 无法识别的描述

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class ShuffleState:
    """
    一次记录的牌组快照.

    Attributes:
        description: 自由文本描述，如"riffle 3"
        sequence_number: 同一数据源内单调递增的序号
        deck: 记录的牌组
    """
    description: str
    sequence_number: int
    deck: Deck

    @property
    def shuffle_type(self) -> ShuffleType:
        """描述文本对应的洗牌类别"""
        from .classifier import classify
        return classify(self.description)

    def __str__(self) -> str:
        return f"#{self.sequence_number} {self.description}"


@dataclass(frozen=True)
class EmpiricalShuffle:
    """
    一次观测到的实体洗牌变换.

    Attributes:
        description: 洗牌描述（取自后一个状态）
        origin: 洗牌前的牌组
        result: 洗牌后的牌组
    """
    description: str
    origin: Deck
    result: Deck

    @property
    def type(self) -> ShuffleType:
        from .classifier import classify
        return classify(self.description)

    @property
    def permutation(self) -> Permutation:
        return derive_permutation(self.origin, self.result)


@dataclass(frozen=True)
class Trial:
    """洗牌生成器产出的一次试验：洗牌前后两副牌"""
    origin: Deck
    result: Deck
