"""
排名比较器基础类

定义比较器的抽象基类：输入洗牌前后两副牌，输出一个随机性得分。
"""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple, Union

from ..deck import Card, Deck, as_sequence

__all__ = ['RankComparator', 'DeckLike']

DeckLike = Union[Deck, Sequence[Card]]


class RankComparator(ABC):
    """排名比较器基础抽象类

    子类只需实现 _score，并设置 name 作为结果汇总时的键。
    """

    name: str = "comparator"

    @abstractmethod
    def _score(self, origin: Tuple[Card, ...], result: Tuple[Card, ...]) -> float:
        """计算具体得分

        Args:
            origin: 洗牌前的牌（已校验）
            result: 洗牌后的牌（已校验）

        Returns:
            float: 得分
        """
        pass

    def compare(self, origin: DeckLike, result: DeckLike) -> float:
        """比较洗牌前后的两副牌

        Args:
            origin: 洗牌前的牌组
            result: 洗牌后的牌组

        Returns:
            float: 随机性得分

        Raises:
            MalformedDeckError: 任一输入不是标准52张牌的排列时
        """
        return float(self._score(as_sequence(origin), as_sequence(result)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
