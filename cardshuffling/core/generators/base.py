"""
洗牌生成器基础类.
"""

from abc import ABC, abstractmethod

from ..shuffles import Trial

__all__ = ['ShuffleGenerator']


class ShuffleGenerator(ABC):
    """
    洗牌生成器抽象基类.

    每次调用 next_trial 产出一对 (洗牌前, 洗牌后) 牌组.
    随机数生成器由构造方传入，相同种子产出相同的试验序列.
    """

    name: str = "generator"

    @abstractmethod
    def next_trial(self) -> Trial:
        """
        产出一次试验.

        Returns:
            Trial: 洗牌前后的两副牌
        """
        pass
