"""
经验算法洗牌.

从已推导出的经验洗牌中随机挑选一次，把它的位置映射原样重放到一副新牌上，
模拟"重复一次观测到的实体洗牌"的效果.
"""

import logging
import random
from typing import Optional, Sequence, Tuple

from ..deck import Deck
from ..shuffles import EmpiricalShuffle, Permutation, ShuffleType, Trial, apply_permutation
from .base import ShuffleGenerator

__all__ = ['EmpiricalAlgorithmShuffle']

logger = logging.getLogger(__name__)


class EmpiricalAlgorithmShuffle(ShuffleGenerator):
    """
    经验算法洗牌生成器.

    随机数只用于挑选重放哪一次历史洗牌；洗牌本身完全由该次观测的排列决定.

    Attributes:
        shuffle_type: 过滤用的洗牌类别，None表示使用全部
        pool_size: 过滤后可供重放的洗牌数
    """

    def __init__(self, pool: Sequence[EmpiricalShuffle], rng: random.Random,
                 shuffle_type: Optional[ShuffleType] = None) -> None:
        """
        初始化生成器.

        Args:
            pool: 经验洗牌池
            rng: 随机数生成器
            shuffle_type: 只使用该类别的洗牌，None表示不过滤

        Raises:
            ValueError: 过滤后洗牌池为空时
        """
        selected = [shuffle for shuffle in pool
                    if shuffle_type is None or shuffle.type is shuffle_type]
        if not selected:
            raise ValueError(f"没有可用的经验洗牌 (类别: {shuffle_type or 'any'})")

        self._rng = rng
        self._origin = Deck.canonical()
        # 排列在构造时推导一次，池本身不再被访问
        self._permutations: Tuple[Permutation, ...] = tuple(shuffle.permutation for shuffle in selected)
        self.shuffle_type = shuffle_type
        self.pool_size = len(selected)
        logger.debug(f"经验洗牌池: {self.pool_size}/{len(pool)} 次洗牌可用 (类别: {shuffle_type or 'any'})")

    @property
    def name(self) -> str:
        if self.shuffle_type is None:
            return "empirical"
        return f"empirical_{self.shuffle_type}"

    def next_trial(self) -> Trial:
        permutation = self._rng.choice(self._permutations)
        return Trial(self._origin, apply_permutation(permutation, self._origin))
