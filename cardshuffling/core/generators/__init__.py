"""
洗牌生成器模块.

提供均匀随机洗牌（零模型）和基于经验洗牌的重放生成器.
"""

from .base import ShuffleGenerator
from .random_shuffle import RandomShuffle
from .empirical_shuffle import EmpiricalAlgorithmShuffle

__all__ = ['ShuffleGenerator', 'RandomShuffle', 'EmpiricalAlgorithmShuffle']
