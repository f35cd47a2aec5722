"""
cardshuffling - 实体洗牌随机性分析

把记录下来的洗牌前后牌组与统计零模型进行比较，量化一种洗牌手法的随机程度.
"""

__version__ = "1.0.0"

__all__ = ['core', 'application']
