"""
模拟结果类型定义

定义模拟运行的汇总结果和单个比较器的得分统计。
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

import numpy as np

__all__ = ['ScoreSummary', 'SimulationResult']


@dataclass(frozen=True)
class ScoreSummary:
    """单个比较器在全部试验上的得分统计"""
    count: int
    mean: float
    std: float
    minimum: float
    maximum: float

    @classmethod
    def from_scores(cls, scores: List[float]) -> 'ScoreSummary':
        """从得分列表计算统计量"""
        if not scores:
            return cls(count=0, mean=0.0, std=0.0, minimum=0.0, maximum=0.0)
        values = np.asarray(scores, dtype=np.float64)
        return cls(
            count=len(values),
            mean=float(np.mean(values)),
            std=float(np.std(values)),
            minimum=float(np.min(values)),
            maximum=float(np.max(values))
        )

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return asdict(self)


@dataclass(frozen=True)
class SimulationResult:
    """一次模拟运行的完整结果

    Attributes:
        generator: 洗牌生成器名称
        trial_count: 试验次数
        group_size: 汇报分组大小（每组的试验数）
        destination: 输出目标标识，如文件路径
        scores: 比较器名称 -> 按试验顺序排列的得分
    """
    generator: str
    trial_count: int
    group_size: int
    destination: str
    scores: Dict[str, List[float]] = field(default_factory=dict)

    def summary(self) -> Dict[str, ScoreSummary]:
        """每个比较器的得分统计"""
        return {name: ScoreSummary.from_scores(values) for name, values in self.scores.items()}

    def group_means(self) -> Dict[str, List[float]]:
        """每个比较器按连续group_size次试验分组后的均值，最后一组可能不满"""
        means: Dict[str, List[float]] = {}
        for name, values in self.scores.items():
            array = np.asarray(values, dtype=np.float64)
            means[name] = [
                float(np.mean(array[start:start + self.group_size]))
                for start in range(0, len(array), self.group_size)
            ]
        return means

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式，包含统计摘要"""
        return {
            'generator': self.generator,
            'trial_count': self.trial_count,
            'group_size': self.group_size,
            'destination': self.destination,
            'scores': {name: list(values) for name, values in self.scores.items()},
            'group_means': self.group_means(),
            'summary': {name: summary.to_dict() for name, summary in self.summary().items()},
        }
