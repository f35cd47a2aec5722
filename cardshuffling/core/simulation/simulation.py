"""
洗牌模拟

驱动一个洗牌生成器运行N次试验，每次试验对全部比较器各求值一次，
按比较器名称收集得分，结束后把结果交给输出端。
模拟本身不解释得分的统计含义。
"""

import logging
from typing import Dict, List, Sequence

from ..comparators import RankComparator
from ..generators import ShuffleGenerator
from .sinks import ResultSink
from .types import SimulationResult

__all__ = ['ShuffleSimulation']


class ShuffleSimulation:
    """
    洗牌模拟

    Examples:
        >>> simulation = ShuffleSimulation(
        ...     RandomShuffle(random.Random(1)), default_comparators(),
        ...     trial_count=100, group_size=10, sink=MemorySink(), destination="memory")
        >>> result = simulation.run()
        >>> len(result.scores["spearman"])
        100
    """

    def __init__(self, generator: ShuffleGenerator, comparators: Sequence[RankComparator],
                 trial_count: int, group_size: int, sink: ResultSink, destination: str):
        """
        初始化模拟

        Args:
            generator: 洗牌生成器
            comparators: 比较器列表，名称必须互不相同
            trial_count: 试验次数
            group_size: 汇报分组大小
            sink: 结果输出端
            destination: 输出目标标识，随结果一起交给报告方

        Raises:
            ValueError: 参数无效时
        """
        if trial_count <= 0:
            raise ValueError(f"试验次数必须为正数，实际: {trial_count}")
        if group_size <= 0:
            raise ValueError(f"分组大小必须为正数，实际: {group_size}")
        names = [comparator.name for comparator in comparators]
        if len(set(names)) != len(names):
            raise ValueError(f"比较器名称重复: {names}")

        self.generator = generator
        self.comparators = list(comparators)
        self.trial_count = trial_count
        self.group_size = group_size
        self.sink = sink
        self.destination = destination
        self.logger = logging.getLogger(__name__)

    def run(self) -> SimulationResult:
        """
        运行全部试验

        Returns:
            SimulationResult: 按试验顺序收集的得分
        """
        scores: Dict[str, List[float]] = {comparator.name: [] for comparator in self.comparators}
        self.logger.info(
            f"开始模拟 {self.generator.name}: {self.trial_count} 次试验, "
            f"{len(self.comparators)} 个比较器"
        )

        for trial_index in range(self.trial_count):
            trial = self.generator.next_trial()
            for comparator in self.comparators:
                scores[comparator.name].append(comparator.compare(trial.origin, trial.result))

            if (trial_index + 1) % self.group_size == 0:
                self.logger.debug(f"已完成 {trial_index + 1}/{self.trial_count} 次试验")

        result = SimulationResult(
            generator=self.generator.name,
            trial_count=self.trial_count,
            group_size=self.group_size,
            destination=self.destination,
            scores=scores
        )
        self.sink.write(result)
        self.logger.info(f"模拟 {self.generator.name} 完成，结果已输出到 {self.destination}")
        return result
