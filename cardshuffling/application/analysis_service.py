#!/usr/bin/env python3
"""
AnalysisService - 洗牌分析服务

负责完整的分析流程：
- 从记录的牌组状态推导经验洗牌并输出统计摘要
- 运行均匀随机洗牌模拟（零模型）
- 运行经验洗牌重放模拟

数据加载与可视化由外部协作方负责，服务只接收已校验的牌组状态，
并把原始得分交给输出端。
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from cardshuffling.core.comparators import RankComparator, default_comparators
from cardshuffling.core.generators import EmpiricalAlgorithmShuffle, RandomShuffle, ShuffleGenerator
from cardshuffling.core.shuffles import (
    EmpiricalShuffle, ShuffleState, ShuffleType, count_by_type, derive_shuffles, describe_counts
)
from cardshuffling.core.simulation import (
    JsonFileSink, ResultSink, ShuffleSimulation, SimulationResult, SinkWriteError, seeded_random
)

from .config_service import ConfigService, SimulationConfig, get_config_service
from .types import CommandResult, QueryResult, ResultStatus

__all__ = ['AnalysisService']


class AnalysisService:
    """
    洗牌分析服务

    所有随机数都由配置中的种子显式派生，每次模拟运行使用独立的随机数流。
    """

    def __init__(self, config_service: Optional[ConfigService] = None,
                 comparators: Optional[Sequence[RankComparator]] = None):
        """
        初始化分析服务

        Args:
            config_service: 配置服务，None时使用全局单例
            comparators: 比较器列表，None时使用全部内置比较器
        """
        self.config_service = config_service or get_config_service()
        self.comparators = list(comparators) if comparators is not None else default_comparators()
        self.logger = logging.getLogger(__name__)

    def derive(self, states: Sequence[ShuffleState], profile: str = "default") -> QueryResult[List[EmpiricalShuffle]]:
        """
        推导经验洗牌

        Args:
            states: 按记录顺序排列的牌组状态
            profile: 模拟配置文件名（读取pair_unknown）

        Returns:
            查询结果，包含推导出的经验洗牌
        """
        config = self._simulation_config(profile)
        self.logger.info(f"Loaded and checked {len(states)} deck states")
        shuffles = derive_shuffles(states, pair_unknown=config.pair_unknown)
        self.logger.info(describe_counts(count_by_type(shuffles)))
        return QueryResult.success_result(shuffles)

    def shuffle_counts(self, shuffles: Sequence[EmpiricalShuffle]) -> QueryResult[Dict[ShuffleType, int]]:
        """按类别统计经验洗牌数量，供报告方使用"""
        return QueryResult.success_result(count_by_type(shuffles))

    def run_random_simulation(self, profile: str = "default",
                              sink: Optional[ResultSink] = None) -> QueryResult[SimulationResult]:
        """
        运行均匀随机洗牌模拟

        Args:
            profile: 模拟配置文件名
            sink: 结果输出端，None时写入 <output_dir>/randomShuffle.json

        Returns:
            查询结果，包含模拟结果
        """
        config = self._simulation_config(profile)
        generator = RandomShuffle(seeded_random(config.seed, "random"))
        return self._simulate(generator, config, Path(config.output_dir) / "randomShuffle.json", sink)

    def run_empirical_simulation(self, pool: Sequence[EmpiricalShuffle], profile: str = "default",
                                 shuffle_type: Optional[ShuffleType] = None,
                                 sink: Optional[ResultSink] = None) -> QueryResult[SimulationResult]:
        """
        运行经验洗牌重放模拟

        Args:
            pool: 经验洗牌池
            profile: 模拟配置文件名
            shuffle_type: 只重放该类别的洗牌，None表示全部
            sink: 结果输出端，None时写入 <output_dir>/randomEmpirical<Type>Shuffle.json

        Returns:
            查询结果，包含模拟结果；洗牌池为空时失败
        """
        config = self._simulation_config(profile)
        type_label = shuffle_type.name.capitalize() if shuffle_type is not None else ""
        try:
            generator = EmpiricalAlgorithmShuffle(
                pool, seeded_random(config.seed, f"empirical{type_label}"), shuffle_type
            )
        except ValueError as e:
            self.logger.warning(f"无法运行经验洗牌模拟: {e}")
            return QueryResult.failure_result(
                str(e), error_code="EMPTY_SHUFFLE_POOL", status=ResultStatus.VALIDATION_ERROR
            )

        return self._simulate(
            generator, config, Path(config.output_dir) / f"randomEmpirical{type_label}Shuffle.json", sink
        )

    def run_analysis(self, states: Sequence[ShuffleState], profile: str = "default",
                     sink: Optional[ResultSink] = None) -> CommandResult:
        """
        运行完整分析流程：推导经验洗牌，运行随机模拟，
        再对每个出现过的洗牌类别运行经验重放模拟

        Args:
            states: 按记录顺序排列的牌组状态
            profile: 模拟配置文件名
            sink: 结果输出端，None时每次模拟写入各自的JSON文件

        Returns:
            命令执行结果，data包含推导统计和各次模拟结果
        """
        shuffles = self.derive(states, profile).data
        simulations: Dict[str, SimulationResult] = {}

        random_result = self.run_random_simulation(profile, sink)
        if not random_result.success:
            return CommandResult.failure_result(
                random_result.message, error_code=random_result.error_code, status=random_result.status
            )
        simulations[random_result.data.generator] = random_result.data

        counts = count_by_type(shuffles)
        for shuffle_type in counts:
            empirical_result = self.run_empirical_simulation(shuffles, profile, shuffle_type, sink)
            if not empirical_result.success:
                return CommandResult.failure_result(
                    empirical_result.message, error_code=empirical_result.error_code, status=empirical_result.status
                )
            simulations[empirical_result.data.generator] = empirical_result.data

        self.logger.info("Done.")
        return CommandResult.success_result(
            "分析完成",
            data={'shuffle_counts': counts, 'simulations': simulations}
        )

    def _simulation_config(self, profile: str) -> SimulationConfig:
        return self.config_service.get_simulation_config(profile).data

    def _simulate(self, generator: ShuffleGenerator, config: SimulationConfig,
                  default_path: Path, sink: Optional[ResultSink]) -> QueryResult[SimulationResult]:
        if sink is None:
            sink = JsonFileSink(default_path)
        simulation = ShuffleSimulation(
            generator,
            self.comparators,
            trial_count=config.trial_count,
            group_size=config.group_size,
            sink=sink,
            destination=sink.destination
        )
        try:
            return QueryResult.success_result(simulation.run())
        except SinkWriteError as e:
            self.logger.error(f"模拟结果输出失败: {e}", exc_info=True)
            return QueryResult.failure_result(
                str(e), error_code="SINK_WRITE_FAILED", status=ResultStatus.SYSTEM_ERROR
            )
