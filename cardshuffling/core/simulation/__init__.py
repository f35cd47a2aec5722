"""
Simulation Module - 洗牌模拟

Classes:
    ShuffleSimulation: 模拟运行器
    SimulationResult: 模拟结果
    ScoreSummary: 得分统计
    ResultSink: 输出端基类
    JsonFileSink: JSON文件输出端
    MemorySink: 内存输出端
"""

from .types import ScoreSummary, SimulationResult
from .sinks import ResultSink, JsonFileSink, MemorySink, SinkWriteError, load_result
from .rng import seeded_random
from .simulation import ShuffleSimulation

__all__ = [
    'ShuffleSimulation',
    'SimulationResult',
    'ScoreSummary',
    'ResultSink',
    'JsonFileSink',
    'MemorySink',
    'SinkWriteError',
    'load_result',
    'seeded_random',
]
