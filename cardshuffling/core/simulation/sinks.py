"""
模拟结果输出

模拟结束后把结果交给输出端。JsonFileSink写入JSON文件，
MemorySink保留在内存中供报告或测试使用。
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Union

from .types import SimulationResult

__all__ = ['ResultSink', 'JsonFileSink', 'MemorySink', 'SinkWriteError', 'load_result']


class SinkWriteError(Exception):
    """结果写入失败"""
    pass


class ResultSink(ABC):
    """结果输出端抽象基类"""

    @property
    @abstractmethod
    def destination(self) -> str:
        """输出目标标识，记录在模拟结果中"""
        pass

    @abstractmethod
    def write(self, result: SimulationResult) -> None:
        """输出一次模拟结果"""
        pass


class JsonFileSink(ResultSink):
    """
    JSON文件输出端

    写入 SimulationResult.to_dict() 的内容，必要时创建父目录。
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    @property
    def destination(self) -> str:
        return str(self.path)

    def write(self, result: SimulationResult) -> None:
        """
        写入JSON文件

        Raises:
            SinkWriteError: 写入失败时抛出
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(result.to_dict(), ensure_ascii=False, indent=2),
                encoding='utf-8'
            )
        except (OSError, TypeError, ValueError) as e:
            raise SinkWriteError(f"写入模拟结果失败 {self.path}: {str(e)}") from e


class MemorySink(ResultSink):
    """内存输出端"""

    destination = "memory"

    def __init__(self):
        self.results: List[SimulationResult] = []

    def write(self, result: SimulationResult) -> None:
        self.results.append(result)


def load_result(path: Union[str, Path]) -> SimulationResult:
    """从JsonFileSink写出的文件读回模拟结果（只读取原始得分）"""
    data: Dict[str, Any] = json.loads(Path(path).read_text(encoding='utf-8'))
    return SimulationResult(
        generator=data['generator'],
        trial_count=data['trial_count'],
        group_size=data['group_size'],
        destination=data['destination'],
        scores={name: list(values) for name, values in data['scores'].items()}
    )
