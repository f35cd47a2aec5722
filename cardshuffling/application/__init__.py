"""
Application Layer - 应用服务层

应用层可以访问核心层，但不能被核心层访问。

Services:
    ConfigService: 配置管理
    AnalysisService: 推导经验洗牌并运行模拟

Types:
    CommandResult: 命令执行结果
    QueryResult: 查询结果
"""

from .types import (
    ResultStatus,
    CommandResult,
    QueryResult,
)

from .config_service import (
    ConfigType,
    SimulationConfig,
    LoggingConfig,
    ConfigService,
    get_config_service,
)
from .analysis_service import AnalysisService

__all__ = [
    # 类型
    "ResultStatus",
    "CommandResult",
    "QueryResult",

    # 配置
    "ConfigType",
    "SimulationConfig",
    "LoggingConfig",

    # 服务
    "ConfigService",
    "AnalysisService",
    "get_config_service",
]
