#!/usr/bin/env python3
"""
ConfigService - 配置管理服务

负责集中化管理分析流程的配置，包括：
- 模拟配置（试验次数、分组大小、随机种子、输出目录）
- 日志配置

为应用层提供统一的配置管理接口。
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Optional, List

from .types import QueryResult, ResultStatus

__all__ = [
    'ConfigType',
    'SimulationConfig',
    'LoggingConfig',
    'ConfigService',
    'get_config_service',
]


class ConfigType(Enum):
    """配置类型枚举"""
    SIMULATION = "simulation"
    LOGGING = "logging"


@dataclass
class SimulationConfig:
    """模拟配置"""
    trial_count: int = 1000
    group_size: int = 10
    seed: int = 8912123
    output_dir: str = "output"
    pair_unknown: bool = False  # 两个UNKNOWN状态是否可以配对推导

    def __post_init__(self):
        """验证配置值"""
        if self.trial_count <= 0:
            raise ValueError(f"试验次数必须为正数，当前为: {self.trial_count}")
        if self.group_size <= 0:
            raise ValueError(f"分组大小必须为正数，当前为: {self.group_size}")


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    enable_file_logging: bool = False
    log_file_path: str = "output/analysis.log"
    enable_console_logging: bool = True
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        """验证日志级别"""
        if not isinstance(self.log_level, str):
            raise ValueError(f"日志级别必须是字符串: {self.log_level!r}")
        if logging.getLevelName(self.log_level.upper()) not in (
                logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
            raise ValueError(f"无效的日志级别: {self.log_level}")


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Any]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.SIMULATION] = {
            'default': SimulationConfig(),
            'quick': SimulationConfig(trial_count=100, group_size=10),
            'thorough': SimulationConfig(trial_count=10000, group_size=100),
        }

        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(
                log_level='DEBUG',
                enable_file_logging=True
            ),
            'quiet': LoggingConfig(
                log_level='WARNING'
            ),
        }

        self.logger.debug("默认配置加载完成")

    def _get_profile(self, config_type: ConfigType, profile: str) -> Any:
        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'，使用默认配置")
            profile = "default"
        return config_profiles[profile]

    def get_simulation_config(self, profile: str = "default") -> QueryResult[SimulationConfig]:
        """
        获取模拟配置

        Args:
            profile: 配置文件名 (default, quick, thorough)

        Returns:
            查询结果，包含模拟配置
        """
        return QueryResult.success_result(self._get_profile(ConfigType.SIMULATION, profile))

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置文件名 (default, debug, quiet)

        Returns:
            查询结果，包含日志配置
        """
        return QueryResult.success_result(self._get_profile(ConfigType.LOGGING, profile))

    def update_config(self, config_type: ConfigType, profile: str, updates: Dict[str, Any]) -> QueryResult[bool]:
        """
        更新配置

        更新后的配置会重新校验，校验失败时保留原配置。

        Args:
            config_type: 配置类型
            profile: 配置文件名
            updates: 更新的配置项

        Returns:
            查询结果，包含更新是否成功
        """
        config_profiles = self._configs.get(config_type)
        if config_profiles is None:
            return QueryResult.failure_result(
                f"配置类型 {config_type} 不存在",
                error_code="CONFIG_TYPE_NOT_FOUND"
            )
        if profile not in config_profiles:
            return QueryResult.failure_result(
                f"配置文件 {profile} 不存在",
                error_code="CONFIG_PROFILE_NOT_FOUND"
            )

        current_config = config_profiles[profile]
        known_updates = {}
        for key, value in updates.items():
            if hasattr(current_config, key):
                known_updates[key] = value
            else:
                self.logger.warning(f"配置项 {key} 不存在于 {config_type.value}.{profile} 中")

        try:
            config_profiles[profile] = replace(current_config, **known_updates)
        except (TypeError, ValueError) as e:
            self.logger.error(f"更新配置 {config_type.value}.{profile} 失败: {e}", exc_info=True)
            return QueryResult.failure_result(
                f"更新配置失败: {str(e)}",
                error_code="UPDATE_CONFIG_FAILED",
                status=ResultStatus.VALIDATION_ERROR
            )

        self.logger.info(f"配置 {config_type.value}.{profile} 更新成功")
        return QueryResult.success_result(True)

    def list_available_profiles(self, config_type: ConfigType) -> QueryResult[List[str]]:
        """
        列出可用的配置文件

        Args:
            config_type: 配置类型

        Returns:
            查询结果，包含可用配置文件列表
        """
        if config_type not in self._configs:
            return QueryResult.failure_result(
                f"配置类型 {config_type} 不存在",
                error_code="CONFIG_TYPE_NOT_FOUND"
            )
        return QueryResult.success_result(list(self._configs[config_type].keys()))

    def configure_logging(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        按日志配置设置根日志器

        Args:
            profile: 日志配置文件名

        Returns:
            查询结果，包含实际使用的日志配置
        """
        config = self._get_profile(ConfigType.LOGGING, profile)
        handlers: List[logging.Handler] = []
        if config.enable_console_logging:
            handlers.append(logging.StreamHandler())
        if config.enable_file_logging:
            try:
                Path(config.log_file_path).parent.mkdir(parents=True, exist_ok=True)
                handlers.append(logging.FileHandler(config.log_file_path, encoding='utf-8'))
            except OSError as e:
                return QueryResult.failure_result(
                    f"无法创建日志文件 {config.log_file_path}: {str(e)}",
                    error_code="LOG_FILE_UNAVAILABLE",
                    status=ResultStatus.SYSTEM_ERROR
                )

        logging.basicConfig(
            level=config.log_level.upper(),
            format=config.log_format,
            handlers=handlers or [logging.NullHandler()],
            force=True
        )
        return QueryResult.success_result(config)


# 全局单例
_config_service_instance: Optional[ConfigService] = None


def get_config_service() -> ConfigService:
    """
    获取配置服务的全局单例

    Returns:
        ConfigService: 配置服务实例
    """
    global _config_service_instance
    if _config_service_instance is None:
        _config_service_instance = ConfigService()
    return _config_service_instance
