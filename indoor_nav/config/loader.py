#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置加载器

从YAML文件加载配置并使用Pydantic验证。
"""

import yaml
from pathlib import Path
from typing import Union
from loguru import logger
from pydantic import ValidationError

from ..common.exceptions import ConfigurationError
from ..common.logger import setup_logger
from .models import RoutingConfig


def load_config(config_path: Union[str, Path]) -> RoutingConfig:
    """
    从YAML文件加载配置

    Args:
        config_path: 配置文件路径

    Returns:
        验证后的RoutingConfig对象

    Raises:
        FileNotFoundError: 配置文件不存在
        yaml.YAMLError: YAML格式错误
        ValueError: 配置文件为空或顶层不是映射
        ConfigurationError: 配置验证失败
    """
    config_path = Path(config_path)

    if not config_path.exists():
        error_msg = f"配置文件不存在: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        error_msg = f"YAML格式错误: {e}"
        logger.error(error_msg)
        raise yaml.YAMLError(error_msg) from e

    if raw_config is None:
        error_msg = "配置文件为空"
        logger.error(error_msg)
        raise ValueError(error_msg)

    if not isinstance(raw_config, dict):
        error_msg = f"配置文件顶层必须是映射: {type(raw_config).__name__}"
        logger.error(error_msg)
        raise ValueError(error_msg)

    try:
        config = RoutingConfig(**raw_config)
        logger.info(f"配置加载成功: {config_path}")
        return config
    except ValidationError as e:
        error_msg = f"配置验证失败:\n{e}"
        logger.error(error_msg)
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error['loc'])
            logger.error(f"  {field_path}: {error['msg']}")
        raise ConfigurationError(error_msg) from e


def setup_logging(config: RoutingConfig):
    """按配置中的 logging 段初始化日志"""
    return setup_logger(config.logging.level, config.logging.log_dir)
