#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    RoutingConfig,
    GridConfig,
    ClearanceConfig,
    SearchConfig,
    LandmarkConfig,
    DirectionsConfig,
    LoggingConfig,
)
from .loader import load_config, setup_logging

__all__ = [
    'RoutingConfig',
    'GridConfig',
    'ClearanceConfig',
    'SearchConfig',
    'LandmarkConfig',
    'DirectionsConfig',
    'LoggingConfig',
    'load_config',
    'setup_logging',
]
