#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
公共模块：常量、异常和日志配置
"""

from .exceptions import RoutingError, ConfigurationError, PathPlanningError
from .logger import setup_logger

__all__ = [
    'RoutingError',
    'ConfigurationError',
    'PathPlanningError',
    'setup_logger',
]
