#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
自定义异常类：定义路径规划模块的专用异常
"""


class RoutingError(Exception):
    """室内导航基础异常类"""
    pass


class ConfigurationError(RoutingError):
    """配置错误异常"""
    pass


class PathPlanningError(RoutingError):
    """路径规划失败异常"""
    pass
