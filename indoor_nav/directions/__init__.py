#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
步行指引模块

根据规划好的路径和房间列表生成逐段的文字指引。
"""

from .units import pixel_distance, pixel_distance_in_meters, format_distance
from .generator import DirectionStep, RouteSummary, generate_directions, summarize_route

__all__ = [
    'pixel_distance',
    'pixel_distance_in_meters',
    'format_distance',
    'DirectionStep',
    'RouteSummary',
    'generate_directions',
    'summarize_route',
]
