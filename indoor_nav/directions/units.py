#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
距离换算与格式化
"""

from ..core.geometry import distance
from ..core.map_model import Point
from ..core.occupancy_grid import round_half_up


def pixel_distance(a: Point, b: Point) -> float:
    """两点间的像素距离"""
    return distance(a, b)


def pixel_distance_in_meters(a: Point, b: Point, meters_per_pixel: float) -> float:
    """两点间的物理距离（米）"""
    return pixel_distance(a, b) * meters_per_pixel


def _format_number(value: float) -> str:
    # 整数不带小数点
    if value == int(value):
        return str(int(value))
    return str(value)


def format_distance(meters: float) -> str:
    """
    距离格式化：不足1米用厘米，不足1千米保留一位小数的米，否则用千米

    Args:
        meters: 距离（米）

    Returns:
        如 "35 cm"、"12.5 m"、"1.2 km"
    """
    if meters < 1:
        return f"{round_half_up(meters * 100)} cm"
    if meters < 1000:
        return f"{_format_number(round_half_up(meters * 10) / 10)} m"
    return f"{_format_number(round_half_up(meters / 100) / 10)} km"
