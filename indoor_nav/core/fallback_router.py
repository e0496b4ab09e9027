#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
回退绕行：A* 搜索失败时绕过第一个挡路的障碍

只处理与直线相交的第一个障碍，结果不再对其他障碍做校验，
调用方应把它当作尽力而为的路线。
"""

from typing import List, Sequence

from loguru import logger

from .geometry import distance, segment_intersects_rectangle
from .map_model import Obstacle, Point


def route_around(start: Point, end: Point, obstacles: Sequence[Obstacle], buffer: float) -> List[Point]:
    """
    经由挡路障碍外扩后的某个角点绕行

    Args:
        start: 起点
        end: 终点
        obstacles: 障碍列表
        buffer: 角点外扩距离（像素）

    Returns:
        [start, corner, end]；没有障碍挡住直线时返回 [start, end]
    """
    blocking = [o for o in obstacles if segment_intersects_rectangle(start, end, o)]
    if not blocking:
        logger.warning("回退绕行: 直线上没有障碍，返回直线路径")
        return [start, end]

    obstacle = blocking[0]
    corners = [
        Point(obstacle.x - buffer, obstacle.y - buffer),
        Point(obstacle.x + obstacle.width + buffer, obstacle.y - buffer),
        Point(obstacle.x + obstacle.width + buffer, obstacle.y + obstacle.height + buffer),
        Point(obstacle.x - buffer, obstacle.y + obstacle.height + buffer),
    ]

    best = corners[0]
    best_total = distance(start, best) + distance(best, end)
    for corner in corners[1:]:
        total = distance(start, corner) + distance(corner, end)
        if total < best_total:
            best, best_total = corner, total

    logger.info(f"回退绕行: 挡路障碍数={len(blocking)}, 经由角点 ({best.x:.1f}, {best.y:.1f})")
    return [start, best, end]
