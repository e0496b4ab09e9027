#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
几何基础函数：距离、线段相交、点与矩形关系

所有障碍检测都基于精确的线段/矩形求交，而不是栅格。
"""

import math
from typing import Sequence

from ..common.constants import PARALLEL_EPSILON
from .map_model import Point, Obstacle


def distance(a: Point, b: Point) -> float:
    """两点间欧氏距离"""
    return math.hypot(a.x - b.x, a.y - b.y)


def path_length(path: Sequence[Point]) -> float:
    """折线总长度（像素）"""
    return sum(distance(path[i], path[i + 1]) for i in range(len(path) - 1))


def segment_intersects_segment(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """
    参数方程法判断线段 p1p2 与 p3p4 是否相交

    分母接近0（平行或共线）时视为不相交。
    """
    denom = (p4.y - p3.y) * (p2.x - p1.x) - (p4.x - p3.x) * (p2.y - p1.y)
    if abs(denom) < PARALLEL_EPSILON:
        return False

    ua = ((p4.x - p3.x) * (p1.y - p3.y) - (p4.y - p3.y) * (p1.x - p3.x)) / denom
    ub = ((p2.x - p1.x) * (p1.y - p3.y) - (p2.y - p1.y) * (p1.x - p3.x)) / denom

    return 0.0 <= ua <= 1.0 and 0.0 <= ub <= 1.0


def point_in_rectangle(p: Point, rect: Obstacle) -> bool:
    """点是否在矩形内（含边界）"""
    return (rect.x <= p.x <= rect.x + rect.width and
            rect.y <= p.y <= rect.y + rect.height)


def segment_intersects_rectangle(a: Point, b: Point, rect: Obstacle) -> bool:
    """
    线段是否与矩形相交

    与任意一条边相交，或任一端点在矩形内，均视为相交。
    """
    if point_in_rectangle(a, rect) or point_in_rectangle(b, rect):
        return True

    left, top = rect.x, rect.y
    right, bottom = rect.x + rect.width, rect.y + rect.height
    edges = [
        (Point(left, top), Point(right, top)),
        (Point(right, top), Point(right, bottom)),
        (Point(right, bottom), Point(left, bottom)),
        (Point(left, bottom), Point(left, top)),
    ]
    return any(segment_intersects_segment(a, b, e1, e2) for e1, e2 in edges)


def is_path_clear_of_obstacles(
    a: Point,
    b: Point,
    obstacles: Sequence[Obstacle],
    buffer: float,
) -> bool:
    """
    线段 ab 与所有障碍（外扩 buffer 后）都不相交时返回 True

    Args:
        a: 线段起点
        b: 线段终点
        obstacles: 障碍列表
        buffer: 安全距离（像素）
    """
    for obstacle in obstacles:
        if segment_intersects_rectangle(a, b, obstacle.Expanded(buffer)):
            return False
    return True
