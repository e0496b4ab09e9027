#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径简化模块：基于精确几何检测的拉绳（string pulling）简化

功能：
- 从当前点出发，尽量直连到最远的可视点，去除多余拐点
- 可视性用线段/矩形求交判断，并保留安全距离
- 只删除点，不移动点；首尾点始终保留
"""

from typing import List, Sequence

from loguru import logger

from ..common.constants import SIMPLIFY_PASSES
from .geometry import is_path_clear_of_obstacles
from .map_model import Obstacle, Point


def string_pull(path: Sequence[Point], obstacles: Sequence[Obstacle], buffer: float) -> List[Point]:
    """
    单遍贪心简化

    Args:
        path: 原始路径
        obstacles: 障碍列表
        buffer: 安全距离（像素）

    Returns:
        简化后的路径
    """
    if len(path) <= 2:
        return list(path)

    simplified = [path[0]]
    i = 0
    n = len(path)

    while i < n - 1:
        next_i = i + 1
        # 从尾部往回找最远可直连点
        for j in range(n - 1, i + 1, -1):
            if is_path_clear_of_obstacles(path[i], path[j], obstacles, buffer):
                next_i = j
                break
        simplified.append(path[next_i])
        i = next_i

    return simplified


def simplify_path(
    path: Sequence[Point],
    obstacles: Sequence[Obstacle],
    buffer: float,
    passes: int = SIMPLIFY_PASSES,
) -> List[Point]:
    """
    多遍拉绳简化，第二遍补上第一遍因方向性漏掉的捷径

    Args:
        path: 原始路径
        obstacles: 障碍列表
        buffer: 安全距离（像素）
        passes: 简化遍数

    Returns:
        简化后的路径
    """
    result = list(path)
    for _ in range(passes):
        result = string_pull(result, obstacles, buffer)

    logger.debug(f"路径简化: 原始长度={len(path)}, 简化后={len(result)}")
    return result
