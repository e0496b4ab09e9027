#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
起点/终点修正：落在障碍上的栅格吸附到最近的可通行栅格
"""

import math

import numpy as np
from loguru import logger

from ..common.constants import SNAP_MAX_RADIUS
from .map_model import GridCell
from .occupancy_grid import is_free


def ensure_valid(cell: GridCell, grid: np.ndarray, max_radius: int = SNAP_MAX_RADIUS) -> GridCell:
    """
    按切比雪夫环逐圈向外搜索最近的可通行栅格

    每一圈只检查 max(|dx|, |dy|) == radius 的栅格，取该圈中欧氏距离最近的一个；
    找到即停止。

    Args:
        cell: 候选栅格 (col, row)
        grid: 占据栅格，True 表示不可通行
        max_radius: 最大搜索半径（栅格单位）

    Returns:
        可通行栅格；找不到时原样返回（可能仍在障碍上）
    """
    if is_free(grid, cell):
        return cell

    col, row = cell
    for radius in range(1, max_radius + 1):
        best = None
        best_dist = math.inf
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                if abs(dx) != radius and abs(dy) != radius:
                    continue
                candidate = (col + dx, row + dy)
                if not is_free(grid, candidate):
                    continue
                dist = math.hypot(dx, dy)
                if dist < best_dist:
                    best, best_dist = candidate, dist
        if best is not None:
            logger.debug(f"找到最近可通行栅格: {cell} -> {best}, 半径: {radius}")
            return best

    logger.warning(f"在半径 {max_radius} 内未找到可通行栅格: {cell}")
    return cell
