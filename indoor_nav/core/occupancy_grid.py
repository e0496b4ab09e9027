#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
障碍栅格化模块：把矩形障碍转成带安全距离的占据栅格

功能：
- 根据比例尺计算栅格尺寸（像素）
- 障碍外扩后标记为不可通行
- 世界坐标与栅格坐标互转
"""

import math
from typing import Sequence, Tuple

import numpy as np
from loguru import logger

from .map_model import GridCell, Obstacle, Point


def round_half_up(value: float) -> int:
    """四舍五入（0.5 向上取整）"""
    return int(math.floor(value + 0.5))


def compute_grid_size(meters_per_pixel: float, cell_size_m: float = 0.5, min_cell_px: int = 4) -> int:
    """
    计算栅格单元的像素尺寸

    Args:
        meters_per_pixel: 每像素米数
        cell_size_m: 栅格单元物理尺寸（米）
        min_cell_px: 最小像素尺寸

    Returns:
        栅格单元像素尺寸
    """
    return max(min_cell_px, round_half_up(cell_size_m / meters_per_pixel))


def grid_shape(map_width: float, map_height: float, grid_size: int) -> Tuple[int, int]:
    """栅格行列数 (rows, cols)，尺寸非正时为0"""
    rows = max(0, math.ceil(map_height / grid_size))
    cols = max(0, math.ceil(map_width / grid_size))
    return rows, cols


def build_occupancy_grid(
    obstacles: Sequence[Obstacle],
    map_width: float,
    map_height: float,
    grid_size: int,
    buffer_px: float,
) -> np.ndarray:
    """
    构建占据栅格

    Args:
        obstacles: 矩形障碍列表
        map_width: 地图宽度（像素）
        map_height: 地图高度（像素）
        grid_size: 栅格单元像素尺寸
        buffer_px: 障碍外扩距离（像素）

    Returns:
        rows x cols 的 bool 数组，True 表示不可通行
    """
    rows, cols = grid_shape(map_width, map_height, grid_size)
    grid = np.zeros((rows, cols), dtype=bool)
    if rows == 0 or cols == 0:
        return grid

    for obstacle in obstacles:
        min_col = math.floor((obstacle.x - buffer_px) / grid_size)
        max_col = math.floor((obstacle.x + obstacle.width + buffer_px) / grid_size)
        min_row = math.floor((obstacle.y - buffer_px) / grid_size)
        max_row = math.floor((obstacle.y + obstacle.height + buffer_px) / grid_size)

        # 完全在地图外的障碍不产生标记
        if max_col < 0 or max_row < 0 or min_col >= cols or min_row >= rows:
            continue

        min_col, max_col = max(0, min_col), min(cols - 1, max_col)
        min_row, max_row = max(0, min_row), min(rows - 1, max_row)
        grid[min_row:max_row + 1, min_col:max_col + 1] = True

    logger.debug(
        f"障碍栅格化完成: grid=({cols}x{rows}), grid_size={grid_size}px, "
        f"buffer={buffer_px:.2f}px, 障碍数={len(obstacles)}, 占据={int(grid.sum())}"
    )
    return grid


def is_free(grid: np.ndarray, cell: GridCell) -> bool:
    """栅格在范围内且可通行"""
    rows, cols = grid.shape
    col, row = cell
    return 0 <= col < cols and 0 <= row < rows and not grid[row, col]


def world_to_cell(point: Point, grid_size: int, grid_dims: Tuple[int, int]) -> GridCell:
    """
    世界坐标转栅格坐标，超出地图的点夹到最近的边界栅格

    Args:
        point: 世界坐标
        grid_size: 栅格单元像素尺寸
        grid_dims: (rows, cols)

    Returns:
        栅格坐标 (col, row)
    """
    rows, cols = grid_dims
    col = math.floor(point.x / grid_size)
    row = math.floor(point.y / grid_size)
    col = max(0, min(col, cols - 1))
    row = max(0, min(row, rows - 1))
    return (col, row)


def cell_to_world(cell: GridCell, grid_size: int) -> Point:
    """栅格中心的世界坐标"""
    col, row = cell
    return Point(col * grid_size + grid_size / 2, row * grid_size + grid_size / 2)
