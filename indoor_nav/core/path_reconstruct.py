#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径回溯：沿父节点下标还原栅格路径，并映射为世界坐标
"""

from typing import List, Sequence

from .map_model import GridCell, Point, SearchNode
from .occupancy_grid import cell_to_world


def reconstruct(nodes: Sequence[SearchNode], goal_index: int) -> List[GridCell]:
    """从终点节点回溯到根节点，返回起点在前的栅格序列"""
    cells: List[GridCell] = []
    idx = goal_index
    while idx >= 0:
        node = nodes[idx]
        cells.append(node.cell)
        idx = node.parent
    cells.reverse()
    return cells


def to_world(cells: Sequence[GridCell], grid_size: int) -> List[Point]:
    """栅格序列转成栅格中心的世界坐标"""
    return [cell_to_world(cell, grid_size) for cell in cells]


def restore_endpoints(path: List[Point], start: Point, end: Point) -> List[Point]:
    """
    用调用方给出的原始起点/终点替换首尾点

    栅格吸附只是搜索内部的细节，对外路径的首尾始终是原始坐标。
    """
    if len(path) < 2:
        return [start, end]
    path = list(path)
    path[0] = start
    path[-1] = end
    return path
