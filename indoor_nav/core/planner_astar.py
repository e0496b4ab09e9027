#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格 A* 搜索

功能：
- 8邻接移动，步长代价为真实欧氏距离（对角线 √2 × 栅格尺寸）
- 对角移动要求相邻的两个轴向栅格都可通行，不切障碍的角
- 欧氏距离启发函数
- 二叉堆开放表，f 相同时按入堆顺序出堆，结果可复现
"""

import heapq
import itertools
import math
from typing import List, Tuple

import numpy as np
from loguru import logger

from ..common.constants import DIRECTIONS_8WAY
from .map_model import GridCell, SearchNode


def _heuristic(a: GridCell, b: GridCell, grid_size: int) -> float:
    """欧氏距离（像素）"""
    return math.hypot(a[0] - b[0], a[1] - b[1]) * grid_size


def astar_search(
    grid: np.ndarray,
    start: GridCell,
    goal: GridCell,
    grid_size: int = 1,
) -> Tuple[List[SearchNode], int, int]:
    """
    在占据栅格上做 A*

    Args:
        grid: rows x cols bool 数组，True 表示不可通行
        start: 起点栅格 (col, row)
        goal: 终点栅格 (col, row)
        grid_size: 栅格单元像素尺寸，用于把代价换算成像素

    Returns:
        (nodes, goal_index, nodes_explored): 节点数组、终点节点下标和探索节点数；
        找不到路径时 goal_index 为 -1
    """
    rows, cols = grid.shape
    nodes: List[SearchNode] = []
    index_of: dict = {}
    closed = np.zeros((rows, cols), dtype=bool)
    counter = itertools.count()

    h0 = _heuristic(start, goal, grid_size)
    nodes.append(SearchNode(cell=start, g=0.0, h=h0, f=h0))
    index_of[start] = 0
    open_heap = [(h0, next(counter), 0)]

    nodes_explored = 0

    while open_heap:
        _, _, idx = heapq.heappop(open_heap)
        current = nodes[idx]
        col, row = current.cell

        if closed[row, col]:
            continue
        closed[row, col] = True
        nodes_explored += 1

        if current.cell == goal:
            logger.debug(f"A*规划成功: 探索节点数={nodes_explored}, 代价={current.g:.1f}")
            return nodes, idx, nodes_explored

        for dx, dy in DIRECTIONS_8WAY:
            nc, nr = col + dx, row + dy
            if nc < 0 or nc >= cols or nr < 0 or nr >= rows:
                continue
            if grid[nr, nc] or closed[nr, nc]:
                continue
            # 对角移动时两侧的轴向栅格必须都可通行
            if dx != 0 and dy != 0 and (grid[row, nc] or grid[nr, col]):
                continue

            neighbor = (nc, nr)
            tentative_g = current.g + math.hypot(dx, dy) * grid_size
            existing = index_of.get(neighbor)

            if existing is None:
                h = _heuristic(neighbor, goal, grid_size)
                nodes.append(SearchNode(cell=neighbor, g=tentative_g, h=h, f=tentative_g + h, parent=idx))
                index_of[neighbor] = len(nodes) - 1
                heapq.heappush(open_heap, (tentative_g + h, next(counter), len(nodes) - 1))
            elif tentative_g < nodes[existing].g:
                # 松弛：更新代价和父节点，旧堆元素出堆时因已关闭而被跳过
                node = nodes[existing]
                node.g = tentative_g
                node.f = tentative_g + node.h
                node.parent = idx
                heapq.heappush(open_heap, (node.f, next(counter), existing))

    logger.warning(f"A*规划失败: 无法找到从{start}到{goal}的路径, 探索节点数={nodes_explored}")
    return nodes, -1, nodes_explored
