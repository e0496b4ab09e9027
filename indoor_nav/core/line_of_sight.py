#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格视线检测：起点到终点直线可达时跳过 A* 搜索
"""

import numpy as np

from .map_model import GridCell
from .occupancy_grid import is_free, round_half_up


def is_direct_path_clear(a: GridCell, b: GridCell, grid: np.ndarray) -> bool:
    """
    沿两个栅格中心的连线等步长采样，逐个检查所在栅格

    步数 = max(|dcol|, |drow|)，每步四舍五入到最近的栅格。

    Args:
        a: 起点栅格 (col, row)
        b: 终点栅格 (col, row)
        grid: 占据栅格，True 表示不可通行

    Returns:
        True: 直线上所有采样栅格都可通行
    """
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    steps = max(abs(dx), abs(dy))

    if steps == 0:
        return is_free(grid, a)

    for i in range(steps + 1):
        t = i / steps
        col = round_half_up(a[0] + dx * t)
        row = round_half_up(a[1] + dy * t)
        if not is_free(grid, (col, row)):
            return False

    return True
