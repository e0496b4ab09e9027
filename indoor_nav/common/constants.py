#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
常量定义：集中管理所有魔法数字和配置常量
"""

# =============================
# 栅格相关常量
# =============================

# 栅格单元的物理尺寸（米）
DEFAULT_CELL_SIZE_M: float = 0.5

# 栅格单元的最小像素尺寸
MIN_CELL_PX: int = 4

# 默认每像素米数
DEFAULT_METERS_PER_PIXEL: float = 0.1

# =============================
# 安全距离常量（米）
# =============================

# 栅格化时障碍的膨胀距离
RASTER_BUFFER_M: float = 0.3

# 路径简化时线段与障碍的最小间距
PATH_BUFFER_M: float = 0.4

# 回退绕行时拐点与障碍的间距
FALLBACK_BUFFER_M: float = 1.0

# =============================
# 路径规划相关常量
# =============================

# 起点/终点吸附的最大搜索半径（栅格单位）
SNAP_MAX_RADIUS: int = 10

# 路径简化遍数
SIMPLIFY_PASSES: int = 2

# A*算法移动方向（八方向）: (dcol, drow)
DIRECTIONS_8WAY = [
    (0, -1),   # 上
    (1, 0),    # 右
    (0, 1),    # 下
    (-1, 0),   # 左
    (1, -1),   # 右上
    (1, 1),    # 右下
    (-1, 1),   # 左下
    (-1, -1),  # 左上
]

# 平行线判定阈值
PARALLEL_EPSILON: float = 1e-10

# =============================
# 地标与指引相关常量
# =============================

# 节点附近地标的搜索半径（像素）
LANDMARK_NEAR_RADIUS: float = 60.0

# 沿线段途经地标的搜索半径（像素）
LANDMARK_ALONG_RADIUS: float = 40.0

# 沿线段采样的分段数
LANDMARK_SAMPLE_STEPS: int = 10

# 平均步行速度（米/秒）
WALKING_SPEED_MPS: float = 1.4

# 判定为直行的最大转角（弧度）
STRAIGHT_THRESHOLD_RAD: float = 0.3

# 每一步最多展示的地标数量
MAX_LANDMARKS_PER_STEP: int = 3
