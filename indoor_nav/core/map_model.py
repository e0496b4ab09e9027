#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
地图数据模型：点、障碍、房间、楼层和规划结果
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

GridCell = Tuple[int, int]  # (col, row)


@dataclass(frozen=True)
class Point:
    """楼层局部坐标系中的连续位置（像素）"""
    x: float
    y: float


@dataclass(frozen=True)
class Obstacle:
    """轴对齐矩形障碍（房间占地），左上角为 (x, y)"""
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def Expanded(self, margin: float) -> "Obstacle":
        """四周各外扩 margin 后的矩形"""
        return Obstacle(
            self.x - margin,
            self.y - margin,
            self.width + 2 * margin,
            self.height + 2 * margin,
        )


@dataclass(frozen=True)
class Room(Obstacle):
    """带标识的房间，同时作为障碍和地标使用"""
    id: str
    name: str = ""
    kind: str = "office"


@dataclass
class SearchNode:
    """A* 搜索节点，parent 为节点数组中的下标（-1 表示根节点）"""
    cell: GridCell
    g: float
    h: float
    f: float
    parent: int = -1


@dataclass
class FloorPlan:
    """单层楼的尺寸、比例尺和房间列表"""
    width: float
    height: float
    meters_per_pixel: float
    rooms: List[Room] = field(default_factory=list)
    name: str = ""


@dataclass
class RouteResult:
    """一次路径规划的结果"""
    path: List[Point]
    method: str                       # direct / astar / fallback / straight
    grid_size: int = 0
    nodes_explored: int = 0
    snapped_start: Optional[GridCell] = None
    snapped_end: Optional[GridCell] = None

    @property
    def ok(self) -> bool:
        """是否由栅格搜索或直线检测得到（而非回退）"""
        return self.method in ("direct", "astar")
