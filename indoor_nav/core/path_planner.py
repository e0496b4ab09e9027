#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
室内路径规划入口

流程：
1. 障碍栅格化
2. 起点/终点吸附到可通行栅格
3. 直线可达检测，可达则跳过搜索
4. A* 搜索并回溯路径
5. 拉绳简化
6. 搜索失败时回退到角点绕行，再失败则返回直线

任何情况下都返回至少两个点的路径，首尾为调用方给出的原始坐标。
"""

import math
from typing import List, Optional, Sequence

from loguru import logger

from ..common.exceptions import PathPlanningError
from ..config.loader import setup_logging
from ..config.models import RoutingConfig
from .fallback_router import route_around
from .line_of_sight import is_direct_path_clear
from .map_model import FloorPlan, Obstacle, Point, RouteResult
from .occupancy_grid import build_occupancy_grid, compute_grid_size, world_to_cell
from .path_reconstruct import reconstruct, restore_endpoints, to_world
from .path_simplify import simplify_path
from .planner_astar import astar_search
from .point_validator import ensure_valid


class RoutePlanner:
    """
    楼层内的路径规划器

    每次调用都重新构建栅格和搜索节点，调用之间不共享可变状态。

    示例:
        ```python
        planner = RoutePlanner()
        result = planner.Plan(Point(100, 100), Point(900, 700), rooms, 1000, 800, 0.1)
        ```
    """

    def __init__(self, config: Optional[RoutingConfig] = None):
        self._config = config if config is not None else RoutingConfig()

    @property
    def config(self) -> RoutingConfig:
        return self._config

    def _ResolveMetersPerPixel(self, meters_per_pixel: Optional[float]) -> float:
        default = self._config.default_meters_per_pixel
        if meters_per_pixel is None:
            return default
        if not math.isfinite(meters_per_pixel) or meters_per_pixel <= 0:
            logger.warning(f"每像素米数无效: {meters_per_pixel}，使用默认值 {default}")
            return default
        return float(meters_per_pixel)

    def Plan(
        self,
        start: Point,
        end: Point,
        obstacles: Sequence[Obstacle],
        map_width: float,
        map_height: float,
        meters_per_pixel: Optional[float] = None,
    ) -> RouteResult:
        """
        规划一条从 start 到 end 的步行路径

        Args:
            start: 起点（像素）
            end: 终点（像素）
            obstacles: 矩形障碍列表
            map_width: 地图宽度（像素）
            map_height: 地图高度（像素）
            meters_per_pixel: 每像素米数，为None时使用配置默认值

        Returns:
            RouteResult，path 至少包含两个点
        """
        try:
            return self._Plan(start, end, obstacles, map_width, map_height, meters_per_pixel)
        except PathPlanningError as e:
            logger.warning(f"{e}，返回直线路径")
            return RouteResult(path=[start, end], method="straight")
        except Exception as e:
            logger.error(f"路径规划异常: {e}，返回直线路径")
            return RouteResult(path=[start, end], method="straight")

    def _Plan(
        self,
        start: Point,
        end: Point,
        obstacles: Sequence[Obstacle],
        map_width: float,
        map_height: float,
        meters_per_pixel: Optional[float],
    ) -> RouteResult:
        if not all(math.isfinite(v) for v in (start.x, start.y, end.x, end.y)):
            raise PathPlanningError(f"起点或终点坐标无效: {start} -> {end}")

        cfg = self._config
        mpp = self._ResolveMetersPerPixel(meters_per_pixel)
        grid_size = compute_grid_size(mpp, cfg.grid.cell_size_m, cfg.grid.min_cell_px)
        raster_buffer = cfg.clearance.raster_buffer_m / mpp
        path_buffer = cfg.clearance.path_buffer_m / mpp
        fallback_buffer = cfg.clearance.fallback_buffer_m / mpp

        grid = build_occupancy_grid(obstacles, map_width, map_height, grid_size, raster_buffer)
        if grid.size == 0:
            logger.warning(f"地图尺寸无效: ({map_width}, {map_height})，返回直线路径")
            return RouteResult(path=[start, end], method="straight", grid_size=grid_size)

        raw_start = world_to_cell(start, grid_size, grid.shape)
        raw_end = world_to_cell(end, grid_size, grid.shape)
        start_cell = ensure_valid(raw_start, grid, cfg.search.snap_radius)
        end_cell = ensure_valid(raw_end, grid, cfg.search.snap_radius)

        if start_cell != raw_start:
            logger.info(f"起点已调整: {raw_start} -> {start_cell}")
        if end_cell != raw_end:
            logger.info(f"终点已调整: {raw_end} -> {end_cell}")

        if cfg.search.enable_direct_check and is_direct_path_clear(start_cell, end_cell, grid):
            logger.debug(f"直线可达，跳过搜索: {start_cell} -> {end_cell}")
            return RouteResult(
                path=[start, end],
                method="direct",
                grid_size=grid_size,
                snapped_start=start_cell,
                snapped_end=end_cell,
            )

        nodes, goal_index, nodes_explored = astar_search(grid, start_cell, end_cell, grid_size)

        if goal_index < 0:
            path = route_around(start, end, obstacles, fallback_buffer)
            return RouteResult(
                path=path,
                method="fallback" if len(path) > 2 else "straight",
                grid_size=grid_size,
                nodes_explored=nodes_explored,
                snapped_start=start_cell,
                snapped_end=end_cell,
            )

        cells = reconstruct(nodes, goal_index)
        path = restore_endpoints(to_world(cells, grid_size), start, end)
        path = simplify_path(path, obstacles, path_buffer, cfg.search.simplify_passes)

        logger.debug(f"路径规划完成: 栅格路径={len(cells)}, 简化后={len(path)}, 探索节点数={nodes_explored}")
        return RouteResult(
            path=path,
            method="astar",
            grid_size=grid_size,
            nodes_explored=nodes_explored,
            snapped_start=start_cell,
            snapped_end=end_cell,
        )

    def PlanFloor(self, start: Point, end: Point, floor: FloorPlan) -> RouteResult:
        """在给定楼层上规划路径"""
        return self.Plan(start, end, floor.rooms, floor.width, floor.height, floor.meters_per_pixel)

    def RenderAscii(
        self,
        result: RouteResult,
        obstacles: Sequence[Obstacle],
        map_width: float,
        map_height: float,
        meters_per_pixel: Optional[float] = None,
    ) -> str:
        """
        用规划时相同的栅格把结果画成文本地图

        '#' = 障碍, '.' = 空地, '*' = 路径拐点, 'S' = 起点, 'G' = 终点
        """
        mpp = self._ResolveMetersPerPixel(meters_per_pixel)
        gs = result.grid_size or compute_grid_size(mpp, self._config.grid.cell_size_m, self._config.grid.min_cell_px)
        grid = build_occupancy_grid(obstacles, map_width, map_height, gs, self._config.clearance.raster_buffer_m / mpp)
        rows, cols = grid.shape
        if grid.size == 0:
            return ""

        vis = [['#' if grid[r, c] else '.' for c in range(cols)] for r in range(rows)]
        for p in result.path[1:-1]:
            c, r = world_to_cell(p, gs, (rows, cols))
            vis[r][c] = '*'
        sc, sr = world_to_cell(result.path[0], gs, (rows, cols))
        gc, gr = world_to_cell(result.path[-1], gs, (rows, cols))
        vis[sr][sc] = 'S'
        vis[gr][gc] = 'G'
        return "\n".join("".join(row) for row in vis)


def find_path(
    start: Point,
    end: Point,
    obstacles: Sequence[Obstacle],
    map_width: float,
    map_height: float,
    meters_per_pixel: float = 0.1,
) -> List[Point]:
    """
    使用默认配置规划路径，只返回路径点

    Returns:
        路径点列表，至少两个点，首尾为原始 start/end
    """
    return RoutePlanner().Plan(start, end, obstacles, map_width, map_height, meters_per_pixel).path


if __name__ == "__main__":
    # 简单自测：在 300x200 的楼层上绕开中间的房间
    config = RoutingConfig(logging={"level": "DEBUG"})
    setup_logging(config)
    width, height, mpp = 300, 200, 0.1
    rooms = [Obstacle(120, 40, 60, 120)]
    start = Point(30, 100)
    end = Point(270, 100)

    planner = RoutePlanner(config)
    result = planner.Plan(start, end, rooms, width, height, mpp)

    print("规划结果 RouteResult:")
    print(f"method: {result.method}")
    print(f"nodes_explored: {result.nodes_explored}")
    print(f"path: {[(round(p.x, 1), round(p.y, 1)) for p in result.path]}")

    print("\nASCII 地图：")
    print(planner.RenderAscii(result, rooms, width, height, mpp))
