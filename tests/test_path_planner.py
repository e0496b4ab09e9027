#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划入口测试：端点保真、绕障、吸附、回退和退化输入
"""

import math

import numpy as np
import pytest

from indoor_nav import find_path, RoutePlanner, Point, Obstacle, Room, FloorPlan
from indoor_nav.config import RoutingConfig, SearchConfig
from indoor_nav.core.geometry import path_length, segment_intersects_rectangle
from indoor_nav.core.occupancy_grid import grid_shape
from indoor_nav.core.path_simplify import simplify_path


MAP_W, MAP_H, MPP = 1000, 800, 0.1
ROOM = Obstacle(400, 300, 200, 150)
CLEARANCE_PX = 0.4 / MPP


@pytest.fixture
def planner():
    return RoutePlanner()


class TestEndpoints:
    """端点和路径长度约束"""

    def test_first_and_last_are_original(self, planner):
        """首尾点是调用方给出的原始坐标"""
        start, end = Point(101.3, 99.7), Point(898.2, 703.9)
        path = planner.Plan(start, end, [ROOM], MAP_W, MAP_H, MPP).path
        assert path[0] == start
        assert path[-1] == end

    def test_never_empty(self, planner):
        """任何输入都至少返回两个点"""
        for start, end in [
            (Point(100, 100), Point(900, 700)),
            (Point(50, 50), Point(50, 50)),
            (Point(500, 375), Point(900, 700)),
        ]:
            assert len(planner.Plan(start, end, [ROOM], MAP_W, MAP_H, MPP).path) >= 2

    def test_same_start_and_end(self):
        """起点等于终点时返回两个相同的点"""
        path = find_path(Point(50, 50), Point(50, 50), [ROOM], MAP_W, MAP_H, MPP)
        assert path == [Point(50, 50), Point(50, 50)]


class TestDirectPath:
    """直线可达"""

    def test_unobstructed_line(self, planner):
        """没有障碍时直接返回 [start, end]"""
        start, end = Point(10, 10), Point(990, 790)
        result = planner.Plan(start, end, [], MAP_W, MAP_H, MPP)
        assert result.path == [start, end]
        assert result.method == "direct"
        assert result.ok

    def test_obstacle_off_the_line(self):
        """障碍不在直线上时也是直线"""
        start, end = Point(100, 100), Point(900, 100)
        assert find_path(start, end, [ROOM], MAP_W, MAP_H, MPP) == [start, end]

    def test_direct_check_disabled(self):
        """关闭直线检测后搜索结果经简化仍是直线"""
        config = RoutingConfig(search=SearchConfig(enable_direct_check=False))
        start, end = Point(10, 10), Point(300, 200)
        result = RoutePlanner(config).Plan(start, end, [], MAP_W, MAP_H, MPP)
        assert result.method == "astar"
        assert result.path == [start, end]


class TestAvoidance:
    """绕开障碍"""

    def test_routes_around_room(self, planner):
        """路径不穿过外扩后的房间，长度接近直线距离"""
        start, end = Point(100, 100), Point(900, 700)
        result = planner.Plan(start, end, [ROOM], MAP_W, MAP_H, MPP)
        path = result.path

        assert result.method == "astar"
        assert len(path) >= 3
        expanded = ROOM.Expanded(CLEARANCE_PX)
        for a, b in zip(path, path[1:]):
            assert not segment_intersects_rectangle(a, b, expanded)

        straight = math.hypot(800, 600)
        assert path_length(path) <= straight * 1.15

    def test_path_is_simplified_fixed_point(self, planner):
        """规划结果再简化一次不变"""
        path = planner.Plan(Point(100, 100), Point(900, 700), [ROOM], MAP_W, MAP_H, MPP).path
        assert simplify_path(path, [ROOM], CLEARANCE_PX) == path

    def test_deterministic(self, planner):
        """相同输入得到相同路径"""
        args = (Point(100, 100), Point(900, 700), [ROOM], MAP_W, MAP_H, MPP)
        assert planner.Plan(*args).path == planner.Plan(*args).path
        assert find_path(*args) == find_path(*args)

    def test_path_length_bounded(self, planner):
        """路径点数不超过栅格数"""
        result = planner.Plan(Point(100, 100), Point(900, 700), [ROOM], MAP_W, MAP_H, MPP)
        rows, cols = grid_shape(MAP_W, MAP_H, result.grid_size)
        assert len(result.path) <= rows * cols

    def test_path_does_not_repeat_points(self, planner):
        """路径中没有连续重复点"""
        path = planner.Plan(Point(100, 100), Point(900, 700), [ROOM], MAP_W, MAP_H, MPP).path
        assert all(a != b for a, b in zip(path, path[1:]))


def _random_layout(seed):
    """单个房间居中，起点在左、终点在右，直线必然穿过房间"""
    rng = np.random.default_rng(seed)
    w = float(rng.uniform(20, 200))
    h = float(rng.uniform(40, 400))
    ox = float(rng.uniform(250, 750 - w))
    oy = float(rng.uniform(100, 700 - h))
    room = Obstacle(ox, oy, w, h)
    start = Point(float(rng.uniform(50, ox - 30)), float(rng.uniform(oy + 0.25 * h, oy + 0.75 * h)))
    end = Point(float(rng.uniform(ox + w + 30, 950)), float(rng.uniform(oy + 0.25 * h, oy + 0.75 * h)))
    return room, start, end


class TestAvoidanceRandomLayouts:
    """随机房间位置和尺寸下的绕障性质"""

    @pytest.mark.parametrize("seed", range(30))
    def test_clearance_and_fixed_point(self, planner, seed):
        """每段路径都不碰外扩后的房间，且结果是简化的不动点"""
        room, start, end = _random_layout(seed)
        result = planner.Plan(start, end, [room], MAP_W, MAP_H, MPP)
        path = result.path

        assert result.method == "astar"
        assert path[0] == start
        assert path[-1] == end
        expanded = room.Expanded(CLEARANCE_PX)
        for a, b in zip(path, path[1:]):
            assert not segment_intersects_rectangle(a, b, expanded)
        assert simplify_path(path, [room], CLEARANCE_PX) == path

    def test_grid_step_near_room_corner(self, planner):
        """贴近房间角点的栅格步也保持安全距离"""
        room = Obstacle(383.19, 338.03, 50.56, 100.03)
        start, end = Point(337.8, 397.25), Point(878.17, 366.29)
        path = planner.Plan(start, end, [room], MAP_W, MAP_H, MPP).path
        expanded = room.Expanded(CLEARANCE_PX)
        for a, b in zip(path, path[1:]):
            assert not segment_intersects_rectangle(a, b, expanded)


class TestSnapping:
    """起点/终点落在障碍中"""

    def test_start_inside_room_near_edge(self, planner):
        """起点被吸附到最近的空闲栅格，但返回的首点仍是原始坐标"""
        start, end = Point(405, 375), Point(100, 700)
        result = planner.Plan(start, end, [ROOM], MAP_W, MAP_H, MPP)
        assert result.snapped_start == (78, 75)
        assert result.path[0] == start
        assert result.path[-1] == end

    def test_start_deep_inside_room(self, planner):
        """吸附失败时回退到角点绕行"""
        start, end = Point(500, 375), Point(900, 700)
        result = planner.Plan(start, end, [ROOM], MAP_W, MAP_H, MPP)
        assert result.method == "fallback"
        assert result.path == [start, Point(610, 460), end]


class TestFallback:
    """搜索失败后的回退"""

    def test_wall_splits_floor(self, planner):
        """整面墙挡住时经由外扩角点绕行"""
        start, end = Point(20, 50), Point(180, 50)
        wall = Obstacle(90, 0, 20, 100)
        result = planner.Plan(start, end, [wall], 200, 100, MPP)
        assert result.method == "fallback"
        assert not result.ok
        assert result.path == [start, Point(80, -10), end]


class TestDegenerateInput:
    """退化输入不抛异常"""

    def test_zero_size_map(self, planner):
        """地图尺寸为0时返回直线"""
        start, end = Point(0, 0), Point(10, 10)
        result = planner.Plan(start, end, [], 0, 0, MPP)
        assert result.path == [start, end]
        assert result.method == "straight"

    def test_invalid_meters_per_pixel(self):
        """每像素米数无效时使用默认值"""
        start, end = Point(100, 100), Point(900, 700)
        for mpp in (0, -1, float("inf"), float("nan")):
            path = find_path(start, end, [ROOM], MAP_W, MAP_H, mpp)
            assert path[0] == start
            assert path[-1] == end

    def test_out_of_bounds_points(self, planner):
        """地图外的点按最近栅格搜索，返回原始坐标"""
        start, end = Point(-50, -50), Point(1500, 900)
        result = planner.Plan(start, end, [], MAP_W, MAP_H, MPP)
        assert result.path == [start, end]
        assert result.snapped_start == (0, 0)

    def test_zero_size_obstacle(self, planner):
        """零宽障碍可以正常规划"""
        start, end = Point(20, 30), Point(180, 30)
        wall = Obstacle(100, 0, 0, 60)
        path = planner.Plan(start, end, [wall], 200, 100, MPP).path
        assert path[0] == start
        assert path[-1] == end
        assert len(path) >= 3

    def test_nan_coordinates(self, planner):
        """非数值坐标退化为直线"""
        start, end = Point(float("nan"), 0), Point(10, 10)
        result = planner.Plan(start, end, [], 100, 100, MPP)
        assert result.method == "straight"
        assert result.path[0] is start
        assert result.path[1] is end


class TestFloorPlan:
    """按楼层规划"""

    def test_plan_floor(self, planner):
        """PlanFloor 使用楼层的尺寸、比例尺和房间"""
        rooms = [Room(400, 300, 200, 150, id="r1", name="Meeting Room")]
        floor = FloorPlan(width=MAP_W, height=MAP_H, meters_per_pixel=MPP, rooms=rooms)
        start, end = Point(100, 100), Point(900, 700)
        result = planner.PlanFloor(start, end, floor)
        assert result.path == planner.Plan(start, end, [ROOM], MAP_W, MAP_H, MPP).path


class TestRenderAscii:
    """文本地图"""

    def test_marks_endpoints_and_obstacles(self, planner):
        """地图尺寸与栅格一致，标出起终点和障碍"""
        rooms = [Obstacle(120, 40, 60, 120)]
        result = planner.Plan(Point(30, 100), Point(270, 100), rooms, 300, 200, MPP)
        lines = planner.RenderAscii(result, rooms, 300, 200, MPP).splitlines()
        rows, cols = grid_shape(300, 200, result.grid_size)
        assert len(lines) == rows
        assert all(len(line) == cols for line in lines)
        assert lines[20][6] == "S"
        assert lines[20][54] == "G"
        assert "#" in lines[20]
        assert any("*" in line for line in lines)

    def test_uses_configured_raster_buffer(self):
        """文本地图使用配置中的膨胀距离"""
        rooms = [Obstacle(120, 40, 60, 120)]
        narrow = RoutePlanner(RoutingConfig(clearance={"raster_buffer_m": 0.0}))
        wide = RoutePlanner(RoutingConfig(clearance={"raster_buffer_m": 1.0}))
        start, end = Point(30, 100), Point(270, 100)
        narrow_map = narrow.RenderAscii(narrow.Plan(start, end, rooms, 300, 200, MPP), rooms, 300, 200, MPP)
        wide_map = wide.RenderAscii(wide.Plan(start, end, rooms, 300, 200, MPP), rooms, 300, 200, MPP)
        assert narrow_map.count("#") < wide_map.count("#")

    def test_empty_map(self, planner):
        """零尺寸地图得到空字符串"""
        result = planner.Plan(Point(0, 0), Point(10, 10), [], 0, 0, MPP)
        assert planner.RenderAscii(result, [], 0, 0, MPP) == ""
