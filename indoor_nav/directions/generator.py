#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
逐段步行指引生成

每一段路径给出动作（出发/直行/左转/右转/到达）、距离、附近地标和途经地标。
屏幕坐标系 y 轴向下，因此转角为正表示右转。
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from loguru import logger

from ..config.models import RoutingConfig
from ..core.geometry import path_length
from ..core.landmarks import get_landmarks_along_path, get_landmarks_near, landmark_key
from ..core.map_model import Point, Room
from .units import format_distance, pixel_distance_in_meters


@dataclass
class DirectionStep:
    """单步指引"""
    step: int
    instruction: str
    distance_m: float
    distance_text: str
    near_landmarks: List[Room] = field(default_factory=list)
    passing_landmarks: List[Room] = field(default_factory=list)


@dataclass
class RouteSummary:
    """路线概要"""
    distance_m: float
    distance_text: str
    steps: int
    estimated_seconds: int


def _heading_change(prev: Point, current: Point, nxt: Point) -> float:
    """两段方向之差，归一化到 (-π, π]"""
    angle1 = math.atan2(current.y - prev.y, current.x - prev.x)
    angle2 = math.atan2(nxt.y - current.y, nxt.x - current.x)
    diff = angle2 - angle1
    if diff > math.pi:
        diff -= 2 * math.pi
    elif diff <= -math.pi:
        diff += 2 * math.pi
    return diff


def _turn_instruction(diff: float, straight_threshold: float) -> str:
    if abs(diff) < straight_threshold:
        return "Continue straight"
    if diff > 0:
        return "Turn right"
    return "Turn left"


def generate_directions(
    path: Sequence[Point],
    rooms: Sequence[Room],
    meters_per_pixel: float,
    config: Optional[RoutingConfig] = None,
) -> List[DirectionStep]:
    """
    生成逐段步行指引

    Args:
        path: 规划好的路径
        rooms: 房间列表（地标来源）
        meters_per_pixel: 每像素米数
        config: 路径规划配置，为None时使用默认配置

    Returns:
        每段路径对应一条指引；路径少于两个点时返回空列表
    """
    if len(path) < 2:
        return []

    cfg = config if config is not None else RoutingConfig()
    lm_cfg = cfg.landmarks
    dir_cfg = cfg.directions

    directions: List[DirectionStep] = []
    last = len(path) - 2

    for i in range(len(path) - 1):
        current = path[i]
        nxt = path[i + 1]

        dist_m = pixel_distance_in_meters(current, nxt, meters_per_pixel)
        near = get_landmarks_near(current, rooms, lm_cfg.near_radius)
        passing = get_landmarks_along_path(current, nxt, rooms, lm_cfg.along_radius, lm_cfg.samples)

        if i == 0:
            instruction = "Start your journey"
        elif i == last:
            instruction = "Arrive at destination"
        else:
            diff = _heading_change(path[i - 1], current, nxt)
            instruction = _turn_instruction(diff, dir_cfg.straight_threshold_rad)
            if near:
                instruction += f" at {near[0].name}"

        near_keys = {landmark_key(room) for room in near}
        directions.append(DirectionStep(
            step=i + 1,
            instruction=instruction,
            distance_m=dist_m,
            distance_text=format_distance(dist_m),
            near_landmarks=near[:dir_cfg.max_landmarks],
            passing_landmarks=[
                room for room in passing[:dir_cfg.max_landmarks] if landmark_key(room) not in near_keys
            ],
        ))

    logger.debug(f"指引生成完成: 路径点数={len(path)}, 指引步数={len(directions)}")
    return directions


def summarize_route(
    path: Sequence[Point],
    meters_per_pixel: float,
    config: Optional[RoutingConfig] = None,
) -> RouteSummary:
    """
    路线概要：沿路径的总距离、步数和预计步行时间

    Args:
        path: 规划好的路径
        meters_per_pixel: 每像素米数
        config: 路径规划配置，为None时使用默认配置
    """
    cfg = config if config is not None else RoutingConfig()
    distance_m = path_length(path) * meters_per_pixel
    return RouteSummary(
        distance_m=distance_m,
        distance_text=format_distance(distance_m),
        steps=max(0, len(path) - 1),
        estimated_seconds=math.ceil(distance_m / cfg.directions.walking_speed_mps),
    )
