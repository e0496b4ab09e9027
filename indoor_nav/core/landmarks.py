#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
地标查询：路径节点附近的房间和线段途经的房间
"""

from typing import List, Sequence

from ..common.constants import LANDMARK_NEAR_RADIUS, LANDMARK_ALONG_RADIUS, LANDMARK_SAMPLE_STEPS
from .geometry import distance
from .map_model import Point, Room


def landmark_key(room: Room):
    """地标去重用的键：优先用房间 id，id 为空时按对象本身区分"""
    return room.id if room.id else id(room)


def get_landmarks_near(point: Point, rooms: Sequence[Room], radius: float = LANDMARK_NEAR_RADIUS) -> List[Room]:
    """中心点距 point 不超过 radius 的房间，保持输入顺序"""
    return [room for room in rooms if distance(point, room.center) <= radius]


def get_landmarks_along_path(
    a: Point,
    b: Point,
    rooms: Sequence[Room],
    radius: float = LANDMARK_ALONG_RADIUS,
    steps: int = LANDMARK_SAMPLE_STEPS,
) -> List[Room]:
    """
    线段 ab 途经的房间

    把线段等分为 steps 段，对每个采样点做附近查询，按房间 id 去重（id 为空的房间各自独立），
    保留第一次出现的顺序。
    """
    landmarks: List[Room] = []
    seen = set()

    for i in range(steps + 1):
        t = i / steps
        sample = Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)
        for room in get_landmarks_near(sample, rooms, radius):
            key = landmark_key(room)
            if key not in seen:
                seen.add(key)
                landmarks.append(room)

    return landmarks
