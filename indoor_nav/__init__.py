#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
室内导航主包
提供楼层内的路径规划、地标标注和步行指引生成
"""

__version__ = "0.1.0"

from .core.map_model import Point, Obstacle, Room, FloorPlan, RouteResult
from .core.path_planner import RoutePlanner, find_path
from .core.landmarks import get_landmarks_near, get_landmarks_along_path

__all__ = [
    'Point',
    'Obstacle',
    'Room',
    'FloorPlan',
    'RouteResult',
    'RoutePlanner',
    'find_path',
    'get_landmarks_near',
    'get_landmarks_along_path',
]
