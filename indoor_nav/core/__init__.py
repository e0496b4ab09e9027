#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划核心模块
"""

from .map_model import Point, Obstacle, Room, FloorPlan, RouteResult, SearchNode
from .path_planner import RoutePlanner, find_path
from .landmarks import get_landmarks_near, get_landmarks_along_path

__all__ = [
    'Point',
    'Obstacle',
    'Room',
    'FloorPlan',
    'RouteResult',
    'SearchNode',
    'RoutePlanner',
    'find_path',
    'get_landmarks_near',
    'get_landmarks_along_path',
]
