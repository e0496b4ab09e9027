#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划配置模型

使用Pydantic定义类型安全的配置模型，所有字段都带有默认值。
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator

from ..common.constants import (
    DEFAULT_CELL_SIZE_M,
    MIN_CELL_PX,
    DEFAULT_METERS_PER_PIXEL,
    RASTER_BUFFER_M,
    PATH_BUFFER_M,
    FALLBACK_BUFFER_M,
    SNAP_MAX_RADIUS,
    SIMPLIFY_PASSES,
    LANDMARK_NEAR_RADIUS,
    LANDMARK_ALONG_RADIUS,
    LANDMARK_SAMPLE_STEPS,
    WALKING_SPEED_MPS,
    STRAIGHT_THRESHOLD_RAD,
    MAX_LANDMARKS_PER_STEP,
)


class GridConfig(BaseModel):
    """栅格配置"""
    cell_size_m: float = Field(DEFAULT_CELL_SIZE_M, description="栅格单元物理尺寸（米）")
    min_cell_px: int = Field(MIN_CELL_PX, description="栅格单元最小像素尺寸")

    @field_validator('cell_size_m')
    @classmethod
    def validate_cell_size(cls, v: float) -> float:
        """验证栅格尺寸"""
        if v <= 0:
            raise ValueError(f"栅格尺寸必须大于0: {v}")
        return v

    @field_validator('min_cell_px')
    @classmethod
    def validate_min_cell_px(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"最小栅格像素必须大于等于1: {v}")
        return v


class ClearanceConfig(BaseModel):
    """安全距离配置（米）"""
    raster_buffer_m: float = Field(RASTER_BUFFER_M, description="栅格化时障碍膨胀距离")
    path_buffer_m: float = Field(PATH_BUFFER_M, description="路径简化时与障碍的最小间距")
    fallback_buffer_m: float = Field(FALLBACK_BUFFER_M, description="回退绕行拐点与障碍的间距")

    @field_validator('raster_buffer_m', 'path_buffer_m', 'fallback_buffer_m')
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        """验证非负"""
        if v < 0:
            raise ValueError(f"安全距离不能为负数: {v}")
        return v


class SearchConfig(BaseModel):
    """搜索配置"""
    snap_radius: int = Field(SNAP_MAX_RADIUS, description="起点/终点吸附最大半径（栅格）")
    enable_direct_check: bool = Field(True, description="是否先做直线可达检测")
    simplify_passes: int = Field(SIMPLIFY_PASSES, description="路径简化遍数")

    @field_validator('snap_radius')
    @classmethod
    def validate_snap_radius(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"吸附半径不能为负数: {v}")
        return v

    @field_validator('simplify_passes')
    @classmethod
    def validate_simplify_passes(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"简化遍数不能为负数: {v}")
        return v


class LandmarkConfig(BaseModel):
    """地标配置（像素）"""
    near_radius: float = Field(LANDMARK_NEAR_RADIUS, description="节点附近地标搜索半径")
    along_radius: float = Field(LANDMARK_ALONG_RADIUS, description="沿线段途经地标搜索半径")
    samples: int = Field(LANDMARK_SAMPLE_STEPS, description="沿线段采样分段数")

    @field_validator('near_radius', 'along_radius')
    @classmethod
    def validate_radius(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"搜索半径不能为负数: {v}")
        return v

    @field_validator('samples')
    @classmethod
    def validate_samples(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"采样分段数必须大于0: {v}")
        return v


class DirectionsConfig(BaseModel):
    """步行指引配置"""
    walking_speed_mps: float = Field(WALKING_SPEED_MPS, description="平均步行速度（米/秒）")
    straight_threshold_rad: float = Field(STRAIGHT_THRESHOLD_RAD, description="直行判定角度阈值（弧度）")
    max_landmarks: int = Field(MAX_LANDMARKS_PER_STEP, description="每步最多展示的地标数量")

    @field_validator('walking_speed_mps')
    @classmethod
    def validate_walking_speed(cls, v: float) -> float:
        """验证步行速度"""
        if v <= 0:
            raise ValueError(f"步行速度必须大于0: {v}")
        return v

    @field_validator('straight_threshold_rad')
    @classmethod
    def validate_straight_threshold(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"直行阈值不能为负数: {v}")
        return v

    @field_validator('max_landmarks')
    @classmethod
    def validate_max_landmarks(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"地标数量不能为负数: {v}")
        return v


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field("INFO", description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志目录（为空时只输出到控制台）")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """验证日志级别"""
        level = v.upper()
        if level not in ['TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL']:
            raise ValueError(f"未知的日志级别: {v}")
        return level


class RoutingConfig(BaseModel):
    """路径规划主配置"""
    default_meters_per_pixel: float = Field(DEFAULT_METERS_PER_PIXEL, description="默认每像素米数")
    grid: GridConfig = Field(default_factory=GridConfig, description="栅格配置")
    clearance: ClearanceConfig = Field(default_factory=ClearanceConfig, description="安全距离配置")
    search: SearchConfig = Field(default_factory=SearchConfig, description="搜索配置")
    landmarks: LandmarkConfig = Field(default_factory=LandmarkConfig, description="地标配置")
    directions: DirectionsConfig = Field(default_factory=DirectionsConfig, description="步行指引配置")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="日志配置")

    @field_validator('default_meters_per_pixel')
    @classmethod
    def validate_meters_per_pixel(cls, v: float) -> float:
        """验证每像素米数"""
        if v <= 0:
            raise ValueError(f"每像素米数必须大于0: {v}")
        return v
