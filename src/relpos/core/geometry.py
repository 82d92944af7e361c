"""球坐标几何模块

职责:
- 球坐标 ↔ 直角坐标
- 将方向矢量变换到以任意参考方向为极轴的新球坐标系

所有角度以弧度输入/输出, 角度与弧度的转换由调用方完成.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

TWO_PI = 2.0 * np.pi


def to_cartesian(
    radius: float,
    azimuth: float,
    elevation: float,
) -> Tuple[float, float, float]:
    """球坐标转直角坐标

    Args:
        radius: 矢径
        azimuth: 方位角/经度 (弧度)
        elevation: 仰角/纬度 (弧度)

    Returns:
        (x, y, z)
    """
    cos_el = np.cos(elevation)
    x = radius * cos_el * np.cos(azimuth)
    y = radius * cos_el * np.sin(azimuth)
    z = radius * np.sin(elevation)
    return float(x), float(y), float(z)


def to_spherical(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """直角坐标转球坐标

    Returns:
        (radius, azimuth, elevation), azimuth 归算到 [0, 2π)
    """
    rho = np.hypot(x, y)
    radius = np.sqrt(x * x + y * y + z * z)
    azimuth = np.arctan2(y, x)
    if azimuth < 0:
        azimuth += TWO_PI
    elevation = np.arctan2(z, rho)
    return float(radius), float(azimuth), float(elevation)


def frame_rotation_matrix(ref_azimuth: float, ref_elevation: float) -> np.ndarray:
    """以 (ref_azimuth, ref_elevation) 为极轴的坐标旋转矩阵

    主动视角旋转矢量 V=(ref_azimuth, ref_elevation):
    先绕 Z 轴旋转 -ref_azimuth, 将 V 转至 XZ 平面;
    再绕 Y 轴旋转 -(π/2 - ref_elevation), 使 V 与 Z 轴重合.
    """
    sin_a, cos_a = np.sin(ref_azimuth), np.cos(ref_azimuth)
    sin_e, cos_e = np.sin(ref_elevation), np.cos(ref_elevation)
    return np.array([
        [sin_e * cos_a, sin_e * sin_a, -cos_e],
        [-sin_a,        cos_a,         0.0],
        [cos_e * cos_a, cos_e * sin_a, sin_e],
    ])


def rotate_to_frame(
    ref_azimuth: float,
    ref_elevation: float,
    azimuth: float,
    elevation: float,
) -> Tuple[float, float]:
    """将方向 (azimuth, elevation) 变换到以参考方向为极轴的球坐标系

    变换后的仰角为 π/2 减去与参考方向的角距离, 方位角为绕参考轴的旋转角.

    Args:
        ref_azimuth: 参考方向方位角 (弧度)
        ref_elevation: 参考方向仰角 (弧度)
        azimuth: 待变换方向方位角 (弧度)
        elevation: 待变换方向仰角 (弧度)

    Returns:
        新坐标系中的 (azimuth, elevation), 弧度
    """
    vec = np.array(to_cartesian(1.0, azimuth, elevation))
    x2, y2, z2 = frame_rotation_matrix(ref_azimuth, ref_elevation) @ vec
    _, new_azimuth, new_elevation = to_spherical(x2, y2, z2)
    return new_azimuth, new_elevation
