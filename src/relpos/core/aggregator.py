"""结果汇总模块

职责:
- 生成报告行 (含相对旋转/倾斜基准的偏差)
- 旋转角序列展开, 避免跨越 0/360 时统计失真
- 旋转角/倾斜角的最小值、最大值、均值、标准差
"""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, List, Optional, Sequence

import numpy as np

from relpos.core.models import MatchedPair, ReportRow, RunStatistics


def wrap180(angle: float) -> float:
    """将角度修正到 [-180, 180], 只做一次 ±360 修正"""
    if angle > 180.0:
        return angle - 360.0
    if angle < -180.0:
        return angle + 360.0
    return angle


def wrap360(angle: float) -> float:
    """将角度归算到 [0, 360)"""
    from astropy.coordinates import Angle
    import astropy.units as u

    return float(Angle(angle, u.deg).wrap_at(360 * u.deg).degree)


def build_rows(
    pairs: Iterable[MatchedPair],
    base_rotation: float = 0.0,
    base_tilt: float = 0.0,
) -> List[ReportRow]:
    """按匹配顺序生成报告行"""
    return [
        ReportRow(
            pair=pair,
            rel_rotation=wrap180(base_rotation - pair.rotation),
            rel_tilt=base_tilt - pair.tilt,
        )
        for pair in pairs
    ]


def unwrap_step(previous: float, value: float) -> float:
    """以上一个展开值为参照, 展开下一个旋转角"""
    delta = value - previous
    if delta > 180.0:
        return value - 360.0
    if delta < -180.0:
        return value + 360.0
    return value


def unwrap_rotations(values: Sequence[float]) -> List[float]:
    """展开旋转角序列, 以第一个值为起点"""
    return list(accumulate(values, unwrap_step))


def summarize(pairs: Sequence[MatchedPair]) -> Optional[RunStatistics]:
    """统计旋转角和倾斜角

    标准差为总体标准差 (分母为 n). 无数据时返回 None.
    """
    if not pairs:
        return None

    rot = np.asarray(unwrap_rotations([p.rotation for p in pairs]), dtype=np.float64)
    tilt = np.asarray([p.tilt for p in pairs], dtype=np.float64)

    return RunStatistics(
        count=len(pairs),
        rotation_min=wrap360(rot.min()),
        rotation_max=wrap360(rot.max()),
        rotation_mean=wrap360(rot.mean()),
        rotation_stdev=float(rot.std()),
        tilt_min=float(tilt.min()),
        tilt_max=float(tilt.max()),
        tilt_mean=float(tilt.mean()),
        tilt_stdev=float(tilt.std()),
    )
