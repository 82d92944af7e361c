"""Core data models for relpos.

所有数据模型使用 dataclass 定义. 观测点与匹配结果为不可变对象,
RunContext 承载单次运行的全部状态, 不使用模块级全局变量.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple


# ─────────────────────── Enums ───────────────────────


class FieldRole(Enum):
    """视场角色"""
    REFERENCE = "FFoV"  # 大视场, 作为指向基准
    FOLLOWER = "JFoV"   # 小视场, 计算其相对基准的偏差


# ─────────────────────── 观测数据 ───────────────────────


@dataclass(frozen=True)
class Observation:
    """单个指向数据点

    Attributes:
        ra: 赤经 (度)
        dec: 赤纬 (度)
        calendar_date: 年月日 (YYMMDD)
        hour: 时
        minute: 分
        centiseconds: 秒, 量纲 0.01 秒 (SSfs)
        label: 原始 FITS 文件名
    """
    ra: float
    dec: float
    calendar_date: int
    hour: int
    minute: int
    centiseconds: int
    label: str = ""

    @property
    def time_of_day(self) -> float:
        """当日零时起算的秒数"""
        return (self.hour * 60 + self.minute) * 60 + self.centiseconds * 0.01


@dataclass
class ObservationSet:
    """单个视场的数据点集合

    数据点按时间先后排列, 由调用者保证.
    """
    camera_id: str
    observations: List[Observation] = field(default_factory=list)
    source: Optional[Path] = None   # 数据来源文件

    @property
    def is_valid(self) -> bool:
        """数据完备标志: 至少包含一个数据点"""
        return len(self.observations) > 0

    @property
    def first(self) -> Observation:
        return self.observations[0]

    @property
    def last(self) -> Observation:
        return self.observations[-1]

    @property
    def time_span(self) -> Tuple[float, float]:
        """(起始秒数, 结束秒数)"""
        return self.first.time_of_day, self.last.time_of_day

    def times(self) -> List[float]:
        return [obs.time_of_day for obs in self.observations]

    def __len__(self) -> int:
        return len(self.observations)


# ─────────────────────── 交叉结果 ───────────────────────


@dataclass(frozen=True)
class MatchedPair:
    """交叉数据点: JFoV 位置与其匹配的 FFoV 位置

    Attributes:
        ra, dec: JFoV 中心位置 (度)
        label: JFoV 文件名
        ra0, dec0: FFoV 中心位置 (度)
        label0: FFoV 文件名
        rotation: 旋转角 (度)
        tilt: 倾斜角 (度), 0 表示与 FFoV 光轴重合
    """
    ra: float
    dec: float
    label: str
    ra0: float
    dec0: float
    label0: str
    rotation: float
    tilt: float


@dataclass(frozen=True)
class ReportRow:
    """报告中的一行: 交叉数据点 + 相对基准的偏差"""
    pair: MatchedPair
    rel_rotation: float
    rel_tilt: float


@dataclass(frozen=True)
class RunStatistics:
    """旋转角/倾斜角统计结果

    旋转角最小/最大/均值已归算到 [0, 360), 标准差基于展开后的序列.
    """
    count: int
    rotation_min: float
    rotation_max: float
    rotation_mean: float
    rotation_stdev: float
    tilt_min: float
    tilt_max: float
    tilt_mean: float
    tilt_stdev: float


# ─────────────────────── 运行上下文 ───────────────────────


@dataclass
class RunContext:
    """单次运行的全部状态

    Attributes:
        reference: FFoV 数据集合
        follower: JFoV 数据集合
        base_rotation: 旋转基准 (度)
        base_tilt: 倾斜基准 (度)
        tolerance: 时间匹配容差 (秒)
        pairs: 数据交叉结果
    """
    reference: ObservationSet
    follower: ObservationSet
    base_rotation: float = 0.0
    base_tilt: float = 0.0
    tolerance: float = 10.0
    pairs: List[MatchedPair] = field(default_factory=list)
