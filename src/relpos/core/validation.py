"""数据有效性检查

职责:
- 单个视场数据的日期一致性
- FFoV 与 JFoV 的时间对应关系
- 运行前的集中检查 (失败时抛出对应错误)

匹配算法的时间运算假定所有数据位于同一日期, 不处理跨 UTC 零点的数据.
"""

from __future__ import annotations

import logging

from relpos.core.errors import RoleIncomplete, TemporalInconsistency
from relpos.core.models import ObservationSet, RunContext

logger = logging.getLogger(__name__)


def is_temporally_consistent(obs_set: ObservationSet) -> bool:
    """检查数据集内所有数据点日期相同"""
    if not obs_set.is_valid:
        return False
    ymd = obs_set.first.calendar_date
    return all(obs.calendar_date == ymd for obs in obs_set.observations)


def date_ranges_overlap(set_a: ObservationSet, set_b: ObservationSet) -> bool:
    """检查两组数据的时间对应关系

    判据: 两组数据首个数据点的日期相同.
    """
    if not (set_a.is_valid and set_b.is_valid):
        return False
    return set_a.first.calendar_date == set_b.first.calendar_date


def time_ranges_overlap(
    reference: ObservationSet,
    follower: ObservationSet,
    tolerance: float = 10.0,
) -> bool:
    """按时间区间检查 JFoV 与 FFoV 是否有交集

    FFoV 区间两端各放宽 tolerance 秒, 因此允许只有单个数据点的 FFoV.
    要求两组数据已通过 date_ranges_overlap.
    """
    if not (reference.is_valid and follower.is_valid):
        return False
    ref_start, ref_end = reference.time_span
    fol_start, fol_end = follower.time_span
    return fol_start <= ref_end + tolerance and fol_end >= ref_start - tolerance


def check_run_inputs(context: RunContext, strict_overlap: bool = False) -> None:
    """匹配前的集中检查

    Args:
        context: 运行上下文
        strict_overlap: 是否额外要求时间区间有交集

    Raises:
        RoleIncomplete: FFoV 或 JFoV 数据不可用
        TemporalInconsistency: 时间范围不匹配
    """
    if not context.follower.is_valid:
        raise RoleIncomplete("JFoV 数据不可用")
    if not context.reference.is_valid:
        raise RoleIncomplete("FFoV 数据不可用")

    for name, obs_set in (("JFoV", context.follower), ("FFoV", context.reference)):
        if not is_temporally_consistent(obs_set):
            raise TemporalInconsistency(
                f"{name} 数据<{obs_set.camera_id}>跨越多个日期"
            )

    if not date_ranges_overlap(context.reference, context.follower):
        raise TemporalInconsistency(
            f"时间范围不匹配: FFoV 日期 {context.reference.first.calendar_date:06d}, "
            f"JFoV 日期 {context.follower.first.calendar_date:06d}"
        )

    if strict_overlap and not time_ranges_overlap(
        context.reference, context.follower, context.tolerance
    ):
        raise TemporalInconsistency("时间范围不匹配: JFoV 与 FFoV 时间区间无交集")

    logger.debug("时间有效性检查通过")
