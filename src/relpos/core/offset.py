"""相对位置计算模块

职责:
- 将 JFoV 中心位置变换到以 FFoV 中心为极轴的坐标系
- 生成交叉数据点 (旋转角/倾斜角)
"""

from __future__ import annotations

import logging
from typing import List

import numpy as np

from relpos.core.geometry import rotate_to_frame
from relpos.core.matcher import match_sequences
from relpos.core.models import MatchedPair, Observation, RunContext

logger = logging.getLogger(__name__)


def compute_offset(follower: Observation, reference: Observation) -> MatchedPair:
    """计算 JFoV 相对 FFoV 的旋转角和倾斜角

    两个方向重合时倾斜角为 0, 此时旋转角无意义.

    Args:
        follower: JFoV 数据点
        reference: 与其匹配的 FFoV 数据点

    Returns:
        交叉数据点, 角度量纲为度
    """
    rot, elev = rotate_to_frame(
        np.deg2rad(reference.ra),
        np.deg2rad(reference.dec),
        np.deg2rad(follower.ra),
        np.deg2rad(follower.dec),
    )
    return MatchedPair(
        ra=follower.ra,
        dec=follower.dec,
        label=follower.label,
        ra0=reference.ra,
        dec0=reference.dec,
        label0=reference.label,
        rotation=float(np.rad2deg(rot)),
        tilt=float(90.0 - np.rad2deg(elev)),
    )


def compute_offsets(context: RunContext) -> List[MatchedPair]:
    """扫描原始数据并计算相对位置

    结果同时保存在 context.pairs 中. 未找到匹配的 JFoV 数据点被跳过.
    """
    logger.info("扫描数据, 查找匹配数据点")
    matches = match_sequences(context.follower, context.reference, context.tolerance)
    pairs = [
        compute_offset(context.follower.observations[i], context.reference.observations[k])
        for i, k in matches
    ]
    context.pairs = pairs
    logger.info("找到 %d 个匹配数据点", len(pairs))
    return pairs
