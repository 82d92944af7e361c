"""时间匹配模块

为每个 JFoV 时间点在 FFoV 序列中查找时间最接近的数据点.
两组数据均按时间先后排列, 扫描位置只向前移动, 整个匹配过程为 O(n+m).
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from relpos.core.models import ObservationSet

# 匹配条件: 秒数相差不超过 10
DEFAULT_TOLERANCE_S = 10.0


def find_matched_index(
    secs: float,
    reference_times: Sequence[float],
    start: int = 0,
    tolerance: float = DEFAULT_TOLERANCE_S,
) -> Optional[int]:
    """从 start 起向前扫描, 找到与 secs 最接近的数据点

    时间差不再减小时停止 (相等时继续前进).

    Args:
        secs: JFoV 秒数
        reference_times: FFoV 秒数序列 (升序)
        start: 起始扫描位置
        tolerance: 最大允许时间差 (秒)

    Returns:
        匹配数据位置, 未找到匹配数据时为 None
    """
    n = len(reference_times)
    if start < 0 or start >= n:
        return None

    best = start
    dt0 = abs(secs - reference_times[start])
    for i in range(start + 1, n):
        dt1 = abs(secs - reference_times[i])
        if dt1 > dt0:
            break
        dt0 = dt1
        best = i

    if dt0 > tolerance:
        return None
    return best


def match_sequences(
    follower: ObservationSet,
    reference: ObservationSet,
    tolerance: float = DEFAULT_TOLERANCE_S,
) -> List[Tuple[int, int]]:
    """逐个扫描 JFoV 数据点并查找匹配的 FFoV 数据点

    Returns:
        [(JFoV 位置, FFoV 位置), ...], 按 JFoV 顺序排列
    """
    reference_times = reference.times()
    matches = []
    cursor = 0
    for i, obs in enumerate(follower.observations):
        k = find_matched_index(obs.time_of_day, reference_times, cursor, tolerance)
        if k is None:
            continue
        cursor = k
        matches.append((i, k))
    return matches
