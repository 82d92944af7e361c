"""结果报告模块

职责:
- 生成定宽列格式的结果表
- 生成统计结果块 (仅控制台输出)
- 结果文件命名: G<cam_id>_<hhmm>-<hhmm>.txt
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Union

from relpos.core.errors import OutputUnwritable
from relpos.core.models import ObservationSet, ReportRow, RunStatistics

STATS_BANNER = "*" * 30 + " Statistical results " + "*" * 30


def format_header() -> str:
    """结果表表头"""
    return (
        f"{'R.A.  ':>8s} {'DEC.  ':>8s} {'FileName            ':>33s} "
        f"{'R.A.0 ':>8s} {'DEC.0 ':>8s} {'FileName.0          ':>33s} "
        f"{'Rot ':>5s} {'Tilt':>4s} {'rRot ':>6s} {'rTilt':>5s}"
    )


def format_row(row: ReportRow) -> str:
    """格式化单行结果

    列: JFoV 位置, JFoV 文件名, FFoV 位置, FFoV 文件名,
    旋转角, 倾斜角, 相对旋转基准, 相对倾斜基准
    """
    p = row.pair
    return (
        f"{p.ra:8.4f} {p.dec:8.4f} {p.label:>33s} "
        f"{p.ra0:8.4f} {p.dec0:8.4f} {p.label0:>33s} "
        f"{p.rotation:5.1f} {p.tilt:4.1f} {row.rel_rotation:6.1f} {row.rel_tilt:5.1f}"
    )


def format_table(rows: Sequence[ReportRow]) -> List[str]:
    """结果表 (表头 + 数据行). 无数据时为空列表"""
    if not rows:
        return []
    return [format_header()] + [format_row(row) for row in rows]


def format_statistics(stats: RunStatistics) -> List[str]:
    """统计结果块"""
    return [
        STATS_BANNER,
        f"Rotation Minimum = {stats.rotation_min:6.1f} \t "
        f"Rotation Maximum = {stats.rotation_max:6.1f}",
        f"Rotation Mean    = {stats.rotation_mean:6.2f} \t "
        f"Rotation Stdev   = {stats.rotation_stdev:6.2f}",
        f"Tilt Minimum     = {stats.tilt_min:6.1f} \t "
        f"Tilt Maximum     = {stats.tilt_max:6.1f}",
        f"Tilt Mean        = {stats.tilt_mean:6.2f} \t "
        f"Tilt Stdev       = {stats.tilt_stdev:6.2f}",
        STATS_BANNER,
    ]


def write_report(
    rows: Sequence[ReportRow],
    stream: TextIO,
    stats: Optional[RunStatistics] = None,
) -> None:
    """输出结果表到流; stats 不为 None 时附加统计结果"""
    lines = format_table(rows)
    if stats is not None and rows:
        lines += format_statistics(stats)
    for line in lines:
        stream.write(line + "\n")


def output_filename(follower: ObservationSet) -> str:
    """结果文件名

    cam_id 为 JFoV 相机标志, 两个 hhmm 分别为 JFoV 起始和结束时间.
    """
    first, last = follower.first, follower.last
    return (
        f"G{follower.camera_id}_{first.hour:02d}{first.minute:02d}"
        f"-{last.hour:02d}{last.minute:02d}.txt"
    )


def write_report_file(
    rows: Sequence[ReportRow],
    path: Union[str, Path],
) -> Path:
    """保存结果表到文件 (不含统计结果)

    Raises:
        OutputUnwritable: 文件无法创建
    """
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            write_report(rows, f)
    except OSError as e:
        raise OutputUnwritable(path, str(e)) from e
    return path
