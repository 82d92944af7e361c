"""文件管理模块

职责:
- 解析指向数据文件 (每行: 赤经 赤纬 FITS文件名)
- 解析 FITS 文件名中的相机标志和 UTC 时间
- 按相机标志判定 FFoV/JFoV

文件名格式: G<cam_id>_[mon_]<imgtypabbr>_<YYMMDD>T<hhmmssfs>.fit
fs 量纲为 10 毫秒.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Iterable, Tuple, Union

from relpos.core.errors import RoleConflict, SourceUnreadable, UsageError
from relpos.core.models import FieldRole, Observation, ObservationSet
from relpos.core.roles import RolePolicy, default_role_policy

logger = logging.getLogger(__name__)

LABEL_PATTERN = re.compile(
    r"^G(?P<cid>[^_]+)_"
    r"(?:(?i:mon)_)?"
    r"(?P<imgtype>[^_]+)_"
    r"(?P<ymd>\d{6})T(?P<hms>\d{8})"
)


@dataclass(frozen=True)
class LabelInfo:
    """FITS 文件名解析结果"""
    camera_id: str
    calendar_date: int   # YYMMDD
    hour: int
    minute: int
    centiseconds: int    # SSfs, 量纲 0.01 秒


def parse_line(line: str) -> Tuple[float, float, str]:
    """解析行信息

    Returns:
        (赤经, 赤纬, 文件名)

    Raises:
        ValueError: 少于 3 列或赤经/赤纬不是数字
    """
    tokens = line.split()
    if len(tokens) < 3:
        raise ValueError(f"行数据少于 3 列: {line.strip()!r}")
    return float(tokens[0]), float(tokens[1]), tokens[2]


def parse_label(label: str) -> LabelInfo:
    """解析 FITS 文件名

    Raises:
        ValueError: 文件名格式无法识别
    """
    name = PurePath(label).name
    match = LABEL_PATTERN.match(name)
    if match is None:
        raise ValueError(f"无法识别的文件名: {label!r}")

    hms = int(match.group("hms"))
    return LabelInfo(
        camera_id=match.group("cid"),
        calendar_date=int(match.group("ymd")),
        hour=hms // 1000000,
        minute=hms // 10000 % 100,
        centiseconds=hms % 10000,
    )


def load_observation_file(path: Union[str, Path]) -> ObservationSet:
    """解析文件内容

    空行和以 '#' 开头的行被忽略, 格式错误的行记录警告后跳过.
    相机标志取自第一个有效数据点.

    Raises:
        SourceUnreadable: 文件无法打开或没有解析出数据点
    """
    path = Path(path)
    logger.info("解析文件: %s", path)

    observations = []
    camera_id = None
    skipped = 0
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for lineno, line in enumerate(f, start=1):
                if not line.strip() or line.lstrip().startswith("#"):
                    continue
                try:
                    ra, dec, label = parse_line(line)
                    info = parse_label(label)
                except ValueError as e:
                    skipped += 1
                    logger.warning("%s:%d 跳过: %s", path, lineno, e)
                    continue

                if camera_id is None:
                    camera_id = info.camera_id
                elif info.camera_id != camera_id:
                    logger.warning(
                        "%s:%d 相机标志 %s 与首行 %s 不一致",
                        path, lineno, info.camera_id, camera_id,
                    )

                observations.append(Observation(
                    ra=ra,
                    dec=dec,
                    calendar_date=info.calendar_date,
                    hour=info.hour,
                    minute=info.minute,
                    centiseconds=info.centiseconds,
                    label=label,
                ))
    except OSError as e:
        raise SourceUnreadable(path, str(e)) from e

    if not observations:
        raise SourceUnreadable(path, "没有解析出数据点")

    logger.info("从文件解析出 %d 个数据点", len(observations))
    if skipped:
        logger.warning("文件<%s>中跳过 %d 行", path, skipped)

    return ObservationSet(camera_id=camera_id, observations=observations, source=path)


def assign_roles(
    sets: Iterable[ObservationSet],
    policy: RolePolicy = default_role_policy,
) -> Tuple[ObservationSet, ObservationSet]:
    """按相机标志判定 FFoV 与 JFoV

    Returns:
        (FFoV 数据集合, JFoV 数据集合)

    Raises:
        UsageError: 输入不是两个数据集合
        RoleConflict: 两个数据集合被判定为同一视场
    """
    sets = list(sets)
    if len(sets) != 2:
        raise UsageError(f"需要两个输入文件, 实际为 {len(sets)} 个")

    assigned = {}
    for obs_set in sets:
        try:
            role = policy(obs_set.camera_id)
        except ValueError as e:
            raise SourceUnreadable(obs_set.source or obs_set.camera_id, str(e)) from e
        if role in assigned:
            raise RoleConflict(
                f"文件<{assigned[role].source}>与<{obs_set.source}>"
                f"均被判定为 {role.value}"
            )
        assigned[role] = obs_set
        logger.info(
            "文件<%s>判定为 %s (相机 %s)",
            obs_set.source, role.value, obs_set.camera_id,
        )

    return assigned[FieldRole.REFERENCE], assigned[FieldRole.FOLLOWER]
