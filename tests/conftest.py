"""测试套件共享 fixtures

提供临时目录、合成指向数据文件、观测数据构造等可复用测试夹具。
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Callable, Generator, List, Tuple

import pytest


def make_label(cid: str, ymd: int, secs: float, imgtype: str = "objt") -> str:
    """按 GWAC 命名规则生成 FITS 文件名"""
    cs = int(round(secs * 100))
    hh, rem = divmod(cs, 360000)
    mm, rem = divmod(rem, 6000)
    return f"G{cid}_mon_{imgtype}_{ymd:06d}T{hh:02d}{mm:02d}{rem:04d}.fit"


def make_observation(ra: float, dec: float, secs: float, ymd: int = 171028, label: str = ""):
    """由秒数构造单个数据点"""
    from relpos.core.models import Observation

    cs = int(round(secs * 100))
    hh, rem = divmod(cs, 360000)
    mm, rem = divmod(rem, 6000)
    return Observation(
        ra=ra, dec=dec, calendar_date=ymd,
        hour=hh, minute=mm, centiseconds=rem,
        label=label or f"img_{cs}.fit",
    )


def make_set(cid: str, points: List[Tuple[float, float, float]], ymd: int = 171028):
    """由 (ra, dec, secs) 列表构造数据集合"""
    from relpos.core.models import ObservationSet

    return ObservationSet(
        camera_id=cid,
        observations=[make_observation(ra, dec, s, ymd, make_label(cid, ymd, s)) for ra, dec, s in points],
    )


# ─── 临时目录与文件 ───


@pytest.fixture
def tmp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def write_pointing_file(tmp_dir) -> Callable[..., Path]:
    """写出指向数据文件: 每行 '赤经 赤纬 文件名'"""

    def _write(name: str, cid: str, points: List[Tuple[float, float, float]], ymd: int = 171028) -> Path:
        path = tmp_dir / name
        lines = [f"{ra:.6f} {dec:.6f} {make_label(cid, ymd, s)}" for ra, dec, s in points]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def noon() -> float:
    """12:00:00 对应的秒数"""
    return 12 * 3600.0


@pytest.fixture
def pointing_pair(write_pointing_file, noon) -> Tuple[Path, Path]:
    """一对可匹配的 FFoV(005)/JFoV(001) 指向数据文件"""
    ffov = write_pointing_file(
        "ffov.txt", "005",
        [(10.0, 20.0, noon + 20.0 * i) for i in range(6)],
    )
    jfov = write_pointing_file(
        "jfov.txt", "001",
        [(10.5, 21.0, noon + 1.0 + 20.0 * i) for i in range(6)],
    )
    return ffov, jfov


# ─── 配置 ───


@pytest.fixture
def sample_config_dict() -> dict:
    """示例配置字典 (与 config.py 的 JSON 结构对齐)"""
    return {
        "base_rotation": 30.0,
        "base_tilt": 1.5,
        "match_tolerance_s": 5.0,
        "reference_modulus": 5,
        "output_dir": "",
        "strict_overlap": True,
        "write_report_file": False,
        "log_file": "",
        "log_level": "DEBUG",
    }


@pytest.fixture
def config_file(tmp_dir, sample_config_dict) -> Path:
    """在临时目录创建配置文件"""
    cfg_path = tmp_dir / "config.json"
    cfg_path.write_text(json.dumps(sample_config_dict, indent=2), encoding="utf-8")
    return cfg_path
