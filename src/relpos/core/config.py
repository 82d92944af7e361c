"""配置管理模块

职责:
- 加载/保存运行配置 (JSON)
- 提供默认值
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from relpos.core.matcher import DEFAULT_TOLERANCE_S
from relpos.core.roles import DEFAULT_REFERENCE_MODULUS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "relpos_config.json"


@dataclass
class RunConfig:
    """运行配置"""
    base_rotation: float = 0.0          # 旋转基准 (度)
    base_tilt: float = 0.0              # 倾斜基准 (度)
    match_tolerance_s: float = DEFAULT_TOLERANCE_S  # 时间匹配容差 (秒)
    reference_modulus: int = DEFAULT_REFERENCE_MODULUS  # 相机编号整除此数为 FFoV
    output_dir: str = ""                # 结果文件目录, 空则为当前目录
    strict_overlap: bool = False        # 要求 JFoV/FFoV 时间区间有交集
    write_report_file: bool = True      # 是否保存结果文件
    log_file: str = ""                  # 日志文件, 空则使用默认路径
    log_level: str = "INFO"


def get_default_config_path() -> Path:
    """获取默认配置文件路径 (当前工作目录)"""
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def load_config(path: Optional[Union[str, Path]] = None) -> RunConfig:
    """加载配置文件

    文件不存在或无法解析时返回默认配置.

    Args:
        path: 配置文件路径 (None=默认位置)

    Returns:
        RunConfig 实例
    """
    if path is None:
        path = get_default_config_path()
    path = Path(path)

    config = RunConfig()

    if not path.exists():
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("配置文件<%s>无法读取, 使用默认配置: %s", path, e)
        return config

    config.base_rotation = float(data.get("base_rotation", config.base_rotation))
    config.base_tilt = float(data.get("base_tilt", config.base_tilt))
    config.match_tolerance_s = float(data.get("match_tolerance_s", config.match_tolerance_s))
    config.reference_modulus = int(data.get("reference_modulus", config.reference_modulus))
    config.output_dir = data.get("output_dir", config.output_dir)
    config.strict_overlap = bool(data.get("strict_overlap", config.strict_overlap))
    config.write_report_file = bool(data.get("write_report_file", config.write_report_file))
    config.log_file = data.get("log_file", config.log_file)
    config.log_level = data.get("log_level", config.log_level)

    return config


def save_config(
    config: RunConfig,
    path: Optional[Union[str, Path]] = None,
) -> Path:
    """保存配置到 JSON 文件

    Returns:
        保存的文件路径
    """
    if path is None:
        path = get_default_config_path()
    path = Path(path)

    data = {
        "base_rotation": config.base_rotation,
        "base_tilt": config.base_tilt,
        "match_tolerance_s": config.match_tolerance_s,
        "reference_modulus": config.reference_modulus,
        "output_dir": config.output_dir,
        "strict_overlap": config.strict_overlap,
        "write_report_file": config.write_report_file,
        "log_file": config.log_file,
        "log_level": config.log_level,
    }

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    return path
