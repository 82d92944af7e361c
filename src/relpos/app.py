"""relpos 命令行入口

用法:
    relpos <path 1> <path 2> [rotation base] [inclination base]

输入文件每行三列: 赤经 赤纬 FITS文件名 (赤经/赤纬量纲: 度).
相机标志为 5 的倍数的文件视为 FFoV, 另一个为 JFoV.
"""

import argparse
import sys
from typing import List, Optional

from relpos import __version__
from relpos.core.config import load_config
from relpos.core.errors import RelposError
from relpos.logger_config import close_logging, get_logger, setup_logging
from relpos.services.offset_service import OffsetPipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="relpos",
        description="计算 GWAC 系统中 JFoV 相对 FFoV 的位置 (旋转角/倾斜角)",
    )
    parser.add_argument("path1", help="指向数据文件 1")
    parser.add_argument("path2", help="指向数据文件 2")
    parser.add_argument("rotation_base", nargs="?", type=float, default=None,
                        help="旋转基准 (度), 缺省为 0")
    parser.add_argument("tilt_base", nargs="?", type=float, default=None,
                        help="倾斜基准 (度), 缺省为 0")
    parser.add_argument("--config", default=None, help="JSON 配置文件")
    parser.add_argument("--output-dir", default=None, help="结果文件目录")
    parser.add_argument("--tolerance", type=float, default=None,
                        help="时间匹配容差 (秒), 缺省为 10")
    parser.add_argument("--strict-overlap", action="store_true",
                        help="要求 JFoV 与 FFoV 时间区间有交集")
    parser.add_argument("--no-file", action="store_true", help="不保存结果文件")
    parser.add_argument("--log-file", default=None, help="日志文件路径")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """运行 relpos, 返回退出码"""
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.rotation_base is not None:
        config.base_rotation = args.rotation_base
    if args.tilt_base is not None:
        config.base_tilt = args.tilt_base
    if args.output_dir is not None:
        config.output_dir = args.output_dir
    if args.tolerance is not None:
        config.match_tolerance_s = args.tolerance
    if args.strict_overlap:
        config.strict_overlap = True
    if args.no_file:
        config.write_report_file = False

    setup_logging(
        log_file=args.log_file or config.log_file or None,
        log_level=args.log_level or config.log_level,
    )
    logger = get_logger(__name__)

    try:
        pipeline = OffsetPipeline(config=config)
        pipeline.run([args.path1, args.path2])
    except RelposError as e:
        logger.error("%s", e)
        return e.exit_code
    finally:
        close_logging()

    return 0


if __name__ == "__main__":
    sys.exit(main())
