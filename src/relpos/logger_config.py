"""统一日志配置模块

提供全局日志配置，确保整个程序使用统一的日志系统。
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    log_file: Optional[Union[str, Path]] = None,
    log_level: Union[int, str] = logging.INFO,
    console_output: bool = True
) -> logging.Logger:
    """配置全局日志系统

    Args:
        log_file: 日志文件路径，如果为None则使用当前目录下的 logs/relpos.log
        log_level: 日志级别（默认为INFO），可为整数或级别名称
        console_output: 是否输出到控制台（默认为True）

    Returns:
        配置好的根logger

    Example:
        >>> logger = setup_logging()
        >>> logger.info("这是一条日志消息")
    """
    if isinstance(log_level, str):
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"未知的日志级别: {log_level}")
        log_level = level

    # 确定日志文件路径
    if log_file is None:
        log_file = Path.cwd() / 'logs' / 'relpos.log'
    log_file = Path(log_file).resolve()

    # 配置根logger
    logger = logging.getLogger()
    logger.setLevel(log_level)

    # 清除已有的handlers（避免重复添加）
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 文件handler
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        # 无法创建日志文件时仍保证程序能运行
        print(f"警告：无法创建日志文件 {log_file}: {e}", file=sys.stderr)

    # 控制台handler
    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    logger.debug(f"日志系统已初始化，日志文件: {log_file}")

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """获取logger实例

    Args:
        name: logger名称，通常为__name__

    Returns:
        Logger实例
    """
    return logging.getLogger(name)


def close_logging():
    """关闭日志系统（清理root logger的所有handlers）

    通常在程序退出时调用，释放日志文件句柄。
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.flush()
        handler.close()
        root_logger.removeHandler(handler)
