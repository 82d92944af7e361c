"""错误类型

运行中可能出现的致命/非致命错误。致命错误在匹配开始前抛出,
由命令行入口转换为退出码。
"""

from __future__ import annotations


class RelposError(Exception):
    """relpos 错误基类"""
    exit_code = 1


class UsageError(RelposError):
    """输入文件或参数不足"""
    exit_code = 2


class SourceUnreadable(RelposError):
    """输入文件无法打开, 或未解析出任何数据点"""
    exit_code = 3

    def __init__(self, path, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"无法解析文件<{path}>"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class RoleIncomplete(RelposError):
    """FFoV 或 JFoV 数据不可用"""
    exit_code = 4


class RoleConflict(RelposError):
    """两个输入文件被判定为同一视场"""
    exit_code = 4


class TemporalInconsistency(RelposError):
    """时间范围不匹配 (跨日期或两组数据日期不一致)"""
    exit_code = 5


class OutputUnwritable(RelposError):
    """结果文件无法创建. 非致命: 控制台输出保持有效"""

    def __init__(self, path, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"无法创建结果文件<{path}>"
        if reason:
            message += f": {reason}"
        super().__init__(message)
