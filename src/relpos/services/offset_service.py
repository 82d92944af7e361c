"""相对指向计算服务

职责:
- 编排完整的处理流程:
  解析文件 → 判定视场 → 时间检查 → 时间匹配 → 相对位置 → 统计输出
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Union

from relpos.core.aggregator import build_rows, summarize
from relpos.core.config import RunConfig
from relpos.core.errors import OutputUnwritable, UsageError
from relpos.core.models import ReportRow, RunContext, RunStatistics
from relpos.core.offset import compute_offsets
from relpos.core.report import output_filename, write_report, write_report_file
from relpos.core.roles import RolePolicy, modulus_role_policy
from relpos.core.validation import check_run_inputs
from relpos.data.file_manager import assign_roles, load_observation_file

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """单次运行结果"""
    context: RunContext
    rows: List[ReportRow] = field(default_factory=list)
    statistics: Optional[RunStatistics] = None
    output_path: Optional[Path] = None
    error: str = ""

    @property
    def has_matches(self) -> bool:
        return bool(self.rows)


class OffsetPipeline:
    """JFoV 相对 FFoV 位置计算管线

    流程:
    1. 解析两个输入文件
    2. 判定 FFoV / JFoV
    3. 检查时间有效性
    4. 时间匹配并计算旋转角/倾斜角
    5. 输出结果表与统计结果, 保存结果文件
    """

    def __init__(
        self,
        config: Optional[RunConfig] = None,
        role_policy: Optional[RolePolicy] = None,
        stream: Optional[TextIO] = None,
    ):
        self.config = config or RunConfig()
        self.role_policy = role_policy or modulus_role_policy(self.config.reference_modulus)
        self.stream = stream

    def build_context(self, paths: Sequence[Union[str, Path]]) -> RunContext:
        """解析输入文件并建立运行上下文

        Raises:
            UsageError, SourceUnreadable, RoleConflict
        """
        if len(paths) != 2:
            raise UsageError(f"需要两个输入文件, 实际为 {len(paths)} 个")

        sets = [load_observation_file(p) for p in paths]
        reference, follower = assign_roles(sets, self.role_policy)
        return RunContext(
            reference=reference,
            follower=follower,
            base_rotation=self.config.base_rotation,
            base_tilt=self.config.base_tilt,
            tolerance=self.config.match_tolerance_s,
        )

    def run(self, paths: Sequence[Union[str, Path]]) -> PipelineResult:
        """执行完整流程

        致命错误在匹配开始前抛出. 无匹配数据和结果文件无法创建不视为失败.
        """
        context = self.build_context(paths)
        return self.process(context)

    def process(self, context: RunContext) -> PipelineResult:
        """对已建立的运行上下文执行检查、匹配与输出"""
        check_run_inputs(context, strict_overlap=self.config.strict_overlap)

        pairs = compute_offsets(context)
        result = PipelineResult(context=context)
        if not pairs:
            logger.info("没有满足条件的匹配数据")
            return result

        result.rows = build_rows(pairs, context.base_rotation, context.base_tilt)
        result.statistics = summarize(pairs)

        stream = self.stream if self.stream is not None else sys.stdout
        write_report(result.rows, stream, result.statistics)

        if self.config.write_report_file:
            result.output_path = self._save(result.rows, context)
            if result.output_path is None:
                result.error = "结果文件无法创建"

        return result

    def _save(self, rows: List[ReportRow], context: RunContext) -> Optional[Path]:
        out_dir = Path(self.config.output_dir) if self.config.output_dir else Path.cwd()
        path = out_dir / output_filename(context.follower)
        try:
            saved = write_report_file(rows, path)
        except OutputUnwritable as e:
            logger.error("%s", e)
            return None
        logger.info("结果已保存为文件<%s>", saved)
        return saved
