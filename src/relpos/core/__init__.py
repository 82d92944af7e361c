"""Core layer - geometry, matching and statistics, no file I/O."""

from relpos.core.models import (
    FieldRole,
    MatchedPair,
    Observation,
    ObservationSet,
    ReportRow,
    RunContext,
    RunStatistics,
)
