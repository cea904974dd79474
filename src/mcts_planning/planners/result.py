"""Planner result and the three-line result record.

The record is parsed line by line by the benchmark harness and must stay
byte-exact:

    RESULT: SUCCESS | RESULT: FAILURE
    RESULT: PLAN_LENGTH=<int>
    RESULT: RUNTIME_MS=<int>
"""

import enum
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TextIO

from ..core.plan import Plan


class FailureReason(enum.Enum):
    TIMEOUT = "timeout"
    NO_APPLICABLE_ACTION = "no_applicable_action"
    MAX_PLAN_LENGTH = "max_plan_length"


@dataclass
class PlanResult:
    """Outcome of one solve.

    Attributes:
        success: Goal reached
        plan: The plan on success, None otherwise
        runtime_ms: Elapsed wall-clock time in milliseconds
        failure: Why the search failed (None on success)
        stats: Planner-specific counters (decisions, rounds, restarts...)
    """
    success: bool
    plan: Optional[Plan]
    runtime_ms: int
    failure: Optional[FailureReason] = None
    stats: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def solved(cls, plan: Plan, runtime_ms: int, **stats) -> "PlanResult":
        return cls(success=True, plan=plan, runtime_ms=runtime_ms, stats=stats)

    @classmethod
    def failed(cls, reason: FailureReason, runtime_ms: int, **stats) -> "PlanResult":
        return cls(success=False, plan=None, runtime_ms=runtime_ms, failure=reason, stats=stats)

    @property
    def plan_length(self) -> int:
        if not self.success or self.plan is None:
            return 0
        return len(self.plan)

    def result_lines(self) -> List[str]:
        return [
            "RESULT: SUCCESS" if self.success else "RESULT: FAILURE",
            f"RESULT: PLAN_LENGTH={self.plan_length}",
            f"RESULT: RUNTIME_MS={max(0, int(self.runtime_ms))}",
        ]

    def emit(self, stream: Optional[TextIO] = None) -> None:
        """Write the result record, one line each, and flush."""
        out = stream if stream is not None else sys.stdout
        for line in self.result_lines():
            out.write(line + "\n")
        out.flush()
