"""Benchmarking planners against each other.

Runs planners as separate processes, reads their RESULT records,
writes CSV rows and tests whether the differences are significant.
"""

from .benchmark import (
    BenchmarkRow,
    ProblemInstance,
    RunResult,
    ParsedResult,
    parse_result_lines,
    collect_instances,
    planner_command,
    run_planner,
    planner_env,
    run_benchmark,
    to_row,
    write_csv,
    read_csv,
)
from .statistical_tests import (
    welch_ttest,
    mann_whitney_u_test,
    compute_effect_size,
    success_rate,
    compare_planners,
)

__all__ = [
    "BenchmarkRow",
    "ProblemInstance",
    "RunResult",
    "ParsedResult",
    "parse_result_lines",
    "collect_instances",
    "planner_command",
    "run_planner",
    "planner_env",
    "run_benchmark",
    "to_row",
    "write_csv",
    "read_csv",
    "welch_ttest",
    "mann_whitney_u_test",
    "compute_effect_size",
    "success_rate",
    "compare_planners",
]
