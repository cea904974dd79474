"""Planning contract shared by the search strategies.

Strategies do not inherit from a common base: each planner owns its engine
and satisfies the ``Planner`` protocol structurally.
"""

import time
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Protocol, Union

from ..core.loader import load_problem, problem_from_dict
from ..core.plan import Plan
from ..core.problem import Problem

RawProblem = Union[Problem, Dict[str, Any], str, Path]


class Planner(Protocol):
    """What a search strategy offers to its callers."""

    def is_supported(self, problem: Problem) -> bool:
        ...

    def instantiate(self, raw: RawProblem) -> Problem:
        ...

    def solve(self, problem: Problem) -> Optional[Plan]:
        ...


def instantiate_problem(raw: RawProblem, heuristic_kind: str) -> Problem:
    """Turn a problem, its dict form or a YAML path into a Problem.

    The result is bound to the named heuristic.
    """
    if isinstance(raw, Problem):
        problem = raw
    elif isinstance(raw, dict):
        problem = problem_from_dict(raw)
    else:
        problem = load_problem(raw)
    return problem.with_heuristic(heuristic_kind)


class Stopwatch:
    """Elapsed-time tracking with a cooperative timeout check."""

    def __init__(self, timeout_ms: Optional[int], clock: Callable[[], float] = time.monotonic):
        self.timeout_ms = timeout_ms
        self.clock = clock
        self.start = clock()

    def elapsed_ms(self) -> float:
        return (self.clock() - self.start) * 1000.0

    def runtime_ms(self) -> int:
        return int(self.elapsed_ms())

    def timed_out(self) -> bool:
        """True once elapsed time strictly exceeds the timeout."""
        if self.timeout_ms is None:
            return False
        return self.elapsed_ms() > self.timeout_ms
