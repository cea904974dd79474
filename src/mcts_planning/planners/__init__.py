"""Planner drivers: timeout-aware loops around the search engines."""

from .base import Planner, Stopwatch, instantiate_problem
from .result import FailureReason, PlanResult
from .mcts_planner import MCTSPlanner
from .rw_planner import RandomWalkPlanner

PLANNERS = {
    "mcts": MCTSPlanner,
    "rw": RandomWalkPlanner,
}


def create_planner(kind: str, **kwargs) -> Planner:
    """Create a planner by short name (``mcts`` or ``rw``)."""
    try:
        cls = PLANNERS[kind.lower()]
    except KeyError:
        raise ValueError(f"Unknown planner {kind!r}, expected one of {', '.join(PLANNERS)}") from None
    return cls(**kwargs)


__all__ = [
    "Planner",
    "Stopwatch",
    "instantiate_problem",
    "FailureReason",
    "PlanResult",
    "MCTSPlanner",
    "RandomWalkPlanner",
    "PLANNERS",
    "create_planner",
]
