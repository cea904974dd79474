"""Grounded planning problem."""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .action import Action
from .heuristics import Heuristic, GoalCountHeuristic, make_heuristic
from .state import Condition, State
from .transition import is_goal


@dataclass(frozen=True)
class Problem:
    """Initial state, goal, ground actions and a heuristic evaluator.

    Attributes:
        name: Problem name
        initial_state: State at time 0
        goal: Goal condition
        actions: All ground actions
        heuristic: ``h(state) -> int``; goal counting when None
        domain: Domain label, used in benchmark reports
    """
    name: str
    initial_state: State
    goal: Condition
    actions: Tuple[Action, ...]
    heuristic: Optional[Heuristic] = None
    domain: str = ""

    def __post_init__(self):
        if not isinstance(self.actions, tuple):
            object.__setattr__(self, "actions", tuple(self.actions))
        if self.heuristic is None:
            object.__setattr__(self, "heuristic", GoalCountHeuristic(self.goal))

    def h(self, state: State) -> int:
        return self.heuristic(state)

    def is_goal(self, state: State) -> bool:
        return is_goal(state, self.goal)

    def with_heuristic(self, kind: str) -> "Problem":
        """Copy of this problem evaluated with the named heuristic."""
        return replace(self, heuristic=make_heuristic(kind, self.actions, self.goal))

    def __repr__(self) -> str:
        return (f"Problem({self.name!r}, fluents={len(self.initial_state)}, "
                f"actions={len(self.actions)})")
