"""Planning problem model: states, actions, transitions, heuristics."""

from .state import State, Condition, Effect, ConditionalEffect
from .action import Action
from .transition import applicable, apply_action, is_goal
from .heuristics import (
    DEAD_END_VALUE,
    GoalCountHeuristic,
    RelaxedHeuristic,
    make_heuristic,
)
from .problem import Problem
from .plan import Plan, validate_plan, replay
from .loader import (
    ProblemFormatError,
    problem_from_dict,
    problem_to_dict,
    load_problem,
    dump_problem,
)

__all__ = [
    "State",
    "Condition",
    "Effect",
    "ConditionalEffect",
    "Action",
    "applicable",
    "apply_action",
    "is_goal",
    "DEAD_END_VALUE",
    "GoalCountHeuristic",
    "RelaxedHeuristic",
    "make_heuristic",
    "Problem",
    "Plan",
    "validate_plan",
    "replay",
    "ProblemFormatError",
    "problem_from_dict",
    "problem_to_dict",
    "load_problem",
    "dump_problem",
]
