"""MCTS and random-walk planners for grounded STRIPS/ADL problems.

Core loop:
1. Driver: hold the committed state, check the timeout
2. Search: MCTS commits one action, local search commits a walk
3. Transition: apply the committed action(s) to the state
4. Repeat until the goal, a failure or the timeout

Components:
- core/ - states, actions, transitions, heuristics, problem files
- search/ - rollouts, MCTS tree (node/tree/ucb/backprop), local search
- planners/ - timeout-aware drivers and the RESULT record
- comparison/ - benchmark runner and statistics
"""

__version__ = "0.1.0"

from .config import PlannerConfig, ConfigError
from .core import Action, Condition, Effect, ConditionalEffect, State, Problem, Plan
from .planners import MCTSPlanner, RandomWalkPlanner, PlanResult, create_planner

__all__ = [
    "PlannerConfig",
    "ConfigError",
    "Action",
    "Condition",
    "Effect",
    "ConditionalEffect",
    "State",
    "Problem",
    "Plan",
    "MCTSPlanner",
    "RandomWalkPlanner",
    "PlanResult",
    "create_planner",
    "solve_problem",
]


def solve_problem(problem_path: str, planner: str = "mcts", **kwargs):
    """High-level API: load a YAML problem and solve it.

    Args:
        problem_path: Path to the grounded problem file
        planner: ``mcts`` or ``rw``
        **kwargs: PlannerConfig options

    Returns:
        PlanResult (the RESULT record is not printed)
    """
    config = PlannerConfig.from_dict(kwargs)
    p = create_planner(planner, config=config)
    problem = p.instantiate(problem_path)
    return p.search(problem)
