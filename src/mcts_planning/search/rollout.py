"""Bounded random walks.

Used both as the MCTS rollout policy and as the move generator of the
randomized local search.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from ..core.action import Action
from ..core.state import Condition, State
from ..core.transition import applicable, apply_action, is_goal


@dataclass(frozen=True)
class WalkResult:
    """Outcome of one random walk.

    Attributes:
        end_state: State where the walk stopped
        actions: Actions taken, in order
        dead_end: Walk stopped on a state with no applicable action
        reached_goal: ``end_state`` satisfies the goal
    """
    end_state: State
    actions: Tuple[Action, ...]
    dead_end: bool
    reached_goal: bool

    def __len__(self) -> int:
        return len(self.actions)


def random_walk(
    start: State,
    actions: Sequence[Action],
    goal: Condition,
    max_len: int,
    rng: np.random.Generator
) -> WalkResult:
    """Walk at most ``max_len`` uniformly random applicable actions from ``start``.

    The goal is checked before each step and once more on the final state,
    so a goal reached on the last permitted step is still reported.

    Args:
        start: Start state
        actions: Candidate ground actions
        goal: Goal condition
        max_len: Step budget
        rng: Random source, drawn from once per step

    Returns:
        WalkResult
    """
    current = start
    taken = []

    for _ in range(max_len):
        if is_goal(current, goal):
            return WalkResult(current, tuple(taken), dead_end=False, reached_goal=True)

        candidates = applicable(current, actions)
        if not candidates:
            return WalkResult(current, tuple(taken), dead_end=True, reached_goal=False)

        chosen = candidates[int(rng.integers(len(candidates)))]
        current = apply_action(current, chosen)
        taken.append(chosen)

    return WalkResult(current, tuple(taken), dead_end=False, reached_goal=is_goal(current, goal))
