"""Randomized local search with best-of-N random walks.

Each round runs ``num_walks`` walks of ``walk_length`` from the current
state and jumps to the endpoint with the lowest heuristic value. A counter
of rounds without strict improvement of the best known value triggers a
restart from the initial state.
"""

import enum
import logging
from typing import Optional

import numpy as np

from ..config import PlannerConfig
from ..core.plan import Plan
from ..core.problem import Problem
from .rollout import WalkResult, random_walk

logger = logging.getLogger(__name__)


class RoundOutcome(enum.Enum):
    GOAL = "goal"
    IMPROVED = "improved"
    NOT_IMPROVED = "not_improved"
    NO_CANDIDATE = "no_candidate"


def best_of_walks(
    problem: Problem,
    state,
    rng: np.random.Generator,
    num_walks: int,
    walk_length: int
) -> Optional[WalkResult]:
    """Best of ``num_walks`` random walks from ``state``.

    A walk reaching the goal is returned at once. Otherwise the non-dead-end
    walk with the strictly lowest endpoint heuristic wins (first found on
    ties). Returns None when every walk hit a dead end.
    """
    best = None
    best_h = None

    for _ in range(num_walks):
        walk = random_walk(state, problem.actions, problem.goal, walk_length, rng)
        if walk.reached_goal:
            return walk
        if walk.dead_end:
            continue
        h = problem.h(walk.end_state)
        if best is None or h < best_h:
            best = walk
            best_h = h

    return best


class RandomWalkSearch:
    """Local-search state kept across the rounds of one solve.

    Attributes:
        state: Current state
        plan: Actions committed since the last restart
        h_min: Best heuristic value seen since the last restart
        counter: Rounds without strict improvement of ``h_min``
        restarts: Number of restarts so far
        rounds: Number of rounds so far
    """

    def __init__(self, problem: Problem, config: Optional[PlannerConfig] = None):
        self.problem = problem
        self.config = config or PlannerConfig()
        self.restarts = 0
        self.rounds = 0
        self.plan = Plan()
        self.reset()

    def reset(self) -> None:
        """Restart from the initial state with an empty plan."""
        self.state = self.problem.initial_state
        self.plan.clear()
        self.h_min = self.problem.h(self.state)
        self.counter = 0

    def restart(self) -> None:
        self.restarts += 1
        logger.debug("Restart #%d after %d rounds", self.restarts, self.rounds)
        self.reset()

    @property
    def needs_restart(self) -> bool:
        return self.counter > self.config.max_steps_no_improve

    def is_goal(self) -> bool:
        return self.problem.is_goal(self.state)

    def step(self, rng: np.random.Generator) -> RoundOutcome:
        """Run one round (restart check, walks, jump, counter update)."""
        self.rounds += 1

        if self.needs_restart:
            self.restart()

        walk = best_of_walks(self.problem, self.state, rng,
                             self.config.num_walks, self.config.walk_length)
        if walk is None:
            self.restart()
            return RoundOutcome.NO_CANDIDATE

        self.plan.extend(walk.actions)
        self.state = walk.end_state
        if walk.reached_goal:
            return RoundOutcome.GOAL

        hs = self.problem.h(self.state)
        if hs < self.h_min:
            self.h_min = hs
            self.counter = 0
            return RoundOutcome.IMPROVED

        self.counter += 1
        return RoundOutcome.NOT_IMPROVED
