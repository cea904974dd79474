"""Random-walk (randomized local search) planner driver.

The only way out of the round loop besides the goal is the timeout: a run
of unlucky restarts is bounded by wall-clock time alone.
"""

import logging
import time
from typing import Callable, Optional, TextIO

from ..config import PlannerConfig
from ..core.plan import Plan
from ..core.problem import Problem
from ..search.local_search import RandomWalkSearch, RoundOutcome
from ..utils.seed import make_rng
from .base import RawProblem, Stopwatch, instantiate_problem
from .result import FailureReason, PlanResult

logger = logging.getLogger(__name__)


class RandomWalkPlanner:
    """Best-of-N random walks guided by a heuristic, with restarts."""

    name = "RW"

    def __init__(
        self,
        config: Optional[PlannerConfig] = None,
        stream: Optional[TextIO] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        self.config = config or PlannerConfig()
        self.stream = stream
        self.clock = clock
        self.last_result: Optional[PlanResult] = None

    def is_supported(self, problem: Problem) -> bool:
        return True

    def instantiate(self, raw: RawProblem) -> Problem:
        return instantiate_problem(raw, self.config.heuristic_kind)

    def search(self, problem: Problem) -> PlanResult:
        """Plan without printing the result record."""
        cfg = self.config
        watch = Stopwatch(cfg.timeout_ms, self.clock)

        logger.info("RWPlanner: walkLength=%d numWalks=%d maxStepsNoImprove=%d",
                    cfg.walk_length, cfg.num_walks, cfg.max_steps_no_improve)
        logger.info("Timeout(ms)=%s actions=%d", cfg.timeout_ms, len(problem.actions))

        if problem.is_goal(problem.initial_state):
            logger.info("Initial state satisfies the goal")
            return PlanResult.solved(Plan(), watch.runtime_ms(), rounds=0, restarts=0)

        rng = make_rng(cfg.seed)
        search = RandomWalkSearch(problem, cfg)

        while True:
            if watch.timed_out():
                logger.info("Timeout reached after %d rounds (%d restarts)",
                            search.rounds, search.restarts)
                return PlanResult.failed(FailureReason.TIMEOUT, watch.runtime_ms(),
                                         rounds=search.rounds, restarts=search.restarts)

            outcome = search.step(rng)
            if outcome is RoundOutcome.GOAL:
                logger.info("Goal reached! plan length=%d rounds=%d restarts=%d",
                            len(search.plan), search.rounds, search.restarts)
                return PlanResult.solved(search.plan.copy(), watch.runtime_ms(),
                                         rounds=search.rounds, restarts=search.restarts)

    def solve(self, problem: Problem) -> Optional[Plan]:
        """Plan, print the result record and return the plan (None on failure)."""
        result = self.search(problem)
        result.emit(self.stream)
        self.last_result = result
        return result.plan
