"""MCTS planner driver.

Continuous replanning: at every decision point a fresh tree is searched
from the committed state and exactly one action is committed.
"""

import logging
import time
from typing import Callable, Optional, TextIO

from ..config import PlannerConfig
from ..core.plan import Plan
from ..core.problem import Problem
from ..core.transition import apply_action
from ..search.mcts import MCTSEngine
from ..utils.seed import make_rng
from .base import RawProblem, Stopwatch, instantiate_problem
from .result import FailureReason, PlanResult

logger = logging.getLogger(__name__)


class MCTSPlanner:
    """Monte-Carlo tree search planner.

    Selection: UCB1. Expansion: one random untried action. Rollout: random
    walk. Backpropagation: visits += 1, wins += reward.
    """

    name = "MCTS"

    def __init__(
        self,
        config: Optional[PlannerConfig] = None,
        stream: Optional[TextIO] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        self.config = config or PlannerConfig()
        self.engine = MCTSEngine(self.config)
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
        rng = make_rng(cfg.seed)

        logger.info("MCTSPlanner: iterations=%d rolloutDepth=%d maxPlanLength=%d explorationC=%s",
                    cfg.iterations, cfg.rollout_depth, cfg.max_plan_length, cfg.exploration_constant)
        logger.info("Timeout(ms)=%s actions=%d", cfg.timeout_ms, len(problem.actions))

        state = problem.initial_state
        plan = Plan()
        t = 0

        while not problem.is_goal(state) and t < cfg.max_plan_length:
            if watch.timed_out():
                logger.info("Timeout reached after %d decisions", t)
                return PlanResult.failed(FailureReason.TIMEOUT, watch.runtime_ms(), decisions=t)

            action = self.engine.choose_action(problem, state, rng)
            if action is None:
                logger.info("No applicable action at step %d", t)
                return PlanResult.failed(FailureReason.NO_APPLICABLE_ACTION,
                                         watch.runtime_ms(), decisions=t)

            plan.add(t, action)
            t += 1
            state = apply_action(state, action)

        runtime = watch.runtime_ms()
        if problem.is_goal(state):
            logger.info("Goal reached! plan length=%d", t)
            return PlanResult.solved(plan, runtime, decisions=t)

        logger.info("Max plan length %d reached without goal", cfg.max_plan_length)
        return PlanResult.failed(FailureReason.MAX_PLAN_LENGTH, runtime, decisions=t)

    def solve(self, problem: Problem) -> Optional[Plan]:
        """Plan, print the result record and return the plan (None on failure)."""
        result = self.search(problem)
        result.emit(self.stream)
        self.last_result = result
        return result.plan
