"""Command line planner.

Usage:
    python -m mcts_planning.cli mcts problems/blocks/p01.yaml -I 300 -R 40 -P 500 -C 1.4
    python -m mcts_planning.cli rw problems/gripper/p02.yaml -L 10 -N 100 -S 7 -H h_add

Prints the three RESULT lines on stdout. Logs go to stderr.
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from .config import ConfigError, HEURISTIC_KINDS, PlannerConfig
from .core.loader import ProblemFormatError
from .planners import PLANNERS, create_planner
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcts_planning",
        description="MCTS and random-walk planners for grounded STRIPS/ADL problems"
    )
    parser.add_argument("planner", choices=sorted(PLANNERS), help="Search strategy")
    parser.add_argument("problem", type=str, help="Grounded problem (YAML)")
    parser.add_argument("--config", type=str, default=None, help="Planner config file (YAML)")

    mcts = parser.add_argument_group("MCTS")
    mcts.add_argument("-I", "--iterations", type=int, default=None,
                      help="MCTS iterations per decision")
    mcts.add_argument("-R", "--rollout-depth", type=int, default=None,
                      help="Maximum random rollout depth")
    mcts.add_argument("-P", "--max-plan-length", type=int, default=None,
                      help="Maximum plan length")
    mcts.add_argument("-C", "--exploration", type=float, default=None,
                      help="UCB exploration constant")

    rw = parser.add_argument_group("Random walk")
    rw.add_argument("-L", "--walk-length", type=int, default=None, help="Length of each walk")
    rw.add_argument("-N", "--num-walks", type=int, default=None, help="Walks per round")
    rw.add_argument("-S", "--max-steps-no-improve", type=int, default=None,
                    help="Rounds without improvement before a restart")
    rw.add_argument("-H", "--heuristic", choices=HEURISTIC_KINDS, default=None,
                    help="Heuristic guiding the walks")

    parser.add_argument("-t", "--timeout-ms", type=int, default=None,
                        help="Planner timeout in milliseconds (0 disables it)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    parser.add_argument("--print-plan", action="store_true", help="Print the plan after the result")
    return parser


def load_config(args: argparse.Namespace) -> PlannerConfig:
    config = PlannerConfig.from_yaml(args.config) if args.config else PlannerConfig()
    config = config.merged(
        iterations=args.iterations,
        rollout_depth=args.rollout_depth,
        max_plan_length=args.max_plan_length,
        exploration_constant=args.exploration,
        walk_length=args.walk_length,
        num_walks=args.num_walks,
        max_steps_no_improve=args.max_steps_no_improve,
        heuristic_kind=args.heuristic,
        seed=args.seed,
    )
    if args.timeout_ms is not None:
        # merged() skips None, so 0 is mapped to "no timeout" here
        timeout_ms = args.timeout_ms if args.timeout_ms > 0 else None
        config = dataclasses.replace(config, timeout_ms=timeout_ms)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = load_config(args)
    except (ConfigError, FileNotFoundError) as e:
        logger.critical("%s", e)
        return 2

    planner = create_planner(args.planner, config=config)
    try:
        problem = planner.instantiate(args.problem)
    except (ProblemFormatError, FileNotFoundError) as e:
        logger.critical("%s", e)
        return 2

    plan = planner.solve(problem)
    if args.print_plan and plan is not None:
        print(plan)
    return 0


if __name__ == "__main__":
    sys.exit(main())
