#!/usr/bin/env python3
"""Benchmark MCTS against the random-walk planner.

Every (problem, planner) pair runs in its own process with an external
wall-clock kill. Rows go to a CSV file; a significance test on runtimes
is logged at the end.

Usage:
    python experiments/run_benchmark.py --problems_root problems --output results/results.csv
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

import yaml

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mcts_planning.comparison.benchmark import (
    DEFAULT_DOMAINS,
    DEFAULT_PLANNER_PARAMS,
    PROCESS_TIMEOUT_MS,
    collect_instances,
    run_benchmark,
    write_csv,
)
from mcts_planning.comparison.statistical_tests import compare_planners
from mcts_planning.utils.logging import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Benchmark planners on grounded problems")
    parser.add_argument("--problems_root", type=str, default="problems", help="Problem tree root")
    parser.add_argument("--output", type=str, default="results/results.csv", help="CSV output")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML with 'domains', 'limit_per_suite' and 'planners' (label -> flags)")
    parser.add_argument("--timeout_ms", type=int, default=PROCESS_TIMEOUT_MS,
                        help="External kill per run")
    args = parser.parse_args()

    setup_logging()
    logger = logging.getLogger(__name__)

    config = {}
    if args.config:
        with open(args.config, 'r') as f:
            config = yaml.safe_load(f) or {}

    domains = config.get('domains', list(DEFAULT_DOMAINS))
    planners = config.get('planners', DEFAULT_PLANNER_PARAMS)
    instances = collect_instances(args.problems_root, domains,
                                  limit_per_suite=config.get('limit_per_suite', 10))

    logger.info("Found instances: %d", len(instances))
    logger.info("CSV -> %s", Path(args.output).absolute())
    logger.info("Time: %s", datetime.now())

    rows = run_benchmark(instances, planners, timeout_ms=args.timeout_ms, progress=True)

    write_csv(args.output, rows)
    logger.info("Saved CSV: %s", Path(args.output).absolute())

    labels = list(planners)
    if len(labels) >= 2:
        summary = compare_planners(rows, labels[0], labels[1])
        logger.info("%s vs %s runtime comparison: %s", labels[0], labels[1], summary)


if __name__ == "__main__":
    main()
