#!/usr/bin/env python3
"""Run one planner on one grounded problem.

Usage:
    python experiments/run_planner.py mcts problems/briefcase/p01.yaml --config configs/mcts.yaml
    python experiments/run_planner.py rw problems/briefcase/p01.yaml -H h_add --print-plan
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mcts_planning.cli import main

if __name__ == "__main__":
    sys.exit(main())
