#!/usr/bin/env python3
"""Write grounded benchmark problems as YAML.

Usage:
    python scripts/generate_problems.py --output_dir problems --num_problems 5 --seed 42

Layout: <output_dir>/<domain>/generated/pNN.yaml
"""

import argparse
import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mcts_planning.core.loader import dump_problem
from mcts_planning.domains import blocksworld_problem, briefcase_problem, gripper_problem
from mcts_planning.utils.seed import set_seed


def random_stacks(blocks, rng: random.Random):
    """Random partition of ``blocks`` into stacks."""
    order = list(blocks)
    rng.shuffle(order)
    stacks = []
    for b in order:
        if stacks and rng.random() < 0.5:
            stacks[rng.randrange(len(stacks))].append(b)
        else:
            stacks.append([b])
    return stacks


def main():
    parser = argparse.ArgumentParser(description="Generate grounded planning problems")
    parser.add_argument("--output_dir", type=str, default="problems", help="Output directory")
    parser.add_argument("--num_problems", type=int, default=5, help="Problems per domain")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args()

    set_seed(args.seed)
    rng = random.Random(args.seed)
    out = Path(args.output_dir)

    for i in range(args.num_problems):
        n = 3 + i
        blocks = [chr(ord("a") + k) for k in range(n)]
        problem = blocksworld_problem(random_stacks(blocks, rng), random_stacks(blocks, rng),
                                      name=f"blocks-p{i + 1:02d}")
        dump_problem(problem, out / "blocks" / "generated" / f"p{i + 1:02d}.yaml")

        problem = gripper_problem(i + 1, name=f"gripper-p{i + 1:02d}")
        dump_problem(problem, out / "gripper" / "generated" / f"p{i + 1:02d}.yaml")

        locations = [f"loc{k}" for k in range(2 + i // 2)]
        objects = {f"obj{k}": rng.choice(locations) for k in range(1 + i)}
        goal = {o: rng.choice(locations) for o in objects}
        problem = briefcase_problem(locations, objects, goal, briefcase_at=locations[0],
                                    name=f"briefcase-p{i + 1:02d}")
        dump_problem(problem, out / "briefcase" / "generated" / f"p{i + 1:02d}.yaml")

    print(f"Wrote {3 * args.num_problems} problems to {out}")


if __name__ == "__main__":
    main()
