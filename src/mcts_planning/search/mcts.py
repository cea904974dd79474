"""Main MCTS search for planning.

One call commits one action for the current state:

def iterate(tree, state):
    node = root
    while fully_expanded(node) and node.children:
        node = ucb_select(node); state = apply(state, node.action)
    if node.untried:
        node = expand(node, random untried action)
    reward = 1 if rollout(state) reaches goal else 0
    backprop(node, reward)

The tree is rebuilt from scratch for every decision.
"""

import logging
from typing import Optional

import numpy as np

from ..config import PlannerConfig
from ..core.action import Action
from ..core.problem import Problem
from ..core.state import State
from ..core.transition import applicable, apply_action
from .backprop import backpropagate
from .rollout import random_walk
from .tree import MCTSTree
from .ucb import select_most_visited, ucb_select_child

logger = logging.getLogger(__name__)


def iterate(
    tree: MCTSTree,
    root_state: State,
    problem: Problem,
    rng: np.random.Generator,
    config: PlannerConfig
) -> float:
    """Single MCTS iteration: selection, expansion, rollout, backpropagation.

    Returns:
        Reward of the rollout (1.0 goal reached, 0.0 otherwise)
    """
    state = root_state
    handle = 0

    # 1. Selection
    node = tree[handle]
    while node.is_fully_expanded() and node.has_children():
        handle = ucb_select_child(tree, handle, config.exploration_constant)
        node = tree[handle]
        state = apply_action(state, node.action)

    # 2. Expansion
    if node.untried:
        idx = int(rng.integers(len(node.untried)))
        action = node.untried.pop(idx)
        state = apply_action(state, action)
        handle = tree.add_child(handle, action, applicable(state, problem.actions))

    # 3. Rollout
    walk = random_walk(state, problem.actions, problem.goal, config.rollout_depth, rng)
    reward = 1.0 if walk.reached_goal else 0.0

    # 4. Backpropagate
    backpropagate(tree, handle, reward)

    return reward


class MCTSEngine:
    """Per-decision Monte-Carlo tree search."""

    def __init__(self, config: Optional[PlannerConfig] = None):
        self.config = config or PlannerConfig()
        # Statistics of the last decision
        self.last_stats: dict = {}

    def build_tree(
        self,
        problem: Problem,
        state: State,
        rng: np.random.Generator
    ) -> Optional[MCTSTree]:
        """Run ``iterations`` MCTS iterations from ``state``.

        Returns:
            The search tree, or None if ``state`` has no applicable action
        """
        root_actions = applicable(state, problem.actions)
        if not root_actions:
            return None

        tree = MCTSTree(root_actions)
        num_rewarded = 0
        for _ in range(self.config.iterations):
            num_rewarded += iterate(tree, state, problem, rng, self.config) > 0.0

        if logger.isEnabledFor(logging.DEBUG):
            self.last_stats = tree.get_statistics()
        else:
            self.last_stats = {"total_nodes": len(tree), "root_visits": tree.root.visits}
        self.last_stats["rewarded_rollouts"] = int(num_rewarded)
        return tree

    def choose_action(
        self,
        problem: Problem,
        state: State,
        rng: np.random.Generator
    ) -> Optional[Action]:
        """Commit the most visited root action, or None if there is none."""
        tree = self.build_tree(problem, state, rng)
        if tree is None:
            self.last_stats = {}
            return None

        best = select_most_visited(tree)
        logger.debug("MCTS decision: %s", self.last_stats)
        return None if best is None else tree[best].action
