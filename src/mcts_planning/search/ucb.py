"""UCB selection for planning MCTS."""

import math
from typing import Optional

from .node import MCTSNode
from .tree import MCTSTree


def ucb_score(
    child: MCTSNode,
    parent_visits: int,
    c: float = 1.4
) -> float:
    """Compute UCB1 score.

    UCB = W / N + c * sqrt(ln(max(1, N_parent)) / N)

    Args:
        child: Child node, must have been visited
        parent_visits: Visit count of the parent
        c: Exploration constant

    Returns:
        UCB score
    """
    exploitation = child.wins / child.visits
    exploration = c * math.sqrt(math.log(max(1, parent_visits)) / child.visits)
    return exploitation + exploration


def ucb_select_child(
    tree: MCTSTree,
    handle: int,
    c: float = 1.4
) -> Optional[int]:
    """Pick the child of ``handle`` to descend into.

    An unvisited child is returned immediately. Otherwise the highest UCB1
    score wins; on equal scores the first child keeps its place.

    Returns:
        Child handle, or None if the node has no children
    """
    parent = tree[handle]
    best = None
    best_score = float('-inf')

    for child_handle in parent.children:
        child = tree[child_handle]
        if child.visits == 0:
            return child_handle

        score = ucb_score(child, parent.visits, c)
        if score > best_score:
            best_score = score
            best = child_handle

    return best


def select_most_visited(tree: MCTSTree, handle: int = 0) -> Optional[int]:
    """Most visited child (for final selection); first found wins ties."""
    best = None
    best_visits = -1
    for child_handle in tree[handle].children:
        visits = tree[child_handle].visits
        if visits > best_visits:
            best_visits = visits
            best = child_handle
    return best
