"""Backpropagation for planning MCTS."""

from .tree import MCTSTree


def backpropagate(tree: MCTSTree, handle: int, reward: float) -> None:
    """Backpropagate reward from node to root.

    Updates visits and wins for the node and all its ancestors.

    Args:
        tree: Search tree
        handle: Expanded (or selected) node
        reward: 1 if the rollout reached the goal, else 0
    """
    current = handle

    while current is not None:
        node = tree[current]
        node.visits += 1
        node.wins += reward
        current = node.parent
