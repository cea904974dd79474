"""Search engines: random walks, Monte-Carlo tree search, randomized local search.

MCTS commits one action per decision from a freshly built tree.
Local search commits a block of actions per round and restarts when stuck.
Both draw every random choice from an explicitly passed generator.
"""

from .rollout import WalkResult, random_walk
from .node import MCTSNode
from .tree import MCTSTree
from .ucb import ucb_score, ucb_select_child, select_most_visited
from .backprop import backpropagate
from .mcts import MCTSEngine, iterate
from .local_search import RandomWalkSearch, RoundOutcome, best_of_walks

__all__ = [
    "WalkResult",
    "random_walk",
    "MCTSNode",
    "MCTSTree",
    "ucb_score",
    "ucb_select_child",
    "select_most_visited",
    "backpropagate",
    "MCTSEngine",
    "iterate",
    "RandomWalkSearch",
    "RoundOutcome",
    "best_of_walks",
]
