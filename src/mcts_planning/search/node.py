"""MCTS node for planning search.

Note: nodes do not store states. The simulated state is rebuilt by
replaying actions from the root on every iteration.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..core.action import Action


@dataclass
class MCTSNode:
    """Arena entry of an MCTS tree.

    Attributes:
        handle: Index of this node in the tree arena
        parent: Handle of the parent (None for root)
        action: Action that produced this node from its parent (None for root)
        untried: Applicable actions not yet expanded into children
        children: Handles of materialized children, in expansion order
        visits: N - number of backpropagations through this node
        wins: W - sum of backpropagated rewards
    """
    handle: int
    parent: Optional[int] = None
    action: Optional[Action] = None
    untried: List[Action] = field(default_factory=list)
    children: List[int] = field(default_factory=list)
    visits: int = 0
    wins: float = 0.0

    @property
    def Q(self) -> float:
        """Win rate (W / N)."""
        if self.visits == 0:
            return 0.0
        return self.wins / self.visits

    def is_fully_expanded(self) -> bool:
        return not self.untried

    def has_children(self) -> bool:
        return bool(self.children)

    def is_root(self) -> bool:
        return self.parent is None

    def __repr__(self) -> str:
        name = self.action.name if self.action is not None else "root"
        return (f"MCTSNode({self.handle}, {name}, visits={self.visits}, "
                f"Q={self.Q:.3f}, untried={len(self.untried)})")
