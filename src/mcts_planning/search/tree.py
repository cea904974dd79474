"""MCTS tree structure.

Flat arena: nodes live in a list and refer to each other by integer
handle. The whole tree is dropped after one decision.
"""

from typing import List, Optional, Sequence

import networkx as nx

from ..core.action import Action
from .node import MCTSNode


class MCTSTree:
    """Arena-backed search tree for one decision point."""

    def __init__(self, root_actions: Sequence[Action]):
        self.nodes: List[MCTSNode] = [MCTSNode(handle=0, untried=list(root_actions))]

    @property
    def root(self) -> MCTSNode:
        return self.nodes[0]

    def __getitem__(self, handle: int) -> MCTSNode:
        return self.nodes[handle]

    def __len__(self) -> int:
        return len(self.nodes)

    def add_child(self, parent: int, action: Action, untried: Sequence[Action]) -> int:
        """Materialize a child of ``parent`` and return its handle."""
        handle = len(self.nodes)
        self.nodes.append(MCTSNode(handle=handle, parent=parent, action=action,
                                   untried=list(untried)))
        self.nodes[parent].children.append(handle)
        return handle

    def children(self, handle: int) -> List[MCTSNode]:
        return [self.nodes[c] for c in self.nodes[handle].children]

    def get_path_to_root(self, handle: int) -> List[MCTSNode]:
        """Nodes from ``handle`` up to the root, both included."""
        path = []
        current: Optional[int] = handle
        while current is not None:
            node = self.nodes[current]
            path.append(node)
            current = node.parent
        return path

    def to_networkx(self) -> nx.DiGraph:
        """Export as a directed graph with visit/win attributes."""
        graph = nx.DiGraph()
        for node in self.nodes:
            graph.add_node(node.handle, visits=node.visits, wins=node.wins,
                           action=node.action.name if node.action is not None else None)
            if node.parent is not None:
                graph.add_edge(node.parent, node.handle)
        return graph

    def depth(self) -> int:
        """Length of the longest root-to-leaf path."""
        if len(self.nodes) == 1:
            return 0
        return nx.dag_longest_path_length(self.to_networkx())

    def get_statistics(self) -> dict:
        """Get tree statistics."""
        return {
            "total_nodes": len(self.nodes),
            "depth": self.depth(),
            "root_visits": self.root.visits,
            "root_children": len(self.root.children),
            "root_Q": self.root.Q,
        }
