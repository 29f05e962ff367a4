"""
Directed flow graph of a BPMN diagram.

Nodes are keyed by their diagram id. Outgoing edges keep the order they
were added in, which fixes the order the path search expands them.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from bpmn_path.errors import NodeNotFoundError


@dataclass(frozen=True)
class Edge:
    """
    A directed sequence flow between two flow nodes.

    Attributes:
        source: Id of the node the flow leaves
        target: Id of the node the flow enters
    """

    source: str
    target: str


@dataclass(frozen=True)
class Node:
    """
    A flow node and the targets of its outgoing edges.

    Attributes:
        id: Node id, unique within the diagram
        outgoing: Target ids in edge insertion order (may repeat for parallel flows)
    """

    id: str
    outgoing: tuple[str, ...] = ()


class Graph:
    """
    Mapping of node id to Node.

    Built once by build_graph() and not modified afterwards.
    """

    def __init__(self, nodes: dict[str, Node]) -> None:
        self._nodes = nodes

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={self.edge_count})"

    @property
    def node_ids(self) -> list[str]:
        """All node ids in insertion order."""
        return list(self._nodes)

    @property
    def edges(self) -> list[Edge]:
        """All edges, grouped by source node in insertion order."""
        return [
            Edge(node.id, target)
            for node in self._nodes.values()
            for target in node.outgoing
        ]

    @property
    def edge_count(self) -> int:
        return sum(len(node.outgoing) for node in self._nodes.values())

    def get_node(self, node_id: str) -> Node:
        """Get node by id, raising NodeNotFoundError if absent."""
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    def successors(self, node_id: str) -> tuple[str, ...]:
        """Get outgoing edge targets of a node in insertion order."""
        return self.get_node(node_id).outgoing

    def has_edge(self, source: str, target: str) -> bool:
        node = self._nodes.get(source)
        return node is not None and target in node.outgoing

    def stats(self) -> dict:
        """Get summary statistics about the graph."""
        return {
            "nodes": len(self._nodes),
            "edges": self.edge_count,
            "sinks": sum(1 for node in self._nodes.values() if not node.outgoing),
        }
