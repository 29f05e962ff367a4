"""
Builds a Graph from flat node id and edge lists.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bpmn_path.errors import MalformedGraphError
from bpmn_path.graph.model import Edge, Graph, Node

logger = logging.getLogger(__name__)


def build_graph(
    node_ids: Iterable[str],
    edges: Iterable[Edge | tuple[str, str]],
) -> Graph:
    """
    Build a directed graph from node ids and (source, target) edges.

    Duplicate node ids are ignored. Edges may repeat (parallel flows).

    Args:
        node_ids: Node identifiers, each a non-empty string
        edges: Edge objects or (source, target) pairs between declared nodes

    Returns:
        Graph whose outgoing edges keep the order given here

    Raises:
        MalformedGraphError: If a node id is empty or an edge endpoint is unknown
    """
    adjacency: dict[str, list[str]] = {}

    for node_id in node_ids:
        if not isinstance(node_id, str) or not node_id:
            raise MalformedGraphError(f"Invalid node id: {node_id!r}")
        adjacency.setdefault(node_id, [])

    edge_count = 0
    for edge in edges:
        if isinstance(edge, Edge):
            source, target = edge.source, edge.target
        else:
            try:
                source, target = edge
            except (TypeError, ValueError):
                raise MalformedGraphError(
                    f"Edge must be a (source, target) pair, got {edge!r}"
                ) from None
        for endpoint in (source, target):
            if endpoint not in adjacency:
                raise MalformedGraphError(
                    f"Edge {source!r} -> {target!r} references unknown node {endpoint!r}"
                )
        adjacency[source].append(target)
        edge_count += 1

    logger.debug(f"Built graph with {len(adjacency)} nodes and {edge_count} edges")
    return Graph(
        {node_id: Node(node_id, tuple(targets)) for node_id, targets in adjacency.items()}
    )
