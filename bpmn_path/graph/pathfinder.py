"""
Breadth-first path search over a flow graph.

Returns the first path reached in BFS order, which is a shortest path by
number of edges. When several shortest paths exist, the one chosen is the
one whose edges come first in insertion order.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence

from bpmn_path.errors import NodeNotFoundError
from bpmn_path.graph.model import Graph

logger = logging.getLogger(__name__)


def find_path(graph: Graph, start_id: str, end_id: str) -> list[str] | None:
    """
    Find a shortest path from start_id to end_id using BFS.

    Args:
        graph: Graph to search
        start_id: Id of the first node of the path
        end_id: Id of the last node of the path

    Returns:
        List of node ids from start to end inclusive, or None if end is unreachable

    Raises:
        NodeNotFoundError: If start_id or end_id is not in the graph
    """
    for node_id in (start_id, end_id):
        if node_id not in graph:
            raise NodeNotFoundError(node_id)

    # BFS with parent tracking; a node is visited once it is queued
    queue: deque[str] = deque([start_id])
    visited: dict[str, str | None] = {start_id: None}

    while queue:
        current = queue.popleft()

        if current == end_id:
            path = []
            node_id: str | None = current
            while node_id is not None:
                path.append(node_id)
                node_id = visited[node_id]
            path.reverse()
            logger.debug(f"Found path ({len(path) - 1} hops): {' -> '.join(path)}")
            return path

        for target in graph.successors(current):
            if target not in visited:
                visited[target] = current
                queue.append(target)

    logger.debug(
        f"No path from '{start_id}' to '{end_id}' ({len(visited)} nodes explored)"
    )
    return None


def is_valid_path(graph: Graph, path: Sequence[str], start_id: str, end_id: str) -> bool:
    """Check that path runs from start_id to end_id along edges of graph."""
    if not path or path[0] != start_id or path[-1] != end_id:
        return False
    if any(node_id not in graph for node_id in path):
        return False
    return all(graph.has_edge(a, b) for a, b in zip(path, path[1:]))
