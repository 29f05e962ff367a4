"""
Graph module.

Provides the flow graph and the path search over it:
- build_graph: Flat node/edge lists to adjacency structure
- find_path: BFS shortest path by hop count
"""

from bpmn_path.graph.builder import build_graph
from bpmn_path.graph.model import Edge, Graph, Node
from bpmn_path.graph.pathfinder import find_path, is_valid_path

__all__ = [
    "Edge",
    "Graph",
    "Node",
    "build_graph",
    "find_path",
    "is_valid_path",
]
