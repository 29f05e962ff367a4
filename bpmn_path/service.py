"""
End-to-end path lookup for a deployed process definition.

Fetches the diagram, parses it, builds the flow graph and runs the search.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bpmn_path.bpmn import parse_bpmn_xml
from bpmn_path.camunda import ProcessDefinitionClient
from bpmn_path.config import DEFAULT_PROCESS_KEY
from bpmn_path.errors import NodeNotFoundError
from bpmn_path.graph import find_path

logger = logging.getLogger(__name__)


@dataclass
class PathResult:
    """
    Outcome of a path lookup.

    Attributes:
        process_key: Process definition the diagram was fetched for
        start_id: Requested first node
        end_id: Requested last node
        path: Node ids from start to end, or None if end is unreachable
        node_count: Number of flow nodes in the diagram
        edge_count: Number of sequence flows in the diagram
    """

    process_key: str
    start_id: str
    end_id: str
    path: list[str] | None
    node_count: int
    edge_count: int

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def hops(self) -> int | None:
        """Number of sequence flows on the path, or None if not found."""
        return len(self.path) - 1 if self.path is not None else None

    def to_dict(self) -> dict:
        return {
            "process_key": self.process_key,
            "start_id": self.start_id,
            "end_id": self.end_id,
            "found": self.found,
            "path": self.path,
            "hops": self.hops,
            "node_count": self.node_count,
            "edge_count": self.edge_count,
        }


def find_process_path(
    start_id: str,
    end_id: str,
    process_key: str = DEFAULT_PROCESS_KEY,
    client: ProcessDefinitionClient | None = None,
) -> PathResult:
    """
    Find a path between two flow nodes of a deployed process.

    Args:
        start_id: Id of the node to start from
        end_id: Id of the node to reach
        process_key: Process definition key to fetch
        client: Client to fetch with (a default one is created if omitted)

    Returns:
        PathResult; its path is None if end_id is unreachable

    Raises:
        FetchError: If the diagram cannot be retrieved
        DocumentParseError: If the diagram is not valid BPMN
        MalformedGraphError: If a sequence flow references an unknown node
        NodeNotFoundError: If start_id or end_id is not in the diagram
    """
    if client is None:
        with ProcessDefinitionClient() as default_client:
            xml = default_client.fetch_bpmn_xml(process_key)
    else:
        xml = client.fetch_bpmn_xml(process_key)

    graph = parse_bpmn_xml(xml).to_graph()

    # Check both ids before searching
    for node_id in (start_id, end_id):
        if node_id not in graph:
            raise NodeNotFoundError(node_id)

    path = find_path(graph, start_id, end_id)

    if path is not None:
        logger.info(f"Found path ({len(path) - 1} hops): {' -> '.join(path)}")
    else:
        logger.warning(f"No path found from '{start_id}' to '{end_id}'")

    return PathResult(
        process_key=process_key,
        start_id=start_id,
        end_id=end_id,
        path=path,
        node_count=len(graph),
        edge_count=graph.edge_count,
    )
