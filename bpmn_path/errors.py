"""Exceptions raised while fetching, parsing, and searching process diagrams."""

from __future__ import annotations


class BpmnPathError(Exception):
    """Base class for all bpmn_path failures."""


class MalformedGraphError(BpmnPathError):
    """Raised when a node id is invalid or an edge references an unknown node."""


class NodeNotFoundError(BpmnPathError):
    """Raised when a requested node id does not exist in the graph."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node '{node_id}' not found in the BPMN diagram")
        self.node_id = node_id


class FetchError(BpmnPathError):
    """Raised when the diagram cannot be retrieved from the engine."""


class DocumentParseError(BpmnPathError):
    """Raised when the retrieved XML is not a usable BPMN document."""


class ConfigurationError(BpmnPathError):
    """Raised when a setting such as a timeout has an unusable value."""
