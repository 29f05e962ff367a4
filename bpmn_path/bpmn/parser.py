"""
Parser for BPMN 2.0 XML diagrams.

Uses BeautifulSoup with the lxml XML parser. Elements are matched by
namespace URI rather than prefix, so "bpmn:task", "bpmn2:task" and a task
in the default namespace are all found, while same-named elements from
other namespaces (e.g. inside extensionElements) are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bs4 import BeautifulSoup

from bpmn_path.errors import DocumentParseError
from bpmn_path.graph import Edge, Graph, build_graph

logger = logging.getLogger(__name__)

BPMN_MODEL_NS = "http://www.omg.org/spec/BPMN/20100524/MODEL"

# Every concrete BPMN 2.0 element that can take part in sequence flows
FLOW_NODE_TAGS = (
    # Tasks
    "task",
    "userTask",
    "serviceTask",
    "sendTask",
    "receiveTask",
    "manualTask",
    "businessRuleTask",
    "scriptTask",
    # Other activities
    "callActivity",
    "subProcess",
    "transaction",
    "adHocSubProcess",
    # Events
    "startEvent",
    "endEvent",
    "intermediateCatchEvent",
    "intermediateThrowEvent",
    "boundaryEvent",
    # Gateways
    "exclusiveGateway",
    "inclusiveGateway",
    "parallelGateway",
    "complexGateway",
    "eventBasedGateway",
)


@dataclass
class BpmnDocument:
    """
    Flat view of a parsed BPMN diagram.

    Attributes:
        process_ids: Ids of the <process> elements in the document
        node_ids: Flow node ids in document order, without duplicates
        flows: Sequence flows in document order
        node_names: Display name per node id, for nodes that have one
    """

    process_ids: list[str] = field(default_factory=list)
    node_ids: list[str] = field(default_factory=list)
    flows: list[Edge] = field(default_factory=list)
    node_names: dict[str, str] = field(default_factory=dict)

    def to_graph(self) -> Graph:
        """Build the flow graph for this document."""
        return build_graph(self.node_ids, self.flows)


def parse_bpmn_xml(xml: str) -> BpmnDocument:
    """
    Parse BPMN XML into node ids and sequence flows.

    Args:
        xml: BPMN 2.0 XML document

    Returns:
        BpmnDocument with nodes and flows in document order

    Raises:
        DocumentParseError: If there is no <definitions> root, or a flow node
            or sequence flow is missing a required attribute
    """
    soup = BeautifulSoup(xml, "xml")

    definitions = soup.find(
        lambda tag: tag.name == "definitions" and tag.namespace == BPMN_MODEL_NS
    ) or soup.find("definitions")
    if definitions is None:
        raise DocumentParseError("Document has no BPMN <definitions> element")

    # Only elements in the same namespace as <definitions> belong to the model
    namespace = definitions.namespace

    def find_model_elements(names):
        return [
            elem for elem in definitions.find_all(names) if elem.namespace == namespace
        ]

    document = BpmnDocument(
        process_ids=[p.get("id", "") for p in find_model_elements("process")],
    )

    seen: set[str] = set()
    for elem in find_model_elements(list(FLOW_NODE_TAGS)):
        node_id = elem.get("id")
        if not node_id:
            raise DocumentParseError(f"<{elem.name}> element has no id")
        if node_id in seen:
            continue
        seen.add(node_id)
        document.node_ids.append(node_id)
        if elem.get("name"):
            document.node_names[node_id] = elem["name"]

    for elem in find_model_elements("sequenceFlow"):
        source = elem.get("sourceRef")
        target = elem.get("targetRef")
        if not source or not target:
            flow_id = elem.get("id", "?")
            raise DocumentParseError(
                f"Sequence flow '{flow_id}' is missing sourceRef or targetRef"
            )
        document.flows.append(Edge(source, target))

    logger.info(
        f"Parsed {len(document.node_ids)} flow nodes and "
        f"{len(document.flows)} sequence flows"
    )
    return document
