"""
BPMN document module.

Extracts flow nodes and sequence flows from BPMN 2.0 XML.
"""

from bpmn_path.bpmn.parser import FLOW_NODE_TAGS, BpmnDocument, parse_bpmn_xml

__all__ = [
    "BpmnDocument",
    "FLOW_NODE_TAGS",
    "parse_bpmn_xml",
]
