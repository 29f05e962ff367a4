"""
BPMN Path Finder.

Fetches a BPMN process diagram from a Camunda engine, builds a directed
graph of its flow nodes and sequence flows, and reports a path between
two node ids.
"""

__version__ = "0.1.0"
