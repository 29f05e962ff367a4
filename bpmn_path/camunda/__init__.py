"""
Camunda engine REST module.

Provides retrieval of process definition diagrams.
"""

from bpmn_path.camunda.client import ProcessDefinitionClient

__all__ = [
    "ProcessDefinitionClient",
]
