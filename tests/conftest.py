"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import json
from pathlib import Path

import pytest

from bpmn_path.graph import Graph, build_graph


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, payload=None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        return json.loads(self.text)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir() -> Path:
    """Return the test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def invoice_xml(data_dir: Path) -> str:
    """Return the invoice process diagram as XML."""
    return (data_dir / "invoice.bpmn").read_text(encoding="utf-8")


@pytest.fixture
def diamond_graph() -> Graph:
    """A -> B -> D and A -> C -> D, with the B branch added first."""
    return build_graph(
        ["A", "B", "C", "D"],
        [("A", "B"), ("B", "D"), ("A", "C"), ("C", "D")],
    )


@pytest.fixture
def fake_response():
    """Return the FakeResponse class for building canned HTTP responses."""
    return FakeResponse
