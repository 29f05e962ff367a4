"""
Unit tests for ProcessDefinitionClient.

The HTTP session is replaced with a scripted fake; no network access.
"""

import pytest
import requests

from bpmn_path.camunda import ProcessDefinitionClient
from bpmn_path.errors import ConfigurationError, FetchError

BASE_URL = "http://engine.test/engine-rest"


@pytest.fixture
def client():
    with ProcessDefinitionClient(base_url=BASE_URL + "/", timeout=5, max_retries=3) as c:
        yield c


@pytest.fixture
def sleeps(monkeypatch):
    """Record backoff waits instead of sleeping."""
    waits: list[float] = []
    monkeypatch.setattr("bpmn_path.camunda.client.time.sleep", waits.append)
    return waits


def script_session(monkeypatch, client, outcomes):
    """Make client._session.get return (or raise) each outcome in turn."""
    calls = []
    remaining = list(outcomes)

    def fake_get(url, timeout=None):
        calls.append((url, timeout))
        outcome = remaining.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr(client._session, "get", fake_get)
    return calls


class TestUrls:
    """Test endpoint construction."""

    def test_trailing_slash_stripped(self, client):
        assert client.base_url == BASE_URL

    def test_xml_url(self, client):
        assert client.get_xml_url("invoice") == (
            f"{BASE_URL}/process-definition/key/invoice/xml"
        )

    def test_xml_url_quotes_key(self, client):
        assert client.get_xml_url("a b/c") == (
            f"{BASE_URL}/process-definition/key/a%20b%2Fc/xml"
        )

    def test_accepts_json(self, client):
        assert client._session.headers["Accept"] == "application/json"

    @pytest.mark.parametrize("timeout", [0, -1, float("nan")])
    def test_rejects_non_positive_timeout(self, timeout):
        """A timeout requests cannot use is refused up front."""
        with pytest.raises(ConfigurationError, match="Timeout"):
            ProcessDefinitionClient(base_url=BASE_URL, timeout=timeout)


class TestFetch:
    """Test successful and failed fetches."""

    def test_unwraps_bpmn20xml(self, monkeypatch, client, fake_response, invoice_xml):
        calls = script_session(
            monkeypatch,
            client,
            [fake_response(200, {"id": "invoice:1:abc", "bpmn20Xml": invoice_xml})],
        )
        assert client.fetch_bpmn_xml("invoice") == invoice_xml
        assert calls == [(f"{BASE_URL}/process-definition/key/invoice/xml", 5)]

    def test_missing_field(self, monkeypatch, client, fake_response):
        script_session(monkeypatch, client, [fake_response(200, {"id": "invoice:1"})])
        with pytest.raises(FetchError, match="bpmn20Xml"):
            client.fetch_bpmn_xml("invoice")

    def test_null_field(self, monkeypatch, client, fake_response):
        script_session(monkeypatch, client, [fake_response(200, {"bpmn20Xml": None})])
        with pytest.raises(FetchError, match="bpmn20Xml"):
            client.fetch_bpmn_xml("invoice")

    def test_empty_field(self, monkeypatch, client, fake_response):
        script_session(monkeypatch, client, [fake_response(200, {"bpmn20Xml": ""})])
        with pytest.raises(FetchError):
            client.fetch_bpmn_xml("invoice")

    def test_non_object_json(self, monkeypatch, client, fake_response):
        script_session(monkeypatch, client, [fake_response(200, ["not", "an", "object"])])
        with pytest.raises(FetchError):
            client.fetch_bpmn_xml("invoice")

    def test_invalid_json(self, monkeypatch, client, fake_response):
        script_session(monkeypatch, client, [fake_response(200, text="<html>oops</html>")])
        with pytest.raises(FetchError, match="not valid JSON"):
            client.fetch_bpmn_xml("invoice")

    def test_not_found_is_not_retried(self, monkeypatch, client, fake_response, sleeps):
        calls = script_session(
            monkeypatch, client, [fake_response(404, {"type": "RestException"})]
        )
        with pytest.raises(FetchError, match="404"):
            client.fetch_bpmn_xml("missing")
        assert len(calls) == 1
        assert sleeps == []


class TestRetries:
    """Test retry behaviour for transient failures."""

    def test_retries_server_error(self, monkeypatch, client, fake_response, sleeps):
        calls = script_session(
            monkeypatch,
            client,
            [
                fake_response(503, {}),
                fake_response(429, {}),
                fake_response(200, {"bpmn20Xml": "<definitions/>"}),
            ],
        )
        assert client.fetch_bpmn_xml("invoice") == "<definitions/>"
        assert len(calls) == 3
        assert sleeps == [1, 2]

    def test_retries_timeout_and_connection_error(
        self, monkeypatch, client, fake_response, sleeps
    ):
        script_session(
            monkeypatch,
            client,
            [
                requests.exceptions.Timeout(),
                requests.exceptions.ConnectionError("refused"),
                fake_response(200, {"bpmn20Xml": "<definitions/>"}),
            ],
        )
        assert client.fetch_bpmn_xml("invoice") == "<definitions/>"

    def test_gives_up_after_max_retries(self, monkeypatch, client, fake_response, sleeps):
        calls = script_session(
            monkeypatch, client, [fake_response(500, {})] * 3
        )
        with pytest.raises(FetchError, match="500"):
            client.fetch_bpmn_xml("invoice")
        assert len(calls) == 3

    def test_last_timeout_reported(self, monkeypatch, client, sleeps):
        script_session(monkeypatch, client, [requests.exceptions.Timeout()] * 3)
        with pytest.raises(FetchError, match="timed out"):
            client.fetch_bpmn_xml("invoice")

    def test_other_request_errors_not_retried(self, monkeypatch, client, sleeps):
        calls = script_session(
            monkeypatch, client, [requests.exceptions.InvalidURL("bad url")]
        )
        with pytest.raises(FetchError, match="bad url"):
            client.fetch_bpmn_xml("invoice")
        assert len(calls) == 1
