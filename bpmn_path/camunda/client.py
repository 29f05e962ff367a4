"""
Client for fetching process definition XML from a Camunda engine.

The engine answers GET /process-definition/key/{key}/xml with a JSON
envelope whose "bpmn20Xml" field holds the diagram.
"""

from __future__ import annotations

import logging
import time
from urllib.parse import quote

import requests

from bpmn_path.config import (
    BPMN_XML_FIELD,
    ENGINE_REST_URL,
    MAX_RETRIES,
    REQUEST_TIMEOUT,
    RETRYABLE_STATUS_CODES,
    USER_AGENT,
)
from bpmn_path.errors import ConfigurationError, FetchError

logger = logging.getLogger(__name__)


class ProcessDefinitionClient:
    """
    Fetches BPMN XML for process definitions over the engine REST API.

    Timeouts, connection errors, rate limits (429) and server errors (5xx)
    are retried with exponential backoff. Every failure is raised as FetchError.
    """

    def __init__(
        self,
        base_url: str = ENGINE_REST_URL,
        timeout: float = REQUEST_TIMEOUT,
        max_retries: int = MAX_RETRIES,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Engine REST root, e.g. http://localhost:8080/engine-rest
            timeout: Request timeout in seconds
            max_retries: Attempts per fetch (at least one is always made)

        Raises:
            ConfigurationError: If timeout is not a positive number
        """
        if not timeout > 0:
            raise ConfigurationError(
                f"Timeout must be a positive number of seconds, got {timeout!r}"
            )
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_retries = max(1, max_retries)
        self._session = requests.Session()
        self._session.headers.update(
            {"Accept": "application/json", "User-Agent": USER_AGENT}
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def get_xml_url(self, process_key: str) -> str:
        """Build the /xml endpoint URL for a process definition key."""
        return f"{self._base_url}/process-definition/key/{quote(process_key, safe='')}/xml"

    def fetch_bpmn_xml(self, process_key: str) -> str:
        """
        Fetch the BPMN XML of the latest version of a process definition.

        Args:
            process_key: Process definition key (e.g. "invoice")

        Returns:
            BPMN 2.0 XML document as a string

        Raises:
            FetchError: If the request fails or the response has no diagram
        """
        url = self.get_xml_url(process_key)
        response = self._get_with_retries(url)

        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(f"Response from {url} is not valid JSON: {e}") from e

        bpmn_xml = data.get(BPMN_XML_FIELD) if isinstance(data, dict) else None
        if not bpmn_xml:
            raise FetchError(f"{BPMN_XML_FIELD} field is missing in the JSON response")
        if not isinstance(bpmn_xml, str):
            raise FetchError(f"{BPMN_XML_FIELD} field is not a string")

        logger.info(f"Fetched BPMN XML for '{process_key}' ({len(bpmn_xml):,} chars)")
        return bpmn_xml

    def _get_with_retries(self, url: str) -> requests.Response:
        """GET url, retrying transient failures. Returns a 200 response."""
        last_error: FetchError | None = None

        for attempt in range(self._max_retries):
            if attempt > 0:
                wait_time = 2 ** (attempt - 1)  # 1s, 2s, 4s
                logger.debug(
                    f"Waiting {wait_time}s before retry {attempt + 1}/{self._max_retries}"
                )
                time.sleep(wait_time)

            logger.debug(f"Fetching: {url}")
            try:
                response = self._session.get(url, timeout=self._timeout)
            except requests.exceptions.Timeout:
                last_error = FetchError(f"Request to {url} timed out")
                logger.warning(str(last_error))
                continue
            except requests.exceptions.ConnectionError as e:
                last_error = FetchError(f"Could not connect to {url}: {e}")
                logger.warning(str(last_error))
                continue
            except requests.exceptions.RequestException as e:
                raise FetchError(f"Request to {url} failed: {e}") from e

            if response.status_code == 200:
                return response

            message = (
                f"Failed to fetch BPMN XML. HTTP status: {response.status_code}"
            )
            if response.status_code in RETRYABLE_STATUS_CODES:
                last_error = FetchError(message)
                logger.warning(message)
                continue

            raise FetchError(message)

        raise last_error or FetchError("All retries exhausted")

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> ProcessDefinitionClient:
        return self

    def __exit__(self, *args) -> None:
        self.close()
