"""
Configuration constants for the BPMN path finder.

All endpoints, timeouts, and tunable parameters are defined here.
Values can be overridden with environment variables or a .env file.
"""

from __future__ import annotations

import logging
import os
import warnings
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of bpmn_path/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Environment Helpers
# =============================================================================

def env_float(name: str, default: float) -> float:
    """Read a positive float from the environment, falling back to default."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if not value > 0:
        warnings.warn(f"Ignoring {name}={raw!r}, expected a positive number", stacklevel=2)
        return default
    return value


def env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back to default."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        warnings.warn(f"Ignoring {name}={raw!r}, expected a positive integer", stacklevel=2)
        return default
    return value


def parse_log_level(value: str | None, default: str = "WARNING") -> str:
    """Normalize a log level name, falling back to default if unknown."""
    if not value:
        return default
    name = value.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        warnings.warn(f"Unknown log level {value!r}, using {default}", stacklevel=2)
        return default
    return name


# =============================================================================
# Camunda Engine Configuration
# =============================================================================

# Base URL of the engine REST API (no trailing slash)
ENGINE_REST_URL = os.environ.get(
    "BPMN_ENGINE_REST_URL",
    "https://n35ro2ic4d.execute-api.eu-central-1.amazonaws.com/prod/engine-rest",
).rstrip("/")

# Process definition key to fetch when none is given
DEFAULT_PROCESS_KEY = os.environ.get("BPMN_PROCESS_KEY", "invoice")

# JSON field holding the diagram in the /xml response
BPMN_XML_FIELD = "bpmn20Xml"

# =============================================================================
# HTTP Configuration
# =============================================================================

# Request timeout in seconds
REQUEST_TIMEOUT = env_float("BPMN_REQUEST_TIMEOUT", 10.0)

# Attempts for timeouts, connection errors, 429 and 5xx responses
MAX_RETRIES = env_int("BPMN_MAX_RETRIES", 3)

# Status codes worth retrying
RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})

# User agent for requests
USER_AGENT = "BpmnPathFinder/0.1"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR); validated by parse_log_level() at startup
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
