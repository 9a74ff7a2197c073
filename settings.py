# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: settings.py
# -----------------------------------------------------------------------------
import os
from typing import Any, Dict


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_float(name: str, default: float) -> float:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be a float, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Files
# -----------------------------------------------------------------------------
CORPUS_PATH_DEFAULT = "negativa_structured.json"
QA_LOG_PATH_DEFAULT = "qa_pairs.json"


# -----------------------------------------------------------------------------
# Remote models
# -----------------------------------------------------------------------------
MODEL_DEFAULTS: Dict[str, Any] = {
    "embed_model": "text-embedding-ada-002",
    "completion_model": "gpt-4",
    "completion_max_tokens": 150,
    # seconds; enforced by the OpenAI transport, not by the search loop
    "request_timeout": 60.0,
}


# -----------------------------------------------------------------------------
# Startup
# -----------------------------------------------------------------------------
STARTUP_HEALTHCHECK_DEFAULT = False

# Probe text used by the embedding health check
HEALTHCHECK_PROBE_TEXT = "semantic-qa embedding healthcheck"
