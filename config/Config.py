# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

from settings import (
    CORPUS_PATH_DEFAULT,
    MODEL_DEFAULTS,
    QA_LOG_PATH_DEFAULT,
    STARTUP_HEALTHCHECK_DEFAULT,
    _env,
    _env_bool,
    _env_float,
    _env_int,
)

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True))


@dataclass(frozen=True)
class Config:
    # OpenAI (embeddings + completions)
    openai_api_key: str
    openai_base_url: str = ""

    # Remote models
    embed_model: str = MODEL_DEFAULTS["embed_model"]
    completion_model: str = MODEL_DEFAULTS["completion_model"]
    completion_max_tokens: int = MODEL_DEFAULTS["completion_max_tokens"]
    request_timeout: float = MODEL_DEFAULTS["request_timeout"]

    # Files
    corpus_path: str = CORPUS_PATH_DEFAULT
    qa_log_path: str = QA_LOG_PATH_DEFAULT

    # Startup
    startup_healthcheck: bool = STARTUP_HEALTHCHECK_DEFAULT

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        # OpenAI direct
        "openai_api_key": "OPENAI_API_KEY",
        "openai_base_url": "OPENAI_BASE_URL",      # e.g. https://api.openai.com/v1

        # Models
        "embed_model": "SQA_EMBED_MODEL",
        "completion_model": "SQA_COMPLETION_MODEL",
        "completion_max_tokens": "SQA_COMPLETION_MAX_TOKENS",
        "request_timeout": "SQA_REQUEST_TIMEOUT",

        # Files
        "corpus_path": "SQA_CORPUS_PATH",
        "qa_log_path": "SQA_QA_LOG_PATH",

        # Startup
        "startup_healthcheck": "SQA_STARTUP_HEALTHCHECK",
    }

    REQUIRED_FIELDS = ("openai_api_key",)

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables."""
        env = Config.ENV_VARS
        return Config(
            openai_api_key=_env(env["openai_api_key"]),
            openai_base_url=_env(env["openai_base_url"]),
            embed_model=_env(env["embed_model"], MODEL_DEFAULTS["embed_model"]),
            completion_model=_env(env["completion_model"], MODEL_DEFAULTS["completion_model"]),
            completion_max_tokens=_env_int(
                env["completion_max_tokens"], MODEL_DEFAULTS["completion_max_tokens"]
            ),
            request_timeout=_env_float(env["request_timeout"], MODEL_DEFAULTS["request_timeout"]),
            corpus_path=_env(env["corpus_path"], CORPUS_PATH_DEFAULT),
            qa_log_path=_env(env["qa_log_path"], QA_LOG_PATH_DEFAULT),
            startup_healthcheck=_env_bool(env["startup_healthcheck"], STARTUP_HEALTHCHECK_DEFAULT),
        )

    def __post_init__(self):
        """
        Fail fast if any required config is missing or out of range.
        """
        missing_fields = [f for f in self.REQUIRED_FIELDS if not getattr(self, f)]

        if missing_fields:
            missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
            raise ValueError(f"Missing required environment variables: {missing_env_vars}")

        if self.completion_max_tokens <= 0:
            raise ValueError(
                f"{self.ENV_VARS['completion_max_tokens']} must be positive, "
                f"got {self.completion_max_tokens}"
            )
        if self.request_timeout <= 0:
            raise ValueError(
                f"{self.ENV_VARS['request_timeout']} must be positive, got {self.request_timeout}"
            )

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "openai_base_url": self.openai_base_url or "(default)",
            "embed_model": self.embed_model,
            "completion_model": self.completion_model,
            "completion_max_tokens": self.completion_max_tokens,
            "request_timeout": self.request_timeout,
            "corpus_path": self.corpus_path,
            "qa_log_path": self.qa_log_path,
            "startup_healthcheck": self.startup_healthcheck,
        }
