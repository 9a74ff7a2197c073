# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: OpenAICompletion
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, List

from openai import OpenAI, OpenAIError

from chat.CompletionClient import CompletionClient
from config.Config import Config
from utility.Result import Failure, Result, Success
from utility.logging_utils import get_class_logger

Message = Dict[str, str]  # {"role": "system"|"user"|"assistant", "content": "..."}

COMPLETION_FAILED = "Failed to generate text from the language model."


@dataclass
class OpenAICompletion(CompletionClient):
    """
        CompletionClient backed by OpenAI chat completions.

        The prompt is sent as-is as the only user message; output is capped
        at cfg.completion_max_tokens. One request per call, no retries.
    """

    cfg: Config
    client: Any = None
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

        self.model = self.cfg.completion_model
        self.max_tokens = self.cfg.completion_max_tokens

        if self.client is None:
            self.client = OpenAI(
                api_key=self.cfg.openai_api_key,
                base_url=self.cfg.openai_base_url or None,
                timeout=self.cfg.request_timeout,
                max_retries=0,
            )

        self.logger.info(
            "OpenAICompletion initialised (model=%s, max_tokens=%d)", self.model, self.max_tokens
        )

    def complete(self, prompt: str) -> Result[str]:
        messages: List[Message] = [{"role": "user", "content": prompt}]

        self.logger.debug(
            "Completion request: model=%s max_tokens=%s prompt_chars=%d",
            self.model, self.max_tokens, len(prompt)
        )

        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=self.max_tokens,
            )
        except OpenAIError as e:
            self.logger.error("Completion request failed: %s", e)
            return Failure(COMPLETION_FAILED, detail=str(e))

        self.logger.debug("Raw ChatCompletion response: %r", resp)

        try:
            content = resp.choices[0].message.content or ""
        except (AttributeError, IndexError, TypeError) as e:
            self.logger.error("Unexpected completion response format: %s", e, exc_info=True)
            return Failure(COMPLETION_FAILED, detail=f"Unexpected completion response format: {e}")

        text = content.strip()
        if not text:
            self.logger.warning("Completion returned no text (model=%s)", getattr(resp, "model", None))
            return Failure(COMPLETION_FAILED, detail="empty completion")

        self.logger.info("Completion generated (model=%s, chars=%d)", getattr(resp, "model", None), len(text))
        self.logger.debug("Token usage: %r", getattr(resp, "usage", None))
        return Success(text)
