# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Description: CompletionHealth
# -----------------------------------------------------------------------------
import logging
from typing import Optional

from chat.CompletionClient import CompletionClient
from utility.Result import Failure
from utility.logging_utils import get_class_logger


class CompletionHealth:
    """Smoke test for the completion endpoint: a tiny prompt must produce text."""

    PROMPT = "Reply with a single word: OK"

    def __init__(self, completion: CompletionClient, logger: Optional[logging.Logger] = None):
        self.completion = completion
        self.logger = logger or get_class_logger(self.__class__)

    def run(self) -> bool:
        result = self.completion.complete(self.PROMPT)
        if isinstance(result, Failure):
            self.logger.error("Completion healthcheck FAILED: %s", result.detail)
            return False
        self.logger.info("Completion healthcheck PASSED (%d chars).", len(result.value))
        return True
