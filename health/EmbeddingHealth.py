# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Description: EmbeddingHealth
# -----------------------------------------------------------------------------
import logging
import time
from typing import Optional

from embedding.EmbeddingClient import EmbeddingClient
from settings import HEALTHCHECK_PROBE_TEXT
from utility.Result import Failure
from utility.logging_utils import get_class_logger


class EmbeddingHealth:
    """
    Smoke test for the embedding endpoint.

    Verifies:
      - The embedding call completes successfully
      - The vector dimension matches the corpus dimension (if known)
    """

    def __init__(
        self,
        embedder: EmbeddingClient,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.embedder = embedder
        self.expected_dim = expected_dim
        self.logger = logger or get_class_logger(self.__class__)

    def run(self) -> bool:
        start = time.time()
        result = self.embedder.embed(HEALTHCHECK_PROBE_TEXT)
        elapsed_ms = (time.time() - start) * 1000.0

        if isinstance(result, Failure):
            self.logger.error("Embedding healthcheck FAILED after %.1f ms: %s", elapsed_ms, result.detail)
            return False

        dim = result.value.shape[0]
        self.logger.info("Embedding call succeeded in %.1f ms. Returned dimension: %d", elapsed_ms, dim)

        if self.expected_dim is not None and dim != self.expected_dim:
            self.logger.warning("Dimension mismatch: corpus uses %d, model returned %d.", self.expected_dim, dim)
            return False

        self.logger.info("Embedding healthcheck PASSED.")
        return True
