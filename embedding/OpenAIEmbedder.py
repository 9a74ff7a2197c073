# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: OpenAIEmbedder
# -----------------------------------------------------------------------------
import time
from typing import Any, Optional

import numpy as np
from openai import OpenAI, OpenAIError

from config.Config import Config
from embedding.EmbeddingClient import EmbeddingClient
from utility.Result import Failure, Result, Success
from utility.logging_utils import get_class_logger

EMBEDDING_FAILED = "Failed to generate query embedding."


class OpenAIEmbedder(EmbeddingClient):
    """
    EmbeddingClient backed by the OpenAI embeddings endpoint.

    One request per call and no retries: a failed call is logged and
    returned as a Failure for the caller to report.
    """

    def __init__(
            self,
            cfg: Config,
            *,
            client: Optional[Any] = None,
            logger=None,
    ):
        self.cfg = cfg
        self.logger = logger or get_class_logger(self.__class__)

        self.client = client or OpenAI(
            api_key=cfg.openai_api_key,
            base_url=cfg.openai_base_url or None,
            timeout=cfg.request_timeout,
            max_retries=0,
        )
        self.model = cfg.embed_model
        self.logger.info("OpenAI Embedder initialized (model=%s)", self.model)

    def embed(self, text: str) -> Result[np.ndarray]:
        start = time.time()
        try:
            resp = self.client.embeddings.create(model=self.model, input=text)
        except OpenAIError as e:
            elapsed_ms = (time.time() - start) * 1000.0
            self.logger.error("Embedding request failed after %.1f ms: %s", elapsed_ms, e)
            return Failure(EMBEDDING_FAILED, detail=str(e))

        try:
            arr = np.asarray(resp.data[0].embedding, dtype=np.float64)
        except (AttributeError, IndexError, TypeError, ValueError) as e:
            self.logger.error("Unexpected embedding response format: %s", e, exc_info=True)
            return Failure(EMBEDDING_FAILED, detail=f"Unexpected embedding response format: {e}")

        if arr.ndim != 1 or arr.size == 0:
            self.logger.error("Embedding response held no usable vector (shape=%s)", arr.shape)
            return Failure(EMBEDDING_FAILED, detail=f"Unusable embedding shape {arr.shape}")

        if not np.all(np.isfinite(arr)):
            self.logger.error("Embedding response held non-finite values (dim=%d)", arr.shape[0])
            return Failure(EMBEDDING_FAILED, detail="Non-finite values in embedding")

        elapsed_ms = (time.time() - start) * 1000.0
        self.logger.info("Embedded %d chars -> dim=%d (%.1f ms)", len(text), arr.shape[0], elapsed_ms)
        return Success(arr)
