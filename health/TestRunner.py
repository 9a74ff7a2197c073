# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Description: TestRunner
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Dict, Optional

from chat.CompletionClient import CompletionClient
from embedding.EmbeddingClient import EmbeddingClient
from health.CompletionHealth import CompletionHealth
from health.EmbeddingHealth import EmbeddingHealth
from loader.CorpusStore import CorpusStore
from utility.logging_utils import get_class_logger


class TestRunner:
    """
    Orchestrates the startup smoke tests and reports a consolidated result.

    Tests included:
      - corpus     (corpus file loaded and non-empty)
      - embedding  (embedding endpoint + dimension check against the corpus)
      - completion (completion endpoint; opt-in, it spends tokens)
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        corpus: CorpusStore,
        embedder: EmbeddingClient,
        completion: CompletionClient,
        logger: Optional[logging.Logger] = None,
    ):
        self.corpus = corpus
        self.logger = logger or get_class_logger(self.__class__)

        self.embedding_health = EmbeddingHealth(embedder, expected_dim=corpus.dimension)
        self.completion_health = CompletionHealth(completion)

    # -------------------------------------------------------------------------
    def run_all(self, run_completion: bool = False) -> Dict[str, bool]:
        """
        Run all configured smoke tests.

        :param run_completion: If True, runs the completion test as well.
        :return: Dict mapping test names to True/False.
        """
        self.logger.info("Starting smoke test suite (run_completion=%s)", run_completion)

        results: Dict[str, bool] = {
            "corpus": self.corpus.available and len(self.corpus) > 0,
            "embedding": self.embedding_health.run(),
        }
        if run_completion:
            results["completion"] = self.completion_health.run()

        passed = sum(1 for ok in results.values() if ok)
        self.logger.info("Smoke tests finished: %d/%d passed %s", passed, len(results), results)
        return results
