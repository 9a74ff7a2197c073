# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: AnswerService.py
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass, field

from chat.CompletionClient import CompletionClient
from embedding.EmbeddingClient import EmbeddingClient
from loader.CorpusStore import CorpusStore
from services.SearchEngine import MatchResult, SearchEngine
from utility.Result import Failure, Result, Success
from utility.logging_utils import get_class_logger

NO_MATCHES = "No matches found."
CONTENT_NOT_FOUND = "Content for the best match not found."
DIMENSION_MISMATCH = "Query embedding does not match the corpus embedding size."


@dataclass(frozen=True)
class Answer:
    question: str
    match: MatchResult
    text: str


@dataclass
class AnswerService:
    """
    Answer Service:
        - embeds the question with the EmbeddingClient
        - finds the single best corpus document with the SearchEngine
        - sends that document's content to the CompletionClient
        - returns the generated text, or the Failure of the first step that failed
    """
    embedder: EmbeddingClient
    completion: CompletionClient
    corpus: CorpusStore
    search_engine: SearchEngine = field(default_factory=SearchEngine)
    logger: logging.Logger | None = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)
        self.logger.info(
            "AnswerService initialised (embedder=%s completion=%s corpus_docs=%d)",
            type(self.embedder).__name__,
            type(self.completion).__name__,
            len(self.corpus),
        )

    def answer(self, query: str) -> Result[Answer]:
        self.logger.info("answer: query='%s' (start)", query[:120])

        embedded = self.embedder.embed(query)
        if isinstance(embedded, Failure):
            self.logger.warning("answer: embedding failed: %s", embedded.detail or embedded.reason)
            return embedded
        query_vector = embedded.value

        expected_dim = self.corpus.dimension
        if expected_dim is not None and query_vector.shape[0] != expected_dim:
            self.logger.error(
                "answer: query dimension %d != corpus dimension %d",
                query_vector.shape[0],
                expected_dim,
            )
            return Failure(
                DIMENSION_MISMATCH,
                detail=f"query={query_vector.shape[0]} corpus={expected_dim}",
            )

        match = self.search_engine.search(query_vector, self.corpus)
        if not match.found:
            if not self.corpus.available:
                self.logger.warning("answer: corpus unavailable (source=%s)", self.corpus.source)
            return Failure(NO_MATCHES)

        doc = self.corpus.get(match.id)
        if doc is None:
            self.logger.error("answer: best match id=%r missing from corpus", match.id)
            return Failure(CONTENT_NOT_FOUND, detail=f"id={match.id!r}")
        if not doc.content:
            self.logger.error("answer: best match id=%r has empty content", match.id)
            return Failure(CONTENT_NOT_FOUND, detail=f"id={match.id!r} (empty content)")

        generated = self.completion.complete(doc.content)
        if isinstance(generated, Failure):
            self.logger.warning("answer: completion failed: %s", generated.detail or generated.reason)
            return generated

        self.logger.info("answer: match_id=%r answer_chars=%d (done)", match.id, len(generated.value))
        return Success(Answer(question=query, match=match, text=generated.value))
