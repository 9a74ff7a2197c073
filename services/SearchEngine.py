# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: SearchEngine.py
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from document.CorpusDocument import CorpusDocument, DocumentId
from utility.VectorMath import Vector, as_vector, cosine_similarity
from utility.logging_utils import get_class_logger

# Below every valid cosine similarity, so any real document replaces it
NO_MATCH_SCORE = float("-inf")


@dataclass(frozen=True)
class MatchResult:
    id: Optional[DocumentId]
    score: float

    @property
    def found(self) -> bool:
        # id 0 and "" are valid identifiers; only None means "no match"
        return self.id is not None


NO_MATCH = MatchResult(id=None, score=NO_MATCH_SCORE)


@dataclass
class SearchEngine:
    """
    Exhaustive nearest-neighbour search by cosine similarity.

    Every document is scored exactly once. The first document reaching the
    highest score wins; later documents with an equal score do not replace it.
    """
    logger: logging.Logger | None = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def search(self, query_vector: Vector, corpus: Iterable[CorpusDocument]) -> MatchResult:
        query = as_vector(query_vector)
        best = NO_MATCH
        scanned = 0

        for doc in corpus:
            score = cosine_similarity(query, doc.embedding)
            scanned += 1
            if score > best.score:
                best = MatchResult(id=doc.id, score=score)

        if best.found:
            self.logger.info("search: scanned=%d best_id=%r score=%.4f", scanned, best.id, best.score)
        else:
            self.logger.info("search: scanned=%d no match", scanned)
        return best
