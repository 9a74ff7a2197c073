# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: CorpusStore
# -----------------------------------------------------------------------------
import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Sequence

import numpy as np
from pydantic import TypeAdapter, ValidationError

from document.CorpusDocument import CorpusDocument, DocumentId
from document.types import CorpusFileModel, CorpusRecordModel
from utility.logging_utils import get_class_logger

_RECORDS = TypeAdapter(List[CorpusRecordModel])


class CorpusError(ValueError):
    """Corpus content violates an integrity rule (dimension, unique ids)."""


class CorpusStore:
    """
    Read-only, in-memory corpus of pre-embedded documents.

    Provides:
      - load(): read a corpus JSON file; never raises on I/O or parse errors
      - get(): resolve a document by identifier
      - iteration in file order, for linear scans

    A corpus that could not be loaded behaves exactly like an empty one;
    `available` tells the two apart for reporting.
    """

    def __init__(
            self,
            documents: Sequence[CorpusDocument] = (),
            *,
            source: Optional[str] = None,
            available: bool = True,
            logger: logging.Logger | None = None,
    ):
        self.logger = logger or get_class_logger(self.__class__)
        self.source = source
        self.available = available
        self._documents = tuple(documents)
        self._by_id: Dict[DocumentId, CorpusDocument] = {}
        self._dimension: Optional[int] = None

        for doc in self._documents:
            if doc.id in self._by_id:
                raise CorpusError(f"Duplicate document id {doc.id!r}")
            if self._dimension is None:
                self._dimension = doc.dimension
            elif doc.dimension != self._dimension:
                raise CorpusError(
                    f"Document {doc.id!r} has embedding dimension {doc.dimension}, "
                    f"expected {self._dimension}"
                )
            self._by_id[doc.id] = doc

    # -------------------------------------------------------------------------
    @classmethod
    def load(cls, path: str | Path, *, logger: logging.Logger | None = None) -> "CorpusStore":
        """
        Load a corpus file. Any failure is logged and yields an unavailable,
        empty store so the caller can carry on with degraded behaviour.
        """
        logger = logger or get_class_logger(cls)
        path = Path(path)
        start_time = time.time()

        try:
            logger.info("Loading corpus from '%s'...", path)
            with path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
            documents = cls._parse(raw)
            store = cls(documents, source=str(path), logger=logger)
        except FileNotFoundError:
            elapsed = (time.time() - start_time) * 1000.0
            logger.error("Corpus file '%s' not found (%.1f ms)", path, elapsed)
            return cls.unavailable(source=str(path), logger=logger)
        except (OSError, UnicodeDecodeError) as e:
            elapsed = (time.time() - start_time) * 1000.0
            logger.error("Could not read corpus file '%s' after %.1f ms: %s", path, elapsed, e)
            return cls.unavailable(source=str(path), logger=logger)
        except json.JSONDecodeError as e:
            elapsed = (time.time() - start_time) * 1000.0
            logger.error("Corpus file '%s' is not valid JSON (%.1f ms): %s", path, elapsed, e)
            return cls.unavailable(source=str(path), logger=logger)
        except (ValidationError, CorpusError) as e:
            elapsed = (time.time() - start_time) * 1000.0
            logger.error("Corpus file '%s' is malformed (%.1f ms): %s", path, elapsed, e)
            return cls.unavailable(source=str(path), logger=logger)

        elapsed = (time.time() - start_time) * 1000.0
        logger.info(
            "Loaded %d document(s) from '%s' (dimension=%s, %.1f ms)",
            len(store),
            path,
            store.dimension,
            elapsed,
        )
        return store

    @classmethod
    def unavailable(
            cls,
            *,
            source: Optional[str] = None,
            logger: logging.Logger | None = None,
    ) -> "CorpusStore":
        return cls((), source=source, available=False, logger=logger)

    @staticmethod
    def _parse(raw: Any) -> List[CorpusDocument]:
        """Accept either a bare array of records or {"documents": [...]}."""
        if isinstance(raw, dict):
            records = CorpusFileModel.model_validate(raw).documents
        else:
            records = _RECORDS.validate_python(raw)

        return [
            CorpusDocument(
                id=r.id,
                content=r.content,
                embedding=np.asarray(r.embedding, dtype=np.float64),
            )
            for r in records
        ]

    # -------------------------------------------------------------------------
    @property
    def dimension(self) -> Optional[int]:
        """Shared embedding length D, or None for an empty corpus."""
        return self._dimension

    def get(self, doc_id: DocumentId) -> Optional[CorpusDocument]:
        return self._by_id.get(doc_id)

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[CorpusDocument]:
        return iter(self._documents)
