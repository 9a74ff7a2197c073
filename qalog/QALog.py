# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: QALog
# -----------------------------------------------------------------------------
import json
import logging
from pathlib import Path
from typing import Iterator, List, Optional

from qalog.QAPair import QAPair
from utility.logging_utils import get_class_logger


class QALog:
    """
    Ordered, append-only log of question/answer pairs for one run.

    The log always starts empty; earlier runs' files are overwritten, never
    read. The in-memory list is the source of truth: persist() rewrites the
    whole file from it, so a failed write loses nothing that a later
    successful write will not restore.
    """

    def __init__(self, path: str | Path, *, logger: logging.Logger | None = None):
        self.path = Path(path)
        self.logger = logger or get_class_logger(self.__class__)
        self._pairs: List[QAPair] = []

    def append(self, pair: QAPair) -> None:
        self._pairs.append(pair)
        self.logger.info("Appended Q&A pair #%d (question_chars=%d)", len(self._pairs), len(pair.question))

    def persist(self, path: Optional[str | Path] = None) -> bool:
        """
        Overwrite `path` (default: the log's own path) with the full log as a
        JSON array. Returns False if the file could not be written.
        """
        target = Path(path) if path is not None else self.path
        # ASCII-escaped, so any str (lone surrogates included) encodes; the
        # bytes exist before the target is opened and truncated
        payload = json.dumps([p.to_dict() for p in self._pairs], indent=2)
        data = (payload + "\n").encode("utf-8")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as e:
            self.logger.error(
                "Could not write %d Q&A pair(s) to '%s': %s", len(self._pairs), target, e
            )
            return False

        self.logger.info("Q&A pairs saved (%d) to '%s'", len(self._pairs), target)
        return True

    def record(self, pair: QAPair) -> bool:
        """Append, then persist immediately. Every flow writes through here."""
        self.append(pair)
        return self.persist()

    @property
    def entries(self) -> tuple:
        return tuple(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[QAPair]:
        return iter(self._pairs)
