# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: CorpusDocument
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Union

import numpy as np

DocumentId = Union[str, int]


@dataclass(frozen=True, eq=False)
class CorpusDocument:
    """Pre-embedded corpus entry: identifier, text and its embedding vector."""
    id: DocumentId
    content: str
    embedding: np.ndarray

    @property
    def dimension(self) -> int:
        return int(self.embedding.shape[0])
