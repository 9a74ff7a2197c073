# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: EmbeddingClient
# -----------------------------------------------------------------------------

from typing import Protocol, runtime_checkable

import numpy as np

from utility.Result import Result


@runtime_checkable
class EmbeddingClient(Protocol):
    """Turns free text into a fixed-length vector, or a Failure. Never raises."""

    def embed(self, text: str) -> Result[np.ndarray]:
        ...
