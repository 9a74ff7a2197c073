# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: CompletionClient
# -----------------------------------------------------------------------------

from typing import Protocol, runtime_checkable

from utility.Result import Result


@runtime_checkable
class CompletionClient(Protocol):
    """Turns a prompt into trimmed generated text, or a Failure. Never raises."""

    def complete(self, prompt: str) -> Result[str]:
        ...
