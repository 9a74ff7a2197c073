# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: QAPair
# -----------------------------------------------------------------------------
from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class QAPair:
    question: str
    answer: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
