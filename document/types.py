# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: types.py
# -----------------------------------------------------------------------------
from typing import Annotated, List, Union

from pydantic import BaseModel, Field, StrictInt, StrictStr

# NaN / Infinity parse from JSON but cannot be scored
FiniteComponent = Annotated[float, Field(allow_inf_nan=False)]


class CorpusRecordModel(BaseModel):
    """One record of the corpus JSON file. Extra keys are ignored."""
    id: Union[StrictStr, StrictInt]
    content: str
    embedding: List[FiniteComponent] = Field(..., min_length=1)


class CorpusFileModel(BaseModel):
    """Object form of the corpus file: {"documents": [...]}."""
    documents: List[CorpusRecordModel]
