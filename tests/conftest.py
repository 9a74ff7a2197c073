# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-07
# Description: conftest.py
# -----------------------------------------------------------------------------

import json
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# keep test runs from writing ./logs/semantic_qa.log
os.environ.setdefault("SQA_LOG_TO_FILE", "0")

from document.CorpusDocument import CorpusDocument  # noqa: E402
from loader.CorpusStore import CorpusStore  # noqa: E402
from utility.Result import Failure, Success  # noqa: E402

CAPITALS_RECORDS = [
    {"id": "doc1", "content": "Paris is the capital of France.", "embedding": [1, 0]},
    {"id": "doc2", "content": "Tokyo is the capital of Japan.", "embedding": [0, 1]},
]


class FakeEmbedder:
    """Returns canned vectors keyed by text; unknown text is a Failure."""

    def __init__(self, vectors: Optional[Dict[str, List[float]]] = None, fail: bool = False):
        self.vectors = vectors or {}
        self.fail = fail
        self.calls: List[str] = []

    def embed(self, text: str):
        self.calls.append(text)
        if self.fail or text not in self.vectors:
            return Failure("Failed to generate query embedding.", detail="fake failure")
        return Success(np.asarray(self.vectors[text], dtype=np.float64))


class FakeCompletion:
    """Echoes a canned answer per prompt, or fails every call."""

    def __init__(self, answers: Optional[Dict[str, str]] = None, fail: bool = False):
        self.answers = answers or {}
        self.fail = fail
        self.prompts: List[str] = []

    def complete(self, prompt: str):
        self.prompts.append(prompt)
        if self.fail:
            return Failure("Failed to generate text from the language model.", detail="fake failure")
        return Success(self.answers.get(prompt, f"Answer about: {prompt}"))


def make_corpus(records) -> CorpusStore:
    return CorpusStore(
        [
            CorpusDocument(id=r["id"], content=r["content"], embedding=np.asarray(r["embedding"], dtype=np.float64))
            for r in records
        ]
    )


@pytest.fixture
def capitals_corpus() -> CorpusStore:
    return make_corpus(CAPITALS_RECORDS)


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    path = tmp_path / "corpus.json"
    path.write_text(json.dumps(CAPITALS_RECORDS), encoding="utf-8")
    return path


@pytest.fixture
def qa_path(tmp_path: Path) -> Path:
    return tmp_path / "qa_pairs.json"
