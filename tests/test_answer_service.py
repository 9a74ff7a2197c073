# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-08
# Description: test_answer_service.py
# -----------------------------------------------------------------------------
import pytest

from conftest import FakeCompletion, FakeEmbedder, make_corpus
from loader.CorpusStore import CorpusStore
from services.AnswerService import (
    CONTENT_NOT_FOUND,
    DIMENSION_MISMATCH,
    NO_MATCHES,
    AnswerService,
)
from utility.Result import Failure, Success


def _service(corpus, embedder=None, completion=None) -> AnswerService:
    return AnswerService(
        embedder=embedder or FakeEmbedder({"capital of France?": [1, 0]}),
        completion=completion or FakeCompletion({"Paris is the capital of France.": "It is Paris."}),
        corpus=corpus,
    )


def test_answer_uses_best_document_content_as_prompt(capitals_corpus):
    completion = FakeCompletion({"Paris is the capital of France.": "It is Paris."})
    service = _service(capitals_corpus, completion=completion)

    result = service.answer("capital of France?")

    assert isinstance(result, Success)
    assert result.value.text == "It is Paris."
    assert result.value.question == "capital of France?"
    assert result.value.match.id == "doc1"
    assert result.value.match.score == pytest.approx(1.0)
    assert completion.prompts == ["Paris is the capital of France."]


def test_embedding_failure_stops_before_completion(capitals_corpus):
    completion = FakeCompletion()
    service = _service(capitals_corpus, embedder=FakeEmbedder(fail=True), completion=completion)

    result = service.answer("capital of France?")

    assert isinstance(result, Failure)
    assert result.reason == "Failed to generate query embedding."
    assert completion.prompts == []


def test_empty_content_is_not_sent_to_completion():
    corpus = make_corpus(
        [
            {"id": "blank", "content": "", "embedding": [1, 0]},
            {"id": "doc2", "content": "Tokyo is the capital of Japan.", "embedding": [0, 1]},
        ]
    )
    completion = FakeCompletion()

    result = _service(corpus, completion=completion).answer("capital of France?")

    assert isinstance(result, Failure)
    assert result.reason == CONTENT_NOT_FOUND
    assert completion.prompts == []


def test_empty_corpus_reports_no_matches():
    completion = FakeCompletion()
    service = _service(CorpusStore(), completion=completion)

    assert service.answer("capital of France?") == Failure(NO_MATCHES)
    assert completion.prompts == []


def test_unavailable_corpus_reports_no_matches():
    service = _service(CorpusStore.unavailable(source="missing.json"))
    assert service.answer("capital of France?") == Failure(NO_MATCHES)


def test_dimension_mismatch_reported(capitals_corpus):
    embedder = FakeEmbedder({"q": [1, 0, 0]})
    result = _service(capitals_corpus, embedder=embedder).answer("q")
    assert isinstance(result, Failure)
    assert result.reason == DIMENSION_MISMATCH


def test_missing_document_reported(capitals_corpus, monkeypatch):
    monkeypatch.setattr(capitals_corpus, "get", lambda doc_id: None)
    completion = FakeCompletion()

    result = _service(capitals_corpus, completion=completion).answer("capital of France?")

    assert isinstance(result, Failure)
    assert result.reason == CONTENT_NOT_FOUND
    assert completion.prompts == []


def test_completion_failure_propagates(capitals_corpus):
    result = _service(capitals_corpus, completion=FakeCompletion(fail=True)).answer("capital of France?")
    assert isinstance(result, Failure)
    assert result.reason == "Failed to generate text from the language model."
