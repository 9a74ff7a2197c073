# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-08
# Description: test_main.py
# -----------------------------------------------------------------------------
import json

import main
from cli.AppContainer import AppContainer
from config.Config import Config


def test_container_wires_components(corpus_file, qa_path):
    cfg = Config(openai_api_key="sk-test", corpus_path=str(corpus_file), qa_log_path=str(qa_path))
    container = AppContainer(cfg)

    assert len(container.corpus) == 2
    assert container.answer_service.corpus is container.corpus
    assert container.loop.qa_log is container.qa_log
    assert container.qa_log.path == qa_path


def test_container_survives_missing_corpus(tmp_path, qa_path):
    cfg = Config(openai_api_key="sk-test", corpus_path=str(tmp_path / "missing.json"), qa_log_path=str(qa_path))
    container = AppContainer(cfg)
    assert not container.corpus.available


def test_main_exits_cleanly_without_api_key(monkeypatch, capsys):
    for env_name in Config.ENV_VARS.values():
        monkeypatch.delenv(env_name, raising=False)
    main.main()
    assert "OPENAI_API_KEY" in capsys.readouterr().out


def test_main_runs_manual_log_then_exits(monkeypatch, corpus_file, qa_path):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("SQA_CORPUS_PATH", str(corpus_file))
    monkeypatch.setenv("SQA_QA_LOG_PATH", str(qa_path))
    monkeypatch.delenv("SQA_STARTUP_HEALTHCHECK", raising=False)

    answers = iter(["2", "2+2?", "4", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    main.main()

    assert json.loads(qa_path.read_text(encoding="utf-8")) == [{"question": "2+2?", "answer": "4"}]
