# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from chat.OpenAICompletion import OpenAICompletion
from cli.InteractionLoop import InteractionLoop
from config.Config import Config
from embedding.OpenAIEmbedder import OpenAIEmbedder
from health.TestRunner import TestRunner
from loader.CorpusStore import CorpusStore
from qalog.QALog import QALog
from services.AnswerService import AnswerService
from services.SearchEngine import SearchEngine


class AppContainer:
    """
    Owns object instantiation and application wiring for one run.
    """

    def __init__(self, cfg: Config | None = None) -> None:
        # Configuration
        self.cfg = cfg or Config.from_env()

        # Corpus (loaded once; an unreadable file yields an empty corpus)
        self.corpus = CorpusStore.load(self.cfg.corpus_path)

        # Remote clients
        self.embedder = OpenAIEmbedder(cfg=self.cfg)
        self.completion = OpenAICompletion(cfg=self.cfg)

        # Smoke tests / health
        self.test_runner = TestRunner(
            corpus=self.corpus,
            embedder=self.embedder,
            completion=self.completion,
        )

        # Search + answer pipeline
        self.search_engine = SearchEngine()
        self.answer_service = AnswerService(
            embedder=self.embedder,
            completion=self.completion,
            corpus=self.corpus,
            search_engine=self.search_engine,
        )

        # Q&A log starts empty every run
        self.qa_log = QALog(self.cfg.qa_log_path)

        self.loop = InteractionLoop(
            answer_service=self.answer_service,
            qa_log=self.qa_log,
        )
