# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: InteractionLoop
# -----------------------------------------------------------------------------
import logging
from enum import Enum
from typing import Callable, Dict, Optional

from qalog.QALog import QALog
from qalog.QAPair import QAPair
from services.AnswerService import AnswerService
from utility.Result import Failure
from utility.logging_utils import get_class_logger

MENU_TEXT = (
    "\nOptions:\n"
    "1: Make a search query\n"
    "2: Log question and answer\n"
    "3: Exit"
)
INVALID_CHOICE = "Invalid choice. Please enter 1, 2, or 3."
SAVED = "Q&A pairs saved successfully."
SAVE_FAILED = "Could not save Q&A pairs; they are kept in memory and will be saved with the next entry."
UNEXPECTED_ERROR = "Something went wrong handling that request; see the log for details."


class LoopState(Enum):
    MENU = "menu"
    SEARCH_FLOW = "search"
    MANUAL_LOG_FLOW = "manual_log"
    EXIT = "exit"


MENU_CHOICES: Dict[str, LoopState] = {
    "1": LoopState.SEARCH_FLOW,
    "2": LoopState.MANUAL_LOG_FLOW,
    "3": LoopState.EXIT,
}


class InteractionLoop:
    """
    Console menu driving search and manual logging.

    Both flows always come back to MENU, whatever happens inside them;
    only choosing "3" (or end of input at the menu) reaches EXIT.
    """

    def __init__(
            self,
            answer_service: AnswerService,
            qa_log: QALog,
            *,
            input_fn: Optional[Callable[[str], str]] = None,
            output_fn: Optional[Callable[[str], None]] = None,
            logger: logging.Logger | None = None,
    ):
        self.answer_service = answer_service
        self.qa_log = qa_log
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.logger = logger or get_class_logger(self.__class__)

    def run(self) -> None:
        self.logger.info("Interaction loop started")
        state = LoopState.MENU
        while state is not LoopState.EXIT:
            state = self.step(state)
        self.output_fn("Exiting...")
        self.logger.info("Interaction loop finished (qa_pairs=%d)", len(self.qa_log))

    def step(self, state: LoopState) -> LoopState:
        if state is LoopState.MENU:
            return self.menu()

        flow = {
            LoopState.SEARCH_FLOW: self.search_flow,
            LoopState.MANUAL_LOG_FLOW: self.manual_log_flow,
        }[state]

        try:
            flow()
        except EOFError:
            self.logger.info("%s: input closed, back to menu", state.value)
        except Exception as e:
            self.logger.exception("%s: unexpected error: %s", state.value, e)
            self.output_fn(UNEXPECTED_ERROR)
        return LoopState.MENU

    def menu(self) -> LoopState:
        self.output_fn(MENU_TEXT)
        try:
            choice = self.input_fn("Enter your choice: ").strip()
        except EOFError:
            return LoopState.EXIT

        next_state = MENU_CHOICES.get(choice)
        if next_state is None:
            self.output_fn(INVALID_CHOICE)
            return LoopState.MENU
        return next_state

    # -------------------------------------------------------------------------
    def search_flow(self) -> None:
        query = self.input_fn("Enter your search query: ")
        result = self.answer_service.answer(query)

        if isinstance(result, Failure):
            self.output_fn(result.reason)
            return

        answer = result.value
        self.output_fn(f"Generated text based on the best match: {answer.text}")
        self._record(QAPair(question=query, answer=answer.text))

    def manual_log_flow(self) -> None:
        question = self.input_fn("Enter a question: ")
        answer = self.input_fn("Enter the answer: ")
        self._record(QAPair(question=question, answer=answer))

    def _record(self, pair: QAPair) -> None:
        if self.qa_log.record(pair):
            self.output_fn(SAVED)
        else:
            self.output_fn(SAVE_FAILED)
