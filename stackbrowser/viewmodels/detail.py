from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Tuple

from stackbrowser.core.models import Answer, Question
from stackbrowser.core.observable import Observable
from stackbrowser.services.repository import StackOverflowRepository
from stackbrowser.viewmodels.base import BaseViewModel

logger = logging.getLogger(__name__)


class DetailViewModel(BaseViewModel):
    """State for a single question and its answers.

    The question and the answers load independently and may complete in any
    order; each writes only to its own field.
    """

    def __init__(
        self,
        repository: StackOverflowRepository,
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> None:
        super().__init__(repository, executor)
        self.question: Observable[Optional[Question]] = Observable(None)
        self.answers: Observable[List[Answer]] = Observable([])

    def load_question(self, question_id: int) -> Future:
        logger.info("Loading question %s", question_id)
        return self._launch(
            "question",
            lambda: self._repository.get_question_by_id(question_id),
            self.question.set,
        )

    def load_answers(self, question_id: int) -> Future:
        logger.info("Loading answers for question %s", question_id)
        return self._launch(
            "answers",
            lambda: self._repository.get_answers(question_id),
            self.answers.set,
        )

    def open(self, question_id: int) -> Tuple[Future, Future]:
        return self.load_question(question_id), self.load_answers(question_id)
