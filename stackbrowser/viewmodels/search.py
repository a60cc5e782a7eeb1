from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional

from stackbrowser.core.models import Question
from stackbrowser.core.observable import Observable
from stackbrowser.services.repository import StackOverflowRepository
from stackbrowser.viewmodels.base import BaseViewModel

logger = logging.getLogger(__name__)


class SearchViewModel(BaseViewModel):
    """State for the search screen.

    Construction kicks off a load of recent questions; ``initial_load`` holds
    its future.
    """

    def __init__(
        self,
        repository: StackOverflowRepository,
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> None:
        super().__init__(repository, executor)
        self.search_results: Observable[List[Question]] = Observable([])
        self.initial_load: Future = self.refresh_questions()

    def search_questions(self, query: str) -> Optional[Future]:
        """Search question titles. Blank queries are ignored and return None."""
        if not query or not query.strip():
            return None
        logger.info("Searching questions for '%s'", query)
        return self._launch(
            "questions",
            lambda: self._repository.search_questions(query),
            self.search_results.set,
        )

    def refresh_questions(self) -> Future:
        logger.info("Fetching recent questions")
        return self._launch(
            "questions",
            self._repository.fetch_recent_questions,
            self.search_results.set,
        )
