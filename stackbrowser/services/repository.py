from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, TypeVar

import httpx

from stackbrowser.conf.config import settings
from stackbrowser.core.models import Answer, AnswersResponse, Question, SearchResponse
from stackbrowser.core.result import Error, ErrorKind, NetworkResult, Success
from stackbrowser.services.connectivity import ConnectivityCheck, SocketConnectivityChecker
from stackbrowser.services.stack_client import StackOverflowClient

NO_INTERNET_CONNECTION = "No internet connection"
EMPTY_RESPONSE = "Empty response"
QUESTION_NOT_FOUND = "Question not found"
NETWORK_ERROR = "Network error"
SEARCH_FAILED = "Search failed"
FAILED_TO_LOAD_ANSWERS = "Failed to load answers"
FAILED_TO_LOAD_QUESTIONS = "Failed to load questions"
FAILED_TO_LOAD_QUESTION = "Failed to load question"

LOW_QUOTA_THRESHOLD = 10

T = TypeVar("T")

logger = logging.getLogger(__name__)


class StackOverflowRepository:
    """Turns Stack Exchange calls into ``Success`` / ``Error`` results.

    Every operation probes connectivity first, issues exactly one request and
    never raises: transport failures, non-2xx responses, empty bodies and
    missing questions all come back as ``Error``.
    """

    def __init__(
        self,
        client: StackOverflowClient,
        is_network_available: ConnectivityCheck | None = None,
        page_size: int = settings.STACK_PAGE_SIZE,
        site: str = settings.STACK_SITE,
    ) -> None:
        self._client = client
        self._is_network_available = is_network_available or SocketConnectivityChecker()
        self.page_size = page_size
        self.site = site

    def search_questions(self, query: str) -> NetworkResult[List[Question]]:
        return self._execute(
            "search_questions",
            lambda: self._client.search_questions(
                title=query, page_size=self.page_size, site=self.site
            ),
            failure_prefix=SEARCH_FAILED,
            on_body=lambda data: Success(SearchResponse.from_json(data).items),
        )

    def get_answers(self, question_id: int) -> NetworkResult[List[Answer]]:
        return self._execute(
            "get_answers",
            lambda: self._client.get_answers(question_id, site=self.site),
            failure_prefix=FAILED_TO_LOAD_ANSWERS,
            on_body=lambda data: Success(AnswersResponse.from_json(data).items),
        )

    def fetch_recent_questions(self) -> NetworkResult[List[Question]]:
        return self._execute(
            "fetch_recent_questions",
            lambda: self._client.get_recent_questions(
                page_size=self.page_size, site=self.site
            ),
            failure_prefix=FAILED_TO_LOAD_QUESTIONS,
            on_body=lambda data: Success(SearchResponse.from_json(data).items),
        )

    def get_question_by_id(self, question_id: int) -> NetworkResult[Question]:
        def first_item(data: Any) -> NetworkResult[Question]:
            items = SearchResponse.from_json(data).items
            if not items:
                return Error(QUESTION_NOT_FOUND, ErrorKind.NOT_FOUND)
            return Success(items[0])

        return self._execute(
            "get_question_by_id",
            lambda: self._client.get_question_by_id(question_id, site=self.site),
            failure_prefix=FAILED_TO_LOAD_QUESTION,
            on_body=first_item,
            on_empty=Error(QUESTION_NOT_FOUND, ErrorKind.NOT_FOUND),
        )

    def _execute(
        self,
        operation: str,
        call: Callable[[], httpx.Response],
        failure_prefix: str,
        on_body: Callable[[Any], NetworkResult[T]],
        on_empty: Optional[Error] = None,
    ) -> NetworkResult[T]:
        try:
            if not self._is_network_available():
                logger.warning("%s skipped: no internet connection", operation)
                return Error(NO_INTERNET_CONNECTION, ErrorKind.CONNECTIVITY)

            resp = call()
            if not resp.is_success:
                logger.warning(
                    "%s failed with HTTP %s %s",
                    operation,
                    resp.status_code,
                    resp.reason_phrase,
                )
                return Error(f"{failure_prefix}: {resp.reason_phrase}", ErrorKind.HTTP)

            data = resp.json() if resp.content else None
            if not data:
                logger.warning("%s returned an empty body", operation)
                return on_empty or Error(EMPTY_RESPONSE, ErrorKind.EMPTY_RESPONSE)

            quota_remaining = data.get("quota_remaining")
            if quota_remaining is not None and quota_remaining < LOW_QUOTA_THRESHOLD:
                logger.warning("Low Stack Exchange quota remaining: %s", quota_remaining)

            result = on_body(data)
            logger.debug("%s succeeded", operation)
            return result
        except Exception as exc:  # noqa: BLE001
            logger.warning("%s raised %s: %s", operation, type(exc).__name__, exc)
            return Error(f"{NETWORK_ERROR}: {exc}", ErrorKind.NETWORK)

    def close(self) -> None:
        self._client.close()
