from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from stackbrowser.conf.config import settings

API_VERSION = "2.2"

logger = logging.getLogger(__name__)


class StackOverflowClient:
    """Thin wrapper over the Stack Exchange REST endpoints.

    Each method issues a single GET and hands back the raw ``httpx.Response``;
    interpreting status codes and bodies is the repository's job.
    """

    def __init__(
        self,
        session: httpx.Client | None = None,
        base_url: str | None = None,
        key: Optional[str] = None,
    ) -> None:
        self._client = session or httpx.Client(
            timeout=httpx.Timeout(settings.STACK_TIMEOUT)
        )
        self.base_url = (base_url or settings.STACK_API_BASE_URL).rstrip("/")
        self.key = key

    def _get(self, path: str, params: Dict[str, Any]) -> httpx.Response:
        if self.key:
            params["key"] = self.key
        url = f"{self.base_url}/{API_VERSION}/{path}"
        logger.debug("GET %s params=%s", url, params)
        return self._client.get(url, params=params)

    def search_questions(
        self,
        title: str,
        page_size: int = settings.STACK_PAGE_SIZE,
        order: str = settings.DEFAULT_ORDER,
        sort: str = settings.DEFAULT_SORT,
        site: str = settings.STACK_SITE,
        filter: str = settings.DEFAULT_FILTER,
    ) -> httpx.Response:
        params = {
            "pagesize": page_size,
            "order": order,
            "sort": sort,
            "title": title,
            "site": site,
            "filter": filter,
        }
        return self._get("search/advanced", params)

    def get_answers(
        self,
        question_id: int,
        order: str = settings.DEFAULT_ORDER,
        sort: str = settings.DEFAULT_SORT,
        site: str = settings.STACK_SITE,
        filter: str = settings.DEFAULT_FILTER,
    ) -> httpx.Response:
        params = {"order": order, "sort": sort, "site": site, "filter": filter}
        return self._get(f"questions/{question_id}/answers", params)

    def get_recent_questions(
        self,
        page_size: int = settings.STACK_PAGE_SIZE,
        order: str = settings.DEFAULT_ORDER,
        sort: str = settings.DEFAULT_SORT,
        site: str = settings.STACK_SITE,
        filter: str = settings.DEFAULT_FILTER,
    ) -> httpx.Response:
        params = {
            "pagesize": page_size,
            "order": order,
            "sort": sort,
            "site": site,
            "filter": filter,
        }
        return self._get("questions", params)

    def get_question_by_id(
        self,
        question_id: int,
        site: str = settings.STACK_SITE,
        filter: str = settings.DEFAULT_FILTER,
    ) -> httpx.Response:
        params = {"site": site, "filter": filter}
        return self._get(f"questions/{question_id}", params)

    def close(self) -> None:
        self._client.close()
