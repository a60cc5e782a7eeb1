"""Search and recent commands - list questions from Stack Overflow."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

import httpx

from stackbrowser.cli.render import NO_NETWORK_DIALOG, render_question_list
from stackbrowser.conf.config import settings
from stackbrowser.services.connectivity import ConnectivityCheck
from stackbrowser.services.repository import StackOverflowRepository
from stackbrowser.services.stack_client import StackOverflowClient
from stackbrowser.viewmodels import BaseViewModel, SearchViewModel


@contextmanager
def open_repository(
    stack_key: Optional[str] = None,
    session: Optional[httpx.Client] = None,
    is_network_available: Optional[ConnectivityCheck] = None,
) -> Iterator[StackOverflowRepository]:
    """Yield a repository; an HTTP client created here is closed on exit."""
    http_client = session or httpx.Client(timeout=httpx.Timeout(settings.STACK_TIMEOUT))
    fetcher = StackOverflowClient(session=http_client, key=stack_key)
    repository = StackOverflowRepository(fetcher, is_network_available=is_network_available)
    try:
        yield repository
    finally:
        if session is None:
            repository.close()


def report_failure(view_model: BaseViewModel) -> int:
    """Print the holder's error state; returns the exit code."""
    if view_model.show_network_dialog.value:
        print(NO_NETWORK_DIALOG)
        view_model.dismiss_network_dialog()
        return 1
    message = view_model.error_message.value
    if message:
        print(f"Error: {message}")
        view_model.clear_error()
        return 1
    return 0


def run_search(
    query: str,
    stack_key: Optional[str] = None,
    session: Optional[httpx.Client] = None,
    is_network_available: Optional[ConnectivityCheck] = None,
) -> int:
    """Search question titles and print the matches."""
    with open_repository(stack_key, session, is_network_available) as repository, \
            SearchViewModel(repository) as view_model:
        # Constructing the view model also fetches recent questions; that result
        # is superseded by the search and dropped.
        pending = view_model.search_questions(query)
        if pending is None:
            print("Nothing to search for: the query is blank.")
            return 2
        pending.result()
        status = report_failure(view_model)
        if status:
            return status
        print(render_question_list(view_model.search_results.value))
    return 0


def run_recent(
    stack_key: Optional[str] = None,
    session: Optional[httpx.Client] = None,
    is_network_available: Optional[ConnectivityCheck] = None,
) -> int:
    """Print the most recently active questions."""
    with open_repository(stack_key, session, is_network_available) as repository, \
            SearchViewModel(repository) as view_model:
        view_model.initial_load.result()
        status = report_failure(view_model)
        if status:
            return status
        print(render_question_list(view_model.search_results.value))
    return 0
