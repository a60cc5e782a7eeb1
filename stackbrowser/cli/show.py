"""Show command - print one question with its answers."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from stackbrowser.cli.render import render_detail
from stackbrowser.cli.search import open_repository, report_failure
from stackbrowser.core.sorting import DEFAULT_FILTER, AnswerFilter
from stackbrowser.services.connectivity import ConnectivityCheck
from stackbrowser.viewmodels import DetailViewModel

logger = logging.getLogger(__name__)


def run_show(
    question_id: int,
    answer_filter: AnswerFilter | str = DEFAULT_FILTER,
    stack_key: Optional[str] = None,
    session: Optional[httpx.Client] = None,
    is_network_available: Optional[ConnectivityCheck] = None,
) -> int:
    selected = AnswerFilter.parse(answer_filter)
    with open_repository(stack_key, session, is_network_available) as repository, \
            DetailViewModel(repository) as view_model:
        for pending in view_model.open(question_id):
            pending.result()
        status = report_failure(view_model)
        if status:
            return status
        logger.debug(
            "Loaded question %s with %s answers",
            question_id,
            len(view_model.answers.value),
        )
        print(render_detail(view_model.question.value, view_model.answers.value, selected))
    return 0
