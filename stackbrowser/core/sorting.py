from __future__ import annotations

from enum import Enum
from typing import Iterable, List

from stackbrowser.core.models import Answer


class AnswerFilter(str, Enum):
    VOTES = "Votes"
    ACTIVE = "Active"
    OLDEST = "Oldest"

    @classmethod
    def parse(cls, value: "AnswerFilter | str") -> "AnswerFilter":
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        raise ValueError(f"Unknown answer filter: {value!r}")


DEFAULT_FILTER = AnswerFilter.VOTES


def sort_answers(
    answers: Iterable[Answer], answer_filter: AnswerFilter | str = DEFAULT_FILTER
) -> List[Answer]:
    """Return a new list of answers ordered by the selected filter.

    - Votes: highest score first
    - Active: newest first
    - Oldest: oldest first

    Python's sort is stable, so ties keep their original relative order.
    """
    selected = AnswerFilter.parse(answer_filter)
    if selected is AnswerFilter.VOTES:
        return sorted(answers, key=lambda a: a.score, reverse=True)
    if selected is AnswerFilter.ACTIVE:
        return sorted(answers, key=lambda a: a.creation_date, reverse=True)
    return sorted(answers, key=lambda a: a.creation_date)
