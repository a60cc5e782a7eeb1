"""Plain-text rendering of questions and answers for the terminal."""

from __future__ import annotations

from textwrap import indent
from typing import Iterable, List, Optional

from stackbrowser.core.models import Answer, Question
from stackbrowser.core.sorting import AnswerFilter, sort_answers
from stackbrowser.utils.text import format_relative, format_timestamp, html_to_text, strip_html

NO_NETWORK_DIALOG = (
    "No Internet Connection\n"
    "Please check your network settings and try again."
)
EMPTY_SEARCH_RESULT = "No questions found. Try a different search."
PREVIEW_LENGTH = 120


def question_link(question: Question) -> str:
    return f"https://stackoverflow.com/q/{question.question_id}"


def render_question_summary(question: Question) -> str:
    answered = "✔" if question.is_answered else " "
    lines = [
        f"[{question.score:>4}] {answered} {strip_html(question.title)}",
        f"       {question.answer_count} answers · {question.view_count} views · "
        f"asked {format_relative(question.creation_date)} by {question.owner.display_name}",
    ]
    if question.tags:
        lines.append(f"       tags: {', '.join(question.tags)}")
    preview = strip_html(question.body)
    if preview:
        if len(preview) > PREVIEW_LENGTH:
            preview = preview[: PREVIEW_LENGTH - 1].rstrip() + "…"
        lines.append(f"       {preview}")
    lines.append(f"       {question_link(question)}")
    return "\n".join(lines)


def render_question_list(questions: Iterable[Question]) -> str:
    blocks = [render_question_summary(q) for q in questions]
    if not blocks:
        return EMPTY_SEARCH_RESULT
    return "\n\n".join(blocks)


def render_answer(answer: Answer, accepted_answer_id: Optional[int] = None) -> str:
    accepted = answer.is_accepted or answer.answer_id == accepted_answer_id
    header = f"▲ {answer.score}" + ("  ✔ accepted" if accepted else "")
    owner = answer.owner
    byline = f"answered {format_timestamp(answer.creation_date)} by {owner.display_name}"
    if owner.reputation is not None:
        byline += f" ({owner.reputation})"
    return "\n".join([header, byline, "", indent(html_to_text(answer.body), "    ")])


def render_detail(
    question: Optional[Question],
    answers: List[Answer],
    answer_filter: AnswerFilter | str = AnswerFilter.VOTES,
) -> str:
    sections: List[str] = []
    if question is not None:
        sections.append(
            "\n".join(
                [
                    f"# {strip_html(question.title)}",
                    f"Asked {format_timestamp(question.creation_date)} · "
                    f"Active {format_relative(question.last_activity_date)} · "
                    f"Viewed {question.view_count} times · Score {question.score}",
                    f"By {question.owner.display_name}",
                    "",
                    html_to_text(question.body),
                    "",
                    f"Tags: {', '.join(question.tags)}" if question.tags else "",
                    question_link(question),
                ]
            ).rstrip()
        )

    selected = AnswerFilter.parse(answer_filter)
    ordered = sort_answers(answers, selected)
    accepted_id = question.accepted_answer_id if question is not None else None
    sections.append(f"## {len(ordered)} Answers (sorted by {selected.value})")
    sections.extend(render_answer(a, accepted_id) for a in ordered)
    return "\n\n".join(sections)
