from datetime import datetime, UTC

import pytest

from stackbrowser.core.models import Answer, AnswersResponse, Owner, Question, SearchResponse
from stackbrowser.core.observable import Observable
from stackbrowser.core.sorting import AnswerFilter, sort_answers
from stackbrowser.utils.text import format_relative, format_timestamp, html_to_text, strip_html


def test_sort_by_votes_is_descending_and_stable(sample_answers):
    ordered = sort_answers(sample_answers, "Votes")

    assert [a.answer_id for a in ordered] == [11, 10, 12]
    scores = [a.score for a in ordered]
    assert scores == sorted(scores, reverse=True)


def test_sort_by_active_is_newest_first(sample_answers):
    ordered = sort_answers(sample_answers, AnswerFilter.ACTIVE)

    assert [a.answer_id for a in ordered] == [12, 10, 11]


def test_sort_by_oldest_is_ascending(sample_answers):
    ordered = sort_answers(sample_answers, "oldest")

    dates = [a.creation_date for a in ordered]
    assert dates == sorted(dates)
    assert ordered[0].answer_id == 11


def test_sort_never_mutates_input(sample_answers):
    original = list(sample_answers)

    for answer_filter in AnswerFilter:
        result = sort_answers(sample_answers, answer_filter)
        assert result is not sample_answers

    assert sample_answers == original


def test_sort_defaults_to_votes(sample_answers):
    assert sort_answers(sample_answers) == sort_answers(sample_answers, AnswerFilter.VOTES)


def test_sort_rejects_unknown_filter(sample_answers):
    with pytest.raises(ValueError):
        sort_answers(sample_answers, "Newest")


def test_question_from_json(question_item, sample_question):
    assert Question.from_json(question_item) == sample_question


def test_question_from_json_fills_missing_optionals():
    question = Question.from_json(
        {"question_id": 5, "title": "T", "creation_date": 100, "accepted_answer_id": 9}
    )

    assert question.body is None
    assert question.tags == ()
    assert question.owner == Owner(display_name="unknown")
    assert question.last_activity_date == 100
    assert question.accepted_answer_id == 9


def test_envelopes_from_json(question_item, answer_item):
    search = SearchResponse.from_json(
        {"items": [question_item], "has_more": True, "quota_max": 300, "quota_remaining": 7}
    )
    answers = AnswersResponse.from_json({"items": [answer_item]})

    assert search.has_more is True
    assert search.quota_remaining == 7
    assert search.items[0].question_id == 1
    assert isinstance(answers.items[0], Answer)
    assert answers.quota_max == 0


def test_entities_are_immutable(sample_question):
    with pytest.raises(AttributeError):
        sample_question.question_id = 2


def test_created_at_is_utc(sample_question):
    assert sample_question.created_at == datetime(2023, 1, 1, tzinfo=UTC)


def test_observable_notifies_only_on_change():
    seen = []
    box = Observable(0)
    unsubscribe = box.subscribe(seen.append)

    box.set(1)
    box.set(1)
    unsubscribe()
    box.set(2)

    assert seen == [1]
    assert box.value == 2


def test_strip_html_removes_tags():
    assert strip_html("<b>Bold</b> and <i>italic</i> text") == "Bold and italic text"
    assert strip_html("") == ""
    assert strip_html("Just text") == "Just text"
    assert strip_html(None) == ""


def test_html_to_text_simple():
    text = html_to_text("<p>Hello <b>World</b></p>")
    assert "**World**" in text
    assert "Hello" in text


def test_html_to_text_code_block_with_language():
    text = html_to_text('<pre><code class="lang-kotlin">val x = 1</code></pre>')
    assert "```kotlin\nval x = 1\n```" in text


def test_html_to_text_link_and_list():
    text = html_to_text('<ul><li>one</li><li><a href="https://example.com">Link</a></li></ul>')
    assert "- one" in text
    assert "- [Link](https://example.com)" in text


def test_format_timestamp():
    assert format_timestamp(1620000000) == "May 03 2021 at 00:00"


def test_format_relative():
    now = datetime(2023, 1, 1, 12, 0, 0, tzinfo=UTC)
    base = int(now.timestamp())

    assert format_relative(base - 3 * 3600, now=now) == "3 hours ago"
    assert format_relative(base - 60, now=now) == "1 minute ago"
    assert format_relative(base - 5, now=now) == "moments ago"
    assert format_relative(base + 2 * 86400, now=now) == "2 days from now"
