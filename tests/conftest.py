import pytest
from unittest.mock import MagicMock

from stackbrowser.core.models import Answer, Owner, Question


@pytest.fixture
def sample_owner():
    return Owner(display_name="User", user_id=42, reputation=1234)


@pytest.fixture
def sample_question(sample_owner):
    return Question(
        question_id=1,
        title="How to parse JSON in Kotlin?",
        body="<p>I need help parsing JSON.</p>",
        score=2,
        answer_count=1,
        view_count=3,
        creation_date=1672531200,
        last_activity_date=1672534800,
        owner=sample_owner,
        tags=("kotlin", "json"),
        is_answered=False,
    )


@pytest.fixture
def sample_answers(sample_owner):
    return [
        Answer(
            answer_id=10,
            question_id=1,
            body="<p>Use kotlinx.serialization</p>",
            score=5,
            creation_date=1672531300,
            owner=sample_owner,
            is_accepted=True,
        ),
        Answer(
            answer_id=11,
            question_id=1,
            body="<p>Use Gson</p>",
            score=12,
            creation_date=1672531200,
            owner=Owner(display_name="Other"),
        ),
        Answer(
            answer_id=12,
            question_id=1,
            body="<p>Use Moshi</p>",
            score=5,
            creation_date=1672532000,
            owner=Owner(display_name="Third"),
        ),
    ]


@pytest.fixture
def question_item():
    return {
        "question_id": 1,
        "title": "How to parse JSON in Kotlin?",
        "body": "<p>I need help parsing JSON.</p>",
        "score": 2,
        "answer_count": 1,
        "view_count": 3,
        "creation_date": 1672531200,
        "last_activity_date": 1672534800,
        "owner": {"user_id": 42, "display_name": "User", "reputation": 1234},
        "tags": ["kotlin", "json"],
        "is_answered": False,
    }


@pytest.fixture
def answer_item():
    return {
        "answer_id": 10,
        "question_id": 1,
        "body": "<p>Use kotlinx.serialization</p>",
        "score": 5,
        "creation_date": 1672531300,
        "owner": {"user_id": 42, "display_name": "User", "reputation": 1234},
        "is_accepted": True,
    }


def envelope(items):
    return {"items": items, "has_more": False, "quota_max": 300, "quota_remaining": 299}


def make_response(payload=None, is_success=True, reason_phrase="OK", status_code=200):
    resp = MagicMock()
    resp.is_success = is_success
    resp.status_code = status_code
    resp.reason_phrase = reason_phrase
    resp.content = b"" if payload is None else b"{...}"
    resp.json.return_value = payload
    return resp


@pytest.fixture
def mock_httpx_client():
    client = MagicMock()
    client.get.return_value = make_response(envelope([]))
    return client
