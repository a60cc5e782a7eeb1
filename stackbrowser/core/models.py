from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, UTC
from typing import Any, Dict, List, Optional, Tuple


def to_datetime(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, UTC)


@dataclass(frozen=True)
class Owner:
    display_name: str
    user_id: Optional[int] = None
    profile_image: Optional[str] = None
    reputation: Optional[int] = None

    @classmethod
    def from_json(cls, item: Optional[Dict[str, Any]]) -> "Owner":
        item = item or {}
        return cls(
            display_name=item.get("display_name", "unknown"),
            user_id=item.get("user_id"),
            profile_image=item.get("profile_image"),
            reputation=item.get("reputation"),
        )


@dataclass(frozen=True)
class Answer:
    answer_id: int
    question_id: int
    body: str
    score: int
    creation_date: int
    owner: Owner
    is_accepted: bool = False

    @property
    def created_at(self) -> datetime:
        return to_datetime(self.creation_date)

    @classmethod
    def from_json(cls, item: Dict[str, Any]) -> "Answer":
        return cls(
            answer_id=item["answer_id"],
            question_id=item["question_id"],
            body=item.get("body", ""),
            score=item.get("score", 0),
            creation_date=item["creation_date"],
            owner=Owner.from_json(item.get("owner")),
            is_accepted=item.get("is_accepted", False),
        )


@dataclass(frozen=True)
class Question:
    question_id: int
    title: str
    score: int
    answer_count: int
    view_count: int
    creation_date: int
    last_activity_date: int
    owner: Owner
    tags: Tuple[str, ...] = ()
    is_answered: bool = False
    body: Optional[str] = None
    accepted_answer_id: Optional[int] = None

    @property
    def created_at(self) -> datetime:
        return to_datetime(self.creation_date)

    @property
    def last_active_at(self) -> datetime:
        return to_datetime(self.last_activity_date)

    @classmethod
    def from_json(cls, item: Dict[str, Any]) -> "Question":
        return cls(
            question_id=item["question_id"],
            title=item.get("title", ""),
            score=item.get("score", 0),
            answer_count=item.get("answer_count", 0),
            view_count=item.get("view_count", 0),
            creation_date=item["creation_date"],
            last_activity_date=item.get("last_activity_date", item["creation_date"]),
            owner=Owner.from_json(item.get("owner")),
            tags=tuple(item.get("tags", [])),
            is_answered=item.get("is_answered", False),
            body=item.get("body"),
            accepted_answer_id=item.get("accepted_answer_id"),
        )


@dataclass
class SearchResponse:
    """Envelope returned by the question endpoints."""

    items: List[Question] = field(default_factory=list)
    has_more: bool = False
    quota_max: int = 0
    quota_remaining: int = 0

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "SearchResponse":
        return cls(
            items=[Question.from_json(item) for item in data.get("items", [])],
            has_more=data.get("has_more", False),
            quota_max=data.get("quota_max", 0),
            quota_remaining=data.get("quota_remaining", 0),
        )


@dataclass
class AnswersResponse:
    """Envelope returned by the answers endpoint."""

    items: List[Answer] = field(default_factory=list)
    has_more: bool = False
    quota_max: int = 0
    quota_remaining: int = 0

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "AnswersResponse":
        return cls(
            items=[Answer.from_json(item) for item in data.get("items", [])],
            has_more=data.get("has_more", False),
            quota_max=data.get("quota_max", 0),
            quota_remaining=data.get("quota_remaining", 0),
        )
