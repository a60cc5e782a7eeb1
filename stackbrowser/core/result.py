"""Tri-state result returned by the repository.

Every repository call resolves to exactly one of ``Success``, ``Error`` or
``Loading``. Callers match on the variant::

    match result:
        case Success(data=questions):
            ...
        case Error(message=message, kind=ErrorKind.CONNECTIVITY):
            ...
        case Error(message=message):
            ...
        case Loading():
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(Enum):
    CONNECTIVITY = "connectivity"
    NETWORK = "network"
    HTTP = "http"
    EMPTY_RESPONSE = "empty_response"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T


@dataclass(frozen=True)
class Error:
    message: str
    kind: ErrorKind = ErrorKind.NETWORK

    @property
    def is_connectivity(self) -> bool:
        return self.kind is ErrorKind.CONNECTIVITY


@dataclass(frozen=True)
class Loading:
    is_loading: bool = True


NetworkResult = Union[Success[T], Error, Loading]
