# Domain models, results and client-side ordering
from stackbrowser.core.models import Answer, AnswersResponse, Owner, Question, SearchResponse
from stackbrowser.core.observable import Observable
from stackbrowser.core.result import Error, ErrorKind, Loading, NetworkResult, Success
from stackbrowser.core.sorting import AnswerFilter, sort_answers

__all__ = [
    "Answer",
    "AnswersResponse",
    "Owner",
    "Question",
    "SearchResponse",
    "Observable",
    "Error",
    "ErrorKind",
    "Loading",
    "NetworkResult",
    "Success",
    "AnswerFilter",
    "sort_answers",
]
