"""StackBrowser package."""

from dotenv import load_dotenv

load_dotenv()

from stackbrowser.core.models import Answer, Owner, Question
from stackbrowser.core.result import Error, ErrorKind, Loading, NetworkResult, Success
from stackbrowser.services.repository import StackOverflowRepository
from stackbrowser.viewmodels import DetailViewModel, SearchViewModel

__all__ = [
    "Answer",
    "Owner",
    "Question",
    "Error",
    "ErrorKind",
    "Loading",
    "NetworkResult",
    "Success",
    "StackOverflowRepository",
    "DetailViewModel",
    "SearchViewModel",
]
