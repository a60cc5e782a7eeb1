# Screen state holders
from typing import Type, TypeVar

from stackbrowser.services.repository import StackOverflowRepository
from stackbrowser.viewmodels.base import BaseViewModel
from stackbrowser.viewmodels.detail import DetailViewModel
from stackbrowser.viewmodels.search import SearchViewModel

VM = TypeVar("VM", bound=BaseViewModel)


def create_view_model(
    model_class: Type[VM], repository: StackOverflowRepository, executor=None
) -> VM:
    """Build a state holder of the requested class around ``repository``."""
    if issubclass(model_class, SearchViewModel):
        return SearchViewModel(repository, executor)
    if issubclass(model_class, DetailViewModel):
        return DetailViewModel(repository, executor)
    raise ValueError("Unknown ViewModel class")


__all__ = [
    "BaseViewModel",
    "DetailViewModel",
    "SearchViewModel",
    "create_view_model",
]
