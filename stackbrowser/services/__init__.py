# Services module - Stack Exchange access and connectivity
from stackbrowser.services.connectivity import SocketConnectivityChecker
from stackbrowser.services.repository import StackOverflowRepository
from stackbrowser.services.stack_client import StackOverflowClient

__all__ = ["SocketConnectivityChecker", "StackOverflowRepository", "StackOverflowClient"]
