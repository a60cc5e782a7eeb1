from __future__ import annotations

import itertools
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional, Set

from stackbrowser.conf.config import settings
from stackbrowser.core.observable import Observable
from stackbrowser.core.result import Error, ErrorKind, Loading, NetworkResult, Success
from stackbrowser.services.repository import StackOverflowRepository

logger = logging.getLogger(__name__)


class BaseViewModel:
    """Shared loading/error/dialog bookkeeping for the screen state holders.

    Repository calls run on a thread pool. Each call is tagged with a
    sequence number per channel ("questions", "answers", ...); a result whose
    tag is no longer the latest for its channel is dropped, so a slow stale
    response can never overwrite a newer one.
    """

    def __init__(
        self,
        repository: StackOverflowRepository,
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> None:
        self._repository = repository
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=settings.DEFAULT_WORKERS,
            thread_name_prefix=type(self).__name__,
        )
        self._lock = threading.RLock()
        self._sequence = itertools.count(1)
        self._latest: Dict[str, int] = {}
        self._in_flight: Set[int] = set()

        self.is_loading: Observable[bool] = Observable(False)
        self.error_message: Observable[Optional[str]] = Observable(None)
        self.show_network_dialog: Observable[bool] = Observable(False)

    def dismiss_network_dialog(self) -> None:
        self.show_network_dialog.set(False)

    def clear_error(self) -> None:
        self.error_message.set(None)

    def _launch(
        self,
        channel: str,
        call: Callable[[], NetworkResult[Any]],
        on_success: Callable[[Any], None],
    ) -> Future:
        with self._lock:
            token = next(self._sequence)
            previous = self._latest.get(channel)
            self._latest[channel] = token
            self._in_flight.add(token)
            self._refresh_loading()
            self.error_message.set(None)
            try:
                return self._executor.submit(self._run, channel, token, call, on_success)
            except RuntimeError:
                self._in_flight.discard(token)
                if previous is None:
                    del self._latest[channel]
                else:
                    self._latest[channel] = previous
                self._refresh_loading()
                raise

    def _run(
        self,
        channel: str,
        token: int,
        call: Callable[[], NetworkResult[Any]],
        on_success: Callable[[Any], None],
    ) -> NetworkResult[Any]:
        try:
            result = call()
            with self._lock:
                if self._latest.get(channel) != token:
                    logger.debug("Discarding stale %s result (request %s)", channel, token)
                    return result
                self._apply(result, on_success)
            return result
        finally:
            with self._lock:
                self._in_flight.discard(token)
                self._refresh_loading()

    def _refresh_loading(self) -> None:
        # Superseded requests may still be running; only the latest per channel counts.
        self.is_loading.set(
            any(token in self._in_flight for token in self._latest.values())
        )

    def _apply(self, result: NetworkResult[Any], on_success: Callable[[Any], None]) -> None:
        match result:
            case Success(data=data):
                on_success(data)
            case Error(kind=ErrorKind.CONNECTIVITY):
                self.show_network_dialog.set(True)
            case Error(message=message):
                self.error_message.set(message)
            case Loading():
                pass

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
