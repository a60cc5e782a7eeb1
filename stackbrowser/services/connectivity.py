"""Local reachability probe, independent of the outcome of any API call."""

from __future__ import annotations

import logging
import socket
from typing import Callable

from stackbrowser.conf.config import settings

logger = logging.getLogger(__name__)

ConnectivityCheck = Callable[[], bool]


class SocketConnectivityChecker:
    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        timeout: float | None = None,
    ) -> None:
        self.host = host or settings.CONNECTIVITY_HOST
        self.port = port or settings.CONNECTIVITY_PORT
        self.timeout = timeout if timeout is not None else settings.CONNECTIVITY_TIMEOUT

    def __call__(self) -> bool:
        try:
            with socket.create_connection((self.host, self.port), timeout=self.timeout):
                return True
        except OSError as exc:
            logger.debug("Connectivity probe to %s:%s failed: %s", self.host, self.port, exc)
            return False


def always_online() -> bool:
    return True
