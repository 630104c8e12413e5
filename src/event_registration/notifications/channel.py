from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Protocol

from .events import RegistrationConfirmed

logger = logging.getLogger(__name__)

Handler = Callable[[RegistrationConfirmed], object]


class NotificationChannel(Protocol):
    def publish(self, event: RegistrationConfirmed) -> None:
        """Hand the event off; must not block on or fail because of delivery."""

        raise NotImplementedError


class ThreadedNotificationChannel(NotificationChannel):
    """Delivers each event at most once on a small worker pool.

    Failures are logged and dropped: no retry, no queue persistence.
    """

    def __init__(self, handler: Handler, *, max_workers: int = 2):
        self._handler = handler
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="notify")

    def publish(self, event: RegistrationConfirmed) -> None:
        try:
            future = self._executor.submit(self._handler, event)
        except RuntimeError:
            logger.exception("Notification channel closed; dropping event for registration %s", event.registration_id)
            return
        future.add_done_callback(lambda f: self._log_failure(f, event))

    @staticmethod
    def _log_failure(future: Future, event: RegistrationConfirmed) -> None:
        exc = future.exception()
        if exc is not None:
            logger.error(
                "Falha ao enviar e-mail de confirmação (inscrição %s): %s",
                event.registration_id,
                exc,
                exc_info=exc,
            )

    def shutdown(self, *, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
