"""AbortSignal — cancellation token for in-flight requests."""

from __future__ import annotations

import asyncio
import logging

from fetch_decorators.exceptions import AbortError

logger = logging.getLogger(__name__)


class AbortSignal:
    """One-shot token that becomes aborted on demand or after a delay.

    Signals are not reusable: once aborted they stay aborted.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: BaseException | None = None
        self._timer: asyncio.TimerHandle | None = None

    @classmethod
    def timeout(cls, ms: float) -> AbortSignal:
        """Return a signal that aborts itself after ``ms`` milliseconds.

        Must be called from inside a running event loop.
        """
        signal = cls()
        loop = asyncio.get_running_loop()
        signal._timer = loop.call_later(ms / 1000, signal.abort)
        return signal

    @property
    def aborted(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> BaseException | None:
        return self._reason

    def abort(self, reason: BaseException | None = None) -> None:
        if self.aborted:
            return
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._reason = reason if reason is not None else AbortError()
        self._event.set()
        logger.debug("Abort signal fired: %s", self._reason)

    async def wait(self) -> None:
        await self._event.wait()

    def throw_if_aborted(self) -> None:
        if self._reason is not None:
            raise self._reason


def abort_after(ms: float) -> AbortSignal:
    """Shorthand for :meth:`AbortSignal.timeout`."""
    return AbortSignal.timeout(ms)
