"""
Quiet-period export coordination.

The preview surface renders asynchronously and never reports "done". What it
does do is keep asking the server whether an export is running while it
renders. The coordinator treats those status queries as activity: each one
pushes the settle deadline back, and once nobody has asked for a full quiet
period the export future resolves with the export path.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from revealsync.core.errors import ExportTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_QUIET_PERIOD = 0.8


class QuietPeriodTimer:
    """Trailing-edge deadline on an asyncio loop.

    ``arm()`` (re)starts the countdown, ``extend()`` restarts it only while it
    is running, and callbacks registered with ``on_fire()`` run once the
    countdown elapses.
    """

    def __init__(self, duration: float, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.duration = duration
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None
        self._callbacks: list[Callable[[], Any]] = []

    @property
    def armed(self) -> bool:
        return self._handle is not None

    def on_fire(self, callback: Callable[[], Any]) -> None:
        self._callbacks.append(callback)

    def arm(self, duration: Optional[float] = None) -> None:
        if duration is not None:
            self.duration = duration
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self.duration, self._fire)

    def extend(self) -> bool:
        """Restart a running countdown. Returns False if it was not armed."""
        if self._handle is None:
            return False
        self.arm()
        return True

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        for callback in list(self._callbacks):
            callback()


@dataclass
class ExportSession:
    """One in-flight export."""
    future: asyncio.Future
    timer: QuietPeriodTimer
    timeout_handle: Optional[asyncio.TimerHandle] = None


class ExportCoordinator:
    """
    Hands out the single pending export future and settles it on quiescence.

    Idle -> Pending on ``start()``; Pending -> Idle when the quiet-period timer
    fires. A second ``start()`` while pending joins the existing future.
    Without a timeout an export that never goes quiet never resolves.
    """

    def __init__(
        self,
        path_provider: Callable[[], str],
        quiet_period: float = DEFAULT_QUIET_PERIOD,
        timeout: Optional[float] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self._path_provider = path_provider
        self.quiet_period = quiet_period
        self.timeout = timeout
        self._loop = loop
        self._session: Optional[ExportSession] = None

    @property
    def session(self) -> Optional[ExportSession]:
        return self._session

    @property
    def pending(self) -> bool:
        return self._session is not None

    def start(self) -> asyncio.Future:
        """Open a session if none is pending and return its future."""
        if self._session is not None:
            return self._session.future

        loop = self._loop or asyncio.get_running_loop()
        session = ExportSession(
            future=loop.create_future(),
            timer=QuietPeriodTimer(self.quiet_period, loop),
        )
        session.timer.on_fire(lambda: self._settle(session))
        session.timer.arm()
        if self.timeout is not None:
            session.timeout_handle = loop.call_later(self.timeout, self._expire, session)
        self._session = session
        logger.info(f"Export started (quiet period {self.quiet_period:g}s)")
        return session.future

    def is_in_export(self) -> bool:
        """
        Whether an export is pending.

        Asking counts as activity: a pending session's quiet period restarts.
        """
        session = self._session
        if session is None:
            return False
        session.timer.extend()
        return True

    def dispose(self) -> None:
        """Drop a pending session, cancelling its future."""
        session = self._session
        if session is None:
            return
        self._close(session)
        if not session.future.done():
            session.future.cancel()

    def _close(self, session: ExportSession) -> None:
        session.timer.cancel()
        if session.timeout_handle is not None:
            session.timeout_handle.cancel()
            session.timeout_handle = None
        if self._session is session:
            self._session = None

    def _settle(self, session: ExportSession) -> None:
        self._close(session)
        if session.future.done():
            return
        path = self._path_provider()
        session.future.set_result(path)
        logger.info(f"Export settled: {path}")

    def _expire(self, session: ExportSession) -> None:
        session.timeout_handle = None
        self._close(session)
        if not session.future.done():
            logger.warning(f"Export did not settle within {self.timeout:g}s")
            session.future.set_exception(ExportTimeoutError(self.timeout))
