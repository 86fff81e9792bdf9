from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from recipe_editor.domain.errors import EditorError
from recipe_editor.domain.models import SessionStatus

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Recipe has been updated. Redirecting to all recipes."

NavigateCallback = Callable[[str], None]
StatusCallback = Callable[[SessionStatus, Optional[str]], None]


class SessionResultNotifier:
    """
    Tracks the submission outcome and drives post-submit navigation.

    idle -> submitting -> success | failure
    failure accepts a new submission. success shows an acknowledgment that
    navigates to the listing when it times out or is dismissed.
    """

    def __init__(
        self,
        on_navigate: Optional[NavigateCallback] = None,
        ack_seconds: float = 2.0,
        listing_route: str = "/",
        on_status: Optional[StatusCallback] = None,
    ):
        self.on_navigate = on_navigate
        self.ack_seconds = ack_seconds
        self.listing_route = listing_route
        self.on_status = on_status
        self.status = SessionStatus.IDLE
        self.message: Optional[str] = None
        self.last_error: Optional[EditorError] = None
        self.navigated = False
        self._ack_task: Optional[asyncio.Task[None]] = None

    @property
    def is_busy(self) -> bool:
        return self.status is SessionStatus.SUBMITTING

    @property
    def can_submit(self) -> bool:
        return self.status in (SessionStatus.IDLE, SessionStatus.FAILURE)

    def begin(self) -> None:
        self._set(SessionStatus.SUBMITTING, None)

    def succeed(self) -> None:
        self.last_error = None
        self._set(SessionStatus.SUCCESS, SUCCESS_MESSAGE)
        self._ack_task = asyncio.get_running_loop().create_task(
            self._auto_proceed(), name="edit-session-ack"
        )

    def fail(self, error: EditorError) -> None:
        self.last_error = error
        self._set(SessionStatus.FAILURE, str(error))

    def reset(self) -> None:
        self._set(SessionStatus.IDLE, None)

    def dismiss(self) -> None:
        if self.status is SessionStatus.SUCCESS:
            self.proceed()

    def proceed(self) -> None:
        if self.navigated:
            return
        self.navigated = True
        self._cancel_timer()
        logger.info("notifier.navigate route=%s", self.listing_route)
        if self.on_navigate is not None:
            self.on_navigate(self.listing_route)

    def cancel(self) -> None:
        self._cancel_timer()

    async def _auto_proceed(self) -> None:
        await asyncio.sleep(self.ack_seconds)
        self._ack_task = None
        try:
            self.proceed()
        except Exception:
            logger.exception("notifier.navigate_failed route=%s", self.listing_route)

    def _cancel_timer(self) -> None:
        task, self._ack_task = self._ack_task, None
        if task is not None and not task.done():
            task.cancel()

    def _set(self, status: SessionStatus, message: Optional[str]) -> None:
        self.status = status
        self.message = message
        if self.on_status is not None:
            self.on_status(status, message)
