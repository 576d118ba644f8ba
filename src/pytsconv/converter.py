"""Stateful converter that runs the engine and executes its effects."""

from __future__ import annotations

import asyncio
import logging

from pytsconv._constants import ADVISORY_DURATION_MS
from pytsconv._engine import (
    AdvisoryExpired,
    ClipboardOutcome,
    ClipboardWritten,
    CopyRequested,
    CopyTarget,
    EditDatetime,
    EditNumeric,
    Effect,
    Event,
    Now,
    ScheduleAdvisoryClear,
    SelectPrecision,
    State,
    WriteClipboard,
    handle,
)
from pytsconv._instant import Precision
from pytsconv.host._base import Clipboard, Host

logger = logging.getLogger(__name__)


class TimestampConverter:
    """Keeps the numeric, datetime, readable and copy fields consistent.

    Conversion methods are synchronous. Copying is a coroutine because the
    clipboard is; the advisory it produces is cleared by a timer on the
    running event loop.

    Args:
        host: Clock, calendar and formatter. Defaults to ``Host.system()``.
        clipboard: Clipboard to copy into. Without one, copies report
            the clipboard as unavailable.
        precision: Initial precision. Defaults to milliseconds.
        advisory_duration_ms: How long clipboard advisories stay visible.
    """

    def __init__(
        self,
        *,
        host: Host | None = None,
        clipboard: Clipboard | None = None,
        precision: Precision = Precision.MILLISECONDS,
        advisory_duration_ms: int = ADVISORY_DURATION_MS,
    ) -> None:
        self._host = host if host is not None else Host.system()
        self._clipboard = clipboard
        self._advisory_duration_ms = advisory_duration_ms
        self._state = State(precision=Precision(precision))

    @property
    def state(self) -> State:
        return self._state

    def from_now(self) -> State:
        return self._apply_sync(Now())

    def set_precision(self, precision: Precision | str) -> State:
        return self._apply_sync(SelectPrecision(Precision(precision)))

    def edit_numeric(self, text: str) -> State:
        return self._apply_sync(EditNumeric(text))

    def edit_datetime(self, text: str) -> State:
        return self._apply_sync(EditDatetime(text))

    async def copy(self, target: CopyTarget | str = CopyTarget.NUMERIC) -> State:
        """Copy the numeric or formatted field; empty fields are ignored."""
        return await self.dispatch(CopyRequested(CopyTarget(target)))

    async def dispatch(self, event: Event) -> State:
        """Apply any event and run the effects it produces."""
        for effect in self._apply(event):
            await self._run(effect)
        return self._state

    def _apply(self, event: Event) -> tuple[Effect, ...]:
        self._state, effects = handle(
            event,
            self._state,
            self._host,
            advisory_duration_ms=self._advisory_duration_ms,
        )
        return effects

    def _apply_sync(self, event: Event) -> State:
        effects = self._apply(event)
        if effects:
            raise RuntimeError(f"{type(event).__name__} produced effects; use dispatch()")
        return self._state

    async def _run(self, effect: Effect) -> None:
        if isinstance(effect, WriteClipboard):
            outcome = await self._write(effect.text)
            await self.dispatch(ClipboardWritten(effect.target, outcome))
        elif isinstance(effect, ScheduleAdvisoryClear):
            asyncio.get_running_loop().call_later(
                effect.delay_ms / 1000, self._apply, AdvisoryExpired(effect.serial)
            )
        else:
            raise TypeError(f"unknown effect: {effect!r}")

    async def _write(self, text: str) -> ClipboardOutcome:
        if self._clipboard is None:
            return ClipboardOutcome.UNAVAILABLE
        try:
            written = await self._clipboard.write_text(text)
        except Exception:
            logger.warning("clipboard write raised", exc_info=True)
            return ClipboardOutcome.FAILED
        return ClipboardOutcome.WRITTEN if written else ClipboardOutcome.FAILED
