"""Conversion engine: a pure event handler over an immutable converter state.

``handle(event, state, host)`` returns the next state and a tuple of effects
(clipboard writes, advisory timers) for the surrounding shell to execute.
Parse failures never escape ``handle``; they are recorded on the state.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace

from pytsconv._constants import ADVISORY_DURATION_MS, DEFAULT_HINT, MAX_SAFE_INTEGER
from pytsconv._errors import (
    ERR_MSG_CLIPBOARD_UNAVAILABLE,
    ERR_MSG_CLIPBOARD_WRITE_FAILED,
    ERR_MSG_INVALID_DATETIME,
    ERR_MSG_TIMESTAMP_NOT_A_DATE,
    ERR_MSG_TIMESTAMP_OUT_OF_RANGE,
    ClipboardError,
    ClipboardUnavailableError,
    ClipboardWriteFailedError,
    ConversionError,
    InvalidDateTimeError,
    InvalidTimestampError,
    TimestampOutOfRangeError,
)
from pytsconv._grammar import parse_local_datetime, parse_timestamp
from pytsconv._instant import (
    Instant,
    Precision,
    fraction_suffix,
    hides_detail,
    render_numeric,
    to_millis,
)
from pytsconv.host._base import Host, LocalFields

logger = logging.getLogger(__name__)

_CALENDAR_ERRORS = (ValueError, OverflowError, OSError)


class CopyTarget(enum.StrEnum):
    """Which field a copy request reads."""

    NUMERIC = "numeric"
    FORMATTED = "formatted"


class ClipboardOutcome(enum.StrEnum):
    WRITTEN = "written"
    FAILED = "failed"
    UNAVAILABLE = "unavailable"


class AdvisoryKind(enum.StrEnum):
    """Non-fatal, user-facing notices."""

    PRECISION_LOSS = "precision_loss"
    PRECISION_REDUCED = "precision_reduced"
    COPIED = "copied"
    CLIPBOARD_UNAVAILABLE = "clipboard_unavailable"
    CLIPBOARD_WRITE_FAILED = "clipboard_write_failed"

    @property
    def is_error(self) -> bool:
        return self in (AdvisoryKind.CLIPBOARD_UNAVAILABLE, AdvisoryKind.CLIPBOARD_WRITE_FAILED)


@dataclass(frozen=True)
class Advisory:
    """A transient notice. ``error`` is set only for clipboard failures."""

    kind: AdvisoryKind
    text: str
    serial: int
    error: ClipboardError | None = None

    @property
    def is_error(self) -> bool:
        return self.kind.is_error


@dataclass(frozen=True)
class State:
    """Complete converter state. Every event replaces it as a whole.

    ``readable`` and ``copy_text`` are always derived from ``instant`` and
    ``precision``; ``numeric_text`` and ``datetime_text`` hold the raw text
    of the field being typed when there is no instant.
    """

    precision: Precision = Precision.MILLISECONDS
    instant: Instant | None = None
    numeric_text: str = ""
    datetime_text: str = ""
    readable: str = ""
    copy_text: str = ""
    error: ConversionError | None = None
    advisory: Advisory | None = None
    serial: int = 0

    @property
    def status_line(self) -> str:
        if self.error is not None:
            return self.error.user_message
        if self.advisory is not None:
            return self.advisory.text
        return DEFAULT_HINT

    def field_text(self, target: CopyTarget) -> str:
        if target is CopyTarget.NUMERIC:
            return self.numeric_text
        return self.copy_text


# --- Events ---


@dataclass(frozen=True)
class Now:
    pass


@dataclass(frozen=True)
class SelectPrecision:
    precision: Precision


@dataclass(frozen=True)
class EditNumeric:
    text: str


@dataclass(frozen=True)
class EditDatetime:
    text: str


@dataclass(frozen=True)
class CopyRequested:
    target: CopyTarget


@dataclass(frozen=True)
class ClipboardWritten:
    target: CopyTarget
    outcome: ClipboardOutcome


@dataclass(frozen=True)
class AdvisoryExpired:
    serial: int


Event = (
    Now
    | SelectPrecision
    | EditNumeric
    | EditDatetime
    | CopyRequested
    | ClipboardWritten
    | AdvisoryExpired
)


# --- Effects ---


@dataclass(frozen=True)
class WriteClipboard:
    target: CopyTarget
    text: str


@dataclass(frozen=True)
class ScheduleAdvisoryClear:
    serial: int
    delay_ms: int


Effect = WriteClipboard | ScheduleAdvisoryClear


# --- Projections ---


def _local_fields(host: Host, millis: int) -> LocalFields:
    try:
        return host.calendar.to_local_fields(millis)
    except _CALENDAR_ERRORS as e:
        raise InvalidTimestampError(
            ERR_MSG_TIMESTAMP_NOT_A_DATE,
            f"{millis} ms has no calendar representation: {e}",
            wrapped=e,
        ) from e


def _project(
    state: State,
    instant: Instant,
    host: Host,
    *,
    advisory: Advisory | None = None,
) -> State:
    fields = _local_fields(host, instant.millis)
    return replace(
        state,
        instant=instant,
        numeric_text=render_numeric(instant, state.precision),
        datetime_text=fields.isoformat(),
        readable=host.formatter.format(fields),
        copy_text=host.formatter.format(fields, fraction_suffix(instant, state.precision)),
        error=None,
        advisory=advisory,
    )


def _cleared(state: State, *, numeric_text: str = "", datetime_text: str = "") -> State:
    return replace(
        state,
        instant=None,
        numeric_text=numeric_text,
        datetime_text=datetime_text,
        readable="",
        copy_text="",
        error=None,
        advisory=None,
    )


def _advise(state: State, kind: AdvisoryKind, text: str) -> tuple[State, Advisory]:
    serial = state.serial + 1
    return replace(state, serial=serial), Advisory(kind, text, serial)


# --- Parsing ---


def _instant_from_numeric(text: str, precision: Precision) -> Instant:
    value = parse_timestamp(text)
    if precision is Precision.NANOSECONDS:
        instant = Instant.from_nanoseconds(value)
        if abs(instant.millis) > MAX_SAFE_INTEGER:
            raise TimestampOutOfRangeError(
                ERR_MSG_TIMESTAMP_OUT_OF_RANGE,
                f"nanosecond timestamp {value} gives {instant.millis} ms, "
                f"beyond +/-{MAX_SAFE_INTEGER}",
            )
        return instant
    return Instant(to_millis(value, precision))


def _instant_from_datetime(text: str, host: Host) -> Instant:
    fields = parse_local_datetime(text)
    try:
        return Instant(host.calendar.from_local_fields(fields))
    except _CALENDAR_ERRORS as e:
        raise InvalidDateTimeError(
            ERR_MSG_INVALID_DATETIME,
            f"datetime field {text!r} is not a valid local time: {e}",
            wrapped=e,
        ) from e


def _rejected(state: State, error: ConversionError, **typed: str) -> State:
    logger.debug("rejected input: %s", error.internal())
    return replace(_cleared(state, **typed), error=error)


# --- Handlers ---


def _on_now(state: State, host: Host) -> State:
    return _project(state, Instant(host.clock.now_millis()), host)


def _on_select_precision(state: State, precision: Precision, host: Host) -> State:
    if precision is state.precision:
        return state
    logger.debug("precision %s -> %s", state.precision, precision)
    if state.instant is None:
        return replace(state, precision=precision)

    previous = state.instant
    lossy = hides_detail(previous, precision)
    state = replace(state, precision=precision)
    advisory = None
    if lossy:
        state, advisory = _advise(
            state,
            AdvisoryKind.PRECISION_REDUCED,
            f"Switching to {precision} hides detail below one "
            f"{'second' if precision is Precision.SECONDS else 'millisecond'}; "
            f"re-enter the value to restore it.",
        )
    return _project(state, previous.truncated(), host, advisory=advisory)


def _on_edit_numeric(state: State, text: str, host: Host) -> State:
    if not text.strip():
        return _cleared(state, numeric_text=text)
    try:
        instant = _instant_from_numeric(text, state.precision)
        advisory = None
        if instant.remainder:
            state, advisory = _advise(
                state,
                AdvisoryKind.PRECISION_LOSS,
                f"The readable and datetime fields are truncated to milliseconds "
                f"({instant.remainder} ns not shown); the copy field keeps full precision.",
            )
        return _project(state, instant, host, advisory=advisory)
    except ConversionError as e:
        return _rejected(state, e, numeric_text=text)


def _on_edit_datetime(state: State, text: str, host: Host) -> State:
    if not text.strip():
        return _cleared(state, datetime_text=text)
    try:
        return _project(state, _instant_from_datetime(text, host), host)
    except ConversionError as e:
        return _rejected(state, e, datetime_text=text)


_COPIED_TEXT = {
    CopyTarget.NUMERIC: "Timestamp copied to clipboard.",
    CopyTarget.FORMATTED: "Formatted time copied to clipboard.",
}


def _on_copy_requested(state: State, target: CopyTarget) -> tuple[State, tuple[Effect, ...]]:
    text = state.field_text(target)
    if not text:
        return state, ()
    return state, (WriteClipboard(target, text),)


def _clipboard_error(event: ClipboardWritten) -> ClipboardError:
    if event.outcome is ClipboardOutcome.UNAVAILABLE:
        return ClipboardUnavailableError(
            ERR_MSG_CLIPBOARD_UNAVAILABLE,
            f"no clipboard configured for copying the {event.target} field",
        )
    return ClipboardWriteFailedError(
        ERR_MSG_CLIPBOARD_WRITE_FAILED,
        f"clipboard refused the {event.target} field",
    )


def _on_clipboard_written(
    state: State, event: ClipboardWritten, advisory_duration_ms: int
) -> tuple[State, tuple[Effect, ...]]:
    if event.outcome is ClipboardOutcome.WRITTEN:
        kind = AdvisoryKind.COPIED
        error = None
        text = _COPIED_TEXT[event.target]
    else:
        error = _clipboard_error(event)
        logger.debug("copy failed: %s", error.internal())
        kind = (
            AdvisoryKind.CLIPBOARD_UNAVAILABLE
            if isinstance(error, ClipboardUnavailableError)
            else AdvisoryKind.CLIPBOARD_WRITE_FAILED
        )
        text = error.user_message
    serial = state.serial + 1
    advisory = Advisory(kind, text, serial, error=error)
    state = replace(state, serial=serial, advisory=advisory)
    return state, (ScheduleAdvisoryClear(serial, advisory_duration_ms),)


def _on_advisory_expired(state: State, serial: int) -> State:
    if state.advisory is None or state.advisory.serial != serial:
        return state
    return replace(state, advisory=None)


def handle(
    event: Event,
    state: State,
    host: Host,
    *,
    advisory_duration_ms: int = ADVISORY_DURATION_MS,
) -> tuple[State, tuple[Effect, ...]]:
    """Apply ``event`` to ``state``.

    Args:
        event: The user or timer event to apply.
        state: The current state; it is never modified.
        host: Clock, calendar and formatter collaborators.
        advisory_duration_ms: Visibility of clipboard advisories.

    Returns:
        The new state and the effects the caller must execute.

    Raises:
        TypeError: If ``event`` is not a known event type.
    """
    if isinstance(event, Now):
        try:
            return _on_now(state, host), ()
        except ConversionError as e:
            return _rejected(state, e), ()
    if isinstance(event, SelectPrecision):
        return _on_select_precision(state, event.precision, host), ()
    if isinstance(event, EditNumeric):
        return _on_edit_numeric(state, event.text, host), ()
    if isinstance(event, EditDatetime):
        return _on_edit_datetime(state, event.text, host), ()
    if isinstance(event, CopyRequested):
        return _on_copy_requested(state, event.target)
    if isinstance(event, ClipboardWritten):
        return _on_clipboard_written(state, event, advisory_duration_ms)
    if isinstance(event, AdvisoryExpired):
        return _on_advisory_expired(state, event.serial), ()
    raise TypeError(f"unknown event: {event!r}")
