"""pytsconv - Keep timestamps, local datetimes and readable dates in sync."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytsconv")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from pytsconv._engine import (
    Advisory,
    AdvisoryExpired,
    AdvisoryKind,
    ClipboardOutcome,
    ClipboardWritten,
    CopyRequested,
    CopyTarget,
    EditDatetime,
    EditNumeric,
    Now,
    ScheduleAdvisoryClear,
    SelectPrecision,
    State,
    WriteClipboard,
    handle,
)
from pytsconv._errors import (
    ClipboardError,
    ClipboardUnavailableError,
    ClipboardWriteFailedError,
    ConversionError,
    InvalidDateTimeError,
    InvalidTimestampError,
    TimestampOutOfRangeError,
)
from pytsconv._instant import Instant, Precision
from pytsconv.converter import TimestampConverter
from pytsconv.host import Host

__all__ = [
    "handle",
    "Advisory",
    "AdvisoryExpired",
    "AdvisoryKind",
    "ClipboardOutcome",
    "ClipboardWritten",
    "CopyRequested",
    "CopyTarget",
    "EditDatetime",
    "EditNumeric",
    "Host",
    "Instant",
    "Now",
    "Precision",
    "ScheduleAdvisoryClear",
    "SelectPrecision",
    "State",
    "TimestampConverter",
    "WriteClipboard",
    "ClipboardError",
    "ClipboardUnavailableError",
    "ClipboardWriteFailedError",
    "ConversionError",
    "InvalidDateTimeError",
    "InvalidTimestampError",
    "TimestampOutOfRangeError",
]
