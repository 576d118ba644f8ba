"""Host collaborators: wall clock, local calendar, formatter and clipboard."""

from pytsconv.host._base import (
    Calendar,
    Clipboard,
    Formatter,
    Host,
    LocalFields,
    WallClock,
)
from pytsconv.host.memory import FrozenClock, MemoryClipboard
from pytsconv.host.system import LocalCalendar, LongFormFormatter, SystemClock

__all__ = [
    "Calendar",
    "Clipboard",
    "Formatter",
    "FrozenClock",
    "Host",
    "LocalCalendar",
    "LocalFields",
    "LongFormFormatter",
    "MemoryClipboard",
    "SystemClock",
    "WallClock",
]
