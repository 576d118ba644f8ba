"""Abstract interfaces for the collaborators the engine depends on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class LocalFields:
    """An instant decomposed into local calendar fields."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int = 0

    def isoformat(self) -> str:
        """Render as ``YYYY-MM-DDTHH:mm:ss`` (seconds resolution)."""
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


class WallClock(ABC):
    """Source of the current time."""

    @abstractmethod
    def now_millis(self) -> int: ...


class Calendar(ABC):
    """Maps epoch milliseconds to and from local calendar fields.

    Both directions raise ``ValueError`` or ``OverflowError`` when the
    value has no valid calendar representation.
    """

    @abstractmethod
    def to_local_fields(self, millis: int) -> LocalFields: ...

    @abstractmethod
    def from_local_fields(self, fields: LocalFields) -> int: ...


class Formatter(ABC):
    """Long-form, human-readable rendering of local calendar fields."""

    @abstractmethod
    def format(self, fields: LocalFields, fraction: str = "") -> str:
        """Render ``fields``; ``fraction`` goes directly after the seconds."""


class Clipboard(ABC):
    """Asynchronous text clipboard."""

    @abstractmethod
    async def write_text(self, text: str) -> bool:
        """Write ``text``; return ``False`` if the clipboard refused it."""


@dataclass(frozen=True)
class Host:
    """The clock, calendar and formatter a converter runs against."""

    clock: WallClock
    calendar: Calendar
    formatter: Formatter

    @classmethod
    def system(cls) -> Host:
        """Build a host backed by the system clock and local time zone."""
        from pytsconv.host.system import LocalCalendar, LongFormFormatter, SystemClock

        return cls(SystemClock(), LocalCalendar(), LongFormFormatter())
