"""Canonical instant, precision units and exact integer renderers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pytsconv._constants import MILLIS_PER_SECOND, NANOS_PER_MILLISECOND


class Precision(enum.StrEnum):
    """Unit used to parse and render the numeric timestamp field."""

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    NANOSECONDS = "nanoseconds"

    @property
    def placeholder(self) -> str:
        """Example timestamp in this unit, for input hints."""
        return _PLACEHOLDERS[self]


_PLACEHOLDERS = {
    Precision.SECONDS: "1704096000",
    Precision.MILLISECONDS: "1704096000000",
    Precision.NANOSECONDS: "1704096000000000000",
}


@dataclass(frozen=True)
class Instant:
    """A point in time: epoch milliseconds plus a sub-millisecond remainder.

    ``remainder`` is a nanosecond count in ``[0, 1_000_000)``. It is never
    negative: negative timestamps borrow from ``millis`` instead, so
    ``-1`` ns is ``Instant(millis=-1, remainder=999_999)``.
    """

    millis: int
    remainder: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.remainder < NANOS_PER_MILLISECOND:
            raise ValueError(
                f"remainder must be in [0, {NANOS_PER_MILLISECOND}), got {self.remainder}"
            )

    @classmethod
    def from_nanoseconds(cls, nanos: int) -> Instant:
        millis, remainder = divmod(nanos, NANOS_PER_MILLISECOND)
        return cls(millis, remainder)

    @property
    def nanoseconds(self) -> int:
        return self.millis * NANOS_PER_MILLISECOND + self.remainder

    def truncated(self) -> Instant:
        """Return this instant with the sub-millisecond remainder dropped."""
        if not self.remainder:
            return self
        return Instant(self.millis)


def to_millis(value: int, precision: Precision) -> int:
    """Convert a seconds or milliseconds count to milliseconds."""
    if precision is Precision.SECONDS:
        return value * MILLIS_PER_SECOND
    if precision is Precision.MILLISECONDS:
        return value
    raise ValueError("nanosecond values must be split with Instant.from_nanoseconds")


def render_numeric(instant: Instant, precision: Precision) -> str:
    """Render the numeric field. Seconds floor toward negative infinity."""
    if precision is Precision.SECONDS:
        return str(instant.millis // MILLIS_PER_SECOND)
    if precision is Precision.MILLISECONDS:
        return str(instant.millis)
    return str(instant.nanoseconds)


def fraction_suffix(instant: Instant, precision: Precision) -> str:
    """Fractional-second suffix for the copy field."""
    sub_second = instant.millis % MILLIS_PER_SECOND
    if precision is Precision.SECONDS:
        return ""
    if precision is Precision.MILLISECONDS:
        return f".{sub_second:03d}"
    return f".{sub_second * NANOS_PER_MILLISECOND + instant.remainder:09d}"


def hides_detail(instant: Instant, precision: Precision) -> bool:
    """Whether rendering ``instant`` at ``precision`` loses information."""
    if precision is Precision.NANOSECONDS:
        return False
    if instant.remainder:
        return True
    return precision is Precision.SECONDS and instant.millis % MILLIS_PER_SECOND != 0
