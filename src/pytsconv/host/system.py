"""Collaborators backed by the operating system."""

from __future__ import annotations

import calendar
import time
from datetime import datetime, timedelta, timezone, tzinfo

from tzlocal import get_localzone

from pytsconv._constants import NANOS_PER_MILLISECOND
from pytsconv.host._base import Calendar, Formatter, LocalFields, WallClock

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


class SystemClock(WallClock):
    """Reads the wall clock via ``time.time_ns``."""

    def now_millis(self) -> int:
        return time.time_ns() // NANOS_PER_MILLISECOND


class LocalCalendar(Calendar):
    """Gregorian calendar in a single time zone.

    Uses the system zone reported by ``tzlocal`` unless ``zone`` is given.
    The supported range is that of ``datetime`` (years 1 to 9999).
    """

    def __init__(self, zone: tzinfo | None = None) -> None:
        self._zone = zone if zone is not None else get_localzone()

    @property
    def zone(self) -> tzinfo:
        return self._zone

    def to_local_fields(self, millis: int) -> LocalFields:
        # timedelta arithmetic floors, so pre-epoch values decompose correctly
        local = (_EPOCH + millis * _ONE_MILLISECOND).astimezone(self._zone)
        return LocalFields(
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
            millisecond=local.microsecond // 1000,
        )

    def from_local_fields(self, fields: LocalFields) -> int:
        local = datetime(
            fields.year,
            fields.month,
            fields.day,
            fields.hour,
            fields.minute,
            fields.second,
            fields.millisecond * 1000,
            tzinfo=self._zone,
        )
        return (local - _EPOCH) // _ONE_MILLISECOND


class LongFormFormatter(Formatter):
    """Full date plus medium time, e.g. ``Tuesday, November 14, 2023 22:13:20``.

    Weekday and month names come from the stdlib ``calendar`` module and so
    follow the active ``LC_TIME`` locale.
    """

    def format(self, fields: LocalFields, fraction: str = "") -> str:
        weekday = calendar.day_name[calendar.weekday(fields.year, fields.month, fields.day)]
        month = calendar.month_name[fields.month]
        return (
            f"{weekday}, {month} {fields.day}, {fields.year} "
            f"{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}{fraction}"
        )
