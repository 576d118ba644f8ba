"""Shared test fixtures."""

from datetime import timedelta, timezone

import pytest

from pytsconv.host import FrozenClock, Host, LocalCalendar, LongFormFormatter, MemoryClipboard

FROZEN_MILLIS = 1_700_000_000_000
"""2023-11-14T22:13:20Z, a Tuesday."""

UTC_PLUS_8 = timezone(timedelta(hours=8))


@pytest.fixture
def clock():
    return FrozenClock(FROZEN_MILLIS)


@pytest.fixture
def utc_host(clock):
    return Host(clock, LocalCalendar(timezone.utc), LongFormFormatter())


@pytest.fixture
def plus8_host(clock):
    return Host(clock, LocalCalendar(UTC_PLUS_8), LongFormFormatter())


@pytest.fixture
def clipboard():
    return MemoryClipboard()
