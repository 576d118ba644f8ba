"""TimestampConverter shell tests."""

import asyncio
import logging

import pytest

from conftest import FROZEN_MILLIS
from pytsconv import (
    AdvisoryKind,
    ClipboardWriteFailedError,
    CopyTarget,
    Instant,
    InvalidTimestampError,
    Now,
    Precision,
    TimestampConverter,
)
from pytsconv.host import Clipboard, MemoryClipboard


class ExplodingClipboard(Clipboard):
    async def write_text(self, text: str) -> bool:
        raise OSError("no display")


@pytest.fixture
def converter(utc_host, clipboard):
    return TimestampConverter(host=utc_host, clipboard=clipboard)


class TestConversions:
    def test_initial_state(self, converter):
        assert converter.state.precision is Precision.MILLISECONDS
        assert converter.state.instant is None

    def test_initial_precision(self, utc_host):
        converter = TimestampConverter(host=utc_host, precision="nanoseconds")
        assert converter.state.precision is Precision.NANOSECONDS

    def test_from_now(self, converter):
        state = converter.from_now()
        assert state is converter.state
        assert state.numeric_text == "1700000000000"
        assert state.datetime_text == "2023-11-14T22:13:20"
        assert state.copy_text.endswith(".000")

    def test_set_precision_accepts_strings(self, converter):
        converter.from_now()
        state = converter.set_precision("seconds")
        assert state.precision is Precision.SECONDS
        assert state.numeric_text == "1700000000"

    def test_set_precision_rejects_unknown(self, converter):
        with pytest.raises(ValueError):
            converter.set_precision("minutes")

    def test_edit_numeric_then_datetime(self, converter):
        converter.edit_numeric("0")
        assert converter.state.datetime_text == "1970-01-01T00:00:00"
        state = converter.edit_datetime("2023-11-14T22:13:20")
        assert state.instant == Instant(FROZEN_MILLIS)
        assert state.numeric_text == "1700000000000"

    def test_error_does_not_raise(self, converter):
        state = converter.edit_numeric("oops")
        assert isinstance(state.error, InvalidTimestampError)

    def test_default_host(self):
        state = TimestampConverter().from_now()
        assert state.instant is not None
        assert state.error is None


class TestCopy:
    def test_copy_numeric(self, converter, clipboard):
        converter.from_now()
        state = asyncio.run(converter.copy())
        assert clipboard.writes == ["1700000000000"]
        assert state.advisory.kind is AdvisoryKind.COPIED
        assert state.instant == Instant(FROZEN_MILLIS)

    def test_copy_formatted(self, converter, clipboard):
        converter.set_precision(Precision.NANOSECONDS)
        converter.edit_numeric("1700000000123456789")
        asyncio.run(converter.copy(CopyTarget.FORMATTED))
        assert clipboard.text == "Tuesday, November 14, 2023 22:13:20.123456789"

    def test_copy_empty_field_is_ignored(self, converter, clipboard):
        state = asyncio.run(converter.copy("numeric"))
        assert clipboard.writes == []
        assert state.advisory is None

    def test_copy_without_clipboard(self, utc_host):
        converter = TimestampConverter(host=utc_host)
        converter.from_now()
        state = asyncio.run(converter.copy())
        assert state.advisory.kind is AdvisoryKind.CLIPBOARD_UNAVAILABLE
        assert state.advisory.is_error
        assert state.error is None

    def test_copy_refused(self, utc_host):
        converter = TimestampConverter(host=utc_host, clipboard=MemoryClipboard(fail=True))
        converter.from_now()
        state = asyncio.run(converter.copy())
        assert isinstance(state.advisory.error, ClipboardWriteFailedError)
        assert state.instant == Instant(FROZEN_MILLIS)

    def test_copy_raising_clipboard(self, utc_host, caplog):
        converter = TimestampConverter(host=utc_host, clipboard=ExplodingClipboard())
        converter.from_now()
        with caplog.at_level(logging.WARNING, logger="pytsconv.converter"):
            state = asyncio.run(converter.copy())
        assert state.advisory.kind is AdvisoryKind.CLIPBOARD_WRITE_FAILED
        assert "clipboard write raised" in caplog.text

    def test_advisory_clears_after_duration(self, utc_host, clipboard):
        converter = TimestampConverter(
            host=utc_host, clipboard=clipboard, advisory_duration_ms=10
        )
        converter.from_now()

        async def scenario():
            await converter.copy()
            assert converter.state.advisory is not None
            await asyncio.sleep(0.1)
            return converter.state

        state = asyncio.run(scenario())
        assert state.advisory is None
        assert state.numeric_text == "1700000000000"

    def test_later_edit_survives_timer(self, utc_host, clipboard):
        converter = TimestampConverter(
            host=utc_host, clipboard=clipboard, advisory_duration_ms=10
        )
        converter.set_precision(Precision.NANOSECONDS)
        converter.from_now()

        async def scenario():
            await converter.copy()
            converter.edit_numeric("1700000000000000001")
            await asyncio.sleep(0.1)
            return converter.state

        state = asyncio.run(scenario())
        assert state.advisory.kind is AdvisoryKind.PRECISION_LOSS


class TestDispatch:
    def test_dispatch_any_event(self, converter):
        state = asyncio.run(converter.dispatch(Now()))
        assert state.numeric_text == "1700000000000"
