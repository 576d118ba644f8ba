"""Lark grammar for the two editable fields: numeric timestamp and local datetime."""

from __future__ import annotations

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from pytsconv._errors import (
    ERR_MSG_INVALID_DATETIME,
    ERR_MSG_INVALID_TIMESTAMP,
    InvalidDateTimeError,
    InvalidTimestampError,
)
from pytsconv.host._base import LocalFields

FIELD_GRAMMAR = r"""
timestamp: SIGNED_INTEGER

local_datetime: YEAR "-" PAIR "-" PAIR _SEP PAIR ":" PAIR [":" PAIR]

SIGNED_INTEGER: /[+-]?[0-9]+/
YEAR: /[0-9]{4}/
PAIR: /[0-9]{2}/
_SEP: /[T ]/
"""

_parser = Lark(
    FIELD_GRAMMAR,
    start=["timestamp", "local_datetime"],
    parser="lalr",
)


class _FieldTransformer(Transformer):
    def timestamp(self, children: list[Token]) -> int:
        (token,) = children
        return int(token)

    def local_datetime(self, children: list[Token | None]) -> LocalFields:
        year, month, day, hour, minute, second = children
        return LocalFields(
            year=int(year),
            month=int(month),
            day=int(day),
            hour=int(hour),
            minute=int(minute),
            second=int(second) if second is not None else 0,
        )


_transformer = _FieldTransformer()


def parse_timestamp(text: str) -> int:
    """Parse an optionally signed decimal integer; surrounding whitespace is ignored.

    Raises:
        InvalidTimestampError: If the text is not an integer literal.
    """
    try:
        tree = _parser.parse(text.strip(), start="timestamp")
        return _transformer.transform(tree)
    except (LarkError, ValueError) as e:
        raise InvalidTimestampError(
            ERR_MSG_INVALID_TIMESTAMP,
            f"numeric field {text!r} is not an integer literal",
            wrapped=e,
        ) from e


def parse_local_datetime(text: str) -> LocalFields:
    """Parse ``YYYY-MM-DDTHH:mm[:ss]`` into calendar fields.

    Only the shape is checked here; whether the date exists is up to the
    calendar.

    Raises:
        InvalidDateTimeError: If the text does not have the expected shape.
    """
    try:
        tree = _parser.parse(text.strip(), start="local_datetime")
        return _transformer.transform(tree)
    except (LarkError, ValueError) as e:
        raise InvalidDateTimeError(
            ERR_MSG_INVALID_DATETIME,
            f"datetime field {text!r} does not match YYYY-MM-DDTHH:mm[:ss]",
            wrapped=e,
        ) from e
