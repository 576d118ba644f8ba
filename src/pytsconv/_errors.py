"""Exception hierarchy for timestamp conversion."""


class ConversionError(Exception):
    """Base exception for timestamp conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidTimestampError(ConversionError):
    """Raised when the numeric field is not an integer or not a valid date."""


class TimestampOutOfRangeError(ConversionError):
    """Raised when a nanosecond timestamp exceeds the safe millisecond range."""


class InvalidDateTimeError(ConversionError):
    """Raised when the local datetime field is malformed or does not exist."""


class ClipboardError(ConversionError):
    """Base for clipboard failures; only ever reported as advisories."""


class ClipboardUnavailableError(ClipboardError):
    """Raised when no clipboard collaborator is configured."""


class ClipboardWriteFailedError(ClipboardError):
    """Raised when the clipboard rejects a write."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_TIMESTAMP = "enter a valid integer timestamp"
ERR_MSG_TIMESTAMP_NOT_A_DATE = "the timestamp cannot be converted to a valid date"
ERR_MSG_TIMESTAMP_OUT_OF_RANGE = "the timestamp is outside the convertible range"
ERR_MSG_INVALID_DATETIME = "enter a valid local date and time"
ERR_MSG_CLIPBOARD_UNAVAILABLE = "clipboard is not available, copy manually"
ERR_MSG_CLIPBOARD_WRITE_FAILED = "copy failed, copy manually"
