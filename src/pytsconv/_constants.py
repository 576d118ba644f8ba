"""Numeric constants and tunable defaults for timestamp conversion."""

MILLIS_PER_SECOND = 1000
"""Milliseconds in one second."""

NANOS_PER_MILLISECOND = 1_000_000
"""Nanoseconds in one millisecond."""

MAX_SAFE_INTEGER = 2**53 - 1
"""Largest millisecond magnitude accepted from a nanosecond timestamp."""

ADVISORY_DURATION_MS = 1800
"""How long clipboard advisories stay visible before auto-clearing."""

DEFAULT_HINT = (
    "Dates are shown in the local time zone. "
    "Check the precision (seconds, milliseconds or nanoseconds) before copying."
)
"""Status line shown when there is neither an error nor an advisory."""
