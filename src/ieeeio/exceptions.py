"""Exception hierarchy for ieeeio.

All exceptions inherit from IeeeioError so callers can catch any
ieeeio-specific error in one place. Sink write failures are not exceptions:
they are reported through the boolean result of the encoders and writers.
"""

from __future__ import annotations


class IeeeioError(Exception):
    """Base exception for all ieeeio errors."""

    pass


class FormatError(IeeeioError):
    """Raised when a float format, byte order or policy is not recognised.

    Examples:
        - Unknown format name passed to get_format()
        - Byte order other than "big" or "little"
    """

    pass


class EncodeError(IeeeioError):
    """Raised when a value cannot be written.

    Examples:
        - Integer outside the signed range of the target width
    """

    pass


class DecodeError(IeeeioError):
    """Raised when binary data cannot be decoded.

    Examples:
        - Buffer length does not match the float width
        - Stream ended before a complete value was read
    """

    pass


class TruncatedStreamError(DecodeError):
    """Raised when a byte source runs out before a value is complete."""

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(f"Stream ended after {received} of {expected} bytes")
        self.expected = expected
        self.received = received
