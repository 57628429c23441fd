"""Byte sources and sinks.

The codec only needs two things from the outside world: a source that yields
one octet at a time (or signals end of stream) and a sink that accepts one
octet at a time and reports whether the write succeeded. This module defines
those two protocols, in-memory and file-object adapters, and the shared
read/write loops used by every codec.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterable, Protocol

from .exceptions import TruncatedStreamError
from .formats import TruncationPolicy

logger = logging.getLogger(__name__)

# Value a C-style getc() returns at end of file
EOF = -1


class ByteSource(Protocol):
    """Anything that yields sequential octets."""

    def next_octet(self) -> int | None:
        """Return the next octet (0-255), or None at end of stream."""
        ...


class ByteSink(Protocol):
    """Anything that accepts sequential octets."""

    def put_octet(self, value: int) -> bool:
        """Write one octet (0-255); return False if the write failed."""
        ...


class BytesSource:
    """Reads octets from an in-memory buffer.

    Example:
        >>> source = BytesSource(b"\\x00\\x01")
        >>> source.next_octet()
        0
        >>> source.remaining()
        1
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._position = 0

    def next_octet(self) -> int | None:
        if self._position >= len(self._data):
            return None
        value = self._data[self._position]
        self._position += 1
        return value

    @property
    def position(self) -> int:
        """Number of octets consumed so far."""
        return self._position

    def remaining(self) -> int:
        return len(self._data) - self._position


class BytesSink:
    """Collects octets in memory.

    Args:
        capacity: Maximum number of octets to accept (None for unbounded).
            Writes beyond the capacity are refused and reported as failures.
    """

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._buffer = bytearray()
        self._capacity = capacity

    def put_octet(self, value: int) -> bool:
        if self._capacity is not None and len(self._buffer) >= self._capacity:
            return False
        self._buffer.append(value & 0xFF)
        return True

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)


class StreamSource:
    """Adapts a binary file object opened for reading."""

    def __init__(self, fp: BinaryIO) -> None:
        self._fp = fp

    def next_octet(self) -> int | None:
        chunk = self._fp.read(1)
        if not chunk:
            return None
        return chunk[0]


class StreamSink:
    """Adapts a binary file object opened for writing.

    I/O errors raised by the file object, and writes to a closed file, are
    reported as a failed write, never propagated.
    """

    def __init__(self, fp: BinaryIO) -> None:
        self._fp = fp

    def put_octet(self, value: int) -> bool:
        try:
            written = self._fp.write(bytes((value & 0xFF,)))
        except (OSError, ValueError) as e:
            logger.debug("write to %r failed: %s", self._fp, e)
            return False
        # Raw (unbuffered) files may report a short write
        return written is None or written == 1


def read_octets(
    source: ByteSource,
    count: int,
    on_truncation: TruncationPolicy | str = TruncationPolicy.RAISE,
    fill: int = EOF,
) -> list[int]:
    """Read exactly count octets in stream order.

    Args:
        source: Byte source to read from
        count: Number of octets to read
        on_truncation: Policy when the source ends early
        fill: Value substituted for each missing octet under the LEGACY policy

    Returns:
        List of octet values in the order they were read

    Raises:
        TruncatedStreamError: If the source ends early under the RAISE policy
    """
    policy = TruncationPolicy.coerce(on_truncation)
    octets: list[int] = []
    missing = 0
    for index in range(count):
        value = source.next_octet()
        if value is None:
            if policy is TruncationPolicy.RAISE:
                raise TruncatedStreamError(count, index)
            missing += 1
            value = fill
        octets.append(value)

    if missing:
        logger.debug("stream ended early: substituted %d of %d bytes with %d", missing, count, fill)
    return octets


def write_octets(sink: ByteSink, octets: Iterable[int]) -> bool:
    """Write every octet, even after a failure.

    Returns:
        True if all writes succeeded, False if any of them failed
    """
    ok = True
    for value in octets:
        if not sink.put_octet(value):
            ok = False
    return ok
