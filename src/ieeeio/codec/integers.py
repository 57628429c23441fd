"""Portable fixed-width signed integer reads and writes.

Values are reassembled arithmetically from octets, so the result never
depends on the host's native integer width or byte order. The top octet is
interpreted as -128..127 and the remaining octets as 0..255.
"""

from __future__ import annotations

from ..exceptions import EncodeError
from ..formats import ByteOrder, TruncationPolicy
from ..streams import EOF, ByteSink, ByteSource, read_octets, write_octets


def read_int16(
    source: ByteSource,
    order: ByteOrder | str,
    on_truncation: TruncationPolicy | str = TruncationPolicy.RAISE,
) -> int:
    """Read a 16-bit two's-complement signed integer.

    Args:
        source: Byte source to read 2 octets from
        order: Byte order of the octets on the stream
        on_truncation: RAISE for an error on short input, LEGACY to treat each
            missing octet as the end-of-stream value -1

    Returns:
        Signed value in the range -32768..32767 (outside it only under LEGACY)

    Raises:
        TruncatedStreamError: If the source ends early under the RAISE policy

    Example:
        >>> read_int16(BytesSource(b"\\x80\\x00"), "big")
        -32768
    """
    return _read_signed(source, 2, order, on_truncation)


def read_int32(
    source: ByteSource,
    order: ByteOrder | str,
    on_truncation: TruncationPolicy | str = TruncationPolicy.RAISE,
) -> int:
    """Read a 32-bit two's-complement signed integer.

    See read_int16() for the arguments and truncation behaviour.
    """
    return _read_signed(source, 4, order, on_truncation)


def write_int16(value: int, sink: ByteSink, order: ByteOrder | str) -> bool:
    """Write a 16-bit two's-complement signed integer.

    Returns:
        True if every octet was written, False if any write failed

    Raises:
        EncodeError: If value does not fit in 16 signed bits
    """
    return _write_signed(value, sink, 2, order)


def write_int32(value: int, sink: ByteSink, order: ByteOrder | str) -> bool:
    """Write a 32-bit two's-complement signed integer.

    Raises:
        EncodeError: If value does not fit in 32 signed bits
    """
    return _write_signed(value, sink, 4, order)


def _read_signed(
    source: ByteSource,
    num_bytes: int,
    order: ByteOrder | str,
    on_truncation: TruncationPolicy | str,
) -> int:
    byte_order = ByteOrder.coerce(order)
    octets = read_octets(source, num_bytes, on_truncation, fill=EOF)
    if byte_order is ByteOrder.LITTLE:
        octets.reverse()

    # Sign-extend the top octet; EOF (-1) flows through the same arithmetic
    value = (octets[0] ^ 0x80) - 0x80
    for octet in octets[1:]:
        value = value * 256 + octet
    return value


def _write_signed(value: int, sink: ByteSink, num_bytes: int, order: ByteOrder | str) -> bool:
    byte_order = ByteOrder.coerce(order)
    num_bits = num_bytes * 8
    min_value = -(1 << (num_bits - 1))
    max_value = (1 << (num_bits - 1)) - 1
    if value < min_value or value > max_value:
        raise EncodeError(
            f"Value {value} doesn't fit in {num_bits} bits (range: {min_value} to {max_value})"
        )

    unsigned_value = value + (1 << num_bits) if value < 0 else value
    octets = [(unsigned_value >> (8 * i)) & 0xFF for i in range(num_bytes - 1, -1, -1)]
    if byte_order is ByteOrder.LITTLE:
        octets.reverse()
    return write_octets(sink, octets)
