"""IEEE-754 binary floating-point decoder.

Values are rebuilt from their sign, exponent and significand fields with
explicit power-of-two scaling (math.ldexp) rather than by reinterpreting the
bytes as a host float, so the result does not depend on how the host lays out
its own floating-point numbers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ..exceptions import DecodeError
from ..formats import BINARY16, BINARY32, BINARY64, ByteOrder, FloatFormat, TruncationPolicy
from ..streams import EOF, ByteSource, BytesSource, read_octets

# Byte a legacy reader's buffer held after running past end of file
LEGACY_FILL = 0xFF

# Widths up to this many bytes were accumulated in one integer by legacy readers,
# so a single EOF (-1) OR-ed in set every bit of the value
LEGACY_ACCUMULATOR_BYTES = 4


@dataclass(frozen=True)
class FloatFields:
    """Raw field values of an encoded float.

    Attributes:
        sign: Sign bit (0 or 1)
        exponent: Biased exponent field
        significand: Stored significand field (without the implicit bit)
        fmt: Layout the fields were taken from
    """

    sign: int
    exponent: int
    significand: int
    fmt: FloatFormat

    @property
    def category(self) -> str:
        """One of "zero", "subnormal", "normal", "infinity" or "nan"."""
        if self.exponent == 0:
            return "zero" if self.significand == 0 else "subnormal"
        if self.exponent == self.fmt.exponent_mask:
            return "infinity" if self.significand == 0 else "nan"
        return "normal"


def octets_to_bits(octets: Sequence[int], order: ByteOrder | str) -> int:
    """Assemble octets into one unsigned integer, most significant byte first."""
    ordered = list(octets)
    if ByteOrder.coerce(order) is ByteOrder.LITTLE:
        ordered.reverse()

    bits = 0
    for octet in ordered:
        bits = (bits << 8) | (octet & 0xFF)
    return bits


def split_fields(bits: int, fmt: FloatFormat) -> FloatFields:
    """Split a raw bit pattern into sign, exponent and significand fields."""
    return FloatFields(
        sign=(bits >> (fmt.width - 1)) & 1,
        exponent=(bits >> fmt.significand_bits) & fmt.exponent_mask,
        significand=bits & fmt.significand_mask,
        fmt=fmt,
    )


def fields_to_float(fields: FloatFields) -> float:
    """Compute the value described by a set of fields.

    Zero always decodes as +0.0 and every NaN pattern as the host NaN.
    """
    fmt = fields.fmt
    sign = -1.0 if fields.sign else 1.0

    # Significand as a fraction in [0, 1): top stored bit is 0.5, each next bit half that
    fraction = 0.0
    bit_value = 0.5
    for index in range(fmt.significand_bits - 1, -1, -1):
        if (fields.significand >> index) & 1:
            fraction += bit_value
        bit_value /= 2.0

    if fields.exponent == 0 and fraction == 0.0:
        return 0.0

    shift = fields.exponent - fmt.bias
    if fields.exponent == fmt.exponent_mask:
        if fraction != 0.0:
            return math.nan
        return sign * math.inf

    if shift > -fmt.bias:
        return sign * math.ldexp(1.0 + fraction, shift)

    # Subnormal: no implicit leading 1, exponent pinned at the normal minimum
    shift = fmt.min_exponent
    while fraction < 1.0:
        fraction *= 2.0
        shift -= 1
    return sign * math.ldexp(fraction, shift)


def decode_float(
    source: ByteSource,
    fmt: FloatFormat,
    order: ByteOrder | str,
    on_truncation: TruncationPolicy | str = TruncationPolicy.RAISE,
) -> float:
    """Read one IEEE-754 value of the given layout from a byte source.

    Args:
        source: Byte source to read fmt.num_bytes octets from
        fmt: Binary layout of the value
        order: Byte order of the octets on the stream
        on_truncation: RAISE for an error on short input, LEGACY to read each
            missing octet as 0xFF (binary64) or the whole value as all ones
            (widths of 4 bytes or less)

    Returns:
        Decoded value (+0.0 for either zero, NaN for any NaN pattern)

    Raises:
        TruncatedStreamError: If the source ends early under the RAISE policy
    """
    byte_order = ByteOrder.coerce(order)
    octets = read_octets(source, fmt.num_bytes, on_truncation, fill=EOF)
    if EOF in octets:
        if fmt.num_bytes <= LEGACY_ACCUMULATOR_BYTES:
            octets = [LEGACY_FILL] * fmt.num_bytes
        else:
            octets = [LEGACY_FILL if octet == EOF else octet for octet in octets]
    return fields_to_float(split_fields(octets_to_bits(octets, byte_order), fmt))


def decode_float64(
    source: ByteSource,
    order: ByteOrder | str,
    on_truncation: TruncationPolicy | str = TruncationPolicy.RAISE,
) -> float:
    """Read an 8-byte IEEE-754 binary64 value.

    Example:
        >>> decode_float64(BytesSource(bytes.fromhex("400921fb54442d18")), "big")
        3.141592653589793
    """
    return decode_float(source, BINARY64, order, on_truncation)


def decode_float32(
    source: ByteSource,
    order: ByteOrder | str,
    on_truncation: TruncationPolicy | str = TruncationPolicy.RAISE,
) -> float:
    """Read a 4-byte IEEE-754 binary32 value (returned as a Python float)."""
    return decode_float(source, BINARY32, order, on_truncation)


def decode_float16(
    source: ByteSource,
    order: ByteOrder | str,
    on_truncation: TruncationPolicy | str = TruncationPolicy.RAISE,
) -> float:
    """Read a 2-byte IEEE-754 binary16 value."""
    return decode_float(source, BINARY16, order, on_truncation)


def unpack_float(
    data: bytes, fmt: FloatFormat = BINARY64, order: ByteOrder | str = ByteOrder.BIG
) -> float:
    """Decode a value from a complete byte buffer.

    Raises:
        DecodeError: If data is not exactly fmt.num_bytes long
    """
    if len(data) != fmt.num_bytes:
        raise DecodeError(f"{fmt.name} requires exactly {fmt.num_bytes} bytes, got {len(data)}")
    return decode_float(BytesSource(data), fmt, order)
