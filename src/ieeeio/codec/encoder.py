"""IEEE-754 binary floating-point encoder.

The value is normalised by repeated halving and doubling while the
power-of-two shift is tracked, then the sign, biased exponent and significand
are packed into an integer and emitted octet by octet. Zero, NaN and
out-of-range magnitudes collapse to fixed patterns:

- any zero encodes as all-zero bits (negative zero is not preserved)
- any NaN encodes as one canonical quiet pattern (payload is not preserved)
- magnitudes above the format maximum encode as signed infinity
- magnitudes that round below the smallest subnormal encode as zero
"""

from __future__ import annotations

import logging
import math

from ..formats import BINARY16, BINARY32, BINARY64, ByteOrder, FloatFormat
from ..streams import ByteSink, BytesSink, write_octets

logger = logging.getLogger(__name__)


def _infinity_bits(sign: int, fmt: FloatFormat) -> int:
    return (sign << (fmt.width - 1)) | (fmt.exponent_mask << fmt.significand_bits)


def _nan_bits(fmt: FloatFormat) -> int:
    return (fmt.exponent_mask << fmt.significand_bits) | fmt.nan_significand


def pack_bits(value: float, fmt: FloatFormat) -> int:
    """Compute the raw bit pattern of value in the given layout.

    Args:
        value: Number to encode
        fmt: Target binary layout

    Returns:
        Unsigned integer holding sign, biased exponent and significand fields

    Example:
        >>> hex(pack_bits(1.0, BINARY32))
        '0x3f800000'
    """
    try:
        value = float(value)
    except OverflowError:
        # ints and Fractions can exceed the host float range
        logger.debug("value exceeds the host float range, encoding infinity")
        return _infinity_bits(1 if value < 0 else 0, fmt)

    if value == 0:
        return 0
    if value > fmt.max_finite:
        logger.debug("%r exceeds %s range, encoding +inf", value, fmt.name)
        return _infinity_bits(0, fmt)
    if value < -fmt.max_finite:
        logger.debug("%r exceeds %s range, encoding -inf", value, fmt.name)
        return _infinity_bits(1, fmt)
    if value != value:
        return _nan_bits(fmt)

    if value < 0:
        sign = 1
        fnorm = -value
    else:
        sign = 0
        fnorm = value

    # Normalise into [1, 2)
    shift = 0
    while fnorm >= 2.0:
        fnorm /= 2.0
        shift += 1
    while fnorm < 1.0:
        fnorm *= 2.0
        shift -= 1

    if shift < fmt.min_exponent:
        # Subnormal: denormalise down to the minimum exponent, stored exponent 0
        while shift < fmt.min_exponent:
            fnorm /= 2.0
            shift += 1
        biased_exponent = 0
    elif shift > fmt.max_exponent:
        logger.debug("%r exceeds %s range, encoding infinity", value, fmt.name)
        return _infinity_bits(sign, fmt)
    else:
        fnorm -= 1.0
        biased_exponent = shift + fmt.bias

    # round() is round-half-even; a carry out of the significand lands in the exponent
    significand = round(math.ldexp(fnorm, fmt.significand_bits))
    magnitude = (biased_exponent << fmt.significand_bits) + significand
    if magnitude == 0:
        logger.debug("%r is below the %s subnormal range, encoding zero", value, fmt.name)
        return 0
    return (sign << (fmt.width - 1)) | magnitude


def bits_to_octets(bits: int, fmt: FloatFormat, order: ByteOrder | str) -> list[int]:
    """Split a bit pattern into fmt.num_bytes octets in the requested order."""
    octets = [(bits >> (8 * i)) & 0xFF for i in range(fmt.num_bytes - 1, -1, -1)]
    if ByteOrder.coerce(order) is ByteOrder.LITTLE:
        octets.reverse()
    return octets


def encode_float(value: float, sink: ByteSink, fmt: FloatFormat, order: ByteOrder | str) -> bool:
    """Write one value in the given layout to a byte sink.

    Every octet is attempted even after a failed write; nothing is rolled back.

    Args:
        value: Number to encode
        sink: Byte sink to write fmt.num_bytes octets to
        fmt: Target binary layout
        order: Byte order of the octets on the stream

    Returns:
        True if every octet was written, False if any write failed
    """
    byte_order = ByteOrder.coerce(order)
    return write_octets(sink, bits_to_octets(pack_bits(value, fmt), fmt, byte_order))


def encode_float64(value: float, sink: ByteSink, order: ByteOrder | str) -> bool:
    """Write value as an 8-byte IEEE-754 binary64."""
    return encode_float(value, sink, BINARY64, order)


def encode_float32(value: float, sink: ByteSink, order: ByteOrder | str) -> bool:
    """Write value as a 4-byte IEEE-754 binary32, rounding to nearest even."""
    return encode_float(value, sink, BINARY32, order)


def encode_float16(value: float, sink: ByteSink, order: ByteOrder | str) -> bool:
    """Write value as a 2-byte IEEE-754 binary16, rounding to nearest even."""
    return encode_float(value, sink, BINARY16, order)


def pack_float(
    value: float, fmt: FloatFormat = BINARY64, order: ByteOrder | str = ByteOrder.BIG
) -> bytes:
    """Encode a value into a new bytes object.

    Example:
        >>> pack_float(3.141592653589793).hex()
        '400921fb54442d18'
    """
    sink = BytesSink()
    encode_float(value, sink, fmt, order)
    return sink.getvalue()
