"""Byte orders, truncation policies and IEEE-754 binary layouts.

A FloatFormat describes one binary interchange layout (sign bit, biased
exponent field, significand field). The codec is written against these
parameters, so binary16, binary32 and binary64 share a single implementation.
"""

from __future__ import annotations

import enum
import math

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import FormatError

# Significand marker stored in the canonical NaN pattern
NAN_MARKER = 1234


class ByteOrder(str, enum.Enum):
    """Order of octets on the stream."""

    BIG = "big"  # most significant byte first
    LITTLE = "little"  # least significant byte first

    @classmethod
    def coerce(cls, order: ByteOrder | str) -> ByteOrder:
        """Accept a ByteOrder or its string value."""
        try:
            return cls(order)
        except ValueError:
            raise FormatError(f"Byte order must be 'big' or 'little', got {order!r}") from None


class TruncationPolicy(str, enum.Enum):
    """What to do when a byte source ends before a value is complete.

    RAISE raises TruncatedStreamError. LEGACY substitutes the end-of-stream
    sentinel for every missing byte, matching readers that never checked for
    end of file.
    """

    RAISE = "raise"
    LEGACY = "legacy"

    @classmethod
    def coerce(cls, policy: TruncationPolicy | str) -> TruncationPolicy:
        try:
            return cls(policy)
        except ValueError:
            raise FormatError(
                f"Truncation policy must be 'raise' or 'legacy', got {policy!r}"
            ) from None


class FloatFormat(BaseModel):
    """An IEEE-754 binary floating-point layout.

    Attributes:
        name: Format name (e.g. "binary64")
        exponent_bits: Width of the biased exponent field
        significand_bits: Width of the stored significand (without the implicit bit)

    Example:
        >>> BINARY32.bias
        127
        >>> BINARY32.num_bytes
        4
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    # Bounded by the host float: every layout must decode exactly into a double
    exponent_bits: int = Field(ge=2, le=11)
    significand_bits: int = Field(ge=1, le=52)

    @model_validator(mode="after")
    def check_byte_aligned(self) -> FloatFormat:
        if self.width % 8:
            raise ValueError(
                f"{self.name}: total width {self.width} bits is not a whole number of bytes"
            )
        return self

    @property
    def width(self) -> int:
        """Total width in bits."""
        return 1 + self.exponent_bits + self.significand_bits

    @property
    def num_bytes(self) -> int:
        return self.width // 8

    @property
    def bias(self) -> int:
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def exponent_mask(self) -> int:
        """All-ones exponent field (infinity and NaN)."""
        return (1 << self.exponent_bits) - 1

    @property
    def significand_mask(self) -> int:
        return (1 << self.significand_bits) - 1

    @property
    def min_exponent(self) -> int:
        """Smallest unbiased exponent of a normal number."""
        return 1 - self.bias

    @property
    def max_exponent(self) -> int:
        """Largest unbiased exponent of a finite number."""
        return self.bias

    @property
    def max_finite(self) -> float:
        """Largest finite magnitude."""
        return math.ldexp(2.0 - math.ldexp(1.0, -self.significand_bits), self.bias)

    @property
    def nan_significand(self) -> int:
        """Significand stored in the canonical NaN pattern (never zero)."""
        return (NAN_MARKER & self.significand_mask) or 1


BINARY16 = FloatFormat(name="binary16", exponent_bits=5, significand_bits=10)
BINARY32 = FloatFormat(name="binary32", exponent_bits=8, significand_bits=23)
BINARY64 = FloatFormat(name="binary64", exponent_bits=11, significand_bits=52)

FORMATS: dict[str, FloatFormat] = {fmt.name: fmt for fmt in (BINARY16, BINARY32, BINARY64)}


def get_format(name: str | FloatFormat) -> FloatFormat:
    """Look up a predefined format by name.

    Args:
        name: Format name ("binary16", "binary32", "binary64") or a FloatFormat

    Raises:
        FormatError: If the name is unknown
    """
    if isinstance(name, FloatFormat):
        return name
    try:
        return FORMATS[name]
    except KeyError:
        raise FormatError(
            f"Unknown float format {name!r} (known: {', '.join(sorted(FORMATS))})"
        ) from None
