"""Unit tests for formats and options."""

from __future__ import annotations

import sys

import pytest
from pydantic import ValidationError

from ieeeio import (
    BINARY16,
    BINARY32,
    BINARY64,
    ByteOrder,
    FloatFormat,
    FormatError,
    TruncationPolicy,
    get_format,
    pack_float,
    unpack_float,
)


class TestPredefinedFormats:
    """Test the derived layout parameters."""

    @pytest.mark.parametrize(
        "fmt, width, bias, min_exp, max_exp",
        [
            (BINARY16, 16, 15, -14, 15),
            (BINARY32, 32, 127, -126, 127),
            (BINARY64, 64, 1023, -1022, 1023),
        ],
    )
    def test_parameters(
        self, fmt: FloatFormat, width: int, bias: int, min_exp: int, max_exp: int
    ) -> None:
        assert fmt.width == width
        assert fmt.num_bytes == width // 8
        assert fmt.bias == bias
        assert fmt.min_exponent == min_exp
        assert fmt.max_exponent == max_exp

    def test_max_finite(self) -> None:
        assert BINARY64.max_finite == sys.float_info.max
        assert BINARY32.max_finite == 3.4028234663852886e38
        assert BINARY16.max_finite == 65504.0

    def test_nan_significand_nonzero(self) -> None:
        assert BINARY64.nan_significand == 1234
        assert BINARY16.nan_significand == 1234 & 0x3FF

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            BINARY32.exponent_bits = 9  # type: ignore[misc]


class TestCustomFormat:
    """Test user-defined layouts."""

    def test_bfloat16(self) -> None:
        """A format with binary32's exponent range and a short significand."""
        bfloat16 = FloatFormat(name="bfloat16", exponent_bits=8, significand_bits=7)
        assert bfloat16.num_bytes == 2
        assert pack_float(1.0, bfloat16).hex() == "3f80"
        assert unpack_float(bytes.fromhex("c049"), bfloat16) == -3.140625

    def test_unaligned_width_rejected(self) -> None:
        with pytest.raises(ValidationError, match="whole number of bytes"):
            FloatFormat(name="odd", exponent_bits=5, significand_bits=9)

    def test_field_bounds(self) -> None:
        with pytest.raises(ValidationError):
            FloatFormat(name="wide", exponent_bits=15, significand_bits=112)
        with pytest.raises(ValidationError):
            FloatFormat(name="tiny", exponent_bits=1, significand_bits=6)


class TestLookups:
    """Test name lookups and coercion."""

    def test_get_format(self) -> None:
        assert get_format("binary32") is BINARY32
        assert get_format(BINARY16) is BINARY16

    def test_get_format_unknown(self) -> None:
        with pytest.raises(FormatError, match="Unknown float format"):
            get_format("binary128")

    def test_byte_order_coerce(self) -> None:
        assert ByteOrder.coerce("big") is ByteOrder.BIG
        assert ByteOrder.coerce(ByteOrder.LITTLE) is ByteOrder.LITTLE
        with pytest.raises(FormatError):
            ByteOrder.coerce("network")

    def test_truncation_policy_coerce(self) -> None:
        assert TruncationPolicy.coerce("legacy") is TruncationPolicy.LEGACY
        with pytest.raises(FormatError):
            TruncationPolicy.coerce("ignore")
