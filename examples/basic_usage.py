#!/usr/bin/env python3
"""Basic usage example for ieeeio.

This example demonstrates:
1. Encoding doubles and floats in both byte orders
2. Decoding them back from a byte source
3. Saturation of out-of-range values
4. Reading a little-endian record with BinaryReader
"""

from __future__ import annotations

import math

from ieeeio import (
    BINARY32,
    BinaryReader,
    BinaryWriter,
    BytesSink,
    BytesSource,
    CodecConfig,
    decode_float64,
    encode_float64,
    pack_float,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("ieeeio Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding pi as binary64...")
    for order in ("big", "little"):
        sink = BytesSink()
        encode_float64(math.pi, sink, order)
        print(f"   {order:>6}-endian: {sink.getvalue().hex(' ')}")
    print()

    print("2. Decoding it back...")
    value = decode_float64(BytesSource(bytes.fromhex("400921fb54442d18")), "big")
    print(f"   {value!r}")
    print()

    print("3. Saturating values that binary32 cannot hold...")
    for number in (1e300, -1e300, 1e-50, math.nan):
        print(f"   {number!r:>8} -> {pack_float(number, BINARY32).hex(' ')}")
    print()

    print("4. Writing and reading a little-endian record...")
    config = CodecConfig(byte_order="little")  # type: ignore[arg-type]
    sink = BytesSink()
    writer = BinaryWriter(sink, config)
    writer.write_int16(-42)
    writer.write_float32(0.1)
    writer.write_float64(2.5e-310)
    print(f"   Record bytes: {sink.getvalue().hex(' ')}")

    reader = BinaryReader(BytesSource(sink.getvalue()), config)
    print(f"   int16:   {reader.read_int16()}")
    print(f"   float32: {reader.read_float32()!r} (nearest binary32 to 0.1)")
    print(f"   float64: {reader.read_float64()!r} (subnormal)")


if __name__ == "__main__":
    main()
