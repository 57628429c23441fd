"""Unit tests for the stateful reader and writer."""

from __future__ import annotations

import math

import pytest

from ieeeio import (
    BinaryReader,
    BinaryWriter,
    ByteOrder,
    BytesSink,
    BytesSource,
    CodecConfig,
    TruncatedStreamError,
    TruncationPolicy,
)


class TestCodecConfig:
    """Test configuration validation."""

    def test_defaults(self) -> None:
        config = CodecConfig()
        assert config.byte_order is ByteOrder.BIG
        assert config.on_truncation is TruncationPolicy.RAISE

    def test_string_values_coerced(self) -> None:
        config = CodecConfig(byte_order="little", on_truncation="legacy")  # type: ignore[arg-type]
        assert config.byte_order is ByteOrder.LITTLE
        assert config.on_truncation is TruncationPolicy.LEGACY

    def test_invalid_values(self) -> None:
        with pytest.raises(ValueError, match="Byte order"):
            CodecConfig(byte_order="sideways")  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="Truncation policy"):
            CodecConfig(on_truncation="skip")  # type: ignore[arg-type]


class TestBinaryReaderWriter:
    """Test mixed sequences of values."""

    @pytest.mark.parametrize("order", ["big", "little"])
    def test_mixed_roundtrip(self, order: str) -> None:
        config = CodecConfig(byte_order=order)  # type: ignore[arg-type]
        sink = BytesSink()
        writer = BinaryWriter(sink, config)
        assert writer.write_int16(-300)
        assert writer.write_int32(70000)
        assert writer.write_float16(0.5)
        assert writer.write_float32(-0.25)
        assert writer.write_float64(math.e)
        assert writer.ok is True
        assert len(sink) == 2 + 4 + 2 + 4 + 8

        reader = BinaryReader(BytesSource(sink.getvalue()), config)
        assert reader.read_int16() == -300
        assert reader.read_int32() == 70000
        assert reader.read_float16() == 0.5
        assert reader.read_float32() == -0.25
        assert reader.read_float64() == math.e

    def test_default_config_is_big_endian(self) -> None:
        sink = BytesSink()
        BinaryWriter(sink).write_int16(1)
        assert sink.getvalue() == b"\x00\x01"

    def test_writer_ok_is_sticky(self) -> None:
        writer = BinaryWriter(BytesSink(capacity=2))
        assert writer.write_int16(1) is True
        assert writer.write_float32(1.0) is False
        assert writer.write_float32(1.0) is False
        assert writer.ok is False

    def test_reader_truncation_policy(self) -> None:
        with pytest.raises(TruncatedStreamError):
            BinaryReader(BytesSource(b"\x00")).read_int16()

        legacy = BinaryReader(BytesSource(b""), CodecConfig(on_truncation=TruncationPolicy.LEGACY))
        assert legacy.read_int16() == -65793
        assert math.isnan(legacy.read_float32())
