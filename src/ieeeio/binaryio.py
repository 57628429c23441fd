"""Stateful reader and writer bound to one byte stream.

BinaryReader and BinaryWriter carry a CodecConfig so that code walking a
binary file format does not have to repeat the byte order and truncation
policy on every call.
"""

from __future__ import annotations

from dataclasses import dataclass

from .codec.decoder import decode_float
from .codec.encoder import encode_float
from .codec.integers import read_int16, read_int32, write_int16, write_int32
from .exceptions import FormatError
from .formats import BINARY16, BINARY32, BINARY64, ByteOrder, TruncationPolicy
from .streams import ByteSink, ByteSource


@dataclass
class CodecConfig:
    """Settings shared by every read or write through one reader/writer.

    Attributes:
        byte_order: Byte order of values on the stream (default big-endian)
        on_truncation: Behaviour on short reads (default: raise TruncatedStreamError)

    Example:
        >>> config = CodecConfig(byte_order="little", on_truncation="legacy")
        >>> config.byte_order
        <ByteOrder.LITTLE: 'little'>
    """

    byte_order: ByteOrder = ByteOrder.BIG
    on_truncation: TruncationPolicy = TruncationPolicy.RAISE

    def __post_init__(self) -> None:
        """Coerce string values and validate."""
        try:
            self.byte_order = ByteOrder.coerce(self.byte_order)
            self.on_truncation = TruncationPolicy.coerce(self.on_truncation)
        except FormatError as e:
            raise ValueError(str(e)) from e


class BinaryReader:
    """Reads integers and floats from a byte source.

    Example:
        >>> reader = BinaryReader(BytesSource(b"\\x00\\x01"))
        >>> reader.read_int16()
        1
    """

    def __init__(self, source: ByteSource, config: CodecConfig | None = None) -> None:
        self.source = source
        self.config = config or CodecConfig()

    def read_int16(self) -> int:
        return read_int16(self.source, self.config.byte_order, self.config.on_truncation)

    def read_int32(self) -> int:
        return read_int32(self.source, self.config.byte_order, self.config.on_truncation)

    def read_float16(self) -> float:
        return decode_float(
            self.source, BINARY16, self.config.byte_order, self.config.on_truncation
        )

    def read_float32(self) -> float:
        return decode_float(
            self.source, BINARY32, self.config.byte_order, self.config.on_truncation
        )

    def read_float64(self) -> float:
        return decode_float(
            self.source, BINARY64, self.config.byte_order, self.config.on_truncation
        )


class BinaryWriter:
    """Writes integers and floats to a byte sink.

    Each write returns the sink status for that value; ``ok`` stays False
    once any write has failed.
    """

    def __init__(self, sink: ByteSink, config: CodecConfig | None = None) -> None:
        self.sink = sink
        self.config = config or CodecConfig()
        self._ok = True

    @property
    def ok(self) -> bool:
        """True if every write so far succeeded."""
        return self._ok

    def _track(self, result: bool) -> bool:
        self._ok = self._ok and result
        return result

    def write_int16(self, value: int) -> bool:
        return self._track(write_int16(value, self.sink, self.config.byte_order))

    def write_int32(self, value: int) -> bool:
        return self._track(write_int32(value, self.sink, self.config.byte_order))

    def write_float16(self, value: float) -> bool:
        return self._track(encode_float(value, self.sink, BINARY16, self.config.byte_order))

    def write_float32(self, value: float) -> bool:
        return self._track(encode_float(value, self.sink, BINARY32, self.config.byte_order))

    def write_float64(self, value: float) -> bool:
        return self._track(encode_float(value, self.sink, BINARY64, self.config.byte_order))
