"""ieeeio: Portable binary integer and IEEE-754 float I/O

Reads and writes fixed-width signed integers and IEEE-754 binary16/32/64
floats over a byte stream, in either byte order, without relying on the host's
native integer width, byte order or floating-point format. Float fields are
taken apart and put back together arithmetically, so subnormals, infinities
and NaN are handled the same way on every host.

Key Features:
- Big- and little-endian 16/32-bit signed integer reads and writes
- IEEE-754 binary16, binary32 and binary64 encode/decode
- Saturating encoder (overflow to infinity, underflow to zero)
- Explicit truncation policy for short streams

Quick Start:
    >>> from ieeeio import BytesSink, BytesSource, decode_float64, encode_float64
    >>> sink = BytesSink()
    >>> encode_float64(3.141592653589793, sink, "big")
    True
    >>> sink.getvalue().hex()
    '400921fb54442d18'
    >>> decode_float64(BytesSource(sink.getvalue()), "big")
    3.141592653589793

Known limitations: negative zero decodes as +0.0, and NaN payloads and the
signalling/quiet distinction are not preserved.
"""

from __future__ import annotations

from .binaryio import BinaryReader, BinaryWriter, CodecConfig
from .codec import (
    FloatFields,
    decode_float,
    decode_float16,
    decode_float32,
    decode_float64,
    encode_float,
    encode_float16,
    encode_float32,
    encode_float64,
    pack_bits,
    pack_float,
    read_int16,
    read_int32,
    split_fields,
    unpack_float,
    write_int16,
    write_int32,
)
from .exceptions import (
    DecodeError,
    EncodeError,
    FormatError,
    IeeeioError,
    TruncatedStreamError,
)
from .formats import (
    BINARY16,
    BINARY32,
    BINARY64,
    ByteOrder,
    FloatFormat,
    TruncationPolicy,
    get_format,
)
from .streams import BytesSink, BytesSource, ByteSink, ByteSource, StreamSink, StreamSource

__version__ = "0.1.0"

__all__ = [
    # Integer codec
    "read_int16",
    "read_int32",
    "write_int16",
    "write_int32",
    # Float codec
    "decode_float",
    "decode_float16",
    "decode_float32",
    "decode_float64",
    "encode_float",
    "encode_float16",
    "encode_float32",
    "encode_float64",
    "pack_bits",
    "pack_float",
    "unpack_float",
    "split_fields",
    "FloatFields",
    # Formats and options
    "FloatFormat",
    "BINARY16",
    "BINARY32",
    "BINARY64",
    "get_format",
    "ByteOrder",
    "TruncationPolicy",
    # Streams
    "ByteSource",
    "ByteSink",
    "BytesSource",
    "BytesSink",
    "StreamSource",
    "StreamSink",
    # Reader / writer
    "BinaryReader",
    "BinaryWriter",
    "CodecConfig",
    # Exceptions
    "IeeeioError",
    "FormatError",
    "EncodeError",
    "DecodeError",
    "TruncatedStreamError",
    # Version
    "__version__",
]
