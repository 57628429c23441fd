"""Portable integer and IEEE-754 codecs.

This package provides the byte-level readers and writers: signed integers in
codec.integers, float decoding in codec.decoder and float encoding in
codec.encoder.
"""

from __future__ import annotations

from .decoder import (
    FloatFields,
    decode_float,
    decode_float16,
    decode_float32,
    decode_float64,
    split_fields,
    unpack_float,
)
from .encoder import (
    encode_float,
    encode_float16,
    encode_float32,
    encode_float64,
    pack_bits,
    pack_float,
)
from .integers import read_int16, read_int32, write_int16, write_int32

__all__ = [
    "read_int16",
    "read_int32",
    "write_int16",
    "write_int32",
    "decode_float",
    "decode_float16",
    "decode_float32",
    "decode_float64",
    "unpack_float",
    "split_fields",
    "FloatFields",
    "encode_float",
    "encode_float16",
    "encode_float32",
    "encode_float64",
    "pack_bits",
    "pack_float",
]
