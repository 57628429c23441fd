"""Field breakdown CLI command."""

from __future__ import annotations

from ..codec.decoder import fields_to_float, octets_to_bits, split_fields
from ..exceptions import DecodeError
from ..formats import ByteOrder, FloatFormat


def parse_hex(text: str) -> bytes:
    """Parse hex digits, allowing spaces and an optional 0x prefix.

    Raises:
        DecodeError: If text is not valid hex
    """
    cleaned = text.strip()
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError as e:
        raise DecodeError(f"Invalid hex input {text!r}: {e}") from e


def describe_bits(data: bytes, fmt: FloatFormat, order: ByteOrder | str) -> str:
    """Return a human-readable breakdown of an encoded float.

    Args:
        data: Exactly fmt.num_bytes bytes
        fmt: Layout of the value
        order: Byte order of data

    Raises:
        DecodeError: If data has the wrong length
    """
    byte_order = ByteOrder.coerce(order)
    if len(data) != fmt.num_bytes:
        raise DecodeError(f"{fmt.name} requires exactly {fmt.num_bytes} bytes, got {len(data)}")

    bits = octets_to_bits(data, byte_order)
    fields = split_fields(bits, fmt)
    value = fields_to_float(fields)

    exp_width = fmt.exponent_bits
    sig_width = fmt.significand_bits
    lines = [
        f"{'=' * 12} {fmt.name} ({byte_order.value}-endian) {'=' * 12}",
        f"bytes{'.' * 15}{data.hex(' ')}",
        f"sign{'.' * 16}{fields.sign}",
        f"exponent{'.' * 12}{fields.exponent:0{exp_width}b} "
        f"(biased {fields.exponent}, bias {fmt.bias})",
        f"significand{'.' * 9}{fields.significand:0{sig_width}b}",
        f"category{'.' * 12}{fields.category}",
        f"value{'.' * 15}{value!r}",
    ]
    return "\n".join(lines)
