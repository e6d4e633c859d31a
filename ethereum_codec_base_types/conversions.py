"""Conversions between hex strings, byte strings and integers."""

import re
from typing import List, SupportsBytes, TypeAlias

BytesConvertible: TypeAlias = str | bytes | SupportsBytes | List[int]
FixedSizeBytesConvertible: TypeAlias = str | bytes | SupportsBytes | List[int] | int
NumberConvertible: TypeAlias = str | bytes | SupportsBytes | int

WHITESPACE = re.compile(r"\s+")


def to_bytes(value: BytesConvertible) -> bytes:
    """
    Convert a hex string, byte string or list of byte values into bytes.

    Hex strings may omit the `0x` prefix, contain whitespace and have an odd
    number of digits, which is read as if left-padded with a zero.
    """
    if value is None:
        raise ValueError("cannot convert `None` to bytes")
    if isinstance(value, (bytes, list, SupportsBytes)):
        return bytes(value)
    if isinstance(value, str):
        digits = WHITESPACE.sub("", value)
        if digits[:2] in ("0x", "0X"):
            digits = digits[2:]
        return bytes.fromhex(digits.zfill(len(digits) + len(digits) % 2))
    raise ValueError(f"invalid type for `bytes`: {type(value).__name__}")


def to_fixed_size_bytes(
    value: FixedSizeBytesConvertible,
    size: int,
    *,
    left_padding: bool = False,
    right_padding: bool = False,
) -> bytes:
    """
    Convert the value into exactly `size` bytes.

    Integers are always written big-endian over the full size. Other inputs
    shorter than `size` are zero-padded only when one of the padding flags is
    set, and inputs longer than `size` are rejected.
    """
    if isinstance(value, int):
        return value.to_bytes(size, "big", signed=value < 0)
    data = to_bytes(value)
    if len(data) > size:
        raise ValueError(f"input is too large for fixed size bytes: {len(data)} > {size}")
    if len(data) == size:
        return data
    if left_padding:
        return pad_left(data, size)
    if right_padding:
        return pad_right(data, size)
    raise ValueError(
        f"input is too small for fixed size bytes: {len(data)} < {size}, "
        "pass `left_padding=True` or `right_padding=True` to pad it"
    )


def to_hex(value: BytesConvertible) -> str:
    """Return the `0x`-prefixed hex string of the value."""
    return "0x" + to_bytes(value).hex()


def to_number(value: NumberConvertible) -> int:
    """Convert an int, a decimal or `0x` hex string, or big-endian bytes into an int."""
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value, 0)
    if isinstance(value, (bytes, SupportsBytes)):
        return int.from_bytes(bytes(value), "big")
    raise ValueError(f"invalid type for `number`: {type(value).__name__}")


def int_to_bytes(value: int) -> bytes:
    """
    Convert a non-negative integer to its minimal big-endian representation.

    Zero converts to the empty byte string, which is the RLP integer
    convention.
    """
    if value < 0:
        raise ValueError(f"cannot convert negative integer {value} to unsigned bytes")
    return value.to_bytes((value.bit_length() + 7) // 8, byteorder="big")


def pad_left(input_bytes: BytesConvertible, size: int = 32) -> bytes:
    """Left-pad the input with zero bytes up to `size` bytes."""
    data = to_bytes(input_bytes)
    if len(data) > size:
        raise ValueError(f"size of {len(data)} bytes exceeds padding size of {size} bytes")
    return data.rjust(size, b"\x00")


def pad_right(input_bytes: BytesConvertible, size: int = 32) -> bytes:
    """Right-pad the input with zero bytes up to `size` bytes."""
    data = to_bytes(input_bytes)
    if len(data) > size:
        raise ValueError(f"size of {len(data)} bytes exceeds padding size of {size} bytes")
    return data.ljust(size, b"\x00")


def trim_leading_zeros(input_bytes: BytesConvertible) -> bytes:
    """Remove the leading zero bytes of the input."""
    return to_bytes(input_bytes).lstrip(b"\x00")


def concat(*values: BytesConvertible) -> bytes:
    """Concatenate multiple byte-convertible values."""
    return b"".join(to_bytes(value) for value in values)


def size(input_bytes: BytesConvertible) -> int:
    """Return the size in bytes of the input."""
    return len(to_bytes(input_bytes))
