"""
Test suite for the byte and number conversion helpers.
"""

from typing import Any

import pytest

from ..conversions import (
    concat,
    int_to_bytes,
    pad_left,
    pad_right,
    size,
    to_bytes,
    to_fixed_size_bytes,
    to_hex,
    to_number,
    trim_leading_zeros,
)


@pytest.mark.parametrize(
    "input_bytes, expected",
    [
        ("0x", b""),
        ("", b""),
        ("0x01", b"\x01"),
        ("0X01", b"\x01"),
        ("0x1", b"\x01"),
        ("0x 01 02", b"\x01\x02"),
        (b"\x00\x01", b"\x00\x01"),
        ([1, 2, 3], b"\x01\x02\x03"),
    ],
)
def test_to_bytes(input_bytes: Any, expected: bytes):
    """Test the conversion of the supported input types into bytes."""
    assert to_bytes(input_bytes) == expected


@pytest.mark.parametrize("input_bytes", [None, 1.5, "0xzz"])
def test_to_bytes_invalid(input_bytes: Any):
    """Test that unsupported inputs are rejected."""
    with pytest.raises(ValueError):
        to_bytes(input_bytes)


def test_to_hex():
    """Test the hex string conversion."""
    assert to_hex(b"\xde\xad") == "0xdead"
    assert to_hex(b"") == "0x"


@pytest.mark.parametrize(
    "input_number, expected",
    [
        (0, 0),
        ("10", 10),
        ("0x10", 16),
        (b"\x01\x00", 256),
    ],
)
def test_to_number(input_number: Any, expected: int):
    """Test the conversion of the supported input types into numbers."""
    assert to_number(input_number) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, b""),
        (1, b"\x01"),
        (0xFF, b"\xff"),
        (0x100, b"\x01\x00"),
        (2**256 - 1, b"\xff" * 32),
    ],
)
def test_int_to_bytes(value: int, expected: bytes):
    """Test the minimal big-endian conversion of integers."""
    assert int_to_bytes(value) == expected


def test_int_to_bytes_negative():
    """Test that negative integers cannot be converted."""
    with pytest.raises(ValueError):
        int_to_bytes(-1)


def test_padding():
    """Test left and right zero padding."""
    assert pad_left("0x01") == b"\x00" * 31 + b"\x01"
    assert pad_right("0x01") == b"\x01" + b"\x00" * 31
    assert pad_left(b"\x01\x02", 4) == b"\x00\x00\x01\x02"
    assert pad_right(b"\x01\x02", 4) == b"\x01\x02\x00\x00"
    with pytest.raises(ValueError):
        pad_left(b"\x00" * 33)
    with pytest.raises(ValueError):
        pad_right(b"\x00" * 5, 4)


def test_to_fixed_size_bytes():
    """Test fixed size conversions with and without padding."""
    assert to_fixed_size_bytes(1, 2) == b"\x00\x01"
    assert to_fixed_size_bytes("0x0102", 2) == b"\x01\x02"
    assert to_fixed_size_bytes("0x01", 2, left_padding=True) == b"\x00\x01"
    assert to_fixed_size_bytes("0x01", 2, right_padding=True) == b"\x01\x00"
    with pytest.raises(ValueError):
        to_fixed_size_bytes("0x01", 2)
    with pytest.raises(ValueError):
        to_fixed_size_bytes("0x010203", 2)


def test_trim_size_concat():
    """Test the remaining byte helpers."""
    assert trim_leading_zeros("0x000102") == b"\x01\x02"
    assert trim_leading_zeros("0x0000") == b""
    assert size("0x010203") == 3
    assert concat("0x01", b"\x02", [3]) == b"\x01\x02\x03"
