"""Conversion of decoded RLP items into typed transaction fields."""

from typing import Any, List

from ethereum_codec_base_types import Address, Bytes, Hash
from ethereum_codec_exceptions import InvalidSerializedTransactionError
from ethereum_codec_logging import get_logger

logger = get_logger(__name__)

MAX_SCALAR_BYTES = 32


def decode_list(item: Any, name: str) -> List[Any]:
    """Return the item as a list of RLP items."""
    if not isinstance(item, list):
        raise InvalidSerializedTransactionError(f"{name} must be an RLP list")
    return item


def decode_bytes(item: Any, name: str) -> Bytes:
    """Return the item as a byte string."""
    if not isinstance(item, bytes):
        raise InvalidSerializedTransactionError(f"{name} must be an RLP string")
    return Bytes(item)


def decode_uint(item: Any, name: str) -> int:
    """Return the item as an unsigned integer in its canonical RLP form."""
    data = decode_bytes(item, name)
    if len(data) > MAX_SCALAR_BYTES:
        raise InvalidSerializedTransactionError(f"{name} exceeds {MAX_SCALAR_BYTES} bytes")
    if data[:1] == b"\x00":
        raise InvalidSerializedTransactionError(f"{name} has leading zero bytes")
    return int.from_bytes(data, "big")


def decode_signature_scalar(item: Any, name: str, *, strict: bool) -> int:
    """
    Return a signature `r` or `s` value.

    Values longer than 32 bytes are always rejected. Leading zero bytes are
    rejected when `strict` is set and logged otherwise.
    """
    data = decode_bytes(item, name)
    if len(data) > MAX_SCALAR_BYTES:
        raise InvalidSerializedTransactionError(f"{name} exceeds {MAX_SCALAR_BYTES} bytes")
    if data[:1] == b"\x00":
        if strict:
            raise InvalidSerializedTransactionError(f"{name} has leading zero bytes")
        logger.warning("Accepting non-canonical %s with leading zero bytes", name)
    return int.from_bytes(data, "big")


def decode_address(item: Any, name: str) -> Address:
    """Return the item as a 20-byte address."""
    data = decode_bytes(item, name)
    if len(data) != 20:
        raise InvalidSerializedTransactionError(f"{name} must be 20 bytes, got {len(data)}")
    return Address(data)


def decode_optional_address(item: Any, name: str) -> Address | None:
    """Return the item as an address, or `None` for the empty string."""
    if item == b"":
        return None
    return decode_address(item, name)


def decode_hash(item: Any, name: str) -> Hash:
    """Return the item as a 32-byte word."""
    data = decode_bytes(item, name)
    if len(data) != 32:
        raise InvalidSerializedTransactionError(f"{name} must be 32 bytes, got {len(data)}")
    return Hash(data)


def decode_hashes(item: Any, name: str) -> List[Hash]:
    """Return the item as a list of 32-byte words."""
    return [decode_hash(h, f"{name}[{i}]") for i, h in enumerate(decode_list(item, name))]


def expect_item_count(items: List[Any], counts: tuple[int, ...], name: str) -> None:
    """Check that a decoded list has one of the legal item counts."""
    if len(items) not in counts:
        expected = " or ".join(str(c) for c in counts)
        raise InvalidSerializedTransactionError(
            f"{name} must have {expected} items, got {len(items)}"
        )
