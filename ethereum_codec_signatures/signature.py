"""
Signature models and their wire formats.

Three encodings are supported:
- raw 65-byte `r || s || v` signatures,
- EIP-2098 compact 64-byte `r || yParityAndS` signatures,
- ERC-6492 wrapped signatures of counterfactual accounts.
"""

from typing import Any, Dict

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_abi.exceptions import DecodingError
from pydantic import field_validator, model_validator

from config import CodecConfig
from ethereum_codec_base_types import (
    Address,
    Bytes,
    BytesConvertible,
    CamelModel,
    Hash,
    HexNumber,
    to_address,
    to_bytes,
    to_number,
)
from ethereum_codec_exceptions import (
    InvalidSignatureError,
    InvalidSignatureLengthError,
    InvalidYParityOrVError,
)

ERC6492_MAGIC_BYTES = Bytes(CodecConfig().ERC6492_MAGIC_BYTES)

S_MASK = (1 << 255) - 1


def y_parity_from_v(v: int) -> int:
    """
    Return the `yParity` encoded in a `v` value.

    Accepts raw parities (0, 1), pre-EIP-155 values (27, 28) and EIP-155
    values (35 and above).
    """
    if v in (0, 1):
        return v
    if v in (27, 28):
        return v - 27
    if v >= 35:
        return (v - 35) % 2
    raise InvalidYParityOrVError(v)


def chain_id_from_v(v: int) -> int | None:
    """Return the chain id encoded in an EIP-155 `v` value, if any."""
    if v >= 35:
        return (v - 35) // 2
    return None


class Signature(CamelModel):
    """
    A secp256k1 signature in its canonical form.

    `v` is optional and, when present, must agree with `y_parity`.
    """

    r: Hash
    s: Hash
    y_parity: int
    v: HexNumber | None = None

    @field_validator("r", "s", mode="before")
    @classmethod
    def left_pad_scalar(cls, value: Any) -> Any:
        """Accept integers and scalars shorter than 32 bytes."""
        if isinstance(value, (Hash, int)):
            return value
        return Hash(value, left_padding=True)

    @model_validator(mode="before")
    @classmethod
    def derive_y_parity(cls, data: Any) -> Any:
        """Derive `yParity` from `v` when only `v` is given, and check they agree."""
        if not isinstance(data, dict):
            return data
        v = data.get("v")
        y_parity = data.get("y_parity", data.get("yParity"))
        if v is not None:
            expected = y_parity_from_v(to_number(v))
            if y_parity is None:
                data = {**data, "y_parity": expected}
                data.pop("yParity", None)
            elif to_number(y_parity) != expected:
                raise InvalidYParityOrVError(to_number(v))
        elif y_parity is not None and to_number(y_parity) not in (0, 1):
            raise InvalidYParityOrVError(to_number(y_parity))
        return data

    def to_bytes(self) -> Bytes:
        """Return the raw 65-byte `r || s || yParity` used by secp256k1 recovery."""
        return Bytes(bytes(self.r) + bytes(self.s) + bytes([self.y_parity]))


class CompactSignature(CamelModel):
    """An EIP-2098 compact signature."""

    r: Hash
    y_parity_and_s: Hash

    @field_validator("r", "y_parity_and_s", mode="before")
    @classmethod
    def left_pad_scalar(cls, value: Any) -> Any:
        """Accept integers and scalars shorter than 32 bytes."""
        if isinstance(value, (Hash, int)):
            return value
        return Hash(value, left_padding=True)


class Erc6492Signature(CamelModel):
    """
    An ERC-6492 signature.

    `address` and `data` are `None` when the signature was not wrapped.
    """

    address: Address | None = None
    data: Bytes | None = None
    signature: Bytes


def parse_signature(signature: BytesConvertible) -> Signature:
    """
    Parse a raw 65-byte `r || s || yParityOrV` signature.

    A trailing byte of 0 or 1 is a `yParity`, 27 or 28 is a `v`, anything
    else is rejected.
    """
    data = to_bytes(signature)
    if len(data) != 65:
        raise InvalidSignatureLengthError(65, len(data))
    y_parity_or_v = data[64]
    if y_parity_or_v in (0, 1):
        return Signature(r=data[:32], s=data[32:64], y_parity=y_parity_or_v)
    if y_parity_or_v in (27, 28):
        return Signature(
            r=data[:32], s=data[32:64], y_parity=y_parity_or_v - 27, v=y_parity_or_v
        )
    raise InvalidYParityOrVError(y_parity_or_v)


def serialize_signature(signature: Signature) -> Bytes:
    """Serialize a signature into 65 bytes, always using 27/28 as the trailing byte."""
    return Bytes(bytes(signature.r) + bytes(signature.s) + bytes([27 + signature.y_parity]))


def parse_compact_signature(signature: BytesConvertible) -> CompactSignature:
    """Parse a 64-byte EIP-2098 compact signature."""
    data = to_bytes(signature)
    if len(data) != 64:
        raise InvalidSignatureLengthError(64, len(data))
    return CompactSignature(r=data[:32], y_parity_and_s=data[32:])


def serialize_compact_signature(signature: CompactSignature) -> Bytes:
    """Serialize a compact signature into 64 bytes."""
    return Bytes(bytes(signature.r) + bytes(signature.y_parity_and_s))


def signature_to_compact_signature(signature: Signature) -> CompactSignature:
    """Fold `yParity` into the top bit of `s`."""
    s = int.from_bytes(signature.s, "big")
    if s > S_MASK:
        raise InvalidSignatureError("s must have its top bit clear to be compacted")
    return CompactSignature(r=signature.r, y_parity_and_s=s | (signature.y_parity << 255))


def compact_signature_to_signature(signature: CompactSignature) -> Signature:
    """Split the top bit of `yParityAndS` back into `yParity` and `s`."""
    y_parity_and_s = int.from_bytes(signature.y_parity_and_s, "big")
    return Signature(r=signature.r, s=y_parity_and_s & S_MASK, y_parity=y_parity_and_s >> 255)


def is_erc6492_signature(signature: BytesConvertible) -> bool:
    """Return whether the signature ends with the ERC-6492 magic suffix."""
    data = to_bytes(signature)
    return len(data) >= 32 and data[-32:] == ERC6492_MAGIC_BYTES


def parse_erc6492_signature(signature: BytesConvertible) -> Erc6492Signature:
    """
    Unwrap an ERC-6492 signature.

    Signatures without the magic suffix are returned unchanged as the
    `signature` member.
    """
    data = to_bytes(signature)
    if not is_erc6492_signature(data):
        return Erc6492Signature(signature=data)
    try:
        address, factory_data, inner = abi_decode(["address", "bytes", "bytes"], data[:-32])
    except DecodingError as e:
        raise InvalidSignatureError("malformed ERC-6492 signature") from e
    return Erc6492Signature(address=address, data=factory_data, signature=inner)


def serialize_erc6492_signature(signature: Erc6492Signature | Dict[str, Any]) -> Bytes:
    """ABI encode `(address, data, signature)` and append the magic suffix."""
    if not isinstance(signature, Erc6492Signature):
        signature = Erc6492Signature.model_validate(signature)
    if signature.address is None:
        raise InvalidSignatureError("an ERC-6492 signature requires a factory address")
    encoded = abi_encode(
        ["address", "bytes", "bytes"],
        [
            bytes(to_address(signature.address)),
            bytes(signature.data or b""),
            bytes(signature.signature),
        ],
    )
    return Bytes(encoded + ERC6492_MAGIC_BYTES)
