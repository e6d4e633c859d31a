"""
Primitive codec: byte conversions, value types, RLP and keccak256.
"""

from .base_types import (
    Address,
    Bytes,
    FixedSizeBytes,
    Hash,
    HexNumber,
    Number,
    keccak256,
    to_address,
    to_checksum_address,
)
from .constants import (
    SECP256K1N,
    TestAddress,
    TestAddress2,
    TestPrivateKey,
    TestPrivateKey2,
)
from .conversions import (
    BytesConvertible,
    FixedSizeBytesConvertible,
    NumberConvertible,
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
from .pydantic import CamelModel, CodecBaseModel, CopyValidateModel
from .serialization import RLPSerializable, rlp_decode, rlp_encode, to_serializable_element

__all__ = (
    "Address",
    "Bytes",
    "BytesConvertible",
    "CamelModel",
    "CodecBaseModel",
    "CopyValidateModel",
    "FixedSizeBytes",
    "FixedSizeBytesConvertible",
    "Hash",
    "HexNumber",
    "Number",
    "NumberConvertible",
    "RLPSerializable",
    "SECP256K1N",
    "TestAddress",
    "TestAddress2",
    "TestPrivateKey",
    "TestPrivateKey2",
    "concat",
    "int_to_bytes",
    "keccak256",
    "pad_left",
    "pad_right",
    "rlp_decode",
    "rlp_encode",
    "size",
    "to_address",
    "to_bytes",
    "to_checksum_address",
    "to_fixed_size_bytes",
    "to_hex",
    "to_number",
    "to_serializable_element",
    "trim_leading_zeros",
)
