"""
Signature parsing, serialization, recovery and verification.
"""

from .message import SignableMessage, hash_message, to_prefixed_message
from .recovery import (
    SignatureLike,
    public_key_to_address,
    recover_address,
    recover_message_address,
    recover_public_key,
    recover_typed_data_address,
    sign_hash,
    to_signature,
    verify_hash,
    verify_message,
    verify_typed_data,
)
from .signature import (
    ERC6492_MAGIC_BYTES,
    CompactSignature,
    Erc6492Signature,
    Signature,
    chain_id_from_v,
    compact_signature_to_signature,
    is_erc6492_signature,
    parse_compact_signature,
    parse_erc6492_signature,
    parse_signature,
    serialize_compact_signature,
    serialize_erc6492_signature,
    serialize_signature,
    signature_to_compact_signature,
    y_parity_from_v,
)

__all__ = (
    "ERC6492_MAGIC_BYTES",
    "CompactSignature",
    "Erc6492Signature",
    "SignableMessage",
    "Signature",
    "SignatureLike",
    "chain_id_from_v",
    "compact_signature_to_signature",
    "hash_message",
    "is_erc6492_signature",
    "parse_compact_signature",
    "parse_erc6492_signature",
    "parse_signature",
    "public_key_to_address",
    "recover_address",
    "recover_message_address",
    "recover_public_key",
    "recover_typed_data_address",
    "serialize_compact_signature",
    "serialize_erc6492_signature",
    "serialize_signature",
    "sign_hash",
    "signature_to_compact_signature",
    "to_prefixed_message",
    "to_signature",
    "verify_hash",
    "verify_message",
    "verify_typed_data",
    "y_parity_from_v",
)
