"""secp256k1 signing, public key recovery and signature verification."""

from typing import Any, Mapping

from coincurve.keys import PrivateKey, PublicKey

from ethereum_codec_base_types import (
    SECP256K1N,
    Address,
    Bytes,
    BytesConvertible,
    Hash,
    keccak256,
    to_address,
    to_bytes,
)
from ethereum_codec_exceptions import InvalidSignatureError, InvalidSignatureLengthError
from ethereum_codec_logging import get_logger
from ethereum_codec_typed_data import TypedDataDefinition, hash_typed_data

from .message import SignableMessage, hash_message
from .signature import (
    CompactSignature,
    Signature,
    compact_signature_to_signature,
    is_erc6492_signature,
    parse_compact_signature,
    parse_erc6492_signature,
    parse_signature,
)

logger = get_logger(__name__)

SignatureLike = Signature | CompactSignature | BytesConvertible


def to_signature(signature: SignatureLike) -> Signature:
    """Normalize any accepted signature form into a `Signature`."""
    if isinstance(signature, Signature):
        return signature
    if isinstance(signature, CompactSignature):
        return compact_signature_to_signature(signature)
    data = to_bytes(signature)
    if len(data) == 65:
        return parse_signature(data)
    if len(data) == 64:
        return compact_signature_to_signature(parse_compact_signature(data))
    raise InvalidSignatureLengthError((65, 64), len(data))


def sign_hash(hash: BytesConvertible, private_key: int | BytesConvertible) -> Signature:
    """Sign a 32-byte hash, returning a signature with a raw `yParity`."""
    secret = bytes(Hash(private_key, left_padding=True))
    signature_bytes = PrivateKey(secret=secret).sign_recoverable(bytes(Hash(hash)), hasher=None)
    return Signature(
        r=signature_bytes[0:32], s=signature_bytes[32:64], y_parity=signature_bytes[64]
    )


def recover_public_key(hash: BytesConvertible, signature: SignatureLike) -> Bytes:
    """Recover the 65-byte uncompressed public key that produced the signature."""
    message_hash = Hash(hash)
    canonical = to_signature(signature)
    for name, scalar in (("r", canonical.r), ("s", canonical.s)):
        if not 0 < int.from_bytes(scalar, "big") < SECP256K1N:
            raise InvalidSignatureError(f"{name} is outside of the secp256k1 scalar range")
    try:
        public_key = PublicKey.from_signature_and_message(
            bytes(canonical.to_bytes()), bytes(message_hash), hasher=None
        )
    except ValueError as e:
        raise InvalidSignatureError("unable to recover public key from signature") from e
    return Bytes(public_key.format(compressed=False))


def public_key_to_address(public_key: BytesConvertible) -> Address:
    """Derive the address of an uncompressed public key."""
    data = to_bytes(public_key)
    if len(data) == 65:
        data = data[1:]
    return Address(keccak256(data)[12:])


def recover_address(hash: BytesConvertible, signature: SignatureLike) -> Address:
    """Recover the address of the signer of a hash."""
    address = public_key_to_address(recover_public_key(hash, signature))
    logger.debug("Recovered signer %s", address)
    return address


def recover_message_address(message: SignableMessage, signature: SignatureLike) -> Address:
    """Recover the address of the signer of an EIP-191 personal message."""
    return recover_address(hash_message(message), signature)


def recover_typed_data_address(
    typed_data: TypedDataDefinition | Mapping[str, Any], signature: SignatureLike
) -> Address:
    """Recover the address of the signer of an EIP-712 typed data payload."""
    return recover_address(hash_typed_data(typed_data), signature)


def _unwrap(signature: SignatureLike) -> SignatureLike:
    if isinstance(signature, (Signature, CompactSignature)):
        return signature
    if is_erc6492_signature(signature):
        logger.debug("Unwrapping ERC-6492 signature")
        return parse_erc6492_signature(signature).signature
    return signature


def verify_hash(
    address: BytesConvertible, hash: BytesConvertible, signature: SignatureLike
) -> bool:
    """
    Return whether `address` signed `hash`.

    A well-formed signature of a different signer yields `False`, malformed
    input raises. ERC-6492 wrapped signatures are unwrapped and checked as
    externally owned account signatures.
    """
    # addresses compare case-insensitively
    expected = to_address(address.lower() if isinstance(address, str) else address)
    return recover_address(hash, _unwrap(signature)) == expected


def verify_message(
    address: BytesConvertible, message: SignableMessage, signature: SignatureLike
) -> bool:
    """Return whether `address` signed the EIP-191 personal message."""
    return verify_hash(address, hash_message(message), signature)


def verify_typed_data(
    address: BytesConvertible,
    typed_data: TypedDataDefinition | Mapping[str, Any],
    signature: SignatureLike,
) -> bool:
    """Return whether `address` signed the EIP-712 typed data payload."""
    return verify_hash(address, hash_typed_data(typed_data), signature)
