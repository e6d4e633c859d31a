"""EIP-191 personal message hashing."""

from config import CodecConfig
from ethereum_codec_base_types import Bytes, Hash, keccak256

SignableMessage = str | bytes


def to_prefixed_message(message: SignableMessage) -> Bytes:
    """
    Prepend the `"\\x19Ethereum Signed Message:\\n" + len(message)` prefix.

    A `str` message is signed as its UTF-8 text, a `bytes` message (for
    example `Bytes("0x68656c6c6f")`) is signed as is.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    prefix = f"{CodecConfig().PRESIGN_MESSAGE_PREFIX}{len(data)}".encode("utf-8")
    return Bytes(prefix + data)


def hash_message(message: SignableMessage) -> Hash:
    """Return the keccak256 hash of the prefixed message."""
    return keccak256(to_prefixed_message(message))
