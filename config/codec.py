"""
A module for managing codec-wide configuration.

Classes:
- CodecConfig: Holds the strictness knobs and protocol constants used by the
  transaction, signature and typed-data codecs.
"""

from pydantic import BaseModel


class CodecConfig(BaseModel):
    """A class for accessing codec configuration."""

    STRICT_LEGACY_V: bool = True
    """
    Reject legacy `v` values that are neither 27/28 nor a valid EIP-155 value
    (for example 29-34) when decoding a legacy transaction.
    """

    STRICT_SIGNATURE_SCALARS: bool = True
    """
    Reject typed transaction and authorization `r`/`s` items that carry a
    leading zero byte.
    """

    DEFAULT_LOG_LEVEL: str = "INFO"
    """The log level used by `configure_logging` when none is given."""

    ERC6492_MAGIC_BYTES: str = "0x" + "6492" * 16
    """The 32-byte suffix identifying an ERC-6492 wrapped signature."""

    PRESIGN_MESSAGE_PREFIX: str = "\x19Ethereum Signed Message:\n"
    """The EIP-191 personal message prefix."""

    VERSIONED_HASH_VERSION_KZG: int = 0x01
    """Version byte of the EIP-4844 versioned hashes."""
