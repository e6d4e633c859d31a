"""
Value types shared by every codec.

Each type validates through its own constructor when used as a pydantic
field and serializes to its hex string in JSON mode.
"""

from hashlib import sha256
from typing import Any, ClassVar, SupportsBytes, Type, TypeVar

from Crypto.Hash import keccak
from eth_utils import is_address, is_checksum_address
from eth_utils import to_checksum_address as checksum_encode
from pydantic import GetCoreSchemaHandler
from pydantic_core.core_schema import (
    PlainValidatorFunctionSchema,
    no_info_plain_validator_function,
    to_string_ser_schema,
)

from ethereum_codec_exceptions import InvalidAddressFormatError

from .conversions import (
    BytesConvertible,
    FixedSizeBytesConvertible,
    NumberConvertible,
    to_bytes,
    to_fixed_size_bytes,
    to_number,
)


class ToStringSchema:
    """Mixin giving a type a constructor-based pydantic schema and string serialization."""

    @staticmethod
    def __get_pydantic_core_schema__(
        source_type: Any, handler: GetCoreSchemaHandler
    ) -> PlainValidatorFunctionSchema:
        """Validate with the class constructor, serialize with `str`."""
        return no_info_plain_validator_function(
            source_type,
            serialization=to_string_ser_schema(),
        )


class Number(int, ToStringSchema):
    """Unsigned quantity accepting ints, decimal or hex strings and big-endian bytes."""

    def __new__(cls, value: NumberConvertible):
        """Convert the value into an integer."""
        return super(Number, cls).__new__(cls, to_number(value))

    def __str__(self) -> str:
        """Print in decimal."""
        return str(int(self))

    def hex(self) -> str:
        """Return the `0x`-prefixed hexadecimal form."""
        return hex(self)


class HexNumber(Number):
    """Quantity printed and serialized as a `0x` hex string, as in JSON-RPC."""

    def __str__(self) -> str:
        """Print in hexadecimal."""
        return self.hex()


class Bytes(bytes, ToStringSchema):
    """Byte string of any length, printed as `0x` hex."""

    def __new__(cls, value: BytesConvertible = b""):
        """Convert the value into bytes."""
        if type(value) is cls:
            return value
        return super(Bytes, cls).__new__(cls, to_bytes(value))

    def __hash__(self) -> int:
        """Hash as the plain byte string."""
        return super(Bytes, self).__hash__()

    def __str__(self) -> str:
        """Print as hex."""
        return self.hex()

    def hex(self, *args, **kwargs) -> str:
        """Return the `0x`-prefixed hex form."""
        return "0x" + super().hex(*args, **kwargs)

    def keccak256(self) -> "Hash":
        """Return the keccak256 digest of the bytes."""
        return keccak256(self)

    def sha256(self) -> "Hash":
        """Return the sha256 digest of the bytes."""
        return Hash(sha256(self).digest())


FB = TypeVar("FB", bound="FixedSizeBytes")


class FixedSizeBytes(Bytes):
    """
    Byte string of a fixed length, created with `FixedSizeBytes[length]`.

    Integers are converted big-endian to the full length; shorter byte
    strings need an explicit `left_padding` or `right_padding`.
    """

    byte_length: ClassVar[int]
    _sized_: ClassVar[Type["FixedSizeBytes"]]

    def __class_getitem__(cls, length: int) -> Type["FixedSizeBytes"]:
        """Return a subclass holding exactly `length` bytes."""

        class Sized(cls):  # type: ignore
            byte_length = length

        Sized._sized_ = Sized
        return Sized

    def __new__(
        cls,
        value: FixedSizeBytesConvertible | FB,
        *,
        left_padding: bool = False,
        right_padding: bool = False,
    ):
        """Convert the value, checking its length."""
        if type(value) is cls:
            return value
        return super(FixedSizeBytes, cls).__new__(
            cls,
            to_fixed_size_bytes(
                value,
                cls.byte_length,
                left_padding=left_padding,
                right_padding=right_padding,
            ),
        )

    def __hash__(self) -> int:
        """Hash as the plain byte string."""
        return super(FixedSizeBytes, self).__hash__()

    def __eq__(self, other: object) -> bool:
        """
        Compare with another value of the same length.

        Strings, ints and byte strings are converted first; values that do
        not convert compare unequal.
        """
        if other is None:
            return False
        if not isinstance(other, FixedSizeBytes):
            if not isinstance(other, (str, int, bytes, SupportsBytes)):
                return NotImplemented
            try:
                other = self._sized_(other)
            except ValueError:
                return False
        return super().__eq__(other)

    def __ne__(self, other: object) -> bool:
        """Negate `__eq__`."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result


class Address(FixedSizeBytes[20]):  # type: ignore
    """20-byte account address."""

    def checksum(self) -> str:
        """Return the EIP-55 mixed-case checksum representation of the address."""
        return checksum_encode(self.hex())


class Hash(FixedSizeBytes[32]):  # type: ignore
    """32-byte word: hashes, storage keys and signature scalars."""


def keccak256(data: BytesConvertible) -> Hash:
    """Return the keccak256 hash of the input."""
    k = keccak.new(digest_bits=256)
    return Hash(k.update(to_bytes(data)).digest())


def to_address(value: "FixedSizeBytesConvertible | Address") -> Address:
    """
    Convert a user supplied value into an `Address`.

    Hex strings must hold exactly 20 bytes; mixed-case strings must carry a
    valid EIP-55 checksum.
    """
    if isinstance(value, Address):
        return value
    if isinstance(value, str):
        if not is_address(value):
            raise InvalidAddressFormatError(value)
        digits = value[2:] if value[:2] in ("0x", "0X") else value
        if digits not in (digits.lower(), digits.upper()) and not is_checksum_address(value):
            raise InvalidAddressFormatError(value)
        return Address(value)
    if isinstance(value, (bytes, SupportsBytes)):
        data = bytes(value)
        if len(data) != 20:
            raise InvalidAddressFormatError(value)
        return Address(data)
    raise InvalidAddressFormatError(value)


def to_checksum_address(address: "FixedSizeBytesConvertible | Address") -> str:
    """Return the EIP-55 checksum string of a valid address."""
    return to_address(address).checksum()
