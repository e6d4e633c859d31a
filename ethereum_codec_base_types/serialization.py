"""RLP serialization and decoding of codec values."""

from typing import Any, ClassVar, List, Sequence

import ethereum_rlp as eth_rlp
from ethereum_rlp.exceptions import RLPException
from ethereum_types.numeric import Uint

from ethereum_codec_exceptions import RLPDecodingError

from .base_types import Bytes
from .conversions import BytesConvertible, to_bytes


def to_serializable_element(v: Any) -> Any:
    """
    Map a value onto the items accepted by `eth_rlp.encode`.

    Integers and booleans become `Uint`, `None` the empty string and nested
    `RLPSerializable` objects their full field list.
    """
    match v:
        case None:
            return b""
        case bool() | int() if not isinstance(v, Uint):
            if v < 0:
                raise ValueError(f"cannot RLP encode negative integer {v}")
            return Uint(int(v))
        case bytes() | Uint():
            return v
        case list() | tuple():
            return [to_serializable_element(item) for item in v]
        case RLPSerializable():
            return v.to_list(signing=False)
    raise ValueError(f"cannot RLP encode {v!r} of type {type(v).__name__}")


def rlp_encode(value: Any) -> Bytes:
    """
    Encode a value using RLP.

    Integers are encoded as minimal big-endian strings, `None` as the empty
    string and sequences as lists.
    """
    return Bytes(eth_rlp.encode(to_serializable_element(value)))


def rlp_decode(data: BytesConvertible) -> bytes | List[Any]:
    """
    Decode a single RLP item that spans the whole input.

    Trailing bytes after the first item, as well as any non-canonical
    encoding, are rejected.
    """
    encoded = to_bytes(data)
    try:
        decoded = eth_rlp.decode(encoded)
    except RLPException as e:
        raise RLPDecodingError(f"invalid RLP payload: {e}") from e
    except IndexError as e:
        raise RLPDecodingError("truncated RLP payload") from e
    if eth_rlp.encode(decoded) != encoded:
        raise RLPDecodingError("RLP payload has trailing or non-canonical bytes")
    return _to_plain(decoded)


def _to_plain(decoded: Any) -> Any:
    if isinstance(decoded, (bytes, bytearray)):
        return bytes(decoded)
    return [_to_plain(item) for item in decoded]


class RLPSerializable:
    """
    Mixin encoding an object as the RLP list of some of its attributes.

    Subclasses name the attributes of the full envelope in `rlp_fields` and
    those of the envelope hashed for signing in `rlp_signing_fields`. Either
    list, and the byte prefixed to each envelope, can also be computed per
    instance by overriding the `get_*` methods.
    """

    rlp_fields: ClassVar[List[str]]
    rlp_signing_fields: ClassVar[List[str]]

    def get_rlp_fields(self) -> List[str]:
        """Return the attributes of the full envelope, in order."""
        return self.rlp_fields

    def get_rlp_signing_fields(self) -> List[str]:
        """Return the attributes of the signing envelope, in order."""
        return self.rlp_signing_fields

    def get_rlp_prefix(self) -> bytes:
        """Return the bytes written before the full envelope."""
        return b""

    def get_rlp_signing_prefix(self) -> bytes:
        """Return the bytes written before the signing envelope."""
        return b""

    def to_list_from_fields(self, fields: Sequence[str]) -> List[Any]:
        """Return the encodable items of the named attributes."""
        items: List[Any] = []
        for field in fields:
            try:
                items.append(to_serializable_element(getattr(self, field)))
            except (AttributeError, ValueError) as e:
                raise ValueError(
                    f'cannot RLP encode field "{field}" of {self.__class__.__name__}'
                ) from e
        return items

    def to_list(self, signing: bool = False) -> List[Any]:
        """Return the items of the signing envelope or of the full one."""
        if signing:
            return self.to_list_from_fields(self.get_rlp_signing_fields())
        return self.to_list_from_fields(self.get_rlp_fields())

    def rlp_signing_bytes(self) -> Bytes:
        """Return the prefixed signing envelope."""
        return Bytes(self.get_rlp_signing_prefix() + eth_rlp.encode(self.to_list(signing=True)))

    def rlp(self) -> Bytes:
        """Return the prefixed full envelope."""
        return Bytes(self.get_rlp_prefix() + eth_rlp.encode(self.to_list(signing=False)))
