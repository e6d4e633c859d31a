"""EIP-712 type encoding and struct hashing."""

import re
from typing import Any, FrozenSet, Mapping, Sequence

from eth_abi import encode as abi_encode

from ethereum_codec_base_types import Bytes, Hash, keccak256
from ethereum_codec_exceptions import InvalidTypedDataPrimaryTypeError
from ethereum_codec_logging import get_logger

from .domain import EIP712_DOMAIN, domain_to_message, get_types_for_eip712_domain
from .types import TypedDataDefinition, TypedDataDomain
from .validation import (
    Types,
    coerce_leaf_value,
    split_array_type,
    to_types,
    validate_struct,
    validate_typed_data,
)

logger = get_logger(__name__)

ARRAY_SUFFIX = re.compile(r"(\[\d*\])+$")

TYPED_DATA_PREFIX = b"\x19\x01"


def find_type_dependencies(
    type_: str, types: Types, found: FrozenSet[str] = frozenset()
) -> FrozenSet[str]:
    """
    Return the struct types reachable from `type_`, including itself.

    Array suffixes are stripped and basic ABI types end the walk.
    """
    base_type = ARRAY_SUFFIX.sub("", type_)
    if base_type in found or base_type not in types:
        return found
    found = found | {base_type}
    for field in types[base_type]:
        found = find_type_dependencies(field.type, types, found)
    return found


def encode_type(primary_type: str, types: Mapping[str, Sequence[Any]]) -> str:
    """
    Encode a struct type and all its dependencies.

    The primary type comes first, followed by the dependencies sorted by name,
    e.g. `Mail(Person from,Person to,string contents)Person(string name,address wallet)`.
    """
    return _encode_type(primary_type, to_types(types))


def _encode_type(primary_type: str, types: Types) -> str:
    if primary_type not in types:
        raise InvalidTypedDataPrimaryTypeError(primary_type, list(types))
    dependencies = sorted(find_type_dependencies(primary_type, types) - {primary_type})
    return "".join(
        f"{name}({','.join(f'{field.type} {field.name}' for field in types[name])})"
        for name in [primary_type, *dependencies]
    )


def hash_type(primary_type: str, types: Mapping[str, Sequence[Any]]) -> Hash:
    """Return the keccak256 hash of the encoded type."""
    return keccak256(encode_type(primary_type, types).encode("utf-8"))


def encode_field(type_: str, value: Any, types: Types) -> bytes:
    """Encode a single member value into its 32-byte word."""
    if (array := split_array_type(type_)) is not None:
        element_type, _ = array
        return keccak256(b"".join(encode_field(element_type, v, types) for v in value))
    if type_ in types:
        return keccak256(_encode_data(type_, value, types))
    coerced = coerce_leaf_value(type_, value)
    if type_ == "string":
        return keccak256(coerced.encode("utf-8"))
    if type_ == "bytes":
        return keccak256(coerced)
    return abi_encode([type_], [coerced])


def _encode_data(primary_type: str, data: Mapping[str, Any], types: Types) -> Bytes:
    encoded = [bytes(keccak256(_encode_type(primary_type, types).encode("utf-8")))]
    for field in types[primary_type]:
        encoded.append(encode_field(field.type, data[field.name], types))
    return Bytes(b"".join(encoded))


def encode_data(
    primary_type: str, data: Mapping[str, Any], types: Mapping[str, Sequence[Any]]
) -> Bytes:
    """Return the type hash followed by the encoding of every member of the struct."""
    types = to_types(types)
    validate_struct(primary_type, data, types)
    return _encode_data(primary_type, data, types)


def hash_struct(
    primary_type: str, data: Mapping[str, Any], types: Mapping[str, Sequence[Any]]
) -> Hash:
    """Return the EIP-712 `hashStruct` of a struct value."""
    return keccak256(encode_data(primary_type, data, types))


def hash_domain(domain: TypedDataDomain | Mapping[str, Any]) -> Hash:
    """Return the domain separator."""
    if not isinstance(domain, TypedDataDomain):
        domain = TypedDataDomain.model_validate(domain)
    types = {EIP712_DOMAIN: get_types_for_eip712_domain(domain)}
    return hash_struct(EIP712_DOMAIN, domain_to_message(domain), types)


def hash_typed_data(typed_data: TypedDataDefinition | Mapping[str, Any]) -> Hash:
    """
    Return the EIP-712 digest `keccak256(0x1901 || domainSeparator || hashStruct(message))`.

    The message term is left out when the primary type is `EIP712Domain`.
    """
    typed_data = validate_typed_data(typed_data)
    types = dict(typed_data.types)
    types[EIP712_DOMAIN] = get_types_for_eip712_domain(typed_data.domain)

    parts = [TYPED_DATA_PREFIX, _hash(EIP712_DOMAIN, domain_to_message(typed_data.domain), types)]
    if typed_data.primary_type != EIP712_DOMAIN:
        logger.verbose("Hashing typed data %s", _encode_type(typed_data.primary_type, types))
        parts.append(_hash(typed_data.primary_type, typed_data.message, types))
    return keccak256(b"".join(parts))


def _hash(primary_type: str, data: Mapping[str, Any], types: Types) -> bytes:
    return bytes(keccak256(_encode_data(primary_type, data, types)))
