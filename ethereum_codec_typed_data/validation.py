"""
Validation of typed data definitions.

Every check runs before any hashing takes place: a definition either
validates completely or raises, hashing never sees invalid input.
"""

import re
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from pydantic import TypeAdapter, ValidationError

from ethereum_codec_base_types import to_address, to_bytes
from ethereum_codec_exceptions import (
    InvalidTypedDataFieldError,
    InvalidTypedDataPrimaryTypeError,
)

from .domain import EIP712_DOMAIN, domain_to_message, get_types_for_eip712_domain
from .types import TypedDataDefinition, TypedDataField

Types = Dict[str, List[TypedDataField]]

INTEGER_TYPE = re.compile(r"^(u?)int(\d+)$")
FIXED_BYTES_TYPE = re.compile(r"^bytes(\d+)$")
ARRAY_TYPE = re.compile(r"^(.+)\[(\d*)\]$")
STRUCT_NAME = re.compile(r"^[A-Za-z_$][\w$]*$")

types_adapter = TypeAdapter(Types)


def to_types(types: Mapping[str, Sequence[Any]]) -> Types:
    """Convert a mapping of plain `{name, type}` dictionaries into typed fields."""
    return types_adapter.validate_python(dict(types))


def split_array_type(type_: str) -> Tuple[str, int | None] | None:
    """
    Split an array type into its element type and fixed length.

    Returns `None` for non-array types and a length of `None` for dynamic arrays.
    """
    match = ARRAY_TYPE.match(type_)
    if match is None:
        return None
    element_type, length = match.groups()
    return element_type, int(length) if length else None


def is_leaf_type(type_: str) -> bool:
    """Return whether the type is one of the supported basic ABI types."""
    if type_ in ("address", "bool", "string", "bytes"):
        return True
    if match := FIXED_BYTES_TYPE.match(type_):
        return 1 <= int(match.group(1)) <= 32
    if match := INTEGER_TYPE.match(type_):
        bits = int(match.group(2))
        return 8 <= bits <= 256 and bits % 8 == 0
    return False


def coerce_leaf_value(type_: str, value: Any, path: str = "") -> Any:
    """
    Convert a leaf value into the form expected by the ABI encoder.

    Addresses and byte types become `bytes`, integers become `int` and
    strings stay `str`.
    """
    label = path or type_
    if value is None:
        raise InvalidTypedDataFieldError(f"missing value for {label} of type {type_}")

    if type_ == "address":
        return bytes(to_address(value))

    if type_ == "bool":
        if not isinstance(value, bool):
            raise InvalidTypedDataFieldError(f"{label}: expected a bool, got {value!r}")
        return value

    if type_ == "string":
        if not isinstance(value, str):
            raise InvalidTypedDataFieldError(f"{label}: expected a string, got {value!r}")
        return value

    if type_ == "bytes" or FIXED_BYTES_TYPE.match(type_):
        try:
            data = to_bytes(value)
        except ValueError as e:
            raise InvalidTypedDataFieldError(f"{label}: invalid bytes value {value!r}") from e
        if type_ != "bytes" and len(data) != int(type_[5:]):
            raise InvalidTypedDataFieldError(
                f"{label}: expected {type_[5:]} bytes for {type_}, got {len(data)}"
            )
        return data

    if match := INTEGER_TYPE.match(type_):
        signed, bits = match.group(1) == "", int(match.group(2))
        number = _to_integer(value, label)
        low, high = (-(2 ** (bits - 1)), 2 ** (bits - 1) - 1) if signed else (0, 2**bits - 1)
        if not low <= number <= high:
            raise InvalidTypedDataFieldError(f"{label}: {number} is out of range for {type_}")
        return number

    raise InvalidTypedDataFieldError(f"{label}: unsupported type {type_}")


def _to_integer(value: Any, label: str) -> int:
    if isinstance(value, bool):
        raise InvalidTypedDataFieldError(f"{label}: expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            if value.lower().startswith(("0x", "-0x")):
                return int(value, 16)
            return int(value, 10)
        except ValueError as e:
            raise InvalidTypedDataFieldError(f"{label}: expected an integer, got {value!r}") from e
    raise InvalidTypedDataFieldError(f"{label}: expected an integer, got {value!r}")


def validate_types(types: Types) -> None:
    """Check that every member type refers to a declared struct or a basic ABI type."""
    for type_name, fields in types.items():
        if not STRUCT_NAME.match(type_name):
            raise InvalidTypedDataFieldError(f'invalid struct name "{type_name}"')
        names = [field.name for field in fields]
        if len(set(names)) != len(names):
            raise InvalidTypedDataFieldError(f'duplicate member names in struct "{type_name}"')
        for field in fields:
            element_type = field.type
            while (array := split_array_type(element_type)) is not None:
                element_type = array[0]
            if element_type not in types and not is_leaf_type(element_type):
                raise InvalidTypedDataFieldError(
                    f'unknown type "{field.type}" for member "{type_name}.{field.name}"'
                )


def validate_value(type_: str, value: Any, types: Types, path: str) -> None:
    """Check a single value, recursing into arrays and structs."""
    if (array := split_array_type(type_)) is not None:
        element_type, length = array
        if not isinstance(value, (list, tuple)):
            raise InvalidTypedDataFieldError(f"{path}: expected an array, got {value!r}")
        if length is not None and len(value) != length:
            raise InvalidTypedDataFieldError(
                f"{path}: expected {length} elements for {type_}, got {len(value)}"
            )
        for index, element in enumerate(value):
            validate_value(element_type, element, types, f"{path}[{index}]")
    elif type_ in types:
        validate_struct(type_, value, types, path)
    else:
        coerce_leaf_value(type_, value, path)


def validate_struct(type_name: str, data: Any, types: Types, path: str = "") -> None:
    """Check that `data` holds a valid value for every member of the struct."""
    if type_name not in types:
        raise InvalidTypedDataPrimaryTypeError(type_name, list(types))
    if not isinstance(data, Mapping):
        raise InvalidTypedDataFieldError(f"{path or type_name}: expected a struct, got {data!r}")
    for field in types[type_name]:
        member_path = f"{path or type_name}.{field.name}"
        if field.name not in data:
            raise InvalidTypedDataFieldError(f"missing value for {member_path}")
        validate_value(field.type, data[field.name], types, member_path)


def validate_typed_data(
    typed_data: TypedDataDefinition | Mapping[str, Any],
) -> TypedDataDefinition:
    """
    Validate a complete typed data definition and return it as a model.

    Raises `InvalidTypedDataPrimaryTypeError` for an undeclared primary type,
    `InvalidTypedDataFieldError` for schema and value mismatches and
    `InvalidAddressFormatError` for malformed addresses.
    """
    if not isinstance(typed_data, TypedDataDefinition):
        try:
            typed_data = TypedDataDefinition.model_validate(typed_data)
        except ValidationError as e:
            raise InvalidTypedDataFieldError(f"malformed typed data: {e}") from e

    if EIP712_DOMAIN in typed_data.types:
        raise InvalidTypedDataFieldError(
            f'"{EIP712_DOMAIN}" must not be declared, it is derived from the domain'
        )
    validate_types(typed_data.types)

    domain_types = {EIP712_DOMAIN: get_types_for_eip712_domain(typed_data.domain)}
    validate_struct(EIP712_DOMAIN, domain_to_message(typed_data.domain), domain_types)

    if typed_data.primary_type != EIP712_DOMAIN:
        if typed_data.primary_type not in typed_data.types:
            raise InvalidTypedDataPrimaryTypeError(
                typed_data.primary_type, list(typed_data.types)
            )
        validate_struct(typed_data.primary_type, typed_data.message, typed_data.types)

    return typed_data
