"""
EIP-712 typed structured data hashing.
"""

from .domain import EIP712_DOMAIN, domain_to_message, get_types_for_eip712_domain
from .hashing import (
    encode_data,
    encode_field,
    encode_type,
    find_type_dependencies,
    hash_domain,
    hash_struct,
    hash_type,
    hash_typed_data,
)
from .types import TypedDataDefinition, TypedDataDomain, TypedDataField
from .validation import validate_typed_data

__all__ = (
    "EIP712_DOMAIN",
    "TypedDataDefinition",
    "TypedDataDomain",
    "TypedDataField",
    "domain_to_message",
    "encode_data",
    "encode_field",
    "encode_type",
    "find_type_dependencies",
    "get_types_for_eip712_domain",
    "hash_domain",
    "hash_struct",
    "hash_type",
    "hash_typed_data",
    "validate_typed_data",
)
