"""Synthesis of the `EIP712Domain` struct from a domain value."""

from typing import Any, Dict, List

from .types import TypedDataDomain, TypedDataField

EIP712_DOMAIN = "EIP712Domain"

# (member name, member type, model attribute) in EIP712Domain member order
DOMAIN_FIELDS = (
    ("name", "string", "name"),
    ("version", "string", "version"),
    ("chainId", "uint256", "chain_id"),
    ("verifyingContract", "address", "verifying_contract"),
    ("salt", "bytes32", "salt"),
)


def domain_to_message(domain: TypedDataDomain) -> Dict[str, Any]:
    """Return the domain values that are set, keyed by their EIP-712 member name."""
    return {
        name: getattr(domain, attribute)
        for name, _, attribute in DOMAIN_FIELDS
        if getattr(domain, attribute) is not None
    }


def get_types_for_eip712_domain(domain: TypedDataDomain) -> List[TypedDataField]:
    """Return the members of the `EIP712Domain` struct for the given domain."""
    return [
        TypedDataField(name=name, type=type_)
        for name, type_, attribute in DOMAIN_FIELDS
        if getattr(domain, attribute) is not None
    ]
