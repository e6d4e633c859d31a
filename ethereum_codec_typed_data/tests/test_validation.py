"""
Test suite for the typed data validation.
"""

from typing import Any, Dict

import pytest

from ethereum_codec_exceptions import (
    InvalidAddressFormatError,
    InvalidTypedDataFieldError,
    InvalidTypedDataPrimaryTypeError,
)

from ..hashing import hash_struct, hash_typed_data
from ..types import TypedDataDefinition
from ..validation import is_leaf_type, validate_typed_data


@pytest.mark.parametrize(
    "type_, expected",
    [
        ("address", True),
        ("bool", True),
        ("string", True),
        ("bytes", True),
        ("bytes1", True),
        ("bytes32", True),
        ("bytes0", False),
        ("bytes33", False),
        ("uint8", True),
        ("uint256", True),
        ("int128", True),
        ("uint7", False),
        ("uint264", False),
        ("uint", False),
        ("Person", False),
    ],
)
def test_is_leaf_type(type_: str, expected: bool):
    """Test the recognition of the supported basic ABI types."""
    assert is_leaf_type(type_) == expected


def test_valid_definition(mail_typed_data: Dict[str, Any]):
    """Test that a valid definition is returned as a model."""
    typed_data = validate_typed_data(mail_typed_data)
    assert isinstance(typed_data, TypedDataDefinition)
    assert typed_data.primary_type == "Mail"
    assert typed_data.domain.chain_id == 1


def test_unknown_primary_type(mail_typed_data: Dict[str, Any]):
    """Test that an undeclared primary type is rejected."""
    mail_typed_data["primaryType"] = "Letter"
    with pytest.raises(InvalidTypedDataPrimaryTypeError):
        hash_typed_data(mail_typed_data)


def test_declared_domain_type(mail_typed_data: Dict[str, Any]):
    """Test that declaring `EIP712Domain` explicitly is rejected."""
    mail_typed_data["types"]["EIP712Domain"] = [{"name": "name", "type": "string"}]
    with pytest.raises(InvalidTypedDataFieldError):
        validate_typed_data(mail_typed_data)


def test_malformed_verifying_contract(mail_typed_data: Dict[str, Any]):
    """Test that a malformed domain address is reported as an address error."""
    mail_typed_data["domain"]["verifyingContract"] = "0x1234"
    with pytest.raises(InvalidAddressFormatError):
        hash_typed_data(mail_typed_data)


def test_malformed_member_address(mail_typed_data: Dict[str, Any]):
    """Test that a malformed address member is reported before hashing."""
    mail_typed_data["message"]["to"]["wallet"] = "0xnotanaddress"
    with pytest.raises(InvalidAddressFormatError):
        hash_typed_data(mail_typed_data)


def test_missing_member(mail_typed_data: Dict[str, Any]):
    """Test that a missing member value is rejected."""
    del mail_typed_data["message"]["contents"]
    with pytest.raises(InvalidTypedDataFieldError):
        hash_typed_data(mail_typed_data)


def test_unknown_member_type(mail_typed_data: Dict[str, Any]):
    """Test that a member referring to an undeclared type is rejected."""
    mail_typed_data["types"]["Mail"].append({"name": "attachment", "type": "Attachment"})
    mail_typed_data["message"]["attachment"] = {}
    with pytest.raises(InvalidTypedDataFieldError):
        hash_typed_data(mail_typed_data)


@pytest.mark.parametrize(
    "type_, value",
    [
        pytest.param("uint8", 256, id="uint_overflow"),
        pytest.param("uint256", -1, id="uint_negative"),
        pytest.param("int8", 128, id="int_overflow"),
        pytest.param("int8", -129, id="int_underflow"),
        pytest.param("uint256", "ten", id="uint_not_a_number"),
        pytest.param("uint256", True, id="uint_bool"),
        pytest.param("bool", "true", id="bool_string"),
        pytest.param("string", 1, id="string_int"),
        pytest.param("bytes4", "0xdead", id="bytes4_too_short"),
        pytest.param("bytes", "0xzz", id="bytes_not_hex"),
        pytest.param("uint256[2]", [1], id="fixed_array_length"),
        pytest.param("uint256[]", 1, id="array_not_a_list"),
    ],
)
def test_invalid_member_values(type_: str, value: Any):
    """Test that values not convertible to their declared type are rejected."""
    types = {"Value": [{"name": "value", "type": type_}]}
    with pytest.raises(InvalidTypedDataFieldError):
        hash_struct("Value", {"value": value}, types)


def test_nested_struct_must_be_a_mapping(mail_typed_data: Dict[str, Any]):
    """Test that a nested struct value given as a scalar is rejected."""
    mail_typed_data["message"]["from"] = "Cow"
    with pytest.raises(InvalidTypedDataFieldError):
        validate_typed_data(mail_typed_data)


def test_bad_checksum_verifying_contract(mail_typed_data: Dict[str, Any]):
    """Test that a mixed-case domain address must carry a valid EIP-55 checksum."""
    mail_typed_data["domain"]["verifyingContract"] = "0x" + "c" * 39 + "C"
    with pytest.raises(InvalidAddressFormatError):
        hash_typed_data(mail_typed_data)


def test_hex_chain_id(mail_typed_data: Dict[str, Any]):
    """Test that a hex chain id hashes like its decimal value."""
    expected = hash_typed_data(mail_typed_data)
    mail_typed_data["domain"]["chainId"] = "0x1"
    assert validate_typed_data(mail_typed_data).domain.chain_id == 1
    assert hash_typed_data(mail_typed_data) == expected


@pytest.mark.parametrize("chain_id", ["0xzz", "one", 1.5, -1])
def test_invalid_chain_id(mail_typed_data: Dict[str, Any], chain_id: Any):
    """Test that a malformed domain chain id is reported as a field error."""
    mail_typed_data["domain"]["chainId"] = chain_id
    with pytest.raises(InvalidTypedDataFieldError):
        hash_typed_data(mail_typed_data)


def test_malformed_definition():
    """Test that a definition missing its required keys is reported as a field error."""
    with pytest.raises(InvalidTypedDataFieldError):
        validate_typed_data({"domain": {}, "message": {}})
