"""EIP-712 typed data definitions."""

from typing import Any, Dict, List

from pydantic import Field, field_validator

from ethereum_codec_base_types import Address, CamelModel, Hash, HexNumber, to_address
from ethereum_codec_exceptions import InvalidTypedDataFieldError


class TypedDataField(CamelModel):
    """A single `{name, type}` member of a struct type."""

    name: str
    type: str


class TypedDataDomain(CamelModel):
    """
    The EIP-712 domain.

    Empty strings are treated as absent values, absent values are left out of
    the synthesized `EIP712Domain` type.
    """

    name: str | None = None
    version: str | None = None
    chain_id: HexNumber | None = None
    verifying_contract: Address | None = None
    salt: Hash | None = None

    @field_validator("name", "version", "salt", mode="before")
    @classmethod
    def empty_string_as_none(cls, value: Any) -> Any:
        """Treat empty strings as absent values."""
        if value == "":
            return None
        return value

    @field_validator("chain_id", mode="before")
    @classmethod
    def validate_chain_id(cls, value: Any) -> Any:
        """Accept decimal and hex quantities, reject anything else with a codec error."""
        if value is None or value == "":
            return None
        try:
            chain_id = HexNumber(value)
        except (TypeError, ValueError) as e:
            raise InvalidTypedDataFieldError(f"invalid domain chainId {value!r}") from e
        if chain_id < 0:
            raise InvalidTypedDataFieldError(f"invalid domain chainId {value!r}")
        return chain_id

    @field_validator("verifying_contract", mode="before")
    @classmethod
    def validate_verifying_contract(cls, value: Any) -> Any:
        """Reject malformed contract addresses with a codec error."""
        if value is None or value == "":
            return None
        return to_address(value)


class TypedDataDefinition(CamelModel):
    """A complete typed data payload as passed to `eth_signTypedData_v4`."""

    domain: TypedDataDomain = Field(default_factory=TypedDataDomain)
    types: Dict[str, List[TypedDataField]]
    primary_type: str
    message: Dict[str, Any] = Field(default_factory=dict)
