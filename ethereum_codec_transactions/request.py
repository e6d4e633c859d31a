"""Transaction requests: validation and conversion into transactions."""

from typing import Any, Dict, FrozenSet, List

from pydantic import Field

from ethereum_codec_base_types import Address, Bytes, CamelModel, Hash, HexNumber
from ethereum_codec_exceptions import (
    ConflictingFeeFieldsError,
    FeeCapTooHighError,
    InvalidChainIdError,
    TipAboveFeeCapError,
)

from .access_list import AccessList
from .authorization import AuthorizationTuple
from .blob import BlobSidecar, sidecars_to_versioned_hashes
from .transactions import TRANSACTION_CLASSES, Transaction, TransactionType

MAX_UINT256 = 2**256 - 1

LEGACY_FIELDS = frozenset({"chain_id", "nonce", "gas", "to", "value", "data", "gas_price"})
ACCESS_LIST_FIELDS = LEGACY_FIELDS | {"access_list"}
FEE_MARKET_FIELDS = (ACCESS_LIST_FIELDS - {"gas_price"}) | {
    "max_fee_per_gas",
    "max_priority_fee_per_gas",
}
BLOB_FIELDS = FEE_MARKET_FIELDS | {"max_fee_per_blob_gas", "blob_versioned_hashes", "sidecars"}
SET_CODE_FIELDS = FEE_MARKET_FIELDS | {"authorization_list"}

SUPPORTED_FIELDS: Dict[TransactionType, FrozenSet[str]] = {
    TransactionType.LEGACY: LEGACY_FIELDS,
    TransactionType.ACCESS_LIST: ACCESS_LIST_FIELDS,
    TransactionType.FEE_MARKET: FEE_MARKET_FIELDS,
    TransactionType.BLOB: BLOB_FIELDS,
    TransactionType.SET_CODE: SET_CODE_FIELDS,
}


class TransactionRequest(CamelModel):
    """
    A partially specified transaction, as accepted by `eth_sendTransaction`.

    Every field is optional; the transaction type is deduced from the fields
    that are present unless `type` is given explicitly.
    """

    ty: HexNumber | None = Field(None, alias="type")
    sender: Address | None = Field(None, alias="from")
    chain_id: HexNumber | None = None
    nonce: HexNumber | None = None
    gas: HexNumber | None = None
    to: Address | None = None
    value: HexNumber | None = None
    data: Bytes | None = None

    gas_price: HexNumber | None = None
    max_fee_per_gas: HexNumber | None = None
    max_priority_fee_per_gas: HexNumber | None = None
    max_fee_per_blob_gas: HexNumber | None = None

    access_list: List[AccessList] | None = None
    blob_versioned_hashes: List[Hash] | None = None
    sidecars: List[BlobSidecar] | None = None
    authorization_list: List[AuthorizationTuple] | None = None


def assert_request(request: TransactionRequest, *, replay_protected: bool = True) -> None:
    """
    Reject requests whose fields contradict each other.

    A zero chain id is only accepted when `replay_protected` is unset.
    """
    if request.chain_id is not None:
        if request.chain_id < 0 or (replay_protected and request.chain_id == 0):
            raise InvalidChainIdError(request.chain_id)
    if request.gas_price is not None and (
        request.max_fee_per_gas is not None or request.max_priority_fee_per_gas is not None
    ):
        raise ConflictingFeeFieldsError()
    if request.max_fee_per_gas is not None and request.max_fee_per_gas > MAX_UINT256:
        raise FeeCapTooHighError(request.max_fee_per_gas)
    if (
        request.max_fee_per_gas is not None
        and request.max_priority_fee_per_gas is not None
        and request.max_priority_fee_per_gas > request.max_fee_per_gas
    ):
        raise TipAboveFeeCapError(request.max_priority_fee_per_gas, request.max_fee_per_gas)


def get_transaction_type(request: TransactionRequest) -> TransactionType:
    """Return the explicit type of the request, or deduce it from the fields present."""
    if request.ty is not None:
        return TransactionType(int(request.ty))
    if request.authorization_list is not None:
        return TransactionType.SET_CODE
    if (
        request.blob_versioned_hashes is not None
        or request.max_fee_per_blob_gas is not None
        or request.sidecars is not None
    ):
        return TransactionType.BLOB
    if request.max_fee_per_gas is not None or request.max_priority_fee_per_gas is not None:
        return TransactionType.FEE_MARKET
    if request.gas_price is not None and request.access_list is not None:
        return TransactionType.ACCESS_LIST
    if request.access_list is not None:
        return TransactionType.FEE_MARKET
    return TransactionType.LEGACY


def transaction_from_request(
    request: TransactionRequest, *, replay_protected: bool = True
) -> Transaction:
    """
    Build the unsigned transaction described by a request.

    Blob versioned hashes missing from the request are computed from its
    sidecars. Fields the selected type cannot carry are rejected.
    """
    assert_request(request, replay_protected=replay_protected)
    ty = get_transaction_type(request)
    fields: Dict[str, Any] = {
        name: getattr(request, name)
        for name in TransactionRequest.model_fields
        if name not in ("ty", "sender") and getattr(request, name) is not None
    }
    unsupported = sorted(set(fields) - SUPPORTED_FIELDS[ty])
    if unsupported:
        raise ValueError(f"{', '.join(unsupported)} not supported by {ty.name} transactions")
    if ty != TransactionType.LEGACY and request.chain_id is None:
        raise InvalidChainIdError(None)
    if ty == TransactionType.BLOB and request.sidecars and request.blob_versioned_hashes is None:
        fields["blob_versioned_hashes"] = sidecars_to_versioned_hashes(request.sidecars)
    return TRANSACTION_CLASSES[ty](**fields)  # type: ignore[return-value]
