"""
Transaction envelope codec: typed transaction models, blob sidecars and
authorization lists, with their RLP serialization and parsing.
"""

from .access_list import AccessList
from .authorization import AuthorizationTuple
from .blob import (
    BYTES_PER_BLOB,
    BYTES_PER_COMMITMENT,
    BYTES_PER_PROOF,
    BlobSidecar,
    CkzgKzg,
    Kzg,
    commitment_to_versioned_hash,
    sidecars_to_versioned_hashes,
    to_blob_sidecars,
)
from .request import (
    TransactionRequest,
    assert_request,
    get_transaction_type,
    transaction_from_request,
)
from .serialization import (
    get_serialized_transaction_type,
    parse_transaction,
    recover_transaction_address,
    serialize_transaction,
)
from .transactions import (
    AccessListTransaction,
    BlobTransaction,
    FeeMarketTransaction,
    LegacyTransaction,
    SetCodeTransaction,
    Transaction,
    TransactionType,
)

__all__ = (
    "BYTES_PER_BLOB",
    "BYTES_PER_COMMITMENT",
    "BYTES_PER_PROOF",
    "AccessList",
    "AccessListTransaction",
    "AuthorizationTuple",
    "BlobSidecar",
    "BlobTransaction",
    "CkzgKzg",
    "FeeMarketTransaction",
    "Kzg",
    "LegacyTransaction",
    "SetCodeTransaction",
    "Transaction",
    "TransactionRequest",
    "TransactionType",
    "assert_request",
    "commitment_to_versioned_hash",
    "get_serialized_transaction_type",
    "get_transaction_type",
    "parse_transaction",
    "recover_transaction_address",
    "serialize_transaction",
    "sidecars_to_versioned_hashes",
    "to_blob_sidecars",
    "transaction_from_request",
)
