"""Serialization and parsing of transaction envelopes."""

from typing import Any, List

from config import CodecConfig
from ethereum_codec_base_types import (
    Address,
    Bytes,
    BytesConvertible,
    rlp_decode,
    to_bytes,
)
from ethereum_codec_exceptions import (
    InvalidBlobSidecarsError,
    InvalidSerializedTransactionError,
    InvalidSignatureError,
    InvalidYParityOrVError,
    RLPDecodingError,
)
from ethereum_codec_logging import get_logger
from ethereum_codec_signatures import Signature, recover_address

from .access_list import AccessList
from .authorization import AuthorizationTuple
from .blob import BlobSidecar
from .decoding import (
    decode_address,
    decode_bytes,
    decode_hashes,
    decode_list,
    decode_optional_address,
    decode_signature_scalar,
    decode_uint,
    expect_item_count,
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

logger = get_logger(__name__)

SIGNATURE_ITEM_COUNT = 3
UNSIGNED_ITEM_COUNTS = {
    TransactionType.LEGACY: 6,
    TransactionType.ACCESS_LIST: 8,
    TransactionType.FEE_MARKET: 9,
    TransactionType.BLOB: 11,
    TransactionType.SET_CODE: 10,
}
NETWORK_WRAPPER_ITEM_COUNT = 4


def get_serialized_transaction_type(data: BytesConvertible) -> TransactionType:
    """
    Return the type of a serialized transaction.

    Typed transactions start with their type byte; a payload starting with
    an RLP list prefix is a legacy transaction.
    """
    payload = to_bytes(data)
    if not payload:
        raise InvalidSerializedTransactionError("empty transaction payload", data=payload)
    first_byte = payload[0]
    if first_byte >= 0xC0:
        return TransactionType.LEGACY
    if first_byte in (ty.value for ty in TransactionType if ty != TransactionType.LEGACY):
        return TransactionType(first_byte)
    raise InvalidSerializedTransactionError(
        f"unknown transaction type 0x{first_byte:02x}", data=payload
    )


def _item_counts(ty: TransactionType) -> tuple[int, int]:
    unsigned = UNSIGNED_ITEM_COUNTS[ty]
    return unsigned, unsigned + SIGNATURE_ITEM_COUNT


def _decode_payload(payload: bytes, ty: TransactionType) -> List[Any]:
    body = payload if ty == TransactionType.LEGACY else payload[1:]
    try:
        items = rlp_decode(body)
    except RLPDecodingError as e:
        raise InvalidSerializedTransactionError(str(e), data=payload) from e
    if not isinstance(items, list):
        raise InvalidSerializedTransactionError(
            f"{ty.name.lower()} transaction payload must be an RLP list", data=payload
        )
    logger.debug("Decoding %s transaction with %d RLP items", ty.name, len(items))
    return items


def _check_legacy_v(v: int, config: CodecConfig) -> None:
    if v in (27, 28) or v >= 35:
        return
    if config.STRICT_LEGACY_V:
        raise InvalidYParityOrVError(v)
    logger.warning("Accepting legacy transaction with non-standard v value %d", v)


def _parse_legacy(items: List[Any], config: CodecConfig) -> LegacyTransaction:
    expect_item_count(items, _item_counts(TransactionType.LEGACY), "legacy transaction")
    fields: dict[str, Any] = dict(
        nonce=decode_uint(items[0], "nonce"),
        gas_price=decode_uint(items[1], "gasPrice"),
        gas=decode_uint(items[2], "gas"),
        to=decode_optional_address(items[3], "to"),
        value=decode_uint(items[4], "value"),
        data=decode_bytes(items[5], "data"),
    )
    if len(items) == UNSIGNED_ITEM_COUNTS[TransactionType.LEGACY]:
        return LegacyTransaction(**fields)
    v_item, r_item, s_item = items[6:]
    if r_item == b"" and s_item == b"":
        # Unsigned replay protected transaction, `v` holds the chain id.
        return LegacyTransaction(**fields, chain_id=decode_uint(v_item, "chainId"))
    v = decode_uint(v_item, "v")
    _check_legacy_v(v, config)
    return LegacyTransaction(
        **fields,
        v=v,
        r=decode_signature_scalar(r_item, "r", strict=False),
        s=decode_signature_scalar(s_item, "s", strict=False),
    )


def _parse_signature_items(items: List[Any], config: CodecConfig) -> dict[str, Any]:
    """Return the `yParity`, `r` and `s` fields of a signed typed transaction."""
    if not items:
        return {}
    y_parity_item, r_item, s_item = items
    y_parity = decode_uint(y_parity_item, "yParity")
    if y_parity not in (0, 1):
        raise InvalidYParityOrVError(y_parity)
    strict = config.STRICT_SIGNATURE_SCALARS
    return {
        "y_parity": y_parity,
        "r": decode_signature_scalar(r_item, "r", strict=strict),
        "s": decode_signature_scalar(s_item, "s", strict=strict),
    }


def _parse_access_list(items: List[Any], config: CodecConfig) -> AccessListTransaction:
    expect_item_count(items, _item_counts(TransactionType.ACCESS_LIST), "EIP-2930 transaction")
    return AccessListTransaction(
        chain_id=decode_uint(items[0], "chainId"),
        nonce=decode_uint(items[1], "nonce"),
        gas_price=decode_uint(items[2], "gasPrice"),
        gas=decode_uint(items[3], "gas"),
        to=decode_optional_address(items[4], "to"),
        value=decode_uint(items[5], "value"),
        data=decode_bytes(items[6], "data"),
        access_list=AccessList.from_rlp_list(items[7]),
        **_parse_signature_items(items[8:], config),
    )


def _fee_market_fields(items: List[Any], to: Address | None) -> dict[str, Any]:
    return dict(
        chain_id=decode_uint(items[0], "chainId"),
        nonce=decode_uint(items[1], "nonce"),
        max_priority_fee_per_gas=decode_uint(items[2], "maxPriorityFeePerGas"),
        max_fee_per_gas=decode_uint(items[3], "maxFeePerGas"),
        gas=decode_uint(items[4], "gas"),
        to=to,
        value=decode_uint(items[6], "value"),
        data=decode_bytes(items[7], "data"),
        access_list=AccessList.from_rlp_list(items[8]),
    )


def _parse_fee_market(items: List[Any], config: CodecConfig) -> FeeMarketTransaction:
    expect_item_count(items, _item_counts(TransactionType.FEE_MARKET), "EIP-1559 transaction")
    return FeeMarketTransaction(
        **_fee_market_fields(items, decode_optional_address(items[5], "to")),
        **_parse_signature_items(items[9:], config),
    )


def _parse_blob_sidecars(items: List[Any]) -> List[BlobSidecar]:
    blobs = decode_list(items[0], "blobs")
    commitments = decode_list(items[1], "commitments")
    proofs = decode_list(items[2], "proofs")
    if not len(blobs) == len(commitments) == len(proofs):
        raise InvalidBlobSidecarsError(
            f"{len(blobs)} blobs, {len(commitments)} commitments and {len(proofs)} proofs"
        )
    return [
        BlobSidecar(
            blob=decode_bytes(blob, f"blobs[{i}]"),
            commitment=decode_bytes(commitment, f"commitments[{i}]"),
            proof=decode_bytes(proof, f"proofs[{i}]"),
        )
        for i, (blob, commitment, proof) in enumerate(zip(blobs, commitments, proofs))
    ]


def _parse_blob(items: List[Any], config: CodecConfig) -> BlobTransaction:
    sidecars = None
    if len(items) == NETWORK_WRAPPER_ITEM_COUNT:
        sidecars = _parse_blob_sidecars(items[1:])
        items = decode_list(items[0], "EIP-4844 transaction")
    expect_item_count(items, _item_counts(TransactionType.BLOB), "EIP-4844 transaction")
    return BlobTransaction(
        **_fee_market_fields(items, decode_address(items[5], "to")),
        max_fee_per_blob_gas=decode_uint(items[9], "maxFeePerBlobGas"),
        blob_versioned_hashes=decode_hashes(items[10], "blobVersionedHashes"),
        sidecars=sidecars,
        **_parse_signature_items(items[11:], config),
    )


def _parse_set_code(items: List[Any], config: CodecConfig) -> SetCodeTransaction:
    expect_item_count(items, _item_counts(TransactionType.SET_CODE), "EIP-7702 transaction")
    return SetCodeTransaction(
        **_fee_market_fields(items, decode_address(items[5], "to")),
        authorization_list=AuthorizationTuple.from_rlp_list(items[9], config=config),
        **_parse_signature_items(items[10:], config),
    )


def parse_transaction(data: BytesConvertible, *, config: CodecConfig | None = None) -> Transaction:
    """
    Decode a serialized transaction.

    The variant is selected by the leading type byte, and the RLP item count
    must be the unsigned or the signed count of that variant.
    """
    if config is None:
        config = CodecConfig()
    payload = to_bytes(data)
    ty = get_serialized_transaction_type(payload)
    items = _decode_payload(payload, ty)
    match ty:
        case TransactionType.LEGACY:
            return _parse_legacy(items, config)
        case TransactionType.ACCESS_LIST:
            return _parse_access_list(items, config)
        case TransactionType.FEE_MARKET:
            return _parse_fee_market(items, config)
        case TransactionType.BLOB:
            return _parse_blob(items, config)
        case TransactionType.SET_CODE:
            return _parse_set_code(items, config)
    raise InvalidSerializedTransactionError(f"unsupported transaction type {ty}", data=payload)


def serialize_transaction(tx: Transaction, signature: Signature | None = None) -> Bytes:
    """
    Serialize a transaction, signing it first when a signature is given.

    Blob transactions carrying sidecars are serialized in the network wrapper.
    """
    if signature is not None:
        tx = tx.with_signature(signature)
    match tx:
        case (
            LegacyTransaction()
            | AccessListTransaction()
            | FeeMarketTransaction()
            | BlobTransaction()
            | SetCodeTransaction()
        ):
            return tx.rlp()
        case _:
            raise TypeError(f"cannot serialize {type(tx).__name__} as a transaction")


def recover_transaction_address(
    tx: Transaction | BytesConvertible, *, config: CodecConfig | None = None
) -> Address:
    """Recover the sender of a signed transaction or serialized transaction."""
    if not isinstance(
        tx,
        (
            LegacyTransaction,
            AccessListTransaction,
            FeeMarketTransaction,
            BlobTransaction,
            SetCodeTransaction,
        ),
    ):
        tx = parse_transaction(tx, config=config)
    signature = tx.signature
    if signature is None:
        raise InvalidSignatureError("transaction is not signed")
    return recover_address(tx.signing_hash(), signature)
