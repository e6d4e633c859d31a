"""Transaction variants and their RLP envelopes."""

from enum import IntEnum
from typing import Any, ClassVar, Dict, List, Type

import ethereum_rlp as eth_rlp
from pydantic import model_validator

from ethereum_codec_base_types import (
    Address,
    Bytes,
    CamelModel,
    Hash,
    HexNumber,
    RLPSerializable,
    keccak256,
    to_number,
)
from ethereum_codec_exceptions import (
    InvalidBlobSidecarsError,
    InvalidChainIdError,
    InvalidYParityOrVError,
)
from ethereum_codec_signatures import Signature, chain_id_from_v

from .access_list import AccessList
from .authorization import AuthorizationTuple
from .blob import BlobSidecar


class TransactionType(IntEnum):
    """Transaction types."""

    LEGACY = 0
    ACCESS_LIST = 1
    FEE_MARKET = 2
    BLOB = 3
    SET_CODE = 4


class TransactionBase(CamelModel, RLPSerializable):
    """Fields and envelope logic shared by every transaction type."""

    ty: ClassVar[TransactionType]

    nonce: HexNumber = HexNumber(0)
    gas: HexNumber = HexNumber(0)
    to: Address | None = None
    value: HexNumber = HexNumber(0)
    data: Bytes = Bytes(b"")

    def get_rlp_prefix(self) -> bytes:
        """Return the type byte of typed transactions."""
        if self.ty > 0:
            return bytes([self.ty])
        return b""

    def get_rlp_signing_prefix(self) -> bytes:
        """Return the type byte of typed transactions."""
        return self.get_rlp_prefix()

    @property
    def is_signed(self) -> bool:
        """Return whether the signature fields are set."""
        raise NotImplementedError

    @property
    def signature(self) -> Signature | None:
        """Return the signature of the transaction, if signed."""
        raise NotImplementedError

    def with_signature(self, signature: Signature) -> "TransactionBase":
        """Return a signed copy of the transaction."""
        raise NotImplementedError

    def signing_hash(self) -> Hash:
        """Return the hash the sender signs."""
        return keccak256(self.rlp_signing_bytes())

    def hash(self) -> Hash:
        """Return the hash of the serialized transaction, without any network wrapper."""
        return keccak256(self.get_rlp_prefix() + eth_rlp.encode(self.to_list(signing=False)))


class LegacyTransaction(TransactionBase):
    """
    Legacy transaction.

    A non-zero `chain_id` makes the transaction replay protected, so the
    signing envelope carries `[chain_id, 0, 0]` and `v` encodes the chain id
    as per EIP-155. An unsigned replay-protected transaction is serialized
    with the same trailing items. A zero chain id is dropped unless `v`
    encodes it.
    """

    ty: ClassVar[TransactionType] = TransactionType.LEGACY
    zero: ClassVar[int] = 0

    chain_id: HexNumber | None = None
    gas_price: HexNumber = HexNumber(0)
    v: HexNumber | None = None
    r: HexNumber | None = None
    s: HexNumber | None = None

    rlp_fields: ClassVar[List[str]] = [
        "nonce",
        "gas_price",
        "gas",
        "to",
        "value",
        "data",
        "v",
        "r",
        "s",
    ]

    @model_validator(mode="before")
    @classmethod
    def derive_chain_id(cls, data: Any) -> Any:
        """
        Derive the chain id of an EIP-155 `v` and check it against the given one.

        A zero chain id without an EIP-155 `v` is the same as no chain id.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        chain_id = data.pop("chain_id", data.pop("chainId", None))
        if chain_id is not None and to_number(chain_id) == 0:
            chain_id = None
        v = data.get("v")
        if v is not None:
            derived = chain_id_from_v(to_number(v))
            if derived is None and chain_id is not None:
                raise InvalidChainIdError(to_number(chain_id))
            if derived is not None:
                if chain_id is not None and to_number(chain_id) != derived:
                    raise InvalidChainIdError(to_number(chain_id))
                chain_id = derived
        if chain_id is not None:
            data["chain_id"] = chain_id
        return data

    @model_validator(mode="after")
    def check_signature_fields(self) -> "LegacyTransaction":
        """Check that the signature fields are either all set or all unset."""
        present = [f is not None for f in (self.v, self.r, self.s)]
        if any(present) and not all(present):
            raise ValueError("v, r and s must be set together")
        return self

    @property
    def protected(self) -> bool:
        """
        Return whether the transaction is replay protected.

        A signed transaction is protected when its `v` follows EIP-155, which
        includes chain id 0. An unsigned one is protected when it has a chain id.
        """
        if self.v is not None:
            return self.v >= 35
        return self.chain_id is not None

    @property
    def is_signed(self) -> bool:
        """Return whether the signature fields are set."""
        return self.v is not None

    @property
    def y_parity(self) -> int | None:
        """Return the parity bit encoded in `v`."""
        if self.v is None:
            return None
        if self.v in (0, 1):
            return int(self.v)
        if self.v in (27, 28):
            return int(self.v) - 27
        if self.v >= 35:
            return (int(self.v) - 35) % 2
        return int(self.v) % 2

    @property
    def signature(self) -> Signature | None:
        """Return the signature of the transaction, if signed."""
        if self.y_parity is None or self.r is None or self.s is None:
            return None
        return Signature(r=int(self.r), s=int(self.s), y_parity=self.y_parity)

    def get_rlp_signing_fields(self) -> List[str]:
        """Return the signing fields, with the EIP-155 trailer when replay protected."""
        fields = self.rlp_fields[:6]
        if self.protected:
            return fields + ["chain_id", "zero", "zero"]
        return fields

    def get_rlp_fields(self) -> List[str]:
        """Return the serialized fields; unsigned transactions use the signing layout."""
        if self.is_signed:
            return self.rlp_fields
        return self.get_rlp_signing_fields()

    def with_signature(self, signature: Signature) -> "LegacyTransaction":
        """Return a signed copy, encoding the parity and chain id into `v`."""
        if self.protected:
            v = int(self.chain_id or 0) * 2 + 35 + signature.y_parity
        else:
            v = 27 + signature.y_parity
        return self.copy(
            v=v,
            r=int.from_bytes(signature.r, "big"),
            s=int.from_bytes(signature.s, "big"),
        )


class TypedTransaction(TransactionBase):
    """Base class of the EIP-2718 typed transactions."""

    chain_id: HexNumber
    access_list: List[AccessList] = []
    y_parity: HexNumber | None = None
    r: HexNumber | None = None
    s: HexNumber | None = None

    signature_fields: ClassVar[List[str]] = ["y_parity", "r", "s"]

    @model_validator(mode="after")
    def check_signature_fields(self) -> "TypedTransaction":
        """Check that the signature fields are either all set or all unset."""
        present = [f is not None for f in (self.y_parity, self.r, self.s)]
        if any(present) and not all(present):
            raise ValueError("yParity, r and s must be set together")
        if self.y_parity is not None and self.y_parity not in (0, 1):
            raise InvalidYParityOrVError(self.y_parity)
        return self

    @property
    def is_signed(self) -> bool:
        """Return whether the signature fields are set."""
        return self.y_parity is not None

    @property
    def signature(self) -> Signature | None:
        """Return the signature of the transaction, if signed."""
        if self.y_parity is None or self.r is None or self.s is None:
            return None
        return Signature(r=int(self.r), s=int(self.s), y_parity=int(self.y_parity))

    def get_rlp_fields(self) -> List[str]:
        """Return the signing fields, followed by the signature when signed."""
        if self.is_signed:
            return self.rlp_signing_fields + self.signature_fields
        return self.rlp_signing_fields

    def with_signature(self, signature: Signature) -> "TypedTransaction":
        """Return a signed copy of the transaction."""
        return self.copy(
            y_parity=signature.y_parity,
            r=int.from_bytes(signature.r, "big"),
            s=int.from_bytes(signature.s, "big"),
        )


class AccessListTransaction(TypedTransaction):
    """EIP-2930 transaction."""

    ty: ClassVar[TransactionType] = TransactionType.ACCESS_LIST

    gas_price: HexNumber = HexNumber(0)

    rlp_signing_fields: ClassVar[List[str]] = [
        "chain_id",
        "nonce",
        "gas_price",
        "gas",
        "to",
        "value",
        "data",
        "access_list",
    ]


class FeeMarketTransaction(TypedTransaction):
    """EIP-1559 transaction."""

    ty: ClassVar[TransactionType] = TransactionType.FEE_MARKET

    max_priority_fee_per_gas: HexNumber = HexNumber(0)
    max_fee_per_gas: HexNumber = HexNumber(0)

    rlp_signing_fields: ClassVar[List[str]] = [
        "chain_id",
        "nonce",
        "max_priority_fee_per_gas",
        "max_fee_per_gas",
        "gas",
        "to",
        "value",
        "data",
        "access_list",
    ]


class BlobTransaction(FeeMarketTransaction):
    """
    EIP-4844 transaction.

    When `sidecars` is a list, even an empty one, the transaction is
    serialized in the network wrapper `[tx, blobs, commitments, proofs]`.
    The wrapper never takes part in the signing hash nor in the
    transaction hash.
    """

    ty: ClassVar[TransactionType] = TransactionType.BLOB

    to: Address
    max_fee_per_blob_gas: HexNumber = HexNumber(0)
    blob_versioned_hashes: List[Hash] = []
    sidecars: List[BlobSidecar] | None = None

    rlp_signing_fields: ClassVar[List[str]] = FeeMarketTransaction.rlp_signing_fields + [
        "max_fee_per_blob_gas",
        "blob_versioned_hashes",
    ]

    @model_validator(mode="after")
    def check_sidecars(self) -> "BlobTransaction":
        """Check that the sidecars match the versioned hashes."""
        if not self.sidecars:
            return self
        if len(self.sidecars) != len(self.blob_versioned_hashes):
            raise InvalidBlobSidecarsError(
                f"{len(self.sidecars)} sidecars for "
                f"{len(self.blob_versioned_hashes)} versioned hashes"
            )
        for index, (sidecar, versioned_hash) in enumerate(
            zip(self.sidecars, self.blob_versioned_hashes, strict=True)
        ):
            if sidecar.versioned_hash(versioned_hash[0]) != versioned_hash:
                raise InvalidBlobSidecarsError(
                    f"commitment of sidecar {index} does not match its versioned hash"
                )
        return self

    def network_wrapper(self) -> List[Any]:
        """Return the wrapper items `[tx, blobs, commitments, proofs]`."""
        sidecars = self.sidecars or []
        return [
            self.to_list(signing=False),
            [sidecar.blob for sidecar in sidecars],
            [sidecar.commitment for sidecar in sidecars],
            [sidecar.proof for sidecar in sidecars],
        ]

    def rlp(self) -> Bytes:
        """Return the serialized transaction, in the network wrapper when sidecars are set."""
        if self.sidecars is None:
            return super().rlp()
        return Bytes(self.get_rlp_prefix() + eth_rlp.encode(self.network_wrapper()))

    def without_sidecars(self) -> "BlobTransaction":
        """Return a copy of the transaction without its network wrapper."""
        return self.copy(sidecars=None)


class SetCodeTransaction(FeeMarketTransaction):
    """EIP-7702 transaction."""

    ty: ClassVar[TransactionType] = TransactionType.SET_CODE

    to: Address
    authorization_list: List[AuthorizationTuple] = []

    rlp_signing_fields: ClassVar[List[str]] = FeeMarketTransaction.rlp_signing_fields + [
        "authorization_list",
    ]

    @model_validator(mode="after")
    def check_authorizations_signed(self) -> "SetCodeTransaction":
        """Every authorization must carry a signature."""
        for index, authorization in enumerate(self.authorization_list):
            if not authorization.is_signed:
                raise ValueError(f"authorization {index} is not signed")
        return self


Transaction = (
    LegacyTransaction
    | AccessListTransaction
    | FeeMarketTransaction
    | BlobTransaction
    | SetCodeTransaction
)

TRANSACTION_CLASSES: Dict[TransactionType, Type[TransactionBase]] = {
    TransactionType.LEGACY: LegacyTransaction,
    TransactionType.ACCESS_LIST: AccessListTransaction,
    TransactionType.FEE_MARKET: FeeMarketTransaction,
    TransactionType.BLOB: BlobTransaction,
    TransactionType.SET_CODE: SetCodeTransaction,
}
