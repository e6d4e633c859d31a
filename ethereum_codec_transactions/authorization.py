"""EIP-7702 authorization tuples."""

from typing import Any, ClassVar, List

from pydantic import model_validator

from config import CodecConfig
from ethereum_codec_base_types import (
    Address,
    CamelModel,
    Hash,
    HexNumber,
    RLPSerializable,
    keccak256,
)
from ethereum_codec_exceptions import InvalidYParityOrVError
from ethereum_codec_signatures import Signature, recover_address

from .decoding import (
    decode_address,
    decode_list,
    decode_signature_scalar,
    decode_uint,
    expect_item_count,
)


class AuthorizationTuple(CamelModel, RLPSerializable):
    """
    Authorization tuple for set-code transactions.

    The tuple is signed over `keccak256(0x05 || rlp([chain_id, address, nonce]))`.
    """

    chain_id: HexNumber
    address: Address
    nonce: HexNumber
    y_parity: HexNumber | None = None
    r: HexNumber | None = None
    s: HexNumber | None = None

    magic: ClassVar[int] = 0x05

    rlp_fields: ClassVar[List[str]] = ["chain_id", "address", "nonce", "y_parity", "r", "s"]
    rlp_signing_fields: ClassVar[List[str]] = ["chain_id", "address", "nonce"]

    @model_validator(mode="after")
    def check_signature_fields(self) -> "AuthorizationTuple":
        """Check that the signature fields are either all set or all unset."""
        present = [f is not None for f in (self.y_parity, self.r, self.s)]
        if any(present) and not all(present):
            raise ValueError("yParity, r and s must be set together")
        if self.y_parity is not None and self.y_parity not in (0, 1):
            raise InvalidYParityOrVError(self.y_parity)
        return self

    def get_rlp_signing_prefix(self) -> bytes:
        """Return the EIP-7702 magic byte."""
        return self.magic.to_bytes(1, byteorder="big")

    @property
    def is_signed(self) -> bool:
        """Return whether the signature fields are set."""
        return self.r is not None

    @property
    def signature(self) -> Signature | None:
        """Return the signature of the authority, if signed."""
        if self.y_parity is None or self.r is None or self.s is None:
            return None
        return Signature(r=int(self.r), s=int(self.s), y_parity=int(self.y_parity))

    def signing_hash(self) -> Hash:
        """Return the hash signed by the authority."""
        return keccak256(self.rlp_signing_bytes())

    def with_signature(self, signature: Signature) -> "AuthorizationTuple":
        """Return a copy of the tuple carrying the given signature."""
        return self.copy(
            y_parity=signature.y_parity,
            r=int.from_bytes(signature.r, "big"),
            s=int.from_bytes(signature.s, "big"),
        )

    def recover_authority(self) -> Address:
        """Recover the address of the account that signed the authorization."""
        signature = self.signature
        if signature is None:
            raise ValueError("authorization tuple is not signed")
        return recover_address(self.signing_hash(), signature)

    @classmethod
    def from_rlp_list(
        cls, items: Any, name: str = "authorizationList", *, config: CodecConfig | None = None
    ) -> List["AuthorizationTuple"]:
        """Build the authorization tuples from their decoded RLP items."""
        if config is None:
            config = CodecConfig()
        tuples = []
        for index, item in enumerate(decode_list(items, name)):
            tuple_name = f"{name}[{index}]"
            fields = decode_list(item, tuple_name)
            expect_item_count(fields, (6,), tuple_name)
            y_parity = decode_uint(fields[3], f"{tuple_name}.yParity")
            if y_parity not in (0, 1):
                raise InvalidYParityOrVError(y_parity)
            strict = config.STRICT_SIGNATURE_SCALARS
            tuples.append(
                cls(
                    chain_id=decode_uint(fields[0], f"{tuple_name}.chainId"),
                    address=decode_address(fields[1], f"{tuple_name}.address"),
                    nonce=decode_uint(fields[2], f"{tuple_name}.nonce"),
                    y_parity=y_parity,
                    r=decode_signature_scalar(fields[4], f"{tuple_name}.r", strict=strict),
                    s=decode_signature_scalar(fields[5], f"{tuple_name}.s", strict=strict),
                )
            )
        return tuples
