"""Blob sidecars and the KZG capability used to build them."""

from pathlib import Path
from typing import Any, Iterable, List, Protocol, Sequence

import ckzg  # type: ignore
from pydantic import field_validator

from config import CodecConfig
from ethereum_codec_base_types import Bytes, BytesConvertible, CamelModel, Hash, to_bytes
from ethereum_codec_exceptions import InvalidBlobSidecarsError, KzgNotInitializedError

FIELD_ELEMENTS_PER_BLOB = 4096
BYTES_PER_FIELD_ELEMENT = 32
BYTES_PER_BLOB = FIELD_ELEMENTS_PER_BLOB * BYTES_PER_FIELD_ELEMENT
BYTES_PER_COMMITMENT = 48
BYTES_PER_PROOF = 48


class Kzg(Protocol):
    """KZG operations needed to build blob sidecars."""

    def blob_to_kzg_commitment(self, blob: bytes) -> bytes:
        """Return the 48-byte commitment to a blob."""
        ...

    def compute_blob_kzg_proof(self, blob: bytes, commitment: bytes) -> bytes:
        """Return the 48-byte proof of a blob against its commitment."""
        ...


class CkzgKzg:
    """KZG capability backed by `ckzg` and a trusted setup file."""

    def __init__(self, trusted_setup_path: Path | str | None = None, precompute: int = 0):
        """Store the trusted setup location; the setup is loaded on first use."""
        self.trusted_setup_path = trusted_setup_path
        self.precompute = precompute
        self._trusted_setup: Any | None = None

    def trusted_setup(self) -> Any:
        """Load the trusted setup if it is not already loaded."""
        if self._trusted_setup is None:
            if self.trusted_setup_path is None:
                raise KzgNotInitializedError("no KZG trusted setup path was given")
            self._trusted_setup = ckzg.load_trusted_setup(
                str(self.trusted_setup_path), self.precompute
            )
        return self._trusted_setup

    def blob_to_kzg_commitment(self, blob: bytes) -> bytes:
        """Return the commitment to a blob."""
        return ckzg.blob_to_kzg_commitment(blob, self.trusted_setup())

    def compute_blob_kzg_proof(self, blob: bytes, commitment: bytes) -> bytes:
        """Return the proof of a blob against its commitment."""
        return ckzg.compute_blob_kzg_proof(blob, commitment, self.trusted_setup())


def _check_size(value: Bytes, size: int, name: str) -> Bytes:
    if len(value) != size:
        raise InvalidBlobSidecarsError(f"{name} must be {size} bytes, got {len(value)}")
    return value


class BlobSidecar(CamelModel):
    """A blob together with its KZG commitment and proof."""

    blob: Bytes
    commitment: Bytes
    proof: Bytes

    @field_validator("blob")
    @classmethod
    def check_blob_size(cls, value: Bytes) -> Bytes:
        """Blobs have a fixed size."""
        return _check_size(value, BYTES_PER_BLOB, "blob")

    @field_validator("commitment")
    @classmethod
    def check_commitment_size(cls, value: Bytes) -> Bytes:
        """Commitments are compressed G1 points."""
        return _check_size(value, BYTES_PER_COMMITMENT, "commitment")

    @field_validator("proof")
    @classmethod
    def check_proof_size(cls, value: Bytes) -> Bytes:
        """Proofs are compressed G1 points."""
        return _check_size(value, BYTES_PER_PROOF, "proof")

    def versioned_hash(self, version: int | None = None) -> Hash:
        """Return the versioned hash of the commitment."""
        return commitment_to_versioned_hash(self.commitment, version)


def to_blob_sidecars(blobs: Iterable[BytesConvertible], kzg: Kzg) -> List[BlobSidecar]:
    """Compute the commitment and proof of every blob."""
    sidecars = []
    for blob in blobs:
        data = to_bytes(blob)
        if len(data) != BYTES_PER_BLOB:
            raise InvalidBlobSidecarsError(f"blob must be {BYTES_PER_BLOB} bytes, got {len(data)}")
        commitment = bytes(kzg.blob_to_kzg_commitment(data))
        proof = bytes(kzg.compute_blob_kzg_proof(data, commitment))
        sidecars.append(BlobSidecar(blob=data, commitment=commitment, proof=proof))
    return sidecars


def commitment_to_versioned_hash(commitment: BytesConvertible, version: int | None = None) -> Hash:
    """Return `version || sha256(commitment)[1:]`."""
    if version is None:
        version = CodecConfig().VERSIONED_HASH_VERSION_KZG
    return Hash(bytes([version]) + Bytes(commitment).sha256()[1:])


def sidecars_to_versioned_hashes(
    sidecars: Sequence[BlobSidecar], version: int | None = None
) -> List[Hash]:
    """Return the versioned hash of every sidecar, in order."""
    return [sidecar.versioned_hash(version) for sidecar in sidecars]
