"""
Test suite for blob sidecars and blob transactions.
"""

from hashlib import sha256
from typing import List

import pytest

from ethereum_codec_base_types import (
    Hash,
    TestAddress,
    TestPrivateKey,
    keccak256,
    rlp_decode,
    rlp_encode,
)
from ethereum_codec_exceptions import InvalidBlobSidecarsError, KzgNotInitializedError
from ethereum_codec_signatures import sign_hash

from ..blob import (
    BYTES_PER_BLOB,
    BYTES_PER_COMMITMENT,
    BYTES_PER_PROOF,
    BlobSidecar,
    CkzgKzg,
    commitment_to_versioned_hash,
    sidecars_to_versioned_hashes,
    to_blob_sidecars,
)
from ..serialization import parse_transaction, recover_transaction_address
from ..transactions import BlobTransaction


def blob_transaction(
    recipient, sidecars: List[BlobSidecar] | None, **kwargs
) -> BlobTransaction:
    """Return a blob transaction carrying the versioned hashes of the sidecars."""
    return BlobTransaction(
        chain_id=1,
        max_priority_fee_per_gas=1,
        max_fee_per_gas=100,
        gas=21000,
        to=recipient,
        max_fee_per_blob_gas=10,
        blob_versioned_hashes=sidecars_to_versioned_hashes(sidecars or []),
        sidecars=sidecars,
        **kwargs,
    )


def test_commitment_to_versioned_hash():
    """The versioned hash is the commitment digest with its first byte replaced."""
    commitment = b"\xc0" + b"\x00" * 47
    versioned_hash = commitment_to_versioned_hash(commitment)
    assert versioned_hash == Hash(b"\x01" + sha256(commitment).digest()[1:])
    assert commitment_to_versioned_hash(commitment, version=0x02)[0] == 0x02


def test_to_blob_sidecars(blobs: List[bytes], sidecars: List[BlobSidecar]):
    """Sidecars keep the blob order."""
    assert [sidecar.blob for sidecar in sidecars] == blobs
    assert all(len(sidecar.commitment) == BYTES_PER_COMMITMENT for sidecar in sidecars)
    assert all(len(sidecar.proof) == BYTES_PER_PROOF for sidecar in sidecars)
    assert sidecars_to_versioned_hashes(sidecars) == [
        commitment_to_versioned_hash(sidecar.commitment) for sidecar in sidecars
    ]


def test_to_blob_sidecars_invalid_blob(kzg):
    """Blobs must have the exact blob size."""
    with pytest.raises(InvalidBlobSidecarsError):
        to_blob_sidecars([b"\x01" * (BYTES_PER_BLOB - 1)], kzg)


@pytest.mark.parametrize(
    "blob, commitment, proof",
    [
        pytest.param(b"\x00" * 32, b"\x00" * 48, b"\x00" * 48, id="short_blob"),
        pytest.param(b"\x00" * BYTES_PER_BLOB, b"\x00" * 47, b"\x00" * 48, id="short_commitment"),
        pytest.param(b"\x00" * BYTES_PER_BLOB, b"\x00" * 48, b"\x00" * 49, id="long_proof"),
    ],
)
def test_blob_sidecar_sizes(blob: bytes, commitment: bytes, proof: bytes):
    """Sidecar members have fixed sizes."""
    with pytest.raises(InvalidBlobSidecarsError):
        BlobSidecar(blob=blob, commitment=commitment, proof=proof)


def test_ckzg_requires_trusted_setup():
    """The ckzg adapter needs a trusted setup."""
    with pytest.raises(KzgNotInitializedError):
        CkzgKzg().blob_to_kzg_commitment(b"\x00" * BYTES_PER_BLOB)


@pytest.mark.parametrize("with_sidecars", [None, "empty", "full"])
@pytest.mark.parametrize("signed", [False, True], ids=["unsigned", "signed"])
def test_blob_transaction_round_trip(
    recipient, sidecars: List[BlobSidecar], with_sidecars: str | None, signed: bool
):
    """Blob transactions round trip with and without the network wrapper."""
    tx_sidecars = {None: None, "empty": [], "full": sidecars}[with_sidecars]
    tx = blob_transaction(recipient, tx_sidecars)
    if signed:
        tx = tx.with_signature(sign_hash(tx.signing_hash(), TestPrivateKey))
    decoded = parse_transaction(tx.rlp())
    assert decoded == tx
    assert decoded.sidecars == tx_sidecars


def test_blob_network_wrapper(recipient, sidecars: List[BlobSidecar]):
    """The wrapper carries blobs, commitments and proofs but is never hashed."""
    tx = blob_transaction(recipient, sidecars)
    tx = tx.with_signature(sign_hash(tx.signing_hash(), TestPrivateKey))
    bare = tx.without_sidecars()

    wrapper = rlp_decode(tx.rlp()[1:])
    assert len(wrapper) == 4
    assert len(wrapper[0]) == 14
    assert wrapper[1] == [sidecar.blob for sidecar in sidecars]
    assert wrapper[2] == [sidecar.commitment for sidecar in sidecars]
    assert wrapper[3] == [sidecar.proof for sidecar in sidecars]

    assert len(rlp_decode(bare.rlp()[1:])) == 14
    assert tx.hash() == bare.hash() == keccak256(bare.rlp())
    assert tx.signing_hash() == bare.signing_hash()
    assert recover_transaction_address(tx.rlp()) == TestAddress


def test_blob_empty_wrapper(recipient):
    """An empty sidecar list still produces the wrapper."""
    tx = blob_transaction(recipient, [])
    assert rlp_decode(tx.rlp()[1:])[1:] == [[], [], []]
    assert blob_transaction(recipient, None).rlp() != tx.rlp()


def test_blob_sidecars_mismatch(recipient, sidecars: List[BlobSidecar]):
    """Sidecars must match the versioned hashes of the transaction."""
    with pytest.raises(InvalidBlobSidecarsError):
        BlobTransaction(
            chain_id=1,
            to=recipient,
            blob_versioned_hashes=sidecars_to_versioned_hashes(sidecars[:1]),
            sidecars=sidecars,
        )
    with pytest.raises(InvalidBlobSidecarsError):
        BlobTransaction(
            chain_id=1,
            to=recipient,
            blob_versioned_hashes=list(reversed(sidecars_to_versioned_hashes(sidecars))),
            sidecars=sidecars,
        )


def test_blob_wrapper_count_mismatch(recipient, sidecars: List[BlobSidecar]):
    """Decoding a wrapper with inconsistent list lengths fails."""
    tx = blob_transaction(recipient, sidecars)
    wrapper = tx.network_wrapper()
    wrapper[3] = wrapper[3][:1]

    with pytest.raises(InvalidBlobSidecarsError):
        parse_transaction(b"\x03" + rlp_encode(wrapper))
