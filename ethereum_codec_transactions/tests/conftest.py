"""Fixtures for the transaction codec tests."""

from hashlib import sha256
from typing import List

import pytest

from ethereum_codec_base_types import TestAddress2

from ..blob import BYTES_PER_BLOB, BYTES_PER_COMMITMENT, BYTES_PER_PROOF, BlobSidecar
from ..blob import to_blob_sidecars


class FakeKzg:
    """KZG stand-in deriving commitments and proofs from the blob digest."""

    def blob_to_kzg_commitment(self, blob: bytes) -> bytes:
        """Return a 48-byte value derived from the blob."""
        return (b"\xc0" + sha256(blob).digest() * 2)[:BYTES_PER_COMMITMENT]

    def compute_blob_kzg_proof(self, blob: bytes, commitment: bytes) -> bytes:
        """Return a 48-byte value derived from the blob and commitment."""
        return (b"\xa0" + sha256(blob + commitment).digest() * 2)[:BYTES_PER_PROOF]


@pytest.fixture
def kzg() -> FakeKzg:
    """Return the fake KZG capability."""
    return FakeKzg()


@pytest.fixture
def blobs() -> List[bytes]:
    """Return two distinct blobs."""
    return [bytes([i + 1]) * BYTES_PER_BLOB for i in range(2)]


@pytest.fixture
def sidecars(blobs: List[bytes], kzg: FakeKzg) -> List[BlobSidecar]:
    """Return the sidecars of the blobs."""
    return to_blob_sidecars(blobs, kzg)


@pytest.fixture
def recipient():
    """Return the recipient used by the transactions under test."""
    return TestAddress2
