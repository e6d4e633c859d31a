"""
Test suite for EIP-7702 authorization tuples.
"""

import pytest

from ethereum_codec_base_types import (
    TestAddress,
    TestAddress2,
    TestPrivateKey,
    TestPrivateKey2,
    keccak256,
    rlp_encode,
)
from ethereum_codec_exceptions import InvalidYParityOrVError
from ethereum_codec_signatures import sign_hash

from ..authorization import AuthorizationTuple
from ..transactions import SetCodeTransaction


@pytest.fixture
def authorization() -> AuthorizationTuple:
    """Return an unsigned authorization."""
    return AuthorizationTuple(chain_id=1, address=TestAddress2, nonce=7)


def test_signing_hash(authorization: AuthorizationTuple):
    """The signing hash commits to the magic byte and the unsigned fields."""
    expected = keccak256(b"\x05" + rlp_encode([1, TestAddress2, 7]))
    assert authorization.signing_hash() == expected


@pytest.mark.parametrize(
    "private_key, authority",
    [(TestPrivateKey, TestAddress), (TestPrivateKey2, TestAddress2)],
)
def test_recover_authority(authorization: AuthorizationTuple, private_key: int, authority):
    """The authority is recovered from the signed tuple."""
    signed = authorization.with_signature(sign_hash(authorization.signing_hash(), private_key))
    assert signed.is_signed
    assert not authorization.is_signed
    assert signed.signing_hash() == authorization.signing_hash()
    assert signed.recover_authority() == authority


def test_recover_unsigned_authority(authorization: AuthorizationTuple):
    """Unsigned tuples have no authority."""
    with pytest.raises(ValueError):
        authorization.recover_authority()


def test_partial_signature(authorization: AuthorizationTuple):
    """Signature fields must be set together."""
    with pytest.raises(ValueError):
        authorization.copy(y_parity=0, r=1)


def test_invalid_y_parity(authorization: AuthorizationTuple):
    """The parity of an authorization is 0 or 1."""
    with pytest.raises(InvalidYParityOrVError):
        authorization.copy(y_parity=27, r=1, s=1)


def test_set_code_requires_signed_authorizations(authorization: AuthorizationTuple):
    """Set-code transactions only carry signed authorizations."""
    with pytest.raises(ValueError):
        SetCodeTransaction(chain_id=1, to=TestAddress2, authorization_list=[authorization])


def test_rlp_fields(authorization: AuthorizationTuple):
    """Signed tuples serialize six items."""
    signed = authorization.with_signature(sign_hash(authorization.signing_hash(), TestPrivateKey))
    items = signed.to_list()
    assert len(items) == 6
    assert len(authorization.to_list(signing=True)) == 3
