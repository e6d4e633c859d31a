"""
Test suite for ethereum_codec_exceptions module.
"""

import pytest
from pydantic import BaseModel, field_validator

from ..exceptions import (
    CodecException,
    ConflictingFeeFieldsError,
    FeeCapTooHighError,
    InvalidAddressFormatError,
    InvalidBlobSidecarsError,
    InvalidChainIdError,
    InvalidSerializedTransactionError,
    InvalidSignatureError,
    InvalidSignatureLengthError,
    InvalidTypedDataError,
    InvalidTypedDataFieldError,
    InvalidTypedDataPrimaryTypeError,
    InvalidYParityOrVError,
    KzgNotInitializedError,
    RLPDecodingError,
    TipAboveFeeCapError,
)


@pytest.mark.parametrize(
    "exception, expected",
    [
        (
            InvalidSignatureLengthError(65, 64),
            "invalid signature length: expected 65 bytes, got 64",
        ),
        (
            InvalidSignatureLengthError((65, 64), 10),
            "invalid signature length: expected 65 or 64 bytes, got 10",
        ),
        (InvalidYParityOrVError(29), "invalid yParityOrV value: 29"),
        (InvalidTypedDataPrimaryTypeError("Mail"), 'invalid primary type "Mail"'),
        (
            InvalidTypedDataPrimaryTypeError("Mail", ["Person"]),
            "invalid primary type \"Mail\", must be one of ['Person']",
        ),
        (InvalidAddressFormatError("0x1234"), 'address "0x1234" is invalid'),
        (InvalidChainIdError(0), "chain id 0 is invalid"),
        (
            FeeCapTooHighError(2**256),
            f"maxFeePerGas {2**256} cannot be higher than 2^256-1",
        ),
        (
            TipAboveFeeCapError(2, 1),
            "maxPriorityFeePerGas 2 cannot be higher than maxFeePerGas 1",
        ),
        (
            ConflictingFeeFieldsError(),
            "cannot specify both a `gasPrice` and a `maxFeePerGas`/`maxPriorityFeePerGas`",
        ),
        (InvalidSerializedTransactionError(), "invalid serialized transaction"),
    ],
)
def test_exception_messages(exception: CodecException, expected: str):
    """Test the string representation of the exceptions."""
    assert str(exception) == expected


@pytest.mark.parametrize(
    "exception_class",
    [
        ConflictingFeeFieldsError,
        FeeCapTooHighError,
        InvalidAddressFormatError,
        InvalidBlobSidecarsError,
        InvalidChainIdError,
        InvalidSerializedTransactionError,
        InvalidSignatureError,
        InvalidSignatureLengthError,
        InvalidTypedDataError,
        InvalidTypedDataFieldError,
        InvalidTypedDataPrimaryTypeError,
        InvalidYParityOrVError,
        KzgNotInitializedError,
        RLPDecodingError,
        TipAboveFeeCapError,
    ],
)
def test_exception_hierarchy(exception_class: type):
    """Every codec error derives from `CodecException` and not from `ValueError`."""
    assert issubclass(exception_class, CodecException)
    assert not issubclass(exception_class, ValueError)


def test_serialized_transaction_payload():
    """The offending payload is kept on the error."""
    error = InvalidSerializedTransactionError("bad payload", data=b"\x02")
    assert error.data == b"\x02"


class Model(BaseModel):
    """Model raising a codec error from a validator."""

    value: int

    @field_validator("value")
    @classmethod
    def check_value(cls, value: int) -> int:
        """Reject odd values."""
        if value % 2:
            raise InvalidYParityOrVError(value)
        return value


def test_codec_errors_escape_pydantic():
    """Codec errors raised in validators reach the caller unchanged."""
    with pytest.raises(InvalidYParityOrVError):
        Model(value=3)
