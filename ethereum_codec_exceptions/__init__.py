"""Exceptions raised by the transaction, signature and typed-data codecs."""

from .exceptions import (
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

__all__ = (
    "CodecException",
    "ConflictingFeeFieldsError",
    "FeeCapTooHighError",
    "InvalidAddressFormatError",
    "InvalidBlobSidecarsError",
    "InvalidChainIdError",
    "InvalidSerializedTransactionError",
    "InvalidSignatureError",
    "InvalidSignatureLengthError",
    "InvalidTypedDataError",
    "InvalidTypedDataFieldError",
    "InvalidTypedDataPrimaryTypeError",
    "InvalidYParityOrVError",
    "KzgNotInitializedError",
    "RLPDecodingError",
    "TipAboveFeeCapError",
)
