"""
Error types shared by all codec packages.

Every error derives from `CodecException` and not from `ValueError`, so an
error raised inside a pydantic validator reaches the caller as-is.
"""


class CodecException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown while encoding,
    decoding, hashing or verifying.
    """


class InvalidSerializedTransactionError(CodecException):
    """
    Thrown when a serialized transaction cannot be decoded: unknown type
    marker, undecodable RLP or an unexpected number of RLP items.
    """

    def __init__(self, message: str = "invalid serialized transaction", *, data: bytes = b""):
        """Store the offending payload alongside the message."""
        super().__init__(message)
        self.data = data


class InvalidSignatureLengthError(CodecException):
    """
    Thrown when a signature does not have the expected byte length.
    """

    def __init__(self, expected: int | tuple[int, ...], actual: int):
        """Record the expected and actual lengths."""
        self.expected = expected
        self.actual = actual
        if isinstance(expected, tuple):
            expected_str = " or ".join(str(e) for e in expected)
        else:
            expected_str = str(expected)
        super().__init__(f"invalid signature length: expected {expected_str} bytes, got {actual}")


class InvalidYParityOrVError(CodecException):
    """
    Thrown when the recovery byte of a signature is neither a valid `yParity`
    nor a valid `v`.
    """

    def __init__(self, value: int):
        """Record the rejected value."""
        self.value = value
        super().__init__(f"invalid yParityOrV value: {value}")


class InvalidSignatureError(CodecException):
    """
    Thrown when a public key cannot be recovered from a signature.
    """


class InvalidTypedDataError(CodecException):
    """
    Thrown when a typed data definition cannot be encoded.
    """


class InvalidTypedDataPrimaryTypeError(InvalidTypedDataError):
    """
    Thrown when the primary type of a typed data definition is not declared.
    """

    def __init__(self, primary_type: str, types: list[str] | None = None):
        """Record the missing primary type."""
        self.primary_type = primary_type
        message = f'invalid primary type "{primary_type}"'
        if types is not None:
            message += f", must be one of {types}"
        super().__init__(message)


class InvalidTypedDataFieldError(InvalidTypedDataError):
    """
    Thrown when a typed data schema is malformed or a field value does not
    match its declared type.
    """


class InvalidAddressFormatError(CodecException):
    """
    Thrown when a value cannot be interpreted as a 20-byte address.
    """

    def __init__(self, address: object):
        """Record the rejected address."""
        self.address = address
        super().__init__(f'address "{address}" is invalid')


class ConflictingFeeFieldsError(CodecException):
    """
    Thrown when a transaction request mixes legacy and EIP-1559 fee fields.
    """

    def __str__(self):
        """Print exception string."""
        if self.args:
            return str(self.args[0])
        return "cannot specify both a `gasPrice` and a `maxFeePerGas`/`maxPriorityFeePerGas`"


class FeeCapTooHighError(ConflictingFeeFieldsError):
    """
    Thrown when `maxFeePerGas` does not fit in 256 bits.
    """

    def __init__(self, max_fee_per_gas: int):
        """Record the rejected fee cap."""
        self.max_fee_per_gas = max_fee_per_gas
        super().__init__(f"maxFeePerGas {max_fee_per_gas} cannot be higher than 2^256-1")


class TipAboveFeeCapError(ConflictingFeeFieldsError):
    """
    Thrown when `maxPriorityFeePerGas` is greater than `maxFeePerGas`.
    """

    def __init__(self, max_priority_fee_per_gas: int, max_fee_per_gas: int):
        """Record both fees."""
        self.max_priority_fee_per_gas = max_priority_fee_per_gas
        self.max_fee_per_gas = max_fee_per_gas
        super().__init__(
            f"maxPriorityFeePerGas {max_priority_fee_per_gas} cannot be higher than "
            f"maxFeePerGas {max_fee_per_gas}"
        )


class InvalidChainIdError(CodecException):
    """
    Thrown when a chain id is zero or negative where replay protection is
    required.
    """

    def __init__(self, chain_id: int | None):
        """Record the rejected chain id."""
        self.chain_id = chain_id
        super().__init__(f"chain id {chain_id} is invalid")


class InvalidBlobSidecarsError(CodecException):
    """
    Thrown when blob sidecars are inconsistent (mismatched blob, commitment
    and proof counts or sizes).
    """


class KzgNotInitializedError(CodecException):
    """
    Thrown when a KZG operation is requested without a trusted setup.
    """


class RLPDecodingError(CodecException):
    """
    Thrown when a byte string is not a single, canonically encoded RLP item.
    """
