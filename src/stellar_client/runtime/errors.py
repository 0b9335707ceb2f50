"""
Stellar Error Model

This module provides the error handling framework for the Stellar Python client.
Every error raised by the package derives from StellarError and carries a
stable ErrorCode so callers can branch without parsing messages.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes used across the client."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Validation errors (100-199)
    INVALID_ACCOUNT_ID = 100
    INVALID_SECRET_KEY = 101
    INVALID_MEMO = 102
    INVALID_TIME_BOUNDS = 103
    INVALID_ASSET = 104
    INVALID_AMOUNT = 105

    # Encoding errors (200-299)
    ENCODING_ERROR = 200
    XDR_ENCODING_ERROR = 201
    XDR_DECODING_ERROR = 202

    # Collaborator errors (300-399)
    MISSING_COLLABORATOR = 300
    COLLABORATOR_FAILURE = 301
    NETWORK_ERROR = 302
    HORIZON_ERROR = 303
    ACCOUNT_NOT_FOUND = 304
    TRANSACTION_FAILED = 305

    # Signing errors (400-499)
    SIGNER_ERROR = 400


class StellarError(Exception):
    """
    Base class for all Stellar client errors.

    Provides structured error information: a message, an error code,
    optional details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a Stellar error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ValidationError(StellarError):
    """Caller supplied a value that cannot be represented on the network."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class InvalidAccountIdError(ValidationError):
    """Malformed StrKey account address."""

    def __init__(self, message: str = "Invalid account id",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ACCOUNT_ID, details, cause)


class InvalidSecretKeyError(ValidationError):
    """Malformed StrKey secret seed."""

    def __init__(self, message: str = "Invalid secret key",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_SECRET_KEY, details, cause)


class InvalidMemoError(ValidationError):
    """Memo payload violates the size constraint of its variant."""

    def __init__(self, message: str = "Invalid memo",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_MEMO, details, cause)


class InvalidTimeBoundsError(ValidationError):
    """Time bound that cannot be expressed as an unsigned epoch value."""

    def __init__(self, message: str = "Invalid time bounds",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_TIME_BOUNDS, details, cause)


class InvalidAssetError(ValidationError):
    """Asset code outside the alphanum4 / alphanum12 shapes."""

    def __init__(self, message: str = "Invalid asset",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ASSET, details, cause)


class InvalidAmountError(ValidationError):
    """Amount that does not fit in int64 stroops."""

    def __init__(self, message: str = "Invalid amount",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_AMOUNT, details, cause)


class MissingCollaboratorError(StellarError):
    """Sequence resolution, signing or submission requested without an attached service."""

    def __init__(self, message: str = "An API client is required, call set_api_client before using this method",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MISSING_COLLABORATOR, details, cause)


MissingApiClientError = MissingCollaboratorError


class EncodingError(StellarError):
    """Data encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class XdrEncodingError(EncodingError):
    """Value cannot be written with the requested XDR primitive."""

    def __init__(self, message: str = "XDR encoding error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.XDR_ENCODING_ERROR, details, cause)


class XdrDecodingError(EncodingError):
    """Byte stream does not follow the expected XDR grammar."""

    def __init__(self, message: str = "XDR decoding error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.XDR_DECODING_ERROR, details, cause)


class SignerError(StellarError):
    """Signing failed."""

    def __init__(self, message: str = "Signing failed",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.SIGNER_ERROR, details, cause)


class CollaboratorFailure(StellarError):
    """
    Failure reported by an external collaborator (account state, submission).

    The transaction builder never wraps these; they reach the caller as raised.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.COLLABORATOR_FAILURE,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class HorizonNetworkError(CollaboratorFailure):
    """Transport level failure talking to Horizon."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NETWORK_ERROR, details, cause)


class HorizonApiError(CollaboratorFailure):
    """Horizon answered with a problem document."""

    def __init__(self, message: str, status: Optional[int] = None,
                 code: ErrorCode = ErrorCode.HORIZON_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)
        self.status = status


class AccountNotFoundError(HorizonApiError):
    """Account does not exist."""

    def __init__(self, message: str = "Account not found", status: Optional[int] = 404,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, status, ErrorCode.ACCOUNT_NOT_FOUND, details, cause)


class TransactionFailedError(HorizonApiError):
    """Submitted transaction was rejected by the network."""

    def __init__(self, message: str = "Transaction failed", status: Optional[int] = 400,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, status, ErrorCode.TRANSACTION_FAILED, details, cause)

    @property
    def result_codes(self) -> Dict[str, Any]:
        """Result codes reported by the network, if any."""
        return self.details.get("extras", {}).get("result_codes", {})


def error_from_response(status: int, body: Any) -> HorizonApiError:
    """
    Create an appropriate error from a Horizon problem response.

    Args:
        status: HTTP status code
        body: Decoded JSON body (problem document) or raw text

    Returns:
        Appropriate error instance
    """
    if not isinstance(body, dict):
        return HorizonApiError(f"HTTP {status}: {body}", status)

    message = body.get("title") or body.get("detail") or "Unknown error"
    details = {k: v for k, v in body.items() if k in ("type", "detail", "extras")}

    if status == 404:
        return AccountNotFoundError(message, status, details)
    if status == 400 and "result_codes" in body.get("extras", {}):
        return TransactionFailedError(message, status, details)
    return HorizonApiError(message, status, details=details)


__all__ = [
    "ErrorCode",
    "StellarError",
    "ValidationError",
    "InvalidAccountIdError",
    "InvalidSecretKeyError",
    "InvalidMemoError",
    "InvalidTimeBoundsError",
    "InvalidAssetError",
    "InvalidAmountError",
    "MissingCollaboratorError",
    "MissingApiClientError",
    "EncodingError",
    "XdrEncodingError",
    "XdrDecodingError",
    "SignerError",
    "CollaboratorFailure",
    "HorizonNetworkError",
    "HorizonApiError",
    "AccountNotFoundError",
    "TransactionFailedError",
    "error_from_response",
]
