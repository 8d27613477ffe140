"""
Exception and Error Definitions Module

Defines the exception hierarchy raised by the client library. Every exception
inherits from StripeKitError so callers can catch the whole family at once,
while still pattern-matching on the concrete subclass or on the remote
error's ``type``/``code`` for domain-specific handling.

Exception Hierarchy:
    StripeKitError (root)
    ├── EncodingError
    ├── DecodeError
    ├── ConfigurationError
    ├── SignatureVerificationError
    │   ├── UnableToParseHeaderError
    │   ├── NoMatchingSignatureError
    │   └── TimestampNotToleratedError
    └── APIError
        ├── APIConnectionError
        ├── GenericAPIError
        ├── AuthenticationError
        ├── CardError
        ├── IdempotencyError
        ├── InvalidRequestError
        ├── RateLimitError
        └── ParameterValidationError

Transport failures (``httpx.HTTPError``) are not wrapped; they reach the
caller unchanged.
"""

import json
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type


class StripeKitError(Exception):
    """
    Root exception class for all library-specific exceptions.
    """
    pass


class EncodingError(StripeKitError, TypeError):
    """
    Raised when a parameter bag holds a value the request encoder cannot
    represent.

    Raised before any network call is made.

    Attributes:
        key_path: Bracketed key path of the offending value (e.g. ``shipping[address]``)
        value: The offending value
    """

    def __init__(self, key_path: str, value: Any):
        self.key_path = key_path
        self.value = value
        super().__init__(
            f"Cannot encode value of type {type(value).__name__} for parameter '{key_path}'"
        )


class DecodeError(StripeKitError):
    """
    Raised when a response body is not valid JSON or does not match the
    expected resource shape (e.g. a missing ``id`` or ``object`` field).

    No partially decoded resource is ever returned alongside this error.
    """

    def __init__(self, message: str, body: Optional[str] = None):
        self.body = body
        super().__init__(message)


class ConfigurationError(StripeKitError):
    """
    Raised when configuration is missing or invalid.

    This includes scenarios such as:
    - Missing API key
    - Unsupported API version string
    - Non-numeric timeout value in the environment
    """
    pass


class SignatureVerificationError(StripeKitError):
    """
    Base exception for webhook signature verification failures.
    """
    pass


class UnableToParseHeaderError(SignatureVerificationError):
    """
    Raised when the signature header is not in the ``t=...,v1=...`` format.
    """
    pass


class NoMatchingSignatureError(SignatureVerificationError):
    """
    Raised when none of the ``v1`` signatures match the expected signature.
    """
    pass


class TimestampNotToleratedError(SignatureVerificationError):
    """
    Raised when the signed timestamp falls outside the tolerated window.

    Attributes:
        timestamp: The timestamp from the header
        tolerance: Allowed age in seconds
    """

    def __init__(self, message: str, timestamp: int, tolerance: float):
        self.timestamp = timestamp
        self.tolerance = tolerance
        super().__init__(message)


class ErrorType(str, Enum):
    """
    Error types reported in the remote error envelope.
    """
    API_CONNECTION_ERROR = "api_connection_error"
    API_ERROR = "api_error"
    AUTHENTICATION_ERROR = "authentication_error"
    CARD_ERROR = "card_error"
    IDEMPOTENCY_ERROR = "idempotency_error"
    INVALID_REQUEST_ERROR = "invalid_request_error"
    RATE_LIMIT_ERROR = "rate_limit_error"
    VALIDATION_ERROR = "validation_error"

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional["ErrorType"]:
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class APIError(StripeKitError):
    """
    Raised for any non-2xx response.

    Carries the fields of the remote error envelope so callers can branch on
    ``type`` and ``code`` (declined card vs. rate limited vs. invalid
    parameter). This library never branches on them itself.

    Attributes:
        http_status: HTTP status code of the response
        type: Parsed ErrorType, or None when missing or unknown
        code: Machine-readable reason (e.g. ``card_declined``)
        decline_code: Issuer decline reason for card errors
        message: Human-readable message
        param: Offending request parameter, if any
        doc_url: Link to documentation about the error code
        charge: For card errors, the ID of the failed charge
        request_id: Value of the ``Request-Id`` response header
        error: Raw error payload as received
    """

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        http_status: Optional[int] = None,
        type: Optional[ErrorType] = None,
        code: Optional[str] = None,
        decline_code: Optional[str] = None,
        param: Optional[str] = None,
        doc_url: Optional[str] = None,
        charge: Optional[str] = None,
        request_id: Optional[str] = None,
        error: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.http_status = http_status
        self.type = type
        self.code = code
        self.decline_code = decline_code
        self.param = param
        self.doc_url = doc_url
        self.charge = charge
        self.request_id = request_id
        self.error = error or {}
        super().__init__(message or f"Request failed with status {http_status}")

    def __str__(self) -> str:
        parts = [self.message or f"Request failed with status {self.http_status}"]
        if self.code:
            parts.append(f"code={self.code}")
        if self.param:
            parts.append(f"param={self.param}")
        if self.request_id:
            parts.append(f"request_id={self.request_id}")
        return " | ".join(parts)

    @classmethod
    def from_response(
        cls,
        http_status: int,
        body: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "APIError":
        """
        Build the matching APIError subclass from a non-2xx response.

        Args:
            http_status: HTTP status code.
            body: Raw response text.
            headers: Response headers (used for ``Request-Id``).

        Returns:
            APIError: An instance of the subclass registered for the
            envelope's ``type``; GenericAPIError when the body is not an
            error envelope or the type is unknown.
        """
        request_id = None
        if headers is not None:
            request_id = headers.get("request-id") or headers.get("Request-Id")

        try:
            payload = json.loads(body) if body else None
        except ValueError:
            payload = None

        if not isinstance(payload, dict) or not isinstance(payload.get("error"), dict):
            return GenericAPIError(
                body or None,
                http_status=http_status,
                request_id=request_id,
            )

        error = payload["error"]
        error_type = ErrorType.from_string(error.get("type"))
        error_class = _ERROR_CLASSES.get(error_type, GenericAPIError)
        return error_class(
            error.get("message"),
            http_status=http_status,
            type=error_type,
            code=error.get("code"),
            decline_code=error.get("decline_code"),
            param=error.get("param"),
            doc_url=error.get("doc_url"),
            charge=error.get("charge"),
            request_id=request_id,
            error=error,
        )


class APIConnectionError(APIError):
    """Failure to connect to the remote API, as reported by the API."""
    pass


class GenericAPIError(APIError):
    """Any other server-side problem, or a non-envelope error body."""
    pass


class AuthenticationError(APIError):
    """Invalid or missing API key."""
    pass


class CardError(APIError):
    """
    The card could not be charged (declined, expired, incorrect CVC, ...).

    Check ``code`` and ``decline_code`` for the reason.
    """
    pass


class IdempotencyError(APIError):
    """An Idempotency-Key was reused with different parameters."""
    pass


class InvalidRequestError(APIError):
    """The request has invalid parameters; see ``param``."""
    pass


class RateLimitError(APIError):
    """Too many requests hit the API too quickly."""
    pass


class ParameterValidationError(APIError):
    """Client-side field validation failure reported by the API."""
    pass


_ERROR_CLASSES: Dict[Optional[ErrorType], Type[APIError]] = {
    ErrorType.API_CONNECTION_ERROR: APIConnectionError,
    ErrorType.API_ERROR: GenericAPIError,
    ErrorType.AUTHENTICATION_ERROR: AuthenticationError,
    ErrorType.CARD_ERROR: CardError,
    ErrorType.IDEMPOTENCY_ERROR: IdempotencyError,
    ErrorType.INVALID_REQUEST_ERROR: InvalidRequestError,
    ErrorType.RATE_LIMIT_ERROR: RateLimitError,
    ErrorType.VALIDATION_ERROR: ParameterValidationError,
}
