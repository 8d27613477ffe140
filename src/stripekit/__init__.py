"""
stripekit - async client for the Stripe payments API.

    from stripekit import StripeClient

    async with StripeClient("sk_test_...") as stripe:
        invoice = await stripe.invoices.retrieve("in_123", expand=["customer"])
        if invoice.customer.is_expanded:
            print(invoice.customer.value.email)
"""

from .clients import StripeAPIHandler, StripeClient
from .config import StripeConfig
from .engine.encoders import encode
from .engine.exceptions import (
    APIConnectionError,
    APIError,
    AuthenticationError,
    CardError,
    ConfigurationError,
    DecodeError,
    EncodingError,
    ErrorType,
    GenericAPIError,
    IdempotencyError,
    InvalidRequestError,
    NoMatchingSignatureError,
    ParameterValidationError,
    RateLimitError,
    SignatureVerificationError,
    StripeKitError,
    TimestampNotToleratedError,
    UnableToParseHeaderError,
)
from .schemas import DeletedObject, DynamicExpandable, Expandable, ExpandableCollection, SearchResult, StripeList
from .utils import setup_logger

__version__ = "0.1.0"

__all__ = [
    "StripeAPIHandler",
    "StripeClient",
    "StripeConfig",
    "encode",
    "APIConnectionError",
    "APIError",
    "AuthenticationError",
    "CardError",
    "ConfigurationError",
    "DecodeError",
    "EncodingError",
    "ErrorType",
    "GenericAPIError",
    "IdempotencyError",
    "InvalidRequestError",
    "NoMatchingSignatureError",
    "ParameterValidationError",
    "RateLimitError",
    "SignatureVerificationError",
    "StripeKitError",
    "TimestampNotToleratedError",
    "UnableToParseHeaderError",
    "DeletedObject",
    "DynamicExpandable",
    "Expandable",
    "ExpandableCollection",
    "SearchResult",
    "StripeList",
    "setup_logger",
]
