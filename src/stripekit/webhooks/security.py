"""
Webhook Signature Verification

Each webhook delivery carries a ``Stripe-Signature`` header of the form

    t=1492774577,v1=5257a869e7ecebeda32affa62cdca3fa51cad7e77a0e56ff536d0ce8e108d8bd

where ``v1`` is the hex HMAC-SHA256 of ``"{t}.{payload}"`` keyed with the
endpoint's signing secret. Several ``v1`` entries may be present while a
secret is being rolled; any one of them matching is enough.
"""

import hashlib
import hmac
import json
import time
from typing import List, Optional, Tuple, Union

from pydantic import ValidationError

from ..engine.exceptions import (
    DecodeError,
    NoMatchingSignatureError,
    TimestampNotToleratedError,
    UnableToParseHeaderError,
)
from ..resources.events import Event

DEFAULT_TOLERANCE = 300
SIGNATURE_SCHEME = "v1"

Payload = Union[bytes, str]


def _to_text(payload: Payload) -> str:
    return payload.decode("utf-8") if isinstance(payload, bytes) else payload


def _compute_signature(timestamp: str, payload: str, secret: str) -> str:
    return hmac.new(
        key=secret.encode("utf-8"),
        msg=f"{timestamp}.{payload}".encode("utf-8"),
        digestmod=hashlib.sha256,
    ).hexdigest()


def _parse_header(header: str) -> Tuple[str, List[str]]:
    timestamp = None
    signatures = []
    for item in header.split(","):
        key, sep, value = item.strip().partition("=")
        if not sep:
            continue
        if key == "t" and timestamp is None:
            timestamp = value
        elif key == SIGNATURE_SCHEME:
            signatures.append(value)

    if not timestamp:
        raise UnableToParseHeaderError("Unable to extract timestamp and signatures from header")
    return timestamp, signatures


def verify_signature(
    payload: Payload,
    header: str,
    secret: str,
    tolerance: float = DEFAULT_TOLERANCE,
) -> None:
    """
    Verify a webhook delivery against its signature header.

    Args:
        payload: Raw request body exactly as received
        header: Value of the ``Stripe-Signature`` header
        secret: Endpoint signing secret (``whsec_...``)
        tolerance: Maximum age of the signature in seconds; 0 or less
            disables the age check

    Raises:
        UnableToParseHeaderError: If the header has no ``t=`` entry or the
            timestamp is not an integer.
        NoMatchingSignatureError: If no ``v1`` signature matches.
        TimestampNotToleratedError: If the timestamp is older than
            ``tolerance`` or lies in the future.
    """
    timestamp, signatures = _parse_header(header)
    expected = _compute_signature(timestamp, _to_text(payload), secret)

    if not any(hmac.compare_digest(expected, candidate) for candidate in signatures):
        raise NoMatchingSignatureError("No signatures found matching the expected signature for payload")

    try:
        signed_at = int(timestamp)
    except ValueError:
        raise UnableToParseHeaderError(f"Invalid timestamp in signature header: {timestamp!r}")

    age = time.time() - signed_at
    if (tolerance > 0 and age > tolerance) or age < 0:
        raise TimestampNotToleratedError(
            "Timestamp outside the tolerance zone",
            timestamp=signed_at,
            tolerance=tolerance,
        )


def construct_event(
    payload: Payload,
    header: str,
    secret: str,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Event:
    """
    Verify a webhook delivery and decode it into an Event.

    Raises:
        SignatureVerificationError: If verification fails (see ``verify_signature``).
        DecodeError: If the verified body is not a valid event.
    """
    verify_signature(payload, header, secret, tolerance)
    text = _to_text(payload)
    try:
        return Event.model_validate(json.loads(text))
    except (ValueError, ValidationError) as e:
        raise DecodeError(f"Invalid event payload: {e}", body=text) from e


def generate_test_header(
    payload: Payload,
    secret: str,
    timestamp: Optional[int] = None,
) -> str:
    """
    Build a valid signature header for ``payload``.

    Intended for tests of webhook handlers.

    Args:
        timestamp: Signing time; defaults to now
    """
    if timestamp is None:
        timestamp = int(time.time())
    signature = _compute_signature(str(timestamp), _to_text(payload), secret)
    return f"t={timestamp},{SIGNATURE_SCHEME}={signature}"
