import hashlib
import hmac
import json
import time

import pytest

from stripekit.engine.exceptions import (
    DecodeError,
    NoMatchingSignatureError,
    SignatureVerificationError,
    TimestampNotToleratedError,
    UnableToParseHeaderError,
)
from stripekit.resources import Event, Invoice
from stripekit.webhooks import construct_event, generate_test_header, verify_signature

PAYLOAD = b'{"key":"value"}'
SECRET = "SECRET"


def test_valid_signature():
    header = generate_test_header(PAYLOAD, SECRET, timestamp=int(time.time()) - 60)
    verify_signature(PAYLOAD, header, SECRET)
    verify_signature(PAYLOAD.decode(), header, SECRET)


def test_any_of_multiple_signatures_may_match():
    header = (
        "t=123,"
        "v1=7b15c7edc2183ad5be71922cc180f70b1ce4c0925c45abb6b1676ad43cb79173,"
        "v1=911b8d64f1a89c73cec478d4ace90345a6c268f5f60892060ea1af531b4fe97c"
    )
    verify_signature(PAYLOAD, header, SECRET, tolerance=-1)


def test_header_without_timestamp():
    with pytest.raises(UnableToParseHeaderError):
        verify_signature(PAYLOAD, "a", SECRET, tolerance=-1)
    with pytest.raises(UnableToParseHeaderError):
        verify_signature(PAYLOAD, "v1=abc", SECRET, tolerance=-1)


def test_wrong_signature():
    with pytest.raises(NoMatchingSignatureError):
        verify_signature(PAYLOAD, "t=123,v1=abc", SECRET, tolerance=-1)

    header = generate_test_header(PAYLOAD, "other_secret")
    with pytest.raises(SignatureVerificationError):
        verify_signature(PAYLOAD, header, SECRET)


def test_tampered_payload():
    header = generate_test_header(PAYLOAD, SECRET)
    with pytest.raises(NoMatchingSignatureError):
        verify_signature(b'{"key":"other"}', header, SECRET)


def test_old_timestamp_not_tolerated():
    signed_at = int(time.time()) - 360
    header = generate_test_header(PAYLOAD, SECRET, timestamp=signed_at)
    with pytest.raises(TimestampNotToleratedError) as exc_info:
        verify_signature(PAYLOAD, header, SECRET)
    assert exc_info.value.timestamp == signed_at
    assert exc_info.value.tolerance == 300

    # the age check is off when tolerance is not positive
    verify_signature(PAYLOAD, header, SECRET, tolerance=0)


def test_future_timestamp_not_tolerated():
    header = generate_test_header(PAYLOAD, SECRET, timestamp=int(time.time()) + 3600)
    with pytest.raises(TimestampNotToleratedError):
        verify_signature(PAYLOAD, header, SECRET, tolerance=0)


def test_construct_event():
    body = json.dumps({
        "id": "evt_1",
        "object": "event",
        "type": "invoice.paid",
        "api_version": "2022-11-15",
        "data": {"object": {"id": "in_1", "object": "invoice", "status": "paid"}},
    })
    header = generate_test_header(body, SECRET)
    event = construct_event(body, header, SECRET)

    assert isinstance(event, Event)
    assert event.type == "invoice.paid"
    assert event.data_object_as(Invoice).id == "in_1"


def test_construct_event_with_invalid_body():
    body = '{"id": "evt_1"}'
    header = generate_test_header(body, SECRET)
    with pytest.raises(DecodeError):
        construct_event(body, header, SECRET)


@pytest.mark.parametrize("timestamp", ["nan", "inf", "1.5e9"])
def test_signed_non_integer_timestamp_is_rejected(timestamp):
    signature = hmac.new(
        SECRET.encode(), f"{timestamp}.".encode() + PAYLOAD, hashlib.sha256
    ).hexdigest()
    with pytest.raises(UnableToParseHeaderError):
        verify_signature(PAYLOAD, f"t={timestamp},v1={signature}", SECRET)
