import json

from stripekit.engine.exceptions import (
    APIError,
    AuthenticationError,
    CardError,
    ErrorType,
    GenericAPIError,
    InvalidRequestError,
    ParameterValidationError,
    RateLimitError,
    StripeKitError,
)


def _envelope(**error):
    return json.dumps({"error": error})


def test_card_error_envelope():
    body = _envelope(type="card_error", code="card_declined", message="Your card was declined.",
                     decline_code="insufficient_funds", charge="ch_1")
    error = APIError.from_response(402, body, {"request-id": "req_123"})

    assert isinstance(error, CardError)
    assert isinstance(error, StripeKitError)
    assert error.http_status == 402
    assert error.type is ErrorType.CARD_ERROR
    assert error.code == "card_declined"
    assert error.message == "Your card was declined."
    assert error.decline_code == "insufficient_funds"
    assert error.charge == "ch_1"
    assert error.request_id == "req_123"
    assert "card_declined" in str(error)


def test_error_type_selects_subclass():
    cases = {
        "authentication_error": AuthenticationError,
        "invalid_request_error": InvalidRequestError,
        "rate_limit_error": RateLimitError,
        "validation_error": ParameterValidationError,
        "api_error": GenericAPIError,
    }
    for error_type, expected in cases.items():
        assert type(APIError.from_response(400, _envelope(type=error_type, message="m"))) is expected


def test_invalid_request_keeps_param_and_doc_url():
    body = _envelope(type="invalid_request_error", message="No such customer", param="customer",
                     doc_url="https://stripe.com/docs/error-codes/resource-missing", code="resource_missing")
    error = APIError.from_response(404, body)
    assert error.param == "customer"
    assert error.doc_url.endswith("resource-missing")
    assert error.error["code"] == "resource_missing"


def test_unknown_type_falls_back_to_generic():
    error = APIError.from_response(400, _envelope(type="brand_new_error", message="?"))
    assert type(error) is GenericAPIError
    assert error.type is None
    assert error.message == "?"


def test_non_envelope_body_is_generic():
    error = APIError.from_response(502, "<html>Bad gateway</html>")
    assert type(error) is GenericAPIError
    assert error.http_status == 502
    assert error.code is None

    empty = APIError.from_response(500, "")
    assert "500" in str(empty)


def test_error_type_from_string():
    assert ErrorType.from_string("card_error") is ErrorType.CARD_ERROR
    assert ErrorType.from_string("nope") is None
    assert ErrorType.from_string(None) is None
