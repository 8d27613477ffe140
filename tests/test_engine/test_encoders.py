"""
Tests for the form/query parameter encoder.
"""
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from urllib.parse import parse_qsl

import pytest

from stripekit.engine.encoders import encode, flatten
from stripekit.engine.exceptions import EncodingError
from stripekit.resources import Address, CollectionMethod, Customer
from stripekit.schemas.expandable import Expandable, ExpandableCollection


def test_nested_mapping_uses_bracket_keys():
    bag = {"metadata": {"order_id": "abc"}, "amount": 500, "currency": "usd"}
    assert encode(bag) == "metadata[order_id]=abc&amount=500&currency=usd"


def test_scalar_array_repeats_empty_bracket_key():
    assert encode({"expand": ["customer", "default_source"]}) == (
        "expand[]=customer&expand[]=default_source"
    )


def test_object_array_is_indexed():
    bag = {"items": [{"price": "price_1", "quantity": 2}, {"price": "price_2"}]}
    assert encode(bag) == "items[0][price]=price_1&items[0][quantity]=2&items[1][price]=price_2"


def test_none_is_omitted_but_empty_string_clears():
    assert encode({"footer": None}) == ""
    assert encode({"footer": ""}) == "footer="
    assert encode({"description": "x", "footer": None, "metadata": {"a": None}}) == "description=x"


def test_empty_containers_emit_nothing():
    assert encode({}) == ""
    assert encode({"expand": [], "metadata": {}}) == ""


def test_booleans_are_lowercase_literals():
    assert encode({"capture": False, "livemode": True}) == "capture=false&livemode=true"


def test_dates_encode_as_epoch_seconds():
    moment = datetime(2020, 1, 1, tzinfo=timezone.utc)
    assert encode({"due_date": moment}) == "due_date=1577836800"
    # naive datetimes are taken as UTC
    assert encode({"due_date": datetime(2020, 1, 1)}) == "due_date=1577836800"
    assert encode({"due_date": date(2020, 1, 1)}) == "due_date=1577836800"

    offset = datetime(2020, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))
    assert encode({"due_date": offset}) == "due_date=1577836800"


def test_enum_encodes_wire_value():
    assert encode({"collection_method": CollectionMethod.SEND_INVOICE}) == (
        "collection_method=send_invoice"
    )


def test_numbers():
    assert encode({"percentage": Decimal("8.25"), "ratio": 0.5, "amount": 0}) == (
        "percentage=8.25&ratio=0.5&amount=0"
    )


def test_expandable_sends_bare_id_only():
    customer = Customer(id="cus_123", object="customer", email="a@b.com")
    expanded = Expandable(value=customer)
    assert encode({"customer": expanded}) == "customer=cus_123"
    assert encode({"customer": Expandable.of("cus_123")}) == "customer=cus_123"
    assert encode({"customer": Expandable()}) == ""


def test_expandable_collection_sends_ids():
    refs = ExpandableCollection.of(["txr_1", "txr_2"])
    assert encode({"default_tax_rates": refs}) == "default_tax_rates[]=txr_1&default_tax_rates[]=txr_2"


def test_model_value_is_flattened_without_unset_fields():
    bag = {"address": Address(city="Paris", line1="1 Rue de Rivoli")}
    assert encode(bag) == "address[city]=Paris&address[line1]=1%20Rue%20de%20Rivoli"


def test_reserved_characters_are_escaped():
    assert encode({"q": "a&b=c+d"}) == "q=a%26b%3Dc%2Bd"
    assert encode({"email": "jenny rosen@example.com"}) == "email=jenny%20rosen@example.com"
    assert encode({"metadata": {"key with space": "v"}}) == "metadata[key%20with%20space]=v"
    assert encode({"name": "Zoë"}) == "name=Zo%C3%AB"


def test_insertion_order_is_kept_and_encoding_is_deterministic():
    bag = {"b": 1, "a": {"z": 1, "y": [1, 2]}, "c": True}
    assert encode(bag) == encode(dict(bag))
    assert [key for key, _ in flatten(bag)] == ["b", "a[z]", "a[y][]", "a[y][]", "c"]


def test_one_component_per_leaf_and_values_recoverable():
    bag = {
        "metadata": {"order_id": "abc", "note": "a & b"},
        "shipping": {"name": "Jenny", "address": {"city": "São Paulo", "line1": "x=y"}},
        "amount": 500,
    }
    pairs = parse_qsl(encode(bag), keep_blank_values=True)
    assert sorted(pairs) == sorted([
        ("metadata[order_id]", "abc"),
        ("metadata[note]", "a & b"),
        ("shipping[name]", "Jenny"),
        ("shipping[address][city]", "São Paulo"),
        ("shipping[address][line1]", "x=y"),
        ("amount", "500"),
    ])


def test_flatten_returns_unescaped_pairs():
    assert flatten({"shipping": {"address": {"city": "Le Mans"}}}) == [
        ("shipping[address][city]", "Le Mans")
    ]


def test_unsupported_value_fails_fast():
    with pytest.raises(EncodingError) as exc_info:
        encode({"metadata": {"bad": object()}})
    assert exc_info.value.key_path == "metadata[bad]"
    assert isinstance(exc_info.value, TypeError)


def test_non_mapping_bag_is_rejected():
    with pytest.raises(EncodingError):
        encode(["not", "a", "bag"])


def test_plus_sign_is_escaped_and_at_sign_kept():
    assert encode({"email": "accounting+furnitures@hmm.test"}) == "email=accounting%2Bfurnitures@hmm.test"


def test_nested_value_with_comma_and_ampersand():
    assert encode({"shipping": {"name": "Hamlin, Hamlin & McGill"}}) == (
        "shipping[name]=Hamlin,%20Hamlin%20%26%20McGill"
    )


def test_floats_never_use_exponent_notation():
    assert encode({"small": 1e-07, "large": 1e20, "plain": 2.5}) == (
        "small=0.0000001&large=100000000000000000000&plain=2.5"
    )


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), Decimal("NaN")])
def test_non_finite_floats_fail_fast(value):
    with pytest.raises(EncodingError) as exc_info:
        encode({"unit_amount_decimal": value})
    assert exc_info.value.key_path == "unit_amount_decimal"
