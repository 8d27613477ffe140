import pytest

from stripekit.resources import Card, Customer, CustomerList, CustomerSearchResult, CustomerTaxExempt
from stripekit.schemas.bases import DeletedObject

CUSTOMER = {"id": "cus_123", "object": "customer", "email": "jenny@example.com"}


@pytest.mark.asyncio
async def test_create_sends_only_given_fields(make_client, sent):
    client = make_client(CUSTOMER)
    customer = await client.customers.create(
        email="jenny@example.com",
        metadata={"order_id": "abc"},
        tax_exempt=CustomerTaxExempt.REVERSE,
        expand=["default_source"],
    )

    assert isinstance(customer, Customer)
    request = sent[0]
    assert request.method == "POST"
    assert request.url.path == "/v1/customers"
    assert request.content.decode() == (
        "email=jenny@example.com&metadata[order_id]=abc&tax_exempt=reverse&expand[]=default_source"
    )


@pytest.mark.asyncio
async def test_create_with_nested_address(make_client, sent, form):
    client = make_client(CUSTOMER)
    await client.customers.create(
        name="Jenny Rosen",
        shipping={"name": "Jenny Rosen", "address": {"line1": "510 Townsend St", "city": "San Francisco"}},
    )
    assert form(sent[0]) == [
        ("name", "Jenny Rosen"),
        ("shipping[name]", "Jenny Rosen"),
        ("shipping[address][line1]", "510 Townsend St"),
        ("shipping[address][city]", "San Francisco"),
    ]


@pytest.mark.asyncio
async def test_retrieve_with_expansion(make_client, sent):
    payload = {**CUSTOMER, "default_source": {"id": "card_1", "object": "card", "last4": "4242"}}
    client = make_client(payload)
    customer = await client.customers.retrieve("cus_123", expand=["default_source"])

    request = sent[0]
    assert request.method == "GET"
    assert request.url.path == "/v1/customers/cus_123"
    assert request.url.params.get_list("expand[]") == ["default_source"]
    assert request.content == b""
    assert customer.default_source.value_as(Card).last4 == "4242"


@pytest.mark.asyncio
async def test_update_clears_with_empty_string(make_client, sent):
    client = make_client(CUSTOMER)
    await client.customers.update("cus_123", description="", phone=None)
    assert sent[0].url.path == "/v1/customers/cus_123"
    assert sent[0].content.decode() == "description="


@pytest.mark.asyncio
async def test_delete(make_client, sent):
    client = make_client({"id": "cus_123", "object": "customer", "deleted": True})
    deleted = await client.customers.delete("cus_123")
    assert sent[0].method == "DELETE"
    assert sent[0].url.path == "/v1/customers/cus_123"
    assert isinstance(deleted, DeletedObject)
    assert deleted.deleted


@pytest.mark.asyncio
async def test_list_pages_with_cursor(make_client, sent):
    client = make_client({
        "object": "list",
        "has_more": True,
        "url": "/v1/customers",
        "data": [CUSTOMER],
    })
    page = await client.customers.list(limit=1, email="jenny@example.com")
    assert isinstance(page, CustomerList)
    assert page.has_more

    await client.customers.list(limit=1, starting_after=page.last_id)
    assert sent[1].url.params["starting_after"] == "cus_123"
    assert sent[1].url.params["limit"] == "1"


@pytest.mark.asyncio
async def test_search(make_client, sent):
    client = make_client({
        "object": "search_result",
        "has_more": False,
        "url": "/v1/customers/search",
        "next_page": None,
        "data": [CUSTOMER],
    })
    result = await client.customers.search("email:'jenny@example.com'", limit=10)
    assert isinstance(result, CustomerSearchResult)
    assert sent[0].method == "GET"
    assert sent[0].url.path == "/v1/customers/search"
    assert sent[0].url.params["query"] == "email:'jenny@example.com'"
    assert result.data[0].id == "cus_123"


@pytest.mark.asyncio
async def test_ids_are_escaped_in_path(make_client, sent):
    client = make_client(CUSTOMER)
    await client.customers.retrieve("cus/../1")
    assert sent[0].url.raw_path.startswith(b"/v1/customers/cus%2F..%2F1")
