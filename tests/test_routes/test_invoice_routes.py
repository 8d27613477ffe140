from datetime import datetime, timezone

import pytest

from stripekit.engine.exceptions import InvalidRequestError
from stripekit.resources import CollectionMethod, Customer, Invoice, InvoiceStatus

INVOICE = {"id": "in_1", "object": "invoice", "status": "draft", "customer": "cus_1"}


@pytest.mark.asyncio
async def test_create(make_client, sent, form):
    client = make_client(INVOICE)
    invoice = await client.invoices.create(
        "cus_1",
        collection_method=CollectionMethod.SEND_INVOICE,
        due_date=datetime(2030, 1, 1, tzinfo=timezone.utc),
        discounts=[{"coupon": "SUMMER"}],
        default_tax_rates=["txr_1", "txr_2"],
        auto_advance=False,
    )
    assert invoice.status is InvoiceStatus.DRAFT
    assert sent[0].url.path == "/v1/invoices"
    assert form(sent[0]) == [
        ("customer", "cus_1"),
        ("auto_advance", "false"),
        ("collection_method", "send_invoice"),
        ("default_tax_rates[]", "txr_1"),
        ("default_tax_rates[]", "txr_2"),
        ("discounts[0][coupon]", "SUMMER"),
        ("due_date", "1893456000"),
    ]


@pytest.mark.asyncio
async def test_update_footer_unset_vs_cleared(make_client, sent):
    client = make_client(INVOICE)
    await client.invoices.update("in_1", description="Thanks")
    await client.invoices.update("in_1", footer="")

    assert sent[0].content.decode() == "description=Thanks"
    assert sent[1].content.decode() == "footer="


@pytest.mark.asyncio
async def test_retrieve_expanded_customer(make_client, sent):
    client = make_client({**INVOICE, "customer": {"id": "cus_1", "object": "customer", "email": "a@b.com"}})
    invoice = await client.invoices.retrieve("in_1", expand=["customer"])
    assert isinstance(invoice.customer.value, Customer)
    assert invoice.customer.id == "cus_1"


@pytest.mark.asyncio
@pytest.mark.parametrize("operation, suffix", [
    ("finalize", "finalize"),
    ("pay", "pay"),
    ("send", "send"),
    ("void", "void"),
    ("mark_uncollectible", "mark_uncollectible"),
])
async def test_lifecycle_actions_post_to_action_path(make_client, sent, operation, suffix):
    client = make_client({**INVOICE, "status": "open"})
    invoice = await getattr(client.invoices, operation)("in_1")
    assert sent[0].method == "POST"
    assert sent[0].url.path == f"/v1/invoices/in_1/{suffix}"
    assert invoice.id == "in_1"


@pytest.mark.asyncio
async def test_pay_out_of_band(make_client, sent):
    client = make_client({**INVOICE, "status": "paid"})
    await client.invoices.pay("in_1", paid_out_of_band=True)
    assert sent[0].content.decode() == "paid_out_of_band=true"


@pytest.mark.asyncio
async def test_finalize_with_auto_advance(make_client, sent):
    client = make_client({**INVOICE, "status": "open"})
    await client.invoices.finalize("in_1", auto_advance=False, expand=["charge"])
    assert sent[0].content.decode() == "auto_advance=false&expand[]=charge"


@pytest.mark.asyncio
async def test_delete_draft(make_client, sent):
    client = make_client({"id": "in_1", "object": "invoice", "deleted": True})
    deleted = await client.invoices.delete("in_1")
    assert sent[0].method == "DELETE"
    assert deleted.id == "in_1"


@pytest.mark.asyncio
async def test_list_and_search(make_client, sent):
    client = make_client({"object": "list", "data": [INVOICE], "has_more": False, "url": "/v1/invoices"})
    page = await client.invoices.list(customer="cus_1", status=InvoiceStatus.OPEN)
    assert sent[0].url.params["status"] == "open"
    assert page.data[0].id == "in_1"

    await client.invoices.search("total>999")
    assert sent[1].url.path == "/v1/invoices/search"
    assert sent[1].url.params["query"] == "total>999"


@pytest.mark.asyncio
async def test_invalid_request_propagates(make_client):
    client = make_client(
        {"error": {"type": "invalid_request_error", "message": "No such invoice: 'in_x'", "param": "id"}},
        status=404,
    )
    with pytest.raises(InvalidRequestError) as exc_info:
        await client.invoices.retrieve("in_x")
    assert exc_info.value.param == "id"
