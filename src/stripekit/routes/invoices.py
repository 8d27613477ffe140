"""
Invoice Routes

Covers the whole invoice lifecycle: drafts are created and edited, then
finalized, and open invoices are paid, sent, voided or marked uncollectible.
"""

from datetime import datetime
from typing import Dict, List, Optional, Union

from ..resources.invoices import CollectionMethod, Invoice, InvoiceList, InvoiceSearchResult, InvoiceStatus
from ..schemas.bases import DeletedObject
from .bases import Expand, Nested, RouteGroup


class InvoiceRoutes(RouteGroup):
    RESOURCE_PATH = "invoices"

    async def create(
        self,
        customer: str,
        *,
        application_fee_amount: Optional[int] = None,
        auto_advance: Optional[bool] = None,
        collection_method: Optional[Union[CollectionMethod, str]] = None,
        custom_fields: Optional[List[Nested]] = None,
        days_until_due: Optional[int] = None,
        default_payment_method: Optional[str] = None,
        default_source: Optional[str] = None,
        default_tax_rates: Optional[List[str]] = None,
        description: Optional[str] = None,
        discounts: Optional[List[Nested]] = None,
        due_date: Optional[datetime] = None,
        footer: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        statement_descriptor: Optional[str] = None,
        subscription: Optional[str] = None,
        transfer_data: Optional[Nested] = None,
        expand: Expand = None,
    ) -> Invoice:
        """
        Create a draft invoice for a customer.

        Pending invoice items of the customer are pulled into the draft.

        Args:
            customer: Customer to bill
            collection_method: ``charge_automatically`` or ``send_invoice``
            due_date: Only valid with ``send_invoice``
            discounts: Discounts to apply, e.g. ``[{"coupon": "SUMMER"}]``
        """
        params = self._params(
            customer=customer,
            application_fee_amount=application_fee_amount,
            auto_advance=auto_advance,
            collection_method=collection_method,
            custom_fields=custom_fields,
            days_until_due=days_until_due,
            default_payment_method=default_payment_method,
            default_source=default_source,
            default_tax_rates=default_tax_rates,
            description=description,
            discounts=discounts,
            due_date=due_date,
            footer=footer,
            metadata=metadata,
            statement_descriptor=statement_descriptor,
            subscription=subscription,
            transfer_data=transfer_data,
            expand=expand,
        )
        return await self._post(self._path(), Invoice, params)

    async def retrieve(self, invoice: str, *, expand: Expand = None) -> Invoice:
        return await self._get(self._path(invoice), Invoice, self._params(expand=expand))

    async def update(
        self,
        invoice: str,
        *,
        application_fee_amount: Optional[int] = None,
        auto_advance: Optional[bool] = None,
        collection_method: Optional[Union[CollectionMethod, str]] = None,
        custom_fields: Optional[List[Nested]] = None,
        days_until_due: Optional[int] = None,
        default_payment_method: Optional[str] = None,
        default_source: Optional[str] = None,
        default_tax_rates: Optional[List[str]] = None,
        description: Optional[str] = None,
        discounts: Optional[List[Nested]] = None,
        due_date: Optional[datetime] = None,
        footer: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        statement_descriptor: Optional[str] = None,
        transfer_data: Optional[Nested] = None,
        expand: Expand = None,
    ) -> Invoice:
        """
        Update a draft invoice.

        Once finalized only ``auto_advance``, ``description``, ``footer`` and
        ``metadata`` may change. Passing ``footer=""`` clears the footer,
        while leaving it unset keeps it.
        """
        params = self._params(
            application_fee_amount=application_fee_amount,
            auto_advance=auto_advance,
            collection_method=collection_method,
            custom_fields=custom_fields,
            days_until_due=days_until_due,
            default_payment_method=default_payment_method,
            default_source=default_source,
            default_tax_rates=default_tax_rates,
            description=description,
            discounts=discounts,
            due_date=due_date,
            footer=footer,
            metadata=metadata,
            statement_descriptor=statement_descriptor,
            transfer_data=transfer_data,
            expand=expand,
        )
        return await self._post(self._path(invoice), Invoice, params)

    async def delete(self, invoice: str) -> DeletedObject:
        """Delete a draft invoice. Finalized invoices must be voided instead."""
        return await self._delete(self._path(invoice), DeletedObject)

    async def finalize(
        self,
        invoice: str,
        *,
        auto_advance: Optional[bool] = None,
        expand: Expand = None,
    ) -> Invoice:
        params = self._params(auto_advance=auto_advance, expand=expand)
        return await self._post(self._path(invoice, "finalize"), Invoice, params)

    async def pay(
        self,
        invoice: str,
        *,
        forgive: Optional[bool] = None,
        off_session: Optional[bool] = None,
        paid_out_of_band: Optional[bool] = None,
        payment_method: Optional[str] = None,
        source: Optional[str] = None,
        expand: Expand = None,
    ) -> Invoice:
        """
        Attempt payment of an open invoice now.

        Args:
            paid_out_of_band: Mark the invoice paid without charging anything
        """
        params = self._params(
            forgive=forgive,
            off_session=off_session,
            paid_out_of_band=paid_out_of_band,
            payment_method=payment_method,
            source=source,
            expand=expand,
        )
        return await self._post(self._path(invoice, "pay"), Invoice, params)

    async def send(self, invoice: str, *, expand: Expand = None) -> Invoice:
        """Email an open ``send_invoice`` invoice to the customer."""
        return await self._post(self._path(invoice, "send"), Invoice, self._params(expand=expand))

    async def void(self, invoice: str, *, expand: Expand = None) -> Invoice:
        return await self._post(self._path(invoice, "void"), Invoice, self._params(expand=expand))

    async def mark_uncollectible(self, invoice: str, *, expand: Expand = None) -> Invoice:
        return await self._post(
            self._path(invoice, "mark_uncollectible"), Invoice, self._params(expand=expand)
        )

    async def list(
        self,
        *,
        collection_method: Optional[Union[CollectionMethod, str]] = None,
        created: Optional[Union[int, Nested]] = None,
        customer: Optional[str] = None,
        due_date: Optional[Union[int, Nested]] = None,
        ending_before: Optional[str] = None,
        limit: Optional[int] = None,
        starting_after: Optional[str] = None,
        status: Optional[Union[InvoiceStatus, str]] = None,
        subscription: Optional[str] = None,
        expand: Expand = None,
    ) -> InvoiceList:
        params = self._params(
            collection_method=collection_method,
            created=created,
            customer=customer,
            due_date=due_date,
            ending_before=ending_before,
            limit=limit,
            starting_after=starting_after,
            status=status,
            subscription=subscription,
            expand=expand,
        )
        return await self._get(self._path(), InvoiceList, params)

    async def search(
        self,
        query: str,
        *,
        limit: Optional[int] = None,
        page: Optional[str] = None,
        expand: Expand = None,
    ) -> InvoiceSearchResult:
        params = self._params(query=query, limit=limit, page=page, expand=expand)
        return await self._get(self._path("search"), InvoiceSearchResult, params)
