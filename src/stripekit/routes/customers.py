"""
Customer Routes
"""

from typing import Dict, List, Optional, Union

from ..resources.customers import Customer, CustomerList, CustomerSearchResult, CustomerTaxExempt
from ..schemas.bases import DeletedObject
from .bases import Expand, Nested, RouteGroup


class CustomerRoutes(RouteGroup):
    """Create, read, update, delete, list and search customers."""

    RESOURCE_PATH = "customers"

    async def create(
        self,
        *,
        address: Optional[Nested] = None,
        balance: Optional[int] = None,
        coupon: Optional[str] = None,
        description: Optional[str] = None,
        email: Optional[str] = None,
        invoice_prefix: Optional[str] = None,
        invoice_settings: Optional[Nested] = None,
        metadata: Optional[Dict[str, str]] = None,
        name: Optional[str] = None,
        next_invoice_sequence: Optional[int] = None,
        payment_method: Optional[str] = None,
        phone: Optional[str] = None,
        preferred_locales: Optional[List[str]] = None,
        promotion_code: Optional[str] = None,
        shipping: Optional[Nested] = None,
        source: Optional[str] = None,
        tax_exempt: Optional[Union[CustomerTaxExempt, str]] = None,
        test_clock: Optional[str] = None,
        expand: Expand = None,
    ) -> Customer:
        """
        Create a customer.

        Every argument is optional; unset arguments are not sent.

        Returns:
            Customer: The created customer.
        """
        params = self._params(
            address=address,
            balance=balance,
            coupon=coupon,
            description=description,
            email=email,
            invoice_prefix=invoice_prefix,
            invoice_settings=invoice_settings,
            metadata=metadata,
            name=name,
            next_invoice_sequence=next_invoice_sequence,
            payment_method=payment_method,
            phone=phone,
            preferred_locales=preferred_locales,
            promotion_code=promotion_code,
            shipping=shipping,
            source=source,
            tax_exempt=tax_exempt,
            test_clock=test_clock,
            expand=expand,
        )
        return await self._post(self._path(), Customer, params)

    async def retrieve(self, customer: str, *, expand: Expand = None) -> Customer:
        return await self._get(self._path(customer), Customer, self._params(expand=expand))

    async def update(
        self,
        customer: str,
        *,
        address: Optional[Nested] = None,
        balance: Optional[int] = None,
        coupon: Optional[str] = None,
        default_source: Optional[str] = None,
        description: Optional[str] = None,
        email: Optional[str] = None,
        invoice_prefix: Optional[str] = None,
        invoice_settings: Optional[Nested] = None,
        metadata: Optional[Dict[str, str]] = None,
        name: Optional[str] = None,
        next_invoice_sequence: Optional[int] = None,
        phone: Optional[str] = None,
        preferred_locales: Optional[List[str]] = None,
        promotion_code: Optional[str] = None,
        shipping: Optional[Nested] = None,
        source: Optional[str] = None,
        tax_exempt: Optional[Union[CustomerTaxExempt, str]] = None,
        expand: Expand = None,
    ) -> Customer:
        """
        Update a customer.

        Only the arguments that are passed are changed. Pass an empty string
        to clear a field.
        """
        params = self._params(
            address=address,
            balance=balance,
            coupon=coupon,
            default_source=default_source,
            description=description,
            email=email,
            invoice_prefix=invoice_prefix,
            invoice_settings=invoice_settings,
            metadata=metadata,
            name=name,
            next_invoice_sequence=next_invoice_sequence,
            phone=phone,
            preferred_locales=preferred_locales,
            promotion_code=promotion_code,
            shipping=shipping,
            source=source,
            tax_exempt=tax_exempt,
            expand=expand,
        )
        return await self._post(self._path(customer), Customer, params)

    async def delete(self, customer: str) -> DeletedObject:
        """Permanently delete a customer and cancel its active subscriptions."""
        return await self._delete(self._path(customer), DeletedObject)

    async def list(
        self,
        *,
        created: Optional[Union[int, Nested]] = None,
        email: Optional[str] = None,
        ending_before: Optional[str] = None,
        limit: Optional[int] = None,
        starting_after: Optional[str] = None,
        test_clock: Optional[str] = None,
        expand: Expand = None,
    ) -> CustomerList:
        params = self._params(
            created=created,
            email=email,
            ending_before=ending_before,
            limit=limit,
            starting_after=starting_after,
            test_clock=test_clock,
            expand=expand,
        )
        return await self._get(self._path(), CustomerList, params)

    async def search(
        self,
        query: str,
        *,
        limit: Optional[int] = None,
        page: Optional[str] = None,
        expand: Expand = None,
    ) -> CustomerSearchResult:
        """
        Search customers with the search query language.

        Args:
            query: Search query, e.g. ``email:'jenny@example.com'``
            limit: Page size, 1 to 100
            page: ``next_page`` cursor from a previous result
        """
        params = self._params(query=query, limit=limit, page=page, expand=expand)
        return await self._get(self._path("search"), CustomerSearchResult, params)
