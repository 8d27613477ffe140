"""
Charge Routes
"""

from typing import Dict, Optional, Union

from ..resources.charges import Charge, ChargeList, ChargeSearchResult
from .bases import Expand, Nested, RouteGroup


class ChargeRoutes(RouteGroup):
    """Create, capture, read, update, list and search charges."""

    RESOURCE_PATH = "charges"

    async def create(
        self,
        amount: int,
        currency: str,
        *,
        application_fee_amount: Optional[int] = None,
        capture: Optional[bool] = None,
        customer: Optional[str] = None,
        description: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        on_behalf_of: Optional[str] = None,
        receipt_email: Optional[str] = None,
        shipping: Optional[Nested] = None,
        source: Optional[str] = None,
        statement_descriptor: Optional[str] = None,
        statement_descriptor_suffix: Optional[str] = None,
        transfer_data: Optional[Nested] = None,
        transfer_group: Optional[str] = None,
        expand: Expand = None,
    ) -> Charge:
        """
        Charge a payment source.

        Args:
            amount: Amount in the smallest currency unit (e.g. cents)
            currency: Three-letter ISO currency code, lowercase
            capture: False to only authorize; capture later with ``capture()``
            source: Card or source id to charge; defaults to the customer's default source

        Returns:
            Charge: The charge, whether it succeeded or not. A declined card
            raises CardError instead.
        """
        params = self._params(
            amount=amount,
            currency=currency,
            application_fee_amount=application_fee_amount,
            capture=capture,
            customer=customer,
            description=description,
            metadata=metadata,
            on_behalf_of=on_behalf_of,
            receipt_email=receipt_email,
            shipping=shipping,
            source=source,
            statement_descriptor=statement_descriptor,
            statement_descriptor_suffix=statement_descriptor_suffix,
            transfer_data=transfer_data,
            transfer_group=transfer_group,
            expand=expand,
        )
        return await self._post(self._path(), Charge, params)

    async def retrieve(self, charge: str, *, expand: Expand = None) -> Charge:
        return await self._get(self._path(charge), Charge, self._params(expand=expand))

    async def update(
        self,
        charge: str,
        *,
        customer: Optional[str] = None,
        description: Optional[str] = None,
        fraud_details: Optional[Nested] = None,
        metadata: Optional[Dict[str, str]] = None,
        receipt_email: Optional[str] = None,
        shipping: Optional[Nested] = None,
        transfer_group: Optional[str] = None,
        expand: Expand = None,
    ) -> Charge:
        params = self._params(
            customer=customer,
            description=description,
            fraud_details=fraud_details,
            metadata=metadata,
            receipt_email=receipt_email,
            shipping=shipping,
            transfer_group=transfer_group,
            expand=expand,
        )
        return await self._post(self._path(charge), Charge, params)

    async def capture(
        self,
        charge: str,
        *,
        amount: Optional[int] = None,
        application_fee_amount: Optional[int] = None,
        receipt_email: Optional[str] = None,
        statement_descriptor: Optional[str] = None,
        statement_descriptor_suffix: Optional[str] = None,
        transfer_data: Optional[Nested] = None,
        transfer_group: Optional[str] = None,
        expand: Expand = None,
    ) -> Charge:
        """
        Capture a charge created with ``capture=False``.

        Args:
            amount: Amount to capture; the remainder is refunded. Defaults to the full amount.
        """
        params = self._params(
            amount=amount,
            application_fee_amount=application_fee_amount,
            receipt_email=receipt_email,
            statement_descriptor=statement_descriptor,
            statement_descriptor_suffix=statement_descriptor_suffix,
            transfer_data=transfer_data,
            transfer_group=transfer_group,
            expand=expand,
        )
        return await self._post(self._path(charge, "capture"), Charge, params)

    async def list(
        self,
        *,
        created: Optional[Union[int, Nested]] = None,
        customer: Optional[str] = None,
        ending_before: Optional[str] = None,
        limit: Optional[int] = None,
        payment_intent: Optional[str] = None,
        starting_after: Optional[str] = None,
        transfer_group: Optional[str] = None,
        expand: Expand = None,
    ) -> ChargeList:
        params = self._params(
            created=created,
            customer=customer,
            ending_before=ending_before,
            limit=limit,
            payment_intent=payment_intent,
            starting_after=starting_after,
            transfer_group=transfer_group,
            expand=expand,
        )
        return await self._get(self._path(), ChargeList, params)

    async def search(
        self,
        query: str,
        *,
        limit: Optional[int] = None,
        page: Optional[str] = None,
        expand: Expand = None,
    ) -> ChargeSearchResult:
        params = self._params(query=query, limit=limit, page=page, expand=expand)
        return await self._get(self._path("search"), ChargeSearchResult, params)
