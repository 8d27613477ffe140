"""
Payout Routes
"""

from typing import Dict, Optional, Union

from ..resources.payouts import Payout, PayoutList, PayoutMethod, PayoutStatus
from .bases import Expand, Nested, RouteGroup


class PayoutRoutes(RouteGroup):
    """Send funds from the balance to a bank account or debit card."""

    RESOURCE_PATH = "payouts"

    async def create(
        self,
        amount: int,
        currency: str,
        *,
        description: Optional[str] = None,
        destination: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        method: Optional[Union[PayoutMethod, str]] = None,
        source_type: Optional[str] = None,
        statement_descriptor: Optional[str] = None,
        expand: Expand = None,
    ) -> Payout:
        params = self._params(
            amount=amount,
            currency=currency,
            description=description,
            destination=destination,
            metadata=metadata,
            method=method,
            source_type=source_type,
            statement_descriptor=statement_descriptor,
            expand=expand,
        )
        return await self._post(self._path(), Payout, params)

    async def retrieve(self, payout: str, *, expand: Expand = None) -> Payout:
        return await self._get(self._path(payout), Payout, self._params(expand=expand))

    async def update(
        self,
        payout: str,
        *,
        metadata: Optional[Dict[str, str]] = None,
        expand: Expand = None,
    ) -> Payout:
        """Only ``metadata`` can be updated on a payout."""
        return await self._post(
            self._path(payout), Payout, self._params(metadata=metadata, expand=expand)
        )

    async def cancel(self, payout: str, *, expand: Expand = None) -> Payout:
        """Cancel a pending payout; the funds return to the available balance."""
        return await self._post(self._path(payout, "cancel"), Payout, self._params(expand=expand))

    async def reverse(
        self,
        payout: str,
        *,
        metadata: Optional[Dict[str, str]] = None,
        expand: Expand = None,
    ) -> Payout:
        """Reverse a paid payout to a bank account; returns the reversing payout."""
        return await self._post(
            self._path(payout, "reverse"), Payout, self._params(metadata=metadata, expand=expand)
        )

    async def list(
        self,
        *,
        arrival_date: Optional[Union[int, Nested]] = None,
        created: Optional[Union[int, Nested]] = None,
        destination: Optional[str] = None,
        ending_before: Optional[str] = None,
        limit: Optional[int] = None,
        starting_after: Optional[str] = None,
        status: Optional[Union[PayoutStatus, str]] = None,
        expand: Expand = None,
    ) -> PayoutList:
        params = self._params(
            arrival_date=arrival_date,
            created=created,
            destination=destination,
            ending_before=ending_before,
            limit=limit,
            starting_after=starting_after,
            status=status,
            expand=expand,
        )
        return await self._get(self._path(), PayoutList, params)
