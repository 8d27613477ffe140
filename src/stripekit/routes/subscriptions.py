"""
Subscription Routes
"""

from datetime import datetime
from typing import Dict, List, Optional, Union

from ..resources.invoices import CollectionMethod
from ..resources.subscriptions import (
    Subscription,
    SubscriptionList,
    SubscriptionSearchResult,
    SubscriptionStatus,
)
from ..schemas.bases import DeletedObject
from .bases import Expand, Nested, RouteGroup


class SubscriptionRoutes(RouteGroup):
    """Create, read, update, cancel, resume, list and search subscriptions."""

    RESOURCE_PATH = "subscriptions"

    async def create(
        self,
        customer: str,
        items: List[Nested],
        *,
        backdate_start_date: Optional[datetime] = None,
        billing_cycle_anchor: Optional[datetime] = None,
        cancel_at: Optional[datetime] = None,
        cancel_at_period_end: Optional[bool] = None,
        collection_method: Optional[Union[CollectionMethod, str]] = None,
        coupon: Optional[str] = None,
        days_until_due: Optional[int] = None,
        default_payment_method: Optional[str] = None,
        default_source: Optional[str] = None,
        default_tax_rates: Optional[List[str]] = None,
        description: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        off_session: Optional[bool] = None,
        payment_behavior: Optional[str] = None,
        promotion_code: Optional[str] = None,
        proration_behavior: Optional[str] = None,
        trial_end: Optional[Union[datetime, str]] = None,
        trial_period_days: Optional[int] = None,
        expand: Expand = None,
    ) -> Subscription:
        """
        Subscribe a customer to one or more prices.

        Args:
            customer: Customer to subscribe
            items: Subscription items, e.g. ``[{"price": "price_123", "quantity": 2}]``;
                sent as ``items[0][price]=price_123&items[0][quantity]=2``
            trial_end: Trial end time, or ``"now"`` to end the trial immediately
        """
        params = self._params(
            customer=customer,
            items=items,
            backdate_start_date=backdate_start_date,
            billing_cycle_anchor=billing_cycle_anchor,
            cancel_at=cancel_at,
            cancel_at_period_end=cancel_at_period_end,
            collection_method=collection_method,
            coupon=coupon,
            days_until_due=days_until_due,
            default_payment_method=default_payment_method,
            default_source=default_source,
            default_tax_rates=default_tax_rates,
            description=description,
            metadata=metadata,
            off_session=off_session,
            payment_behavior=payment_behavior,
            promotion_code=promotion_code,
            proration_behavior=proration_behavior,
            trial_end=trial_end,
            trial_period_days=trial_period_days,
            expand=expand,
        )
        return await self._post(self._path(), Subscription, params)

    async def retrieve(self, subscription: str, *, expand: Expand = None) -> Subscription:
        return await self._get(self._path(subscription), Subscription, self._params(expand=expand))

    async def update(
        self,
        subscription: str,
        *,
        cancel_at: Optional[datetime] = None,
        cancel_at_period_end: Optional[bool] = None,
        collection_method: Optional[Union[CollectionMethod, str]] = None,
        coupon: Optional[str] = None,
        days_until_due: Optional[int] = None,
        default_payment_method: Optional[str] = None,
        default_source: Optional[str] = None,
        default_tax_rates: Optional[List[str]] = None,
        description: Optional[str] = None,
        items: Optional[List[Nested]] = None,
        metadata: Optional[Dict[str, str]] = None,
        off_session: Optional[bool] = None,
        pause_collection: Optional[Nested] = None,
        payment_behavior: Optional[str] = None,
        promotion_code: Optional[str] = None,
        proration_behavior: Optional[str] = None,
        proration_date: Optional[datetime] = None,
        trial_end: Optional[Union[datetime, str]] = None,
        expand: Expand = None,
    ) -> Subscription:
        params = self._params(
            cancel_at=cancel_at,
            cancel_at_period_end=cancel_at_period_end,
            collection_method=collection_method,
            coupon=coupon,
            days_until_due=days_until_due,
            default_payment_method=default_payment_method,
            default_source=default_source,
            default_tax_rates=default_tax_rates,
            description=description,
            items=items,
            metadata=metadata,
            off_session=off_session,
            pause_collection=pause_collection,
            payment_behavior=payment_behavior,
            promotion_code=promotion_code,
            proration_behavior=proration_behavior,
            proration_date=proration_date,
            trial_end=trial_end,
            expand=expand,
        )
        return await self._post(self._path(subscription), Subscription, params)

    async def cancel(
        self,
        subscription: str,
        *,
        cancellation_details: Optional[Nested] = None,
        invoice_now: Optional[bool] = None,
        prorate: Optional[bool] = None,
        expand: Expand = None,
    ) -> Subscription:
        """
        Cancel a subscription immediately.

        To cancel at the end of the period, use ``update(cancel_at_period_end=True)``.
        """
        params = self._params(
            cancellation_details=cancellation_details,
            invoice_now=invoice_now,
            prorate=prorate,
            expand=expand,
        )
        return await self._delete(self._path(subscription), Subscription, params)

    async def resume(
        self,
        subscription: str,
        *,
        billing_cycle_anchor: Optional[str] = None,
        proration_behavior: Optional[str] = None,
        proration_date: Optional[datetime] = None,
        expand: Expand = None,
    ) -> Subscription:
        """Resume a paused subscription."""
        params = self._params(
            billing_cycle_anchor=billing_cycle_anchor,
            proration_behavior=proration_behavior,
            proration_date=proration_date,
            expand=expand,
        )
        return await self._post(self._path(subscription, "resume"), Subscription, params)

    async def delete_discount(self, subscription: str) -> DeletedObject:
        """Remove the currently applied discount from a subscription."""
        return await self._delete(self._path(subscription, "discount"), DeletedObject)

    async def list(
        self,
        *,
        collection_method: Optional[Union[CollectionMethod, str]] = None,
        created: Optional[Union[int, Nested]] = None,
        customer: Optional[str] = None,
        ending_before: Optional[str] = None,
        limit: Optional[int] = None,
        price: Optional[str] = None,
        starting_after: Optional[str] = None,
        status: Optional[Union[SubscriptionStatus, str]] = None,
        expand: Expand = None,
    ) -> SubscriptionList:
        params = self._params(
            collection_method=collection_method,
            created=created,
            customer=customer,
            ending_before=ending_before,
            limit=limit,
            price=price,
            starting_after=starting_after,
            status=status,
            expand=expand,
        )
        return await self._get(self._path(), SubscriptionList, params)

    async def search(
        self,
        query: str,
        *,
        limit: Optional[int] = None,
        page: Optional[str] = None,
        expand: Expand = None,
    ) -> SubscriptionSearchResult:
        params = self._params(query=query, limit=limit, page=page, expand=expand)
        return await self._get(self._path("search"), SubscriptionSearchResult, params)
