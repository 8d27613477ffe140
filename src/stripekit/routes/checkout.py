"""
Checkout Session Routes
"""

from typing import Dict, List, Optional, Union

from ..resources.checkout import Session, SessionLineItemList, SessionList, SessionMode
from .bases import Expand, Nested, RouteGroup


class SessionRoutes(RouteGroup):
    """Hosted payment page sessions."""

    RESOURCE_PATH = "checkout/sessions"

    async def create(
        self,
        success_url: str,
        *,
        allow_promotion_codes: Optional[bool] = None,
        cancel_url: Optional[str] = None,
        client_reference_id: Optional[str] = None,
        customer: Optional[str] = None,
        customer_email: Optional[str] = None,
        discounts: Optional[List[Nested]] = None,
        expires_at: Optional[int] = None,
        line_items: Optional[List[Nested]] = None,
        locale: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        mode: Optional[Union[SessionMode, str]] = None,
        payment_intent_data: Optional[Nested] = None,
        payment_method_types: Optional[List[str]] = None,
        subscription_data: Optional[Nested] = None,
        expand: Expand = None,
    ) -> Session:
        """
        Create a checkout session.

        Args:
            success_url: Where the customer is sent after a successful payment
            line_items: Items being purchased, e.g. ``[{"price": "price_123", "quantity": 1}]``
            discounts: At most one of ``{"coupon": ...}`` or ``{"promotion_code": ...}``
            mode: ``payment``, ``setup`` or ``subscription``
        """
        params = self._params(
            success_url=success_url,
            allow_promotion_codes=allow_promotion_codes,
            cancel_url=cancel_url,
            client_reference_id=client_reference_id,
            customer=customer,
            customer_email=customer_email,
            discounts=discounts,
            expires_at=expires_at,
            line_items=line_items,
            locale=locale,
            metadata=metadata,
            mode=mode,
            payment_intent_data=payment_intent_data,
            payment_method_types=payment_method_types,
            subscription_data=subscription_data,
            expand=expand,
        )
        return await self._post(self._path(), Session, params)

    async def retrieve(self, session: str, *, expand: Expand = None) -> Session:
        return await self._get(self._path(session), Session, self._params(expand=expand))

    async def expire(self, session: str, *, expand: Expand = None) -> Session:
        """Expire an open session so it can no longer be completed."""
        return await self._post(self._path(session, "expire"), Session, self._params(expand=expand))

    async def list(
        self,
        *,
        customer: Optional[str] = None,
        ending_before: Optional[str] = None,
        limit: Optional[int] = None,
        payment_intent: Optional[str] = None,
        starting_after: Optional[str] = None,
        subscription: Optional[str] = None,
        expand: Expand = None,
    ) -> SessionList:
        params = self._params(
            customer=customer,
            ending_before=ending_before,
            limit=limit,
            payment_intent=payment_intent,
            starting_after=starting_after,
            subscription=subscription,
            expand=expand,
        )
        return await self._get(self._path(), SessionList, params)

    async def list_line_items(
        self,
        session: str,
        *,
        ending_before: Optional[str] = None,
        limit: Optional[int] = None,
        starting_after: Optional[str] = None,
        expand: Expand = None,
    ) -> SessionLineItemList:
        params = self._params(
            ending_before=ending_before,
            limit=limit,
            starting_after=starting_after,
            expand=expand,
        )
        return await self._get(self._path(session, "line_items"), SessionLineItemList, params)
