"""
Stripe API Client

Entry point that bundles every route group around one shared dispatcher.
"""

from typing import Mapping, Optional, Union

import httpx

from ..config import StripeConfig
from ..routes import (
    ChargeRoutes,
    CustomerRoutes,
    InvoiceRoutes,
    PayoutRoutes,
    SessionRoutes,
    SubscriptionRoutes,
    TaxRateRoutes,
)
from .http_client import StripeAPIHandler


class StripeClient:
    """
    API client exposing one attribute per resource.

    Attributes:
        customers: CustomerRoutes
        charges: ChargeRoutes
        invoices: InvoiceRoutes
        subscriptions: SubscriptionRoutes
        checkout_sessions: SessionRoutes
        tax_rates: TaxRateRoutes
        payouts: PayoutRoutes

    Usage:
        ```python
        async with StripeClient("sk_test_...") as stripe:
            customer = await stripe.customers.create(email="jenny@example.com")
            charge = await stripe.charges.create(500, "usd", customer=customer.id)
        ```
    """

    def __init__(
        self,
        config: Union[StripeConfig, str],
        http_client: Optional[httpx.AsyncClient] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
        _handler: Optional[StripeAPIHandler] = None,
    ):
        """
        Args:
            config: StripeConfig, or a bare secret API key using default settings
            http_client: Optional httpx.AsyncClient to send requests through;
                left open when the client is closed
            headers: Extra headers sent with every request of every group
        """
        if isinstance(config, str):
            config = StripeConfig(api_key=config)
        self._handler = _handler or StripeAPIHandler(config, http_client)
        self._headers = dict(headers or {})

        self.customers = CustomerRoutes(self._handler, self._headers)
        self.charges = ChargeRoutes(self._handler, self._headers)
        self.invoices = InvoiceRoutes(self._handler, self._headers)
        self.subscriptions = SubscriptionRoutes(self._handler, self._headers)
        self.checkout_sessions = SessionRoutes(self._handler, self._headers)
        self.tax_rates = TaxRateRoutes(self._handler, self._headers)
        self.payouts = PayoutRoutes(self._handler, self._headers)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **kwargs) -> "StripeClient":
        """Client configured from ``STRIPE_*`` environment variables."""
        return cls(StripeConfig.from_env(env_file), **kwargs)

    @property
    def config(self) -> StripeConfig:
        return self._handler.config

    def with_headers(self, headers: Mapping[str, str]) -> "StripeClient":
        """
        Client sharing this one's connection whose groups all carry ``headers``.

        The current client is not modified.
        """
        return StripeClient(
            self._handler.config,
            headers={**self._headers, **headers},
            _handler=self._handler,
        )

    def for_account(self, account_id: str) -> "StripeClient":
        """Client acting on behalf of a connected account."""
        return self.with_headers({"Stripe-Account": account_id})

    async def aclose(self) -> None:
        await self._handler.aclose()

    async def __aenter__(self) -> "StripeClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
