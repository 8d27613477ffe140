"""
Route groups, one per resource.
"""

from .bases import RouteGroup
from .charges import ChargeRoutes
from .checkout import SessionRoutes
from .customers import CustomerRoutes
from .invoices import InvoiceRoutes
from .payouts import PayoutRoutes
from .subscriptions import SubscriptionRoutes
from .tax_rates import TaxRateRoutes

__all__ = [
    "RouteGroup",
    "ChargeRoutes",
    "SessionRoutes",
    "CustomerRoutes",
    "InvoiceRoutes",
    "PayoutRoutes",
    "SubscriptionRoutes",
    "TaxRateRoutes",
]
