"""
Subscription Resource
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from ..schemas.bases import SearchResult, StripeList, StripeResource
from ..schemas.expandable import Expandable, ExpandableCollection
from .coupons import Discount
from .customers import Customer
from .invoices import CollectionMethod, Invoice
from .payment_methods import PaymentMethod
from .prices import Price
from .tax_rates import TaxRate


class SubscriptionStatus(str, Enum):
    INCOMPLETE = "incomplete"
    INCOMPLETE_EXPIRED = "incomplete_expired"
    TRIALING = "trialing"
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"
    UNPAID = "unpaid"
    PAUSED = "paused"


class SubscriptionItem(StripeResource):
    OBJECT_NAME = "subscription_item"

    created: Optional[datetime] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    price: Optional[Price] = None
    quantity: Optional[int] = None
    subscription: Optional[str] = None
    tax_rates: List[TaxRate] = Field(default_factory=list)


class Subscription(StripeResource):
    """Recurring charge of a customer on one or more prices."""
    OBJECT_NAME = "subscription"

    billing_cycle_anchor: Optional[datetime] = None
    cancel_at: Optional[datetime] = None
    cancel_at_period_end: Optional[bool] = None
    canceled_at: Optional[datetime] = None
    collection_method: Optional[CollectionMethod] = None
    created: Optional[datetime] = None
    currency: Optional[str] = None
    current_period_end: Optional[datetime] = None
    current_period_start: Optional[datetime] = None
    customer: Expandable[Customer] = Field(default_factory=Expandable)
    days_until_due: Optional[int] = None
    default_payment_method: Expandable[PaymentMethod] = Field(default_factory=Expandable)
    default_tax_rates: List[TaxRate] = Field(default_factory=list)
    description: Optional[str] = None
    discounts: ExpandableCollection[Discount] = Field(default_factory=ExpandableCollection)
    ended_at: Optional[datetime] = None
    items: Optional[StripeList[SubscriptionItem]] = None
    latest_invoice: Expandable[Invoice] = Field(default_factory=Expandable)
    livemode: Optional[bool] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    start_date: Optional[datetime] = None
    status: Optional[SubscriptionStatus] = None
    trial_end: Optional[datetime] = None
    trial_start: Optional[datetime] = None


SubscriptionList = StripeList[Subscription]
SubscriptionSearchResult = SearchResult[Subscription]
