"""
Checkout Session Resources
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from ..schemas.bases import StripeList, StripeModel, StripeResource
from ..schemas.expandable import Expandable
from .coupons import Coupon
from .customers import Customer
from .invoices import Invoice
from .prices import Price
from .subscriptions import Subscription


class SessionMode(str, Enum):
    PAYMENT = "payment"
    SETUP = "setup"
    SUBSCRIPTION = "subscription"


class SessionStatus(str, Enum):
    OPEN = "open"
    COMPLETE = "complete"
    EXPIRED = "expired"


class SessionPaymentStatus(str, Enum):
    PAID = "paid"
    UNPAID = "unpaid"
    NO_PAYMENT_REQUIRED = "no_payment_required"


class SessionTotalDetails(StripeModel):
    amount_discount: Optional[int] = None
    amount_shipping: Optional[int] = None
    amount_tax: Optional[int] = None


class SessionLineItem(StripeResource):
    OBJECT_NAME = "item"

    amount_discount: Optional[int] = None
    amount_subtotal: Optional[int] = None
    amount_tax: Optional[int] = None
    amount_total: Optional[int] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Price] = None
    quantity: Optional[int] = None


class SessionDiscount(StripeModel):
    coupon: Expandable[Coupon] = Field(default_factory=Expandable)
    promotion_code: Expandable = Field(default_factory=Expandable)


class Session(StripeResource):
    """A hosted payment page session."""
    OBJECT_NAME = "checkout.session"

    amount_subtotal: Optional[int] = None
    amount_total: Optional[int] = None
    cancel_url: Optional[str] = None
    client_reference_id: Optional[str] = None
    created: Optional[datetime] = None
    currency: Optional[str] = None
    customer: Expandable[Customer] = Field(default_factory=Expandable)
    customer_email: Optional[str] = None
    discounts: List[SessionDiscount] = Field(default_factory=list)
    expires_at: Optional[datetime] = None
    invoice: Expandable[Invoice] = Field(default_factory=Expandable)
    line_items: Optional[StripeList[SessionLineItem]] = None
    livemode: Optional[bool] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    mode: Optional[SessionMode] = None
    payment_intent: Expandable = Field(default_factory=Expandable)
    payment_method_types: List[str] = Field(default_factory=list)
    payment_status: Optional[SessionPaymentStatus] = None
    setup_intent: Expandable = Field(default_factory=Expandable)
    status: Optional[SessionStatus] = None
    subscription: Expandable[Subscription] = Field(default_factory=Expandable)
    success_url: Optional[str] = None
    total_details: Optional[SessionTotalDetails] = None
    url: Optional[str] = Field(None, description="URL of the hosted page; present while the session is open")


SessionList = StripeList[Session]
SessionLineItemList = StripeList[SessionLineItem]
