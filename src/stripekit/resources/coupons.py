"""
Coupon and Discount Resources
"""

from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from pydantic import Field

from ..schemas.bases import StripeResource
from ..schemas.expandable import Expandable
from .customers import Customer


class CouponDuration(str, Enum):
    FOREVER = "forever"
    ONCE = "once"
    REPEATING = "repeating"


class Coupon(StripeResource):
    """A reusable discount definition."""
    OBJECT_NAME = "coupon"

    amount_off: Optional[int] = None
    created: Optional[datetime] = None
    currency: Optional[str] = None
    duration: Optional[CouponDuration] = None
    duration_in_months: Optional[int] = None
    livemode: Optional[bool] = None
    max_redemptions: Optional[int] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    name: Optional[str] = None
    percent_off: Optional[float] = None
    redeem_by: Optional[datetime] = None
    times_redeemed: Optional[int] = None
    valid: Optional[bool] = None


class Discount(StripeResource):
    """A coupon applied to a customer, subscription, invoice or checkout session."""
    OBJECT_NAME = "discount"

    checkout_session: Optional[str] = None
    coupon: Optional[Coupon] = None
    customer: Expandable[Customer] = Field(default_factory=Expandable)
    end: Optional[datetime] = None
    invoice: Optional[str] = None
    invoice_item: Optional[str] = None
    promotion_code: Expandable = Field(default_factory=Expandable)
    start: Optional[datetime] = None
    subscription: Optional[str] = None
