"""
Price Resource

Only the fields needed by subscription items and checkout line items.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from pydantic import Field

from ..schemas.bases import StripeModel, StripeResource
from ..schemas.expandable import Expandable


class PriceType(str, Enum):
    ONE_TIME = "one_time"
    RECURRING = "recurring"


class PriceRecurring(StripeModel):
    interval: Optional[str] = Field(None, description="day, week, month or year")
    interval_count: Optional[int] = None
    usage_type: Optional[str] = None


class Price(StripeResource):
    OBJECT_NAME = "price"

    active: Optional[bool] = None
    created: Optional[datetime] = None
    currency: Optional[str] = None
    livemode: Optional[bool] = None
    lookup_key: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    nickname: Optional[str] = None
    product: Expandable = Field(default_factory=Expandable)
    recurring: Optional[PriceRecurring] = None
    type: Optional[PriceType] = None
    unit_amount: Optional[int] = None
