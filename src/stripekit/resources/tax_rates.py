"""
Tax Rate Resource
"""

from datetime import datetime
from decimal import Decimal
from typing import Dict, Optional

from pydantic import Field

from ..schemas.bases import StripeList, StripeResource


class TaxRate(StripeResource):
    """A tax percentage applied to invoices, subscriptions and checkout sessions."""
    OBJECT_NAME = "tax_rate"

    active: Optional[bool] = None
    country: Optional[str] = None
    created: Optional[datetime] = None
    description: Optional[str] = None
    display_name: Optional[str] = None
    inclusive: Optional[bool] = None
    jurisdiction: Optional[str] = None
    livemode: Optional[bool] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    percentage: Optional[Decimal] = Field(None, description="Tax rate percentage out of 100")
    state: Optional[str] = None
    tax_type: Optional[str] = None


TaxRateList = StripeList[TaxRate]
