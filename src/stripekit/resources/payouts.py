"""
Payout Resource
"""

from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from pydantic import Field

from ..schemas.bases import StripeList, StripeResource
from ..schemas.expandable import DynamicExpandable, Expandable
from .payment_methods import BankAccount, Card


class PayoutStatus(str, Enum):
    PAID = "paid"
    PENDING = "pending"
    IN_TRANSIT = "in_transit"
    CANCELED = "canceled"
    FAILED = "failed"


class PayoutMethod(str, Enum):
    STANDARD = "standard"
    INSTANT = "instant"


class PayoutType(str, Enum):
    BANK_ACCOUNT = "bank_account"
    CARD = "card"


class Payout(StripeResource):
    """Transfer of funds from the balance to a bank account or debit card."""
    OBJECT_NAME = "payout"

    amount: Optional[int] = Field(None, description="Amount in the smallest currency unit")
    arrival_date: Optional[datetime] = None
    automatic: Optional[bool] = None
    balance_transaction: Expandable = Field(default_factory=Expandable)
    created: Optional[datetime] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    destination: DynamicExpandable[BankAccount, Card] = Field(default_factory=DynamicExpandable)
    failure_balance_transaction: Expandable = Field(default_factory=Expandable)
    failure_code: Optional[str] = None
    failure_message: Optional[str] = None
    livemode: Optional[bool] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    method: Optional[PayoutMethod] = None
    original_payout: Expandable["Payout"] = Field(default_factory=Expandable)
    reversed_by: Expandable["Payout"] = Field(default_factory=Expandable)
    statement_descriptor: Optional[str] = None
    status: Optional[PayoutStatus] = None
    type: Optional[PayoutType] = None


PayoutList = StripeList[Payout]
