"""
Charge and Refund Resources
"""

from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from pydantic import Field

from ..schemas.bases import SearchResult, StripeList, StripeModel, StripeResource
from ..schemas.expandable import Expandable
from .customers import Customer
from .shared import BillingDetails, ShippingDetails


class ChargeStatus(str, Enum):
    SUCCEEDED = "succeeded"
    PENDING = "pending"
    FAILED = "failed"


class RefundReason(str, Enum):
    DUPLICATE = "duplicate"
    FRAUDULENT = "fraudulent"
    REQUESTED_BY_CUSTOMER = "requested_by_customer"


class Refund(StripeResource):
    OBJECT_NAME = "refund"

    amount: Optional[int] = None
    charge: Optional[str] = None
    created: Optional[datetime] = None
    currency: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    reason: Optional[RefundReason] = None
    status: Optional[str] = None


class ChargeOutcome(StripeModel):
    """Result of the risk and network evaluation of a charge."""
    network_status: Optional[str] = None
    reason: Optional[str] = None
    risk_level: Optional[str] = None
    risk_score: Optional[int] = None
    seller_message: Optional[str] = None
    type: Optional[str] = None


class Charge(StripeResource):
    """
    A single attempt to move money into the account.

    ``invoice`` points at Invoice, declared in a later module and resolved
    when the resources package finishes importing.
    """
    OBJECT_NAME = "charge"

    amount: Optional[int] = Field(None, description="Amount in the smallest currency unit")
    amount_captured: Optional[int] = None
    amount_refunded: Optional[int] = None
    balance_transaction: Expandable = Field(default_factory=Expandable)
    billing_details: Optional[BillingDetails] = None
    captured: Optional[bool] = None
    created: Optional[datetime] = None
    currency: Optional[str] = None
    customer: Expandable[Customer] = Field(default_factory=Expandable)
    description: Optional[str] = None
    disputed: Optional[bool] = None
    failure_code: Optional[str] = None
    failure_message: Optional[str] = None
    invoice: Expandable["Invoice"] = Field(default_factory=Expandable)
    livemode: Optional[bool] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    outcome: Optional[ChargeOutcome] = None
    paid: Optional[bool] = None
    payment_intent: Expandable = Field(default_factory=Expandable)
    payment_method: Optional[str] = None
    receipt_email: Optional[str] = None
    receipt_number: Optional[str] = None
    receipt_url: Optional[str] = None
    refunded: Optional[bool] = None
    refunds: Optional[StripeList[Refund]] = None
    shipping: Optional[ShippingDetails] = None
    statement_descriptor: Optional[str] = None
    status: Optional[ChargeStatus] = None
    transfer_group: Optional[str] = None


ChargeList = StripeList[Charge]
ChargeSearchResult = SearchResult[Charge]
