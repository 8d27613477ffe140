"""
Payment Method Resources

Cards, bank accounts and the PaymentMethod object. A customer's
``default_source`` and a payout's ``destination`` may expand to either a
Card or a BankAccount, so both set ``OBJECT_NAME``.

``customer`` references point back to Customer, which is declared later;
the package ``__init__`` rebuilds these models once every resource exists.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from pydantic import Field

from ..schemas.bases import StripeModel, StripeResource
from ..schemas.expandable import Expandable
from .shared import BillingDetails


class BankAccountStatus(str, Enum):
    NEW = "new"
    VALIDATED = "validated"
    VERIFIED = "verified"
    VERIFICATION_FAILED = "verification_failed"
    ERRORED = "errored"


class Card(StripeResource):
    """A card attached to a customer or connected account."""
    OBJECT_NAME = "card"

    address_city: Optional[str] = None
    address_country: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    brand: Optional[str] = Field(None, description="Card brand, e.g. Visa or MasterCard")
    country: Optional[str] = None
    customer: Expandable["Customer"] = Field(default_factory=Expandable, description="Owning customer")
    cvc_check: Optional[str] = None
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    fingerprint: Optional[str] = None
    funding: Optional[str] = Field(None, description="credit, debit, prepaid, or unknown")
    last4: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    name: Optional[str] = None


class BankAccount(StripeResource):
    """A bank account attached to a customer or connected account."""
    OBJECT_NAME = "bank_account"

    account_holder_name: Optional[str] = None
    account_holder_type: Optional[str] = None
    bank_name: Optional[str] = None
    country: Optional[str] = None
    currency: Optional[str] = None
    customer: Expandable["Customer"] = Field(default_factory=Expandable, description="Owning customer")
    default_for_currency: Optional[bool] = None
    fingerprint: Optional[str] = None
    last4: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    routing_number: Optional[str] = None
    status: Optional[BankAccountStatus] = None


class PaymentMethodCard(StripeModel):
    brand: Optional[str] = None
    country: Optional[str] = None
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    fingerprint: Optional[str] = None
    funding: Optional[str] = None
    last4: Optional[str] = None


class PaymentMethod(StripeResource):
    """A payment instrument usable with PaymentIntents and subscriptions."""
    OBJECT_NAME = "payment_method"

    billing_details: Optional[BillingDetails] = None
    card: Optional[PaymentMethodCard] = None
    created: Optional[datetime] = None
    customer: Expandable["Customer"] = Field(default_factory=Expandable)
    livemode: Optional[bool] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    type: Optional[str] = Field(None, description="Payment method type, e.g. card or sepa_debit")
