"""
Customer Resource
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from ..schemas.bases import SearchResult, StripeList, StripeModel, StripeResource
from ..schemas.expandable import DynamicExpandable, Expandable
from .payment_methods import BankAccount, Card, PaymentMethod
from .shared import Address, ShippingDetails


class CustomerTaxExempt(str, Enum):
    NONE = "none"
    EXEMPT = "exempt"
    REVERSE = "reverse"


class CustomerInvoiceCustomField(StripeModel):
    name: Optional[str] = None
    value: Optional[str] = None


class CustomerInvoiceSettings(StripeModel):
    """Default invoice settings for a customer."""
    custom_fields: Optional[List[CustomerInvoiceCustomField]] = None
    default_payment_method: Expandable[PaymentMethod] = Field(
        default_factory=Expandable,
        description="Default payment method for subscriptions and invoices",
    )
    footer: Optional[str] = None


class Customer(StripeResource):
    """
    A customer of the business.

    ``default_source`` may expand to a Card or a BankAccount; use
    ``customer.default_source.value_as(Card)`` to read the card form.
    """
    OBJECT_NAME = "customer"

    address: Optional[Address] = None
    balance: Optional[int] = Field(None, description="Balance in the smallest currency unit")
    created: Optional[datetime] = None
    currency: Optional[str] = None
    default_source: DynamicExpandable[Card, BankAccount] = Field(
        default_factory=DynamicExpandable,
        description="Default payment source",
    )
    delinquent: Optional[bool] = None
    description: Optional[str] = None
    email: Optional[str] = None
    invoice_prefix: Optional[str] = None
    invoice_settings: Optional[CustomerInvoiceSettings] = None
    livemode: Optional[bool] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    name: Optional[str] = None
    next_invoice_sequence: Optional[int] = None
    phone: Optional[str] = None
    preferred_locales: Optional[List[str]] = None
    shipping: Optional[ShippingDetails] = None
    tax_exempt: Optional[CustomerTaxExempt] = None
    test_clock: Expandable = Field(default_factory=Expandable, description="Test clock the customer belongs to")


CustomerList = StripeList[Customer]
CustomerSearchResult = SearchResult[Customer]
