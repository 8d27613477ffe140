"""
Invoice Resource
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from ..schemas.bases import SearchResult, StripeList, StripeModel, StripeResource
from ..schemas.expandable import Expandable, ExpandableCollection
from .charges import Charge
from .coupons import Discount
from .customers import Customer
from .payment_methods import PaymentMethod
from .prices import Price
from .tax_rates import TaxRate


class InvoiceStatus(str, Enum):
    DRAFT = "draft"
    OPEN = "open"
    PAID = "paid"
    UNCOLLECTIBLE = "uncollectible"
    VOID = "void"


class CollectionMethod(str, Enum):
    CHARGE_AUTOMATICALLY = "charge_automatically"
    SEND_INVOICE = "send_invoice"


class InvoiceLineItemPeriod(StripeModel):
    start: Optional[datetime] = None
    end: Optional[datetime] = None


class InvoiceLineItem(StripeResource):
    OBJECT_NAME = "line_item"

    amount: Optional[int] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    discountable: Optional[bool] = None
    invoice_item: Optional[str] = None
    livemode: Optional[bool] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    period: Optional[InvoiceLineItemPeriod] = None
    price: Optional[Price] = None
    proration: Optional[bool] = None
    quantity: Optional[int] = None
    subscription: Optional[str] = None
    type: Optional[str] = Field(None, description="invoiceitem or subscription")


class InvoiceStatusTransitions(StripeModel):
    finalized_at: Optional[datetime] = None
    marked_uncollectible_at: Optional[datetime] = None
    paid_at: Optional[datetime] = None
    voided_at: Optional[datetime] = None


class Invoice(StripeResource):
    """
    A statement of amounts owed by a customer.

    Draft invoices can be edited; finalizing moves them to ``open`` and
    from there they are paid, voided or marked uncollectible.
    """
    OBJECT_NAME = "invoice"

    account_country: Optional[str] = None
    amount_due: Optional[int] = None
    amount_paid: Optional[int] = None
    amount_remaining: Optional[int] = None
    attempt_count: Optional[int] = None
    attempted: Optional[bool] = None
    auto_advance: Optional[bool] = None
    billing_reason: Optional[str] = None
    charge: Expandable[Charge] = Field(default_factory=Expandable)
    collection_method: Optional[CollectionMethod] = None
    created: Optional[datetime] = None
    currency: Optional[str] = None
    customer: Expandable[Customer] = Field(default_factory=Expandable)
    customer_email: Optional[str] = None
    customer_name: Optional[str] = None
    days_until_due: Optional[int] = None
    default_payment_method: Expandable[PaymentMethod] = Field(default_factory=Expandable)
    default_tax_rates: List[TaxRate] = Field(default_factory=list)
    description: Optional[str] = None
    discounts: ExpandableCollection[Discount] = Field(default_factory=ExpandableCollection)
    due_date: Optional[datetime] = None
    ending_balance: Optional[int] = None
    footer: Optional[str] = None
    hosted_invoice_url: Optional[str] = None
    invoice_pdf: Optional[str] = None
    lines: Optional[StripeList[InvoiceLineItem]] = None
    livemode: Optional[bool] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    number: Optional[str] = None
    paid: Optional[bool] = None
    period_end: Optional[datetime] = None
    period_start: Optional[datetime] = None
    status: Optional[InvoiceStatus] = None
    status_transitions: Optional[InvoiceStatusTransitions] = None
    subscription: Expandable["Subscription"] = Field(default_factory=Expandable)
    subtotal: Optional[int] = None
    tax: Optional[int] = None
    total: Optional[int] = None


InvoiceList = StripeList[Invoice]
InvoiceSearchResult = SearchResult[Invoice]
