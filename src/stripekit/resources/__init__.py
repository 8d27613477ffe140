"""
Resource Models

Decoded API objects. Relationships that point at a resource declared in a
later module are written as string forward references and resolved here,
once every model exists.
"""

from .shared import Address, BillingDetails, ShippingDetails
from .payment_methods import BankAccount, BankAccountStatus, Card, PaymentMethod, PaymentMethodCard
from .customers import (
    Customer,
    CustomerInvoiceCustomField,
    CustomerInvoiceSettings,
    CustomerList,
    CustomerSearchResult,
    CustomerTaxExempt,
)
from .coupons import Coupon, CouponDuration, Discount
from .tax_rates import TaxRate, TaxRateList
from .prices import Price, PriceRecurring, PriceType
from .charges import (
    Charge,
    ChargeList,
    ChargeOutcome,
    ChargeSearchResult,
    ChargeStatus,
    Refund,
    RefundReason,
)
from .invoices import (
    CollectionMethod,
    Invoice,
    InvoiceLineItem,
    InvoiceLineItemPeriod,
    InvoiceList,
    InvoiceSearchResult,
    InvoiceStatus,
    InvoiceStatusTransitions,
)
from .subscriptions import (
    Subscription,
    SubscriptionItem,
    SubscriptionList,
    SubscriptionSearchResult,
    SubscriptionStatus,
)
from .checkout import (
    Session,
    SessionDiscount,
    SessionLineItem,
    SessionLineItemList,
    SessionList,
    SessionMode,
    SessionPaymentStatus,
    SessionStatus,
    SessionTotalDetails,
)
from .payouts import Payout, PayoutList, PayoutMethod, PayoutStatus, PayoutType
from .events import Event, EventData, EventRequest

_FORWARD_REFS = {
    "Customer": Customer,
    "Invoice": Invoice,
    "Subscription": Subscription,
    "Payout": Payout,
}

for _model in (Card, BankAccount, PaymentMethod, Charge, Invoice, Payout):
    _model.model_rebuild(_types_namespace=_FORWARD_REFS)

# Generic pages built before the rebuild captured the incomplete item models
for _page in (
    CustomerList,
    CustomerSearchResult,
    ChargeList,
    ChargeSearchResult,
    InvoiceList,
    InvoiceSearchResult,
    SubscriptionList,
    SubscriptionSearchResult,
    SessionList,
    SessionLineItemList,
    PayoutList,
    TaxRateList,
):
    _page.model_rebuild(force=True)

__all__ = [
    "Address",
    "BillingDetails",
    "ShippingDetails",
    "BankAccount",
    "BankAccountStatus",
    "Card",
    "PaymentMethod",
    "PaymentMethodCard",
    "Customer",
    "CustomerInvoiceCustomField",
    "CustomerInvoiceSettings",
    "CustomerList",
    "CustomerSearchResult",
    "CustomerTaxExempt",
    "Coupon",
    "CouponDuration",
    "Discount",
    "TaxRate",
    "TaxRateList",
    "Price",
    "PriceRecurring",
    "PriceType",
    "Charge",
    "ChargeList",
    "ChargeOutcome",
    "ChargeSearchResult",
    "ChargeStatus",
    "Refund",
    "RefundReason",
    "CollectionMethod",
    "Invoice",
    "InvoiceLineItem",
    "InvoiceLineItemPeriod",
    "InvoiceList",
    "InvoiceSearchResult",
    "InvoiceStatus",
    "InvoiceStatusTransitions",
    "Subscription",
    "SubscriptionItem",
    "SubscriptionList",
    "SubscriptionSearchResult",
    "SubscriptionStatus",
    "Session",
    "SessionDiscount",
    "SessionLineItem",
    "SessionLineItemList",
    "SessionList",
    "SessionMode",
    "SessionPaymentStatus",
    "SessionStatus",
    "SessionTotalDetails",
    "Payout",
    "PayoutList",
    "PayoutMethod",
    "PayoutStatus",
    "PayoutType",
    "Event",
    "EventData",
    "EventRequest",
]
