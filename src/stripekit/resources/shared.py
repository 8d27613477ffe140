"""
Shared Sub-Records

Small nested structures reused by several resources.
"""

from typing import Optional

from pydantic import Field

from ..schemas.bases import StripeModel


class Address(StripeModel):
    """Postal address."""
    city: Optional[str] = Field(None, description="City, district, suburb, town, or village")
    country: Optional[str] = Field(None, description="Two-letter country code (ISO 3166-1 alpha-2)")
    line1: Optional[str] = Field(None, description="Address line 1 (e.g., street, PO Box, or company name)")
    line2: Optional[str] = Field(None, description="Address line 2 (e.g., apartment, suite, unit, or building)")
    postal_code: Optional[str] = Field(None, description="ZIP or postal code")
    state: Optional[str] = Field(None, description="State, county, province, or region")


class ShippingDetails(StripeModel):
    """Shipping information attached to a customer or charge."""
    address: Optional[Address] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    carrier: Optional[str] = None
    tracking_number: Optional[str] = None


class BillingDetails(StripeModel):
    """Billing information associated with a payment method or charge."""
    address: Optional[Address] = None
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
