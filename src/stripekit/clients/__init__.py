"""
Client module for the payments API.

Provides the request dispatcher and the client bundling every route group.
"""

from .http_client import StripeAPIHandler
from .stripe_client import StripeClient

__all__ = ["StripeAPIHandler", "StripeClient"]
