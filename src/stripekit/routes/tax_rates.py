"""
Tax Rate Routes
"""

from decimal import Decimal
from typing import Dict, Optional, Union

from ..resources.tax_rates import TaxRate, TaxRateList
from .bases import Expand, Nested, RouteGroup


class TaxRateRoutes(RouteGroup):
    RESOURCE_PATH = "tax_rates"

    async def create(
        self,
        display_name: str,
        inclusive: bool,
        percentage: Union[Decimal, float],
        *,
        active: Optional[bool] = None,
        country: Optional[str] = None,
        description: Optional[str] = None,
        jurisdiction: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        state: Optional[str] = None,
        tax_type: Optional[str] = None,
        expand: Expand = None,
    ) -> TaxRate:
        """
        Create a tax rate. Percentage and inclusivity cannot change afterwards.

        Args:
            display_name: Name shown on invoices and receipts, e.g. ``VAT``
            inclusive: Whether the rate is included in the price
            percentage: Rate out of 100
        """
        params = self._params(
            display_name=display_name,
            inclusive=inclusive,
            percentage=percentage,
            active=active,
            country=country,
            description=description,
            jurisdiction=jurisdiction,
            metadata=metadata,
            state=state,
            tax_type=tax_type,
            expand=expand,
        )
        return await self._post(self._path(), TaxRate, params)

    async def retrieve(self, tax_rate: str, *, expand: Expand = None) -> TaxRate:
        return await self._get(self._path(tax_rate), TaxRate, self._params(expand=expand))

    async def update(
        self,
        tax_rate: str,
        *,
        active: Optional[bool] = None,
        country: Optional[str] = None,
        description: Optional[str] = None,
        display_name: Optional[str] = None,
        jurisdiction: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        state: Optional[str] = None,
        tax_type: Optional[str] = None,
        expand: Expand = None,
    ) -> TaxRate:
        params = self._params(
            active=active,
            country=country,
            description=description,
            display_name=display_name,
            jurisdiction=jurisdiction,
            metadata=metadata,
            state=state,
            tax_type=tax_type,
            expand=expand,
        )
        return await self._post(self._path(tax_rate), TaxRate, params)

    async def list(
        self,
        *,
        active: Optional[bool] = None,
        created: Optional[Union[int, Nested]] = None,
        ending_before: Optional[str] = None,
        inclusive: Optional[bool] = None,
        limit: Optional[int] = None,
        starting_after: Optional[str] = None,
        expand: Expand = None,
    ) -> TaxRateList:
        params = self._params(
            active=active,
            created=created,
            ending_before=ending_before,
            inclusive=inclusive,
            limit=limit,
            starting_after=starting_after,
            expand=expand,
        )
        return await self._get(self._path(), TaxRateList, params)
