"""
Base Schema Models

This module defines the base classes every resource model inherits from,
and the generic containers shared by all route groups.

Core Classes:
    - StripeModel: Immutable pydantic base model for decoded resources
    - StripeResource: StripeModel with the required ``id``/``object`` pair
    - StripeList: Page container returned by list operations
    - SearchResult: Page container returned by search operations
    - DeletedObject: Marker returned by delete operations

Dependencies:
    - pydantic: For data validation and serialization
"""

import json
from typing import Any, ClassVar, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


def _drop_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_none(v) for v in value]
    return value


class StripeModel(BaseModel):
    """
    Immutable pydantic base model for every decoded structure.

    Resources are value objects: they are built once from a response body
    and never mutated in place. Unknown fields sent by newer API versions
    are ignored rather than rejected.

    Example:
        class Shipping(StripeModel):
            name: Optional[str] = None

        shipping = Shipping.model_validate({"name": "Jenny Rosen"})
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert model to a JSON-compatible dictionary.

        Expandable references collapse to their bare ids; empty references
        and unset fields are left out.

        Returns:
            Dict[str, Any]: Dictionary with all fields set on the model.
        """
        return _drop_none(self.model_dump(mode="json", exclude_none=True))

    def to_json(self) -> str:
        """Compact JSON text of ``to_dict()`` with sorted keys."""
        return json.dumps(self.to_dict(), separators=(",", ":"), sort_keys=True, ensure_ascii=False)


class StripeResource(StripeModel):
    """
    Base class for top-level resources.

    Attributes:
        id: Server-assigned identifier (opaque, type-prefixed string)
        object: Discriminator naming the resource type (e.g. ``customer``)

    Subclasses set ``OBJECT_NAME`` to the discriminator they are decoded from.
    It is used to pick the right class when a reference may expand to more
    than one resource type.
    """

    OBJECT_NAME: ClassVar[Optional[str]] = None

    id: str = Field(..., description="Unique identifier for the object")
    object: str = Field(..., description="String representing the object's type")


ItemT = TypeVar("ItemT")


class StripeList(BaseModel, Generic[ItemT]):
    """
    Page of results returned by list operations.

    Page forward by resubmitting the same list operation with
    ``starting_after`` set to ``last_id``.

    Attributes:
        object: Always ``list``
        has_more: Whether more items exist after this page
        url: URL of this list endpoint
        data: Items on this page, in server order
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    object: str = Field(..., description="String representing the object's type; always 'list'")
    has_more: bool = Field(default=False, description="True when another page is available")
    url: Optional[str] = Field(default=None, description="The URL where this list can be accessed")
    data: List[ItemT] = Field(default_factory=list, description="Items on this page")
    total_count: Optional[int] = Field(default=None, description="Total count when requested via include[]")

    @property
    def last_id(self) -> Optional[str]:
        """Id of the last item on the page, for ``starting_after``."""
        if not self.data:
            return None
        return getattr(self.data[-1], "id", None)


class SearchResult(StripeList[ItemT], Generic[ItemT]):
    """
    Page of results returned by search operations.

    Attributes:
        next_page: Cursor for the next page; pass as ``page`` on the next call
        total_count: Total number of matches, when the server reports it
    """

    next_page: Optional[str] = Field(default=None, description="Cursor for the next page of results")


class DeletedObject(StripeModel):
    """Marker returned by delete operations."""

    id: str
    object: str
    deleted: bool = True
