"""
Route Group Base

A route group binds the operations of one resource (customers, charges, ...)
to a shared dispatcher. Groups are immutable: header overrides produce a new
group instead of mutating the current one, so a group can be shared between
concurrent tasks.

Core Classes:
    - RouteGroup: Base class with header handling and GET/POST/DELETE helpers

Reads (GET, DELETE) put the parameter bag in the query string; writes (POST)
put it in the form body.
"""

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Dict, List, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import quote

from pydantic import BaseModel

from ..engine.encoders import ParamBag, encode

if TYPE_CHECKING:
    from ..clients.http_client import StripeAPIHandler

ResponseT = TypeVar("ResponseT")
GroupT = TypeVar("GroupT", bound="RouteGroup")

# Nested parameter accepted by operations: a plain mapping or a resource sub-model
Nested = Union[Mapping[str, Any], BaseModel]
Expand = Optional[List[str]]


class RouteGroup:
    """
    Base class of every route group.

    Attributes:
        RESOURCE_PATH: Collection path below the version prefix, e.g. ``customers``
    """

    RESOURCE_PATH: ClassVar[str] = ""

    def __init__(self, handler: "StripeAPIHandler", headers: Optional[Mapping[str, str]] = None):
        self._handler = handler
        self._headers: Mapping[str, str] = MappingProxyType(dict(headers or {}))

    @property
    def headers(self) -> Mapping[str, str]:
        """Headers this group adds to every request (read-only)."""
        return self._headers

    def with_headers(self: GroupT, headers: Mapping[str, str]) -> GroupT:
        """Copy of this group with ``headers`` merged over the current ones."""
        return type(self)(self._handler, {**self._headers, **headers})

    def for_account(self: GroupT, account_id: str) -> GroupT:
        """Copy of this group acting on behalf of a connected account."""
        return self.with_headers({"Stripe-Account": account_id})

    def with_idempotency_key(self: GroupT, key: str) -> GroupT:
        """Copy of this group sending ``Idempotency-Key`` on every request."""
        return self.with_headers({"Idempotency-Key": key})

    def _path(self, *segments: str) -> str:
        parts = [self.RESOURCE_PATH]
        parts.extend(quote(segment, safe="") for segment in segments)
        return "/".join(parts)

    @staticmethod
    def _params(**values: Any) -> Dict[str, Any]:
        """Parameter bag from keyword arguments; ``None`` entries are left out."""
        return {key: value for key, value in values.items() if value is not None}

    async def _get(
        self,
        path: str,
        response_type: Type[ResponseT],
        params: Optional[ParamBag] = None,
    ) -> ResponseT:
        return await self._handler.send(
            "GET", path, response_type, query=encode(params or {}), headers=self._headers
        )

    async def _post(
        self,
        path: str,
        response_type: Type[ResponseT],
        params: Optional[ParamBag] = None,
    ) -> ResponseT:
        return await self._handler.send(
            "POST", path, response_type, body=encode(params or {}), headers=self._headers
        )

    async def _delete(
        self,
        path: str,
        response_type: Type[ResponseT],
        params: Optional[ParamBag] = None,
    ) -> ResponseT:
        return await self._handler.send(
            "DELETE", path, response_type, query=encode(params or {}), headers=self._headers
        )
