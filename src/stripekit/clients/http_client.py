"""
API Request Dispatcher

Single point through which every route operation talks to the remote API.
Builds the absolute URL, merges authentication and version headers with the
route's own headers, performs exactly one request and decodes the JSON body
into the expected model.

No retries and no caching happen here: every call is one request/response
cycle, and transport failures from httpx reach the caller unchanged.
"""

import json
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ..config import StripeConfig
from ..engine.exceptions import APIError, DecodeError
from ..utils import logger

ResponseT = TypeVar("ResponseT")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class StripeAPIHandler:
    """
    Dispatcher shared by every route group of a client.

    The underlying ``httpx.AsyncClient`` may be supplied by the caller (for
    connection sharing, proxies, or ``httpx.MockTransport`` in tests). A client
    created here is owned by the handler and closed by ``aclose``; an injected
    one is left open.

    Usage:
        ```python
        async with StripeAPIHandler(StripeConfig(api_key="sk_test_...")) as handler:
            customer = await handler.send("GET", "customers/cus_123", Customer)
        ```
    """

    def __init__(
        self,
        config: StripeConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._config = config
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=config.timeout)

    @property
    def config(self) -> StripeConfig:
        return self._config

    def default_headers(self) -> Dict[str, str]:
        """Headers sent with every request before route headers are applied."""
        return {
            "Authorization": f"Bearer {self._config.api_key}",
            "Stripe-Version": self._config.api_version,
            "Content-Type": FORM_CONTENT_TYPE,
        }

    # =========================================================================
    # Dispatch
    # =========================================================================

    async def send(
        self,
        method: str,
        path: str,
        response_type: Type[ResponseT],
        query: str = "",
        body: str = "",
        headers: Optional[Mapping[str, str]] = None,
    ) -> ResponseT:
        """
        Perform one API request and decode the response.

        Args:
            method: HTTP method (GET, POST, DELETE)
            path: Resource path below the version prefix, e.g. ``customers/cus_123``
            response_type: Model (or generic page type) to decode the body into
            query: Already-encoded query string, without the leading ``?``
            body: Already-encoded form body
            headers: Route headers; they override the defaults on conflict

        Returns:
            The decoded ``response_type`` instance.

        Raises:
            APIError: For any non-2xx status (subclass chosen by the error type).
            DecodeError: If the body is not JSON or does not match ``response_type``.
            httpx.HTTPError: For transport failures, unchanged.
        """
        url = self._config.url_for(path)
        if query:
            url = f"{url}?{query}"

        merged = self.default_headers()
        if headers:
            merged.update(headers)

        logger.debug("%s %s", method.upper(), path)
        response = await self._http.request(
            method.upper(),
            url,
            headers=merged,
            content=body.encode("utf-8") if body else None,
        )

        if not response.is_success:
            error = APIError.from_response(response.status_code, response.text, response.headers)
            logger.warning(
                "%s %s failed with status %s: %s",
                method.upper(), path, response.status_code, error,
            )
            raise error

        return self._decode(response, response_type)

    def _decode(self, response: httpx.Response, response_type: Type[ResponseT]) -> ResponseT:
        text = response.text
        try:
            payload: Any = json.loads(text)
        except ValueError as e:
            raise DecodeError(f"Response body is not valid JSON: {e}", body=text) from e

        try:
            return TypeAdapter(response_type).validate_python(payload)
        except ValidationError as e:
            raise DecodeError(
                f"Response does not match {getattr(response_type, '__name__', response_type)}: {e}",
                body=text,
            ) from e

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this handler created it."""
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "StripeAPIHandler":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
