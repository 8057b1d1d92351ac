from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import ValidationError

from ryandata_address_metadata.models import (
    PACKAGE_NAME,
    CommonMetadata,
    RyanDataAddressError,
    require_argument,
)
from ryandata_address_metadata.remote.config import ServiceClientConfig

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=CommonMetadata)


class ServiceClient:
    """Async REST client for the address metadata service.

    Fetches ``<base_url>/<identifier>`` and parses the JSON object into the
    requested metadata model. The service answers unknown identifiers with
    an empty object, which parses into a record without an ``id``.

    The underlying ``httpx.AsyncClient`` belongs to the event loop it was
    opened on; a query from another loop opens a fresh one.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        config: Optional[ServiceClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config or ServiceClientConfig()
        self.base_url = (base_url or self._config.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else self._config.timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def _http(self) -> httpx.AsyncClient:
        loop = asyncio.get_running_loop()
        if self._client is None or self._client.is_closed or self._loop is not loop:
            if self._client is not None and self._loop is not loop:
                logger.debug("Event loop changed, opening a new HTTP client")
            self._client = httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self._transport
            )
            self._loop = loop
        return self._client

    async def aclose(self) -> None:
        """Close the underlying HTTP client.

        A client left behind by an event loop that is no longer running can
        not be closed from this one and is dropped.
        """
        client, loop = self._client, self._loop
        self._client = None
        self._loop = None
        if client is not None and loop is asyncio.get_running_loop():
            await client.aclose()

    async def __aenter__(self) -> ServiceClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(self, identifier: str) -> dict[str, Any]:
        logger.debug("Fetching metadata record %s", identifier)
        try:
            response = await self._http().get(f"/{identifier}")
        except httpx.HTTPError as exc:
            raise RyanDataAddressError(
                "remote_request",
                str(exc),
                {"package": PACKAGE_NAME, "id": identifier},
            ) from exc

        if response.status_code >= 400:
            logger.warning(
                "Metadata service returned %s for %s", response.status_code, identifier
            )
            raise RyanDataAddressError(
                "remote_http_error",
                f"{response.status_code}: {response.text}",
                {"package": PACKAGE_NAME, "status": response.status_code, "id": identifier},
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise RyanDataAddressError(
                "remote_parse",
                f"Invalid JSON payload: {exc}",
                {"package": PACKAGE_NAME, "id": identifier},
            ) from exc

        if not isinstance(payload, dict):
            raise RyanDataAddressError(
                "remote_parse",
                "Metadata service returned non-object payload",
                {"package": PACKAGE_NAME, "id": identifier},
            )
        return payload

    async def query(self, identifier: str, model: type[M]) -> M:
        """Fetch and parse the record stored under identifier.

        Raises:
            RyanDataAddressError: If the service cannot be reached, answers
                with an error status, or returns an unusable payload.
        """
        require_argument(identifier, "identifier")
        payload = await self._request(identifier)
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise RyanDataAddressError.from_validation_error(exc, {"id": identifier}) from exc
