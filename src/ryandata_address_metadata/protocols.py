from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ryandata_address_metadata.models import CommonMetadata

M = TypeVar("M", bound="CommonMetadata")


@runtime_checkable
class MetadataClientProtocol(Protocol):
    """Protocol for clients fetching metadata records by identifier.

    Implementations include the HTTP client and the decorators wrapping it
    (nullifying, caching). Errors raised by the transport propagate to the
    caller unchanged. Decorators forward aclose to the client they wrap.
    """

    async def query(self, identifier: str, model: type[M]) -> M | None:
        """Fetch the record stored under an identifier.

        Args:
            identifier: Record identifier such as 'data/US' or 'data/CA--fr'.
            model: Metadata model to parse the record into.

        Returns:
            The parsed record, or None when the client reports no record.
        """
        ...

    async def aclose(self) -> None:
        """Release the resources held by the client (connections, caches)."""
        ...
