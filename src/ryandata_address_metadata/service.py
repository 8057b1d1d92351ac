from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional, Union

from pydantic import ValidationError

from ryandata_address_metadata.core.identifiers import (
    DEFAULT_COUNTRY_IDENTIFIER,
    GLOBAL_IDENTIFIER,
    build_identifier,
)
from ryandata_address_metadata.core.keys import (
    select_language,
    try_get_child_key,
    try_get_country_key,
)
from ryandata_address_metadata.models import (
    AddressData,
    CountryMetadata,
    GlobalMetadata,
    LocalityMetadata,
    MetadataChain,
    ProvinceMetadata,
    RyanDataValidationError,
    SublocalityMetadata,
    ValidationFailure,
    ValidationReport,
    invalid_argument,
    require_argument,
)
from ryandata_address_metadata.remote import NullifyingClientDecorator, create_client
from ryandata_address_metadata.validation.validators import create_default_validators

if TYPE_CHECKING:
    from ryandata_address_metadata.core.validation import BaseValidator
    from ryandata_address_metadata.protocols import MetadataClientProtocol

logger = logging.getLogger(__name__)

AddressInput = Union[AddressData, Mapping[str, Any]]


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def _coerce_address(address: AddressInput | None) -> AddressData:
    require_argument(address, "address")
    if isinstance(address, AddressData):
        return address
    try:
        return AddressData.model_validate(address)
    except ValidationError as exc:
        raise RyanDataValidationError(exc) from exc


class AddressService:
    """High-level facade for metadata lookups and address validation.

    Walks the region hierarchy (country, province, locality, sublocality)
    for an address, fetching one record per level, and runs the validator
    pipeline against the resolved chain.

    Example:
        >>> service = AddressService()
        >>> failures = await service.validate({"country": "US", "province": "CA"})
        >>> report = await service.validate_report({"country": "US", "province": "CA"})
        >>> report.chain.province.key  # "CA"

        # Custom client and validators
        >>> service = AddressService(
        ...     client=create_client(cache=False),
        ...     validator=create_default_validators(["required"]),
        ... )
    """

    def __init__(
        self,
        client: MetadataClientProtocol | None = None,
        validator: BaseValidator | None = None,
    ) -> None:
        """Initialize the address service.

        Args:
            client: Metadata client. Defaults to the configured HTTP client.
                Clients are wrapped so that records without an identifier
                are reported as None.
            validator: Validator to run. Defaults to the default pipeline.
        """
        if client is None:
            client = create_client()
        if not isinstance(client, NullifyingClientDecorator):
            client = NullifyingClientDecorator(client)
        self._client = client
        self._validator = validator if validator is not None else create_default_validators()

    @property
    def client(self) -> NullifyingClientDecorator:
        """Get the metadata client."""
        return self._client

    @property
    def validator(self) -> BaseValidator:
        """Get the validator instance."""
        return self._validator

    async def aclose(self) -> None:
        """Close the metadata client and the connections it holds."""
        await self._client.aclose()

    async def __aenter__(self) -> AddressService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def get_global(self) -> GlobalMetadata | None:
        """Return the global metadata record, or None when unavailable."""
        return await self._client.query(GLOBAL_IDENTIFIER, GlobalMetadata)

    async def get_country(
        self, country_key: str, language: Optional[str] = None
    ) -> CountryMetadata | None:
        """Return country metadata merged with the rest-of-world defaults.

        Args:
            country_key: Key of the country (e.g. 'US').
            language: Language of the record; None for the default language.

        Returns:
            The country record with absent inheritable fields taken from the
            defaults record, or None when the country has no record.

        Raises:
            RyanDataAddressError: If country_key is None.
        """
        require_argument(country_key, "country_key")

        identifier = build_identifier(language, country_key)
        defaults = await self._client.query(DEFAULT_COUNTRY_IDENTIFIER, CountryMetadata)
        result = await self._client.query(identifier, CountryMetadata)

        if result is None:
            return None
        if defaults is None:
            logger.debug("No defaults record available to merge into %s", identifier)
        return result.with_defaults(defaults)

    async def get_province(
        self, country_key: str, province_key: str, language: Optional[str] = None
    ) -> ProvinceMetadata | None:
        """Return province metadata, or None when it has no record.

        Raises:
            RyanDataAddressError: If any key is None.
        """
        require_argument(country_key, "country_key")
        require_argument(province_key, "province_key")

        identifier = build_identifier(language, country_key, province_key)
        return await self._client.query(identifier, ProvinceMetadata)

    async def get_locality(
        self,
        country_key: str,
        province_key: str,
        locality_key: str,
        language: Optional[str] = None,
    ) -> LocalityMetadata | None:
        """Return locality metadata, or None when it has no record.

        Raises:
            RyanDataAddressError: If any key is None.
        """
        require_argument(country_key, "country_key")
        require_argument(province_key, "province_key")
        require_argument(locality_key, "locality_key")

        identifier = build_identifier(language, country_key, province_key, locality_key)
        return await self._client.query(identifier, LocalityMetadata)

    async def get_sublocality(
        self,
        country_key: str,
        province_key: str,
        locality_key: str,
        sublocality_key: str,
        language: Optional[str] = None,
    ) -> SublocalityMetadata | None:
        """Return sublocality metadata, or None when it has no record.

        Raises:
            RyanDataAddressError: If any key is None.
        """
        require_argument(country_key, "country_key")
        require_argument(province_key, "province_key")
        require_argument(locality_key, "locality_key")
        require_argument(sublocality_key, "sublocality_key")

        identifier = build_identifier(
            language, country_key, province_key, locality_key, sublocality_key
        )
        return await self._client.query(identifier, SublocalityMetadata)

    async def resolve(self, address: AddressInput) -> MetadataChain:
        """Resolve the metadata chain for an address.

        Each level is looked up only when the level above resolved and the
        address value matches one of its child regions.

        Raises:
            RyanDataAddressError: If address is None or the global record is
                unavailable.
        """
        address = _coerce_address(address)

        global_metadata = await self.get_global()
        if global_metadata is None:
            raise invalid_argument("global_metadata")

        country_key = try_get_country_key(global_metadata, _clean(address.country))
        if country_key is None:
            return MetadataChain(global_metadata)

        country = await self.get_country(country_key)
        language = select_language(country, address.language)
        if language is not None:
            localized = await self.get_country(country_key, language)
            if localized is None:
                logger.debug("No %s record for %s, using default language", language, country_key)
                language = None
            else:
                country = localized

        province_key = try_get_child_key(country, _clean(address.province))
        if province_key is None:
            return MetadataChain(global_metadata, country, language=language)
        province = await self.get_province(country_key, province_key, language)

        locality_key = try_get_child_key(province, _clean(address.locality))
        if locality_key is None:
            return MetadataChain(global_metadata, country, province, language=language)
        locality = await self.get_locality(country_key, province_key, locality_key, language)

        sublocality_key = try_get_child_key(locality, _clean(address.sublocality))
        if sublocality_key is None:
            return MetadataChain(global_metadata, country, province, locality, language=language)
        sublocality = await self.get_sublocality(
            country_key, province_key, locality_key, sublocality_key, language
        )
        return MetadataChain(
            global_metadata, country, province, locality, sublocality, language=language
        )

    async def validate_report(self, address: AddressInput) -> ValidationReport:
        """Validate an address and return the failures with the metadata used."""
        address = _coerce_address(address)
        chain = await self.resolve(address)
        failures = list(
            self._validator.validate(
                address,
                chain.global_metadata,
                chain.country,
                chain.province,
                chain.locality,
                chain.sublocality,
            )
        )
        return ValidationReport(chain=chain, failures=failures)

    async def validate(self, address: AddressInput) -> list[ValidationFailure]:
        """Validate an address.

        Args:
            address: AddressData or a mapping of address fields.

        Returns:
            Failures in validator order; empty when the address is valid.

        Raises:
            RyanDataAddressError: If address is None or the global record is
                unavailable.
            RyanDataValidationError: If a mapping cannot be read as an address.
        """
        report = await self.validate_report(address)
        return report.failures


_default_service: Optional[AddressService] = None


def get_default_service() -> AddressService:
    """Get the default service instance (created on first use).

    The instance is shared for the life of the process and may be used from
    successive event loops; its HTTP client follows the running loop.
    """
    global _default_service
    if _default_service is None:
        _default_service = AddressService()
    return _default_service


async def validate(address: AddressInput) -> list[ValidationFailure]:
    """Validate an address with a service opened and closed for this call.

    Example:
        >>> failures = asyncio.run(validate({"country": "US", "province": "CA"}))
    """
    async with AddressService() as service:
        return await service.validate(address)
