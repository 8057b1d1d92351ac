"""ryandata-address-metadata: regional address metadata and validation.

This package resolves the address metadata published for every region
(country, province, locality, sublocality) and validates addresses
against it:
- Hierarchical region lookup by key, name or latin name
- Country records merged with the rest-of-world defaults
- Composable validators reporting field-level failures
- Async HTTP client with nullifying and caching decorators

Quick Start:
    >>> import asyncio
    >>> from ryandata_address_metadata import AddressService
    >>> service = AddressService()
    >>> failures = asyncio.run(service.validate({"country": "US", "province": "CA"}))
    >>> for failure in failures:
    ...     print(failure.field, failure.error)

    # Country metadata with defaults applied
    >>> us = asyncio.run(service.get_country("US"))
    >>> print(us.state_type)  # "state"
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from ryandata_address_metadata.models import (
    AddressData,
    AddressField,
    AddressFieldError,
    CountryMetadata,
    GlobalMetadata,
    LocalityMetadata,
    MetadataChain,
    ProvinceMetadata,
    RyanDataAddressError,
    RyanDataValidationError,
    SublocalityMetadata,
    ValidationFailure,
    ValidationReport,
)
from ryandata_address_metadata.core import (
    BaseValidator,
    CompositeValidator,
    ValidatorPipelineBuilder,
    build_identifier,
    select_language,
    try_get_child_key,
    try_get_country_key,
)
from ryandata_address_metadata.protocols import MetadataClientProtocol
from ryandata_address_metadata.validation import (
    KnownValueValidator,
    PostalCodeFormatValidator,
    RequiredElementsValidator,
    ValidatorFactory,
    create_default_validators,
)
from ryandata_address_metadata.remote import (
    CachingClientDecorator,
    NullifyingClientDecorator,
    ServiceClient,
    ServiceClientConfig,
    create_client,
)
from ryandata_address_metadata.service import AddressService, get_default_service, validate

__version__ = "0.1.0"
__package_name__ = "ryandata-address-metadata"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "AddressService",
    "get_default_service",
    "validate",
    # Models
    "AddressData",
    "AddressField",
    "AddressFieldError",
    "CountryMetadata",
    "GlobalMetadata",
    "LocalityMetadata",
    "MetadataChain",
    "ProvinceMetadata",
    "SublocalityMetadata",
    "ValidationFailure",
    "ValidationReport",
    # Errors
    "RyanDataAddressError",
    "RyanDataValidationError",
    # Resolution
    "build_identifier",
    "select_language",
    "try_get_child_key",
    "try_get_country_key",
    # Protocols
    "MetadataClientProtocol",
    # Validators
    "BaseValidator",
    "CompositeValidator",
    "ValidatorPipelineBuilder",
    "KnownValueValidator",
    "PostalCodeFormatValidator",
    "RequiredElementsValidator",
    "ValidatorFactory",
    "create_default_validators",
    # Remote
    "CachingClientDecorator",
    "NullifyingClientDecorator",
    "ServiceClient",
    "ServiceClientConfig",
    "create_client",
]
