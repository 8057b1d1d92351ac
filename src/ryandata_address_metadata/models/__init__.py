"""Address and metadata models package.

This package contains the address input model, the regional metadata
records and the validation result types.
"""

from __future__ import annotations

from ryandata_address_metadata.models.address import AddressData
from ryandata_address_metadata.models.enums import (
    FIELD_ATTRIBUTES,
    AddressField,
    AddressFieldError,
)
from ryandata_address_metadata.models.errors import (
    PACKAGE_NAME,
    RyanDataAddressError,
    RyanDataValidationError,
    invalid_argument,
    require_argument,
)
from ryandata_address_metadata.models.metadata import (
    INHERITABLE_FIELDS,
    CommonMetadata,
    CountryMetadata,
    GlobalMetadata,
    HierarchicalMetadata,
    LocalityMetadata,
    ProvinceMetadata,
    RegionalMetadata,
    SublocalityMetadata,
)
from ryandata_address_metadata.models.results import (
    MetadataChain,
    ValidationFailure,
    ValidationReport,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "RyanDataAddressError",
    "RyanDataValidationError",
    "invalid_argument",
    "require_argument",
    # Enums and constants
    "AddressField",
    "AddressFieldError",
    "FIELD_ATTRIBUTES",
    "INHERITABLE_FIELDS",
    # Address
    "AddressData",
    # Metadata records
    "CommonMetadata",
    "HierarchicalMetadata",
    "RegionalMetadata",
    "GlobalMetadata",
    "CountryMetadata",
    "ProvinceMetadata",
    "LocalityMetadata",
    "SublocalityMetadata",
    # Results
    "MetadataChain",
    "ValidationFailure",
    "ValidationReport",
]
