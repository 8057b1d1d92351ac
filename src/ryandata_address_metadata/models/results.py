"""Result classes for metadata resolution and address validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ryandata_address_metadata.models.enums import AddressField, AddressFieldError

if TYPE_CHECKING:
    from ryandata_address_metadata.models.metadata import (
        CountryMetadata,
        GlobalMetadata,
        LocalityMetadata,
        ProvinceMetadata,
        SublocalityMetadata,
    )


@dataclass(frozen=True)
class ValidationFailure:
    """A single problem found with one address field."""

    field: AddressField
    error: AddressFieldError

    def __str__(self) -> str:
        return f"{self.field.value}: {self.error.value}"


@dataclass(frozen=True)
class MetadataChain:
    """Metadata resolved for an address, from the global record down.

    Levels below the deepest resolved region are None. ``language`` is the
    language encoded into the identifiers used for the lookups (None for the
    country's default language).
    """

    global_metadata: GlobalMetadata
    country: CountryMetadata | None = None
    province: ProvinceMetadata | None = None
    locality: LocalityMetadata | None = None
    sublocality: SublocalityMetadata | None = None
    language: str | None = None


@dataclass
class ValidationReport:
    """Failures produced for an address together with the metadata used."""

    chain: MetadataChain
    failures: list[ValidationFailure] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no validator reported a failure."""
        return not self.failures
