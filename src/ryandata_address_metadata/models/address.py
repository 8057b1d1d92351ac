"""Address input model.

The address is a flat set of free-form strings. Values are kept exactly as
supplied; blank and whitespace-only values are treated as missing by the
validators, never rewritten here.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ryandata_address_metadata.models.enums import FIELD_ATTRIBUTES, AddressField


class AddressData(BaseModel):
    """Address to validate against regional metadata."""

    model_config = ConfigDict(extra="ignore")

    country: str | None = Field(
        default=None,
        description="Country key or name (e.g. 'US')",
        validation_alias=AliasChoices("country", "Country"),
    )
    province: str | None = Field(
        default=None,
        description="State/province level region (key, name or latin name)",
        validation_alias=AliasChoices("province", "Province", "state"),
    )
    locality: str | None = Field(
        default=None,
        description="City/locality level region",
        validation_alias=AliasChoices("locality", "Locality", "city"),
    )
    sublocality: str | None = Field(
        default=None,
        description="Dependent locality / suburb",
        validation_alias=AliasChoices("sublocality", "Sublocality"),
    )
    postal_code: str | None = Field(
        default=None,
        description="Postal or ZIP code",
        validation_alias=AliasChoices("postal_code", "PostalCode", "zip"),
    )
    sorting_code: str | None = Field(
        default=None,
        description="Sorting code (e.g. CEDEX)",
        validation_alias=AliasChoices("sorting_code", "SortingCode"),
    )
    street_address: str | None = Field(
        default=None,
        description="Street address lines",
        validation_alias=AliasChoices("street_address", "StreetAddress"),
    )
    organization: str | None = Field(
        default=None,
        description="Organization or company name",
        validation_alias=AliasChoices("organization", "Organization"),
    )
    name: str | None = Field(
        default=None,
        description="Recipient name",
        validation_alias=AliasChoices("name", "Name"),
    )
    language: str | None = Field(
        default=None,
        description="Language tag the address is written in (e.g. 'ja')",
        validation_alias=AliasChoices("language", "Language"),
    )

    def value_of(self, field: AddressField) -> str | None:
        """Return the raw value held for an address field."""
        return getattr(self, FIELD_ATTRIBUTES[field])

    def is_blank(self, field: AddressField) -> bool:
        """True when the field is None, empty or whitespace-only."""
        value = self.value_of(field)
        return value is None or not value.strip()
