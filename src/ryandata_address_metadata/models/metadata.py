"""Regional metadata records.

Records mirror the JSON served by the address metadata service. Each level
of the hierarchy (global, country, province, locality, sublocality) has its
own model. Records are immutable once constructed. A field that is missing
from the payload is None, which is distinct from an empty collection.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field

from ryandata_address_metadata.models.enums import AddressField

# Fields a country record inherits from the rest-of-world defaults when absent
INHERITABLE_FIELDS: tuple[str, ...] = (
    "format",
    "latin_format",
    "required",
    "uppercase",
    "state_type",
    "locality_type",
    "sublocality_type",
    "postal_code_type",
)


def _split_delimited(delimiter: str) -> Callable[[Any], Any]:
    def split(value: Any) -> Any:
        if isinstance(value, str):
            return tuple(value.split(delimiter)) if value else ()
        return value

    return split


def _parse_fields(value: Any) -> Any:
    """Convert a code string such as 'ACSZ' (or an iterable of fields) to fields."""
    if value is None:
        return None
    # pydantic only converts ValueError/AssertionError into a ValidationError
    if not isinstance(value, (str, Iterable)):
        raise ValueError(f"expected field codes or fields, got {type(value).__name__}")
    items: Iterable[Any] = value
    fields: set[AddressField] = set()
    for item in items:
        if isinstance(item, AddressField):
            fields.add(item)
        elif isinstance(item, str) and len(item) == 1:
            field = AddressField.from_code(item)
            if field is not None:
                fields.add(field)
        else:
            fields.add(AddressField(item))
    return frozenset(fields)


TildeList = Annotated[tuple[str, ...] | None, BeforeValidator(_split_delimited("~"))]
CommaList = Annotated[tuple[str, ...] | None, BeforeValidator(_split_delimited(","))]
FieldSet = Annotated[frozenset[AddressField] | None, BeforeValidator(_parse_fields)]


class CommonMetadata(BaseModel):
    """Fields shared by every metadata record."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | None = Field(
        default=None,
        description="Identifier of the record (e.g. 'data/US'); empty means not found",
    )
    key: str | None = Field(default=None, description="Key of the region (e.g. 'US')")
    name: str | None = Field(default=None, description="Display name of the region")
    language: str | None = Field(
        default=None,
        description="Language of the record, when not the default",
        validation_alias=AliasChoices("language", "lang"),
    )

    @property
    def is_present(self) -> bool:
        """True when the record carries an identifier."""
        return bool(self.id)


class HierarchicalMetadata(CommonMetadata):
    """Metadata with child regions.

    The three child collections are parallel: index i of each refers to the
    same child region.
    """

    child_region_keys: TildeList = Field(
        default=None,
        validation_alias=AliasChoices("child_region_keys", "sub_keys"),
    )
    child_region_names: TildeList = Field(
        default=None,
        validation_alias=AliasChoices("child_region_names", "sub_names"),
    )
    child_region_latin_names: TildeList = Field(
        default=None,
        validation_alias=AliasChoices("child_region_latin_names", "sub_lnames"),
    )


class GlobalMetadata(HierarchicalMetadata):
    """Top-level metadata listing the supported countries."""

    countries: TildeList = Field(default=None, description="Keys of every known country")
    languages: TildeList = Field(default=None)


class RegionalMetadata(HierarchicalMetadata):
    """Formatting and validation attributes of a country or one of its subdivisions."""

    format: str | None = Field(
        default=None,
        description="Address format; '%n' is a line break, '%X' an address element",
        validation_alias=AliasChoices("format", "fmt"),
    )
    latin_format: str | None = Field(
        default=None,
        description="Format to use for addresses written in latin script",
        validation_alias=AliasChoices("latin_format", "lfmt"),
    )
    required: FieldSet = Field(
        default=None,
        description="Address elements that must be present",
        validation_alias=AliasChoices("required", "require"),
    )
    uppercase: FieldSet = Field(
        default=None,
        description="Address elements that should be uppercased",
        validation_alias=AliasChoices("uppercase", "upper"),
    )
    state_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("state_type", "state_name_type"),
    )
    locality_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("locality_type", "locality_name_type"),
    )
    sublocality_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("sublocality_type", "sublocality_name_type"),
    )
    postal_code_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("postal_code_type", "zip_name_type"),
    )
    postal_code_pattern: str | None = Field(
        default=None,
        description="Regular expression for postal codes (a prefix below country level)",
        validation_alias=AliasChoices("postal_code_pattern", "zip"),
    )
    postal_code_examples: CommaList = Field(
        default=None,
        validation_alias=AliasChoices("postal_code_examples", "zipex"),
    )
    postal_service_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("postal_service_url", "posturl"),
    )


class CountryMetadata(RegionalMetadata):
    """Country-level metadata."""

    languages: TildeList = Field(
        default=None,
        description="Languages with regional data; the first is the default",
    )

    def with_defaults(self, defaults: CountryMetadata | None) -> CountryMetadata:
        """Return a copy with every absent inheritable field taken from defaults.

        Fields are filled one by one; fields already present are kept even
        when the defaults carry a value.
        """
        if defaults is None:
            return self
        update = {
            name: getattr(defaults, name)
            for name in INHERITABLE_FIELDS
            if getattr(self, name) is None and getattr(defaults, name) is not None
        }
        return self.model_copy(update=update) if update else self


class ProvinceMetadata(RegionalMetadata):
    """State/province-level metadata."""


class LocalityMetadata(RegionalMetadata):
    """City/locality-level metadata."""


class SublocalityMetadata(RegionalMetadata):
    """Dependent-locality-level metadata."""
