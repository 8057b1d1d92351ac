"""Address validator implementations.

Each validator implements the BaseValidator contract and can be combined
with the others in any order through ValidatorPipelineBuilder.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from functools import lru_cache
from typing import TYPE_CHECKING, ClassVar

from ryandata_address_metadata.core.factory import PluginFactory
from ryandata_address_metadata.core.keys import try_get_child_key, try_get_country_key
from ryandata_address_metadata.core.validation import (
    BaseValidator,
    CompositeValidator,
    ValidatorPipelineBuilder,
)
from ryandata_address_metadata.models import (
    FIELD_ATTRIBUTES,
    AddressField,
    AddressFieldError,
    ValidationFailure,
    require_argument,
)

if TYPE_CHECKING:
    from ryandata_address_metadata.models import (
        AddressData,
        CountryMetadata,
        GlobalMetadata,
        HierarchicalMetadata,
        LocalityMetadata,
        ProvinceMetadata,
        RegionalMetadata,
        SublocalityMetadata,
    )

logger = logging.getLogger(__name__)

# Fields required when a metadata level is absent or declares no requirements
DEFAULT_REQUIRED_FIELDS: frozenset[AddressField] = frozenset({AddressField.COUNTRY})


def _clean(value: str | None) -> str | None:
    """Strip a value, returning None when nothing is left."""
    if value is None:
        return None
    return value.strip() or None


class RequiredElementsValidator(BaseValidator):
    """Ensures every required address element has a value.

    The required set is the union of the requirements declared at the
    country, province, locality and sublocality levels. A level that is
    absent (or declares nothing) contributes only the country field.
    """

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "required"

    def required_fields(
        self,
        country: CountryMetadata | None,
        province: ProvinceMetadata | None,
        locality: LocalityMetadata | None,
        sublocality: SublocalityMetadata | None,
    ) -> frozenset[AddressField]:
        """Return the union of the fields required by each level."""
        required = set(DEFAULT_REQUIRED_FIELDS)
        for level in (country, province, locality, sublocality):
            if level is not None and level.required is not None:
                required.update(level.required)
            else:
                required.update(DEFAULT_REQUIRED_FIELDS)
        return frozenset(required)

    def validate(
        self,
        address: AddressData,
        global_metadata: GlobalMetadata,
        country: CountryMetadata | None,
        province: ProvinceMetadata | None,
        locality: LocalityMetadata | None,
        sublocality: SublocalityMetadata | None,
    ) -> list[ValidationFailure]:
        """Report every required field whose value is empty or whitespace-only."""
        require_argument(address, "address")
        require_argument(global_metadata, "global_metadata")

        required = self.required_fields(country, province, locality, sublocality)
        return [
            ValidationFailure(field, AddressFieldError.MISSING_REQUIRED_FIELD)
            for field in FIELD_ATTRIBUTES
            if field in required and address.is_blank(field)
        ]


class KnownValueValidator(BaseValidator):
    """Ensures region values name regions known to their parent record.

    The country must be listed by the global record. Province, locality and
    sublocality are only checked when their parent record is present and
    declares child regions; values may be given as key, name or latin name.
    """

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "known_value"

    def validate(
        self,
        address: AddressData,
        global_metadata: GlobalMetadata,
        country: CountryMetadata | None,
        province: ProvinceMetadata | None,
        locality: LocalityMetadata | None,
        sublocality: SublocalityMetadata | None,
    ) -> list[ValidationFailure]:
        """Report region values that do not match any known region."""
        require_argument(address, "address")
        require_argument(global_metadata, "global_metadata")

        failures: list[ValidationFailure] = []

        country_value = _clean(address.country)
        if country_value and try_get_country_key(global_metadata, country_value) is None:
            failures.append(
                ValidationFailure(AddressField.COUNTRY, AddressFieldError.UNKNOWN_VALUE)
            )

        checks: tuple[tuple[AddressField, HierarchicalMetadata | None], ...] = (
            (AddressField.PROVINCE, country),
            (AddressField.LOCALITY, province),
            (AddressField.SUBLOCALITY, locality),
        )
        for field, parent in checks:
            value = _clean(address.value_of(field))
            if not value or parent is None or not parent.child_region_keys:
                continue
            if try_get_child_key(parent, value) is None:
                failures.append(ValidationFailure(field, AddressFieldError.UNKNOWN_VALUE))

        return failures


@lru_cache(maxsize=512)
def _compile(pattern: str) -> re.Pattern[str] | None:
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        logger.warning("Ignoring invalid postal code pattern %r: %s", pattern, exc)
        return None


class PostalCodeFormatValidator(BaseValidator):
    """Checks the postal code against the patterns published in the metadata.

    The country pattern must match the whole postal code. Patterns of the
    province, locality and sublocality records only constrain a prefix of it.
    """

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "postal_code_format"

    def validate(
        self,
        address: AddressData,
        global_metadata: GlobalMetadata,
        country: CountryMetadata | None,
        province: ProvinceMetadata | None,
        locality: LocalityMetadata | None,
        sublocality: SublocalityMetadata | None,
    ) -> list[ValidationFailure]:
        """Report a malformed postal code, or one outside the resolved region."""
        require_argument(address, "address")
        require_argument(global_metadata, "global_metadata")

        postal_code = _clean(address.postal_code)
        if postal_code is None or country is None:
            return []

        country_pattern = self._pattern(country)
        if country_pattern is not None and country_pattern.fullmatch(postal_code) is None:
            return [ValidationFailure(AddressField.POSTAL_CODE, AddressFieldError.INVALID_FORMAT)]

        for level in (province, locality, sublocality):
            pattern = self._pattern(level)
            if pattern is not None and pattern.match(postal_code) is None:
                return [
                    ValidationFailure(
                        AddressField.POSTAL_CODE, AddressFieldError.MISMATCHING_VALUE
                    )
                ]
        return []

    @staticmethod
    def _pattern(level: RegionalMetadata | None) -> re.Pattern[str] | None:
        if level is None or not level.postal_code_pattern:
            return None
        return _compile(level.postal_code_pattern)


class ValidatorFactory(PluginFactory[BaseValidator]):
    """Factory for creating validators by name.

    Example:
        >>> validator = ValidatorFactory.create("required")

        # Register a custom validator
        >>> ValidatorFactory.register("organization", OrganizationValidator)
        >>> pipeline = create_default_validators(["required", "organization"])
    """

    _registry: ClassVar[dict[str, type[BaseValidator]]] = {}
    _base_type: ClassVar[type[BaseValidator]] = BaseValidator
    _default_type: ClassVar[str] = "required"
    _entity_name: ClassVar[str] = "validator"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure built-in validators are registered."""
        cls._registry.setdefault("required", RequiredElementsValidator)
        cls._registry.setdefault("known_value", KnownValueValidator)
        cls._registry.setdefault("postal_code_format", PostalCodeFormatValidator)


DEFAULT_VALIDATORS: tuple[str, ...] = ("required", "known_value", "postal_code_format")


def create_default_validators(names: Sequence[str] | None = None) -> CompositeValidator:
    """Create the address validation pipeline.

    Args:
        names: Registered validator names, in the order they should run.
            Defaults to required, known_value, postal_code_format.

    Returns:
        CompositeValidator running the validators in order.

    Raises:
        ValueError: If a name is not registered with ValidatorFactory.
    """
    builder = ValidatorPipelineBuilder("address_validation")
    for name in names if names is not None else DEFAULT_VALIDATORS:
        builder.add(ValidatorFactory.create(name))
    return builder.build()
