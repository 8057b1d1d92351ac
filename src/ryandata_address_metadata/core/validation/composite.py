"""Composite validator for combining multiple validators.

Runs validators in registration order and concatenates their failures.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ryandata_address_metadata.core.validation.base import BaseValidator
from ryandata_address_metadata.models.errors import require_argument

if TYPE_CHECKING:
    from ryandata_address_metadata.models import (
        AddressData,
        CountryMetadata,
        GlobalMetadata,
        LocalityMetadata,
        ProvinceMetadata,
        SublocalityMetadata,
        ValidationFailure,
    )

logger = logging.getLogger(__name__)


class CompositeValidator(BaseValidator):
    """Validator that combines multiple validators.

    Failures keep each validator's own order, and validators keep their
    registration order.
    """

    def __init__(self, validators: Iterable[BaseValidator], name: str = "composite") -> None:
        """Initialize composite validator.

        Args:
            validators: Validators to run, in order.
            name: Name of the pipeline.
        """
        self._validators = tuple(validators)
        self._name = name

    @property
    def name(self) -> str:
        """Name of this validator."""
        return self._name

    @property
    def validators(self) -> list[BaseValidator]:
        """Get copy of validators list."""
        return list(self._validators)

    def validate(
        self,
        address: AddressData,
        global_metadata: GlobalMetadata,
        country: CountryMetadata | None = None,
        province: ProvinceMetadata | None = None,
        locality: LocalityMetadata | None = None,
        sublocality: SublocalityMetadata | None = None,
    ) -> list[ValidationFailure]:
        """Run all validators and concatenate their failures.

        Raises:
            RyanDataAddressError: If address or global_metadata is None.
        """
        require_argument(address, "address")
        require_argument(global_metadata, "global_metadata")

        failures: list[ValidationFailure] = []
        for validator in self._validators:
            emitted = list(
                validator.validate(
                    address, global_metadata, country, province, locality, sublocality
                )
            )
            if emitted:
                logger.debug("Validator %s reported %d failure(s)", validator.name, len(emitted))
            failures.extend(emitted)
        return failures


class ValidatorPipelineBuilder:
    """Fluent builder for an ordered validator pipeline.

    Example:
        >>> pipeline = (
        ...     ValidatorPipelineBuilder("address_validation")
        ...     .add(RequiredElementsValidator())
        ...     .add(KnownValueValidator())
        ...     .build()
        ... )
    """

    def __init__(self, name: str = "pipeline") -> None:
        self._name = name
        self._validators: list[BaseValidator] = []

    def add(self, validator: BaseValidator) -> ValidatorPipelineBuilder:
        """Append a validator to the pipeline."""
        self._validators.append(validator)
        return self

    def build(self) -> CompositeValidator:
        """Build the pipeline; later changes to the builder do not affect it."""
        return CompositeValidator(self._validators, name=self._name)
