"""Abstract base validator class.

Every validator receives the address together with the full resolved
metadata chain and reports field-level failures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

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


class BaseValidator(ABC):
    """Abstract base class for address validators.

    Validators must be stateless across calls; configuration is fixed at
    construction.

    Example:
        class OrganizationValidator(BaseValidator):
            @property
            def name(self) -> str:
                return "organization"

            def validate(self, address, global_metadata, country, province,
                         locality, sublocality) -> list[ValidationFailure]:
                if address.is_blank(AddressField.ORGANIZATION):
                    return [ValidationFailure(AddressField.ORGANIZATION,
                                              AddressFieldError.MISSING_REQUIRED_FIELD)]
                return []
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this validator for registration and error reporting."""
        ...

    @abstractmethod
    def validate(
        self,
        address: AddressData,
        global_metadata: GlobalMetadata,
        country: CountryMetadata | None,
        province: ProvinceMetadata | None,
        locality: LocalityMetadata | None,
        sublocality: SublocalityMetadata | None,
    ) -> Sequence[ValidationFailure]:
        """Validate an address against its metadata chain.

        Args:
            address: Address to validate.
            global_metadata: Global metadata record.
            country: Country metadata, if resolved.
            province: Province metadata, if resolved.
            locality: Locality metadata, if resolved.
            sublocality: Sublocality metadata, if resolved.

        Returns:
            Failures in the order the validator found them.
        """
        ...
