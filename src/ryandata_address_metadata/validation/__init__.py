"""Address validation implementations.

This module provides the validators that check an address against its
resolved metadata chain.
"""

from ryandata_address_metadata.core.validation import (
    BaseValidator,
    CompositeValidator,
    ValidatorPipelineBuilder,
)
from ryandata_address_metadata.validation.validators import (
    DEFAULT_REQUIRED_FIELDS,
    DEFAULT_VALIDATORS,
    KnownValueValidator,
    PostalCodeFormatValidator,
    RequiredElementsValidator,
    ValidatorFactory,
    create_default_validators,
)

__all__ = [
    "BaseValidator",
    "CompositeValidator",
    "ValidatorPipelineBuilder",
    "DEFAULT_REQUIRED_FIELDS",
    "DEFAULT_VALIDATORS",
    "KnownValueValidator",
    "PostalCodeFormatValidator",
    "RequiredElementsValidator",
    "ValidatorFactory",
    "create_default_validators",
]
