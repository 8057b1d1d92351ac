"""Generic validation infrastructure.

Provides the validator contract and the composite used to run an ordered
set of validators as one pipeline.
"""

from ryandata_address_metadata.core.validation.base import BaseValidator
from ryandata_address_metadata.core.validation.composite import (
    CompositeValidator,
    ValidatorPipelineBuilder,
)

__all__ = ["BaseValidator", "CompositeValidator", "ValidatorPipelineBuilder"]
