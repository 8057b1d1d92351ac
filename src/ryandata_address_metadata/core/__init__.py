"""Core resolution and validation utilities.

Usage:
    from ryandata_address_metadata.core import (
        # Identifiers
        build_identifier,
        # Key resolution
        try_get_child_key,
        try_get_country_key,
        select_language,
        # Validation
        BaseValidator,
        CompositeValidator,
        ValidatorPipelineBuilder,
        # Factory
        PluginFactory,
    )
"""

from __future__ import annotations

from ryandata_address_metadata.core.factory import PluginFactory
from ryandata_address_metadata.core.identifiers import (
    DATA_NAMESPACE,
    DEFAULT_COUNTRY_IDENTIFIER,
    DEFAULT_REGION_KEY,
    GLOBAL_IDENTIFIER,
    LANGUAGE_SEPARATOR,
    build_identifier,
)
from ryandata_address_metadata.core.keys import (
    select_language,
    try_get_child_key,
    try_get_country_key,
)
from ryandata_address_metadata.core.validation import (
    BaseValidator,
    CompositeValidator,
    ValidatorPipelineBuilder,
)

__all__ = [
    # Identifiers
    "DATA_NAMESPACE",
    "DEFAULT_COUNTRY_IDENTIFIER",
    "DEFAULT_REGION_KEY",
    "GLOBAL_IDENTIFIER",
    "LANGUAGE_SEPARATOR",
    "build_identifier",
    # Key resolution
    "select_language",
    "try_get_child_key",
    "try_get_country_key",
    # Validation
    "BaseValidator",
    "CompositeValidator",
    "ValidatorPipelineBuilder",
    # Factory
    "PluginFactory",
]
