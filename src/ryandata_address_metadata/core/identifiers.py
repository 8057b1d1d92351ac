"""Metadata service identifiers.

An identifier is the namespace followed by the '/'-joined key chain, with an
optional '--<language>' suffix: ``data/CA/QC--fr``.
"""

from __future__ import annotations

from ryandata_address_metadata.models.errors import invalid_argument

DATA_NAMESPACE = "data"
KEY_SEPARATOR = "/"
LANGUAGE_SEPARATOR = "--"

# Region code of the rest-of-world defaults record
DEFAULT_REGION_KEY = "ZZ"

GLOBAL_IDENTIFIER = DATA_NAMESPACE


def build_identifier(language: str | None, *keys: str) -> str:
    """Build the identifier of the record for a chain of region keys.

    Args:
        language: Language code to encode, or None/empty for the default language.
        *keys: Region keys from the country down; at least one is required.

    Returns:
        Identifier such as ``data/XX/ZZ--abc``.

    Raises:
        RyanDataAddressError: If no keys are given.
    """
    if not keys:
        raise invalid_argument("keys")

    identifier = KEY_SEPARATOR.join((DATA_NAMESPACE, *keys))
    if language:
        identifier = f"{identifier}{LANGUAGE_SEPARATOR}{language}"
    return identifier


DEFAULT_COUNTRY_IDENTIFIER = build_identifier(None, DEFAULT_REGION_KEY)
