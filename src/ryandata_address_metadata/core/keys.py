"""Region key resolution.

Free-form region values (a key such as 'QC', a display name such as
'Québec' or a latin name) are matched against the child regions declared by
a parent record. Matching is case-insensitive using a simple lowercase
mapping; no locale-specific collation is applied.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ryandata_address_metadata.models.metadata import (
    CountryMetadata,
    GlobalMetadata,
    HierarchicalMetadata,
)

logger = logging.getLogger(__name__)


def _fold(value: str) -> str:
    return value.lower()


def _index_of(candidates: Sequence[str] | None, folded: str) -> int | None:
    """Return the first index whose value matches, ignoring case."""
    if not candidates:
        return None
    for index, candidate in enumerate(candidates):
        if candidate is not None and _fold(candidate) == folded:
            return index
    return None


def try_get_child_key(parent: HierarchicalMetadata | None, value: str | None) -> str | None:
    """Find the key of the child region of parent that value refers to.

    Keys are tried first, then display names, then latin names. A name match
    at index i resolves to the key at index i.

    Args:
        parent: Record whose child regions are searched.
        value: Key, name or latin name of the child region.

    Returns:
        The canonical child key, or None when there is no match.
    """
    if not value or parent is None or not parent.child_region_keys:
        return None

    keys = parent.child_region_keys
    folded = _fold(value)
    for candidates in (
        keys,
        parent.child_region_names,
        parent.child_region_latin_names,
    ):
        index = _index_of(candidates, folded)
        if index is not None and index < len(keys):
            return keys[index]

    logger.debug("No child region of %s matches %r", parent.id, value)
    return None


def try_get_country_key(global_metadata: GlobalMetadata | None, value: str | None) -> str | None:
    """Find the country key for value in the global record.

    Only keys are matched because the global record carries no country names.

    Returns:
        The country key as spelled in the global record, or None.
    """
    if not value or global_metadata is None or not global_metadata.countries:
        return None

    index = _index_of(global_metadata.countries, _fold(value))
    if index is None:
        logger.debug("Unknown country %r", value)
        return None
    return global_metadata.countries[index]


def select_language(country: CountryMetadata | None, language: str | None) -> str | None:
    """Pick the language to encode in identifiers below a country.

    Returns None when the default (first) language applies: no language was
    requested, the country is unknown or lists no languages, the requested
    language is the default one, or the country does not offer it.
    """
    if not language or country is None or not country.languages:
        return None

    index = _index_of(country.languages, _fold(language))
    if index is None or index == 0:
        return None
    return country.languages[index]
