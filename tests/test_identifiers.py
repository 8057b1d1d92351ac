from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ryandata_address_metadata.core.identifiers import (
    DEFAULT_COUNTRY_IDENTIFIER,
    GLOBAL_IDENTIFIER,
    build_identifier,
)
from ryandata_address_metadata.models import RyanDataAddressError

key_strategy = st.text(alphabet=string.ascii_uppercase + string.digits, min_size=1, max_size=4)
language_strategy = st.one_of(
    st.none(), st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=5)
)


@pytest.mark.parametrize(
    ("language", "keys", "expected"),
    [
        (None, ("XX",), "data/XX"),
        ("", ("XX",), "data/XX"),
        ("abc", ("XX",), "data/XX--abc"),
        ("abc", ("XX", "ZZ"), "data/XX/ZZ--abc"),
        (None, ("XX", "ZZ", "ZY"), "data/XX/ZZ/ZY"),
        ("xyz", ("XX", "ZZ", "ZY", "XY"), "data/XX/ZZ/ZY/XY--xyz"),
    ],
)
def test_build_identifier(language: str | None, keys: tuple[str, ...], expected: str) -> None:
    assert build_identifier(language, *keys) == expected


def test_build_identifier_requires_keys() -> None:
    with pytest.raises(RyanDataAddressError) as excinfo:
        build_identifier("en")
    assert excinfo.value.type == "invalid_argument"


def test_well_known_identifiers() -> None:
    assert GLOBAL_IDENTIFIER == "data"
    assert DEFAULT_COUNTRY_IDENTIFIER == "data/ZZ"


@given(language_strategy, st.lists(key_strategy, min_size=1, max_size=4))
def test_identifier_encodes_keys_and_language(language: str | None, keys: list[str]) -> None:
    """The identifier can be split back into the key chain and language."""
    identifier = build_identifier(language, *keys)

    body, _, suffix = identifier.partition("--")
    assert body.split("/") == ["data", *keys]
    assert (suffix or None) == language
    assert build_identifier(language, *keys) == identifier
