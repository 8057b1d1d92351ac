"""Address field and validation error enumerations."""

from __future__ import annotations

from enum import Enum


class AddressField(str, Enum):
    """Enumeration of the address elements that metadata can reference."""

    COUNTRY = "Country"
    PROVINCE = "Province"
    LOCALITY = "Locality"
    SUBLOCALITY = "Sublocality"
    POSTAL_CODE = "PostalCode"
    SORTING_CODE = "SortingCode"
    STREET_ADDRESS = "StreetAddress"
    ORGANIZATION = "Organization"
    NAME = "Name"

    @classmethod
    def from_code(cls, code: str) -> AddressField | None:
        """Look up a field by its metadata code, returning None for unknown codes."""
        return _CODE_TO_FIELD.get(code.upper())


class AddressFieldError(str, Enum):
    """Kinds of problems a validator can report against an address field."""

    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    UNKNOWN_VALUE = "UnknownValue"
    INVALID_FORMAT = "InvalidFormat"
    MISMATCHING_VALUE = "MismatchingValue"


_CODE_TO_FIELD: dict[str, AddressField] = {
    "R": AddressField.COUNTRY,
    "S": AddressField.PROVINCE,
    "C": AddressField.LOCALITY,
    "D": AddressField.SUBLOCALITY,
    "Z": AddressField.POSTAL_CODE,
    "X": AddressField.SORTING_CODE,
    "A": AddressField.STREET_ADDRESS,
    "O": AddressField.ORGANIZATION,
    "N": AddressField.NAME,
}

# Address attribute holding the value of each field, in validation order
FIELD_ATTRIBUTES: dict[AddressField, str] = {
    AddressField.COUNTRY: "country",
    AddressField.PROVINCE: "province",
    AddressField.LOCALITY: "locality",
    AddressField.SUBLOCALITY: "sublocality",
    AddressField.POSTAL_CODE: "postal_code",
    AddressField.SORTING_CODE: "sorting_code",
    AddressField.STREET_ADDRESS: "street_address",
    AddressField.ORGANIZATION: "organization",
    AddressField.NAME: "name",
}
