from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ryandata_address_metadata.core.validation import (
    BaseValidator,
    CompositeValidator,
    ValidatorPipelineBuilder,
)
from ryandata_address_metadata.models import (
    AddressData,
    AddressField,
    AddressFieldError,
    CountryMetadata,
    GlobalMetadata,
    LocalityMetadata,
    ProvinceMetadata,
    RyanDataAddressError,
    SublocalityMetadata,
    ValidationFailure,
)
from ryandata_address_metadata.validation import (
    DEFAULT_VALIDATORS,
    KnownValueValidator,
    PostalCodeFormatValidator,
    RequiredElementsValidator,
    ValidatorFactory,
    create_default_validators,
)

GLOBAL = GlobalMetadata(id="data", countries="US~CA~XX")

MISSING = AddressFieldError.MISSING_REQUIRED_FIELD
UNKNOWN = AddressFieldError.UNKNOWN_VALUE


class StaticValidator(BaseValidator):
    """Validator returning a fixed list of failures."""

    def __init__(self, *failures: ValidationFailure) -> None:
        self.failures = list(failures)
        self.calls = 0

    @property
    def name(self) -> str:
        return "static"

    def validate(self, address, global_metadata, country, province, locality, sublocality):
        self.calls += 1
        return self.failures


def failure(field: AddressField, error: AddressFieldError = MISSING) -> ValidationFailure:
    return ValidationFailure(field, error)


class TestRequiredElementsValidator:
    validator = RequiredElementsValidator()

    def test_name(self) -> None:
        assert self.validator.name == "required"

    def test_country_required_without_metadata(self) -> None:
        failures = self.validator.validate(AddressData(), GLOBAL, None, None, None, None)
        assert failures == [failure(AddressField.COUNTRY)]

    def test_country_level_requirements(self) -> None:
        country = CountryMetadata(id="data/XX", required="ACZ")
        failures = self.validator.validate(
            AddressData(country="XX", locality="Town"), GLOBAL, country, None, None, None
        )
        assert failures == [failure(AddressField.POSTAL_CODE), failure(AddressField.STREET_ADDRESS)]

    def test_requirements_are_unioned_across_levels(self) -> None:
        country = CountryMetadata(id="data/XX", required=[])
        province = ProvinceMetadata(id="data/XX/XA", required=[])
        locality = LocalityMetadata(id="data/XX/XA/XB", required=[AddressField.SUBLOCALITY])
        address = AddressData(country="XX", province="XA", locality="XB")

        failures = self.validator.validate(address, GLOBAL, country, province, locality, None)

        assert failures == [failure(AddressField.SUBLOCALITY)]

    def test_empty_requirements_still_need_country(self) -> None:
        country = CountryMetadata(id="data/XX", required=[])
        failures = self.validator.validate(AddressData(), GLOBAL, country, None, None, None)
        assert failures == [failure(AddressField.COUNTRY)]

    def test_sublocality_level_requirements(self) -> None:
        sublocality = SublocalityMetadata(id="data/XX/XA/XB/XC", required="N")
        failures = self.validator.validate(
            AddressData(country="XX"), GLOBAL, None, None, None, sublocality
        )
        assert failures == [failure(AddressField.NAME)]

    @given(st.text(alphabet=" \t\n\r", max_size=5))
    def test_whitespace_counts_as_missing(self, blank: str) -> None:
        country = CountryMetadata(id="data/XX", required="AO")
        address = AddressData(country="XX", street_address=blank, organization=blank)

        failures = self.validator.validate(address, GLOBAL, country, None, None, None)

        assert failures == [
            failure(AddressField.STREET_ADDRESS),
            failure(AddressField.ORGANIZATION),
        ]

    def test_failures_follow_field_order(self) -> None:
        country = CountryMetadata(id="data/XX", required="NOAXZDCS")
        failures = self.validator.validate(AddressData(), GLOBAL, country, None, None, None)
        assert [f.field for f in failures] == [
            AddressField.COUNTRY,
            AddressField.PROVINCE,
            AddressField.LOCALITY,
            AddressField.SUBLOCALITY,
            AddressField.POSTAL_CODE,
            AddressField.SORTING_CODE,
            AddressField.STREET_ADDRESS,
            AddressField.ORGANIZATION,
            AddressField.NAME,
        ]

    def test_requires_address_and_global(self) -> None:
        with pytest.raises(RyanDataAddressError):
            self.validator.validate(None, GLOBAL, None, None, None, None)  # type: ignore[arg-type]
        with pytest.raises(RyanDataAddressError):
            self.validator.validate(AddressData(), None, None, None, None, None)  # type: ignore[arg-type]


class TestKnownValueValidator:
    validator = KnownValueValidator()

    country = CountryMetadata(
        id="data/XX",
        child_region_keys="XA~XB",
        child_region_names="Alpha~Beta",
        child_region_latin_names="Alfa~Bet",
    )
    province = ProvinceMetadata(id="data/XX/XA", child_region_keys="XC")
    locality = LocalityMetadata(id="data/XX/XA/XC", child_region_keys="XD")

    def test_unknown_country(self) -> None:
        failures = self.validator.validate(
            AddressData(country="Narnia"), GLOBAL, None, None, None, None
        )
        assert failures == [failure(AddressField.COUNTRY, UNKNOWN)]

    def test_blank_country_is_not_checked(self) -> None:
        failures = self.validator.validate(AddressData(country="  "), GLOBAL, None, None, None, None)
        assert failures == []

    @pytest.mark.parametrize("province", ["XA", "xb", "ALPHA", "bet"])
    def test_known_province(self, province: str) -> None:
        address = AddressData(country="XX", province=province)
        assert self.validator.validate(address, GLOBAL, self.country, None, None, None) == []

    def test_unknown_province(self) -> None:
        address = AddressData(country="XX", province="Gamma")
        failures = self.validator.validate(address, GLOBAL, self.country, None, None, None)
        assert failures == [failure(AddressField.PROVINCE, UNKNOWN)]

    def test_unknown_locality_and_sublocality(self) -> None:
        address = AddressData(
            country="XX", province="XA", locality="Nowhere", sublocality="Elsewhere"
        )
        failures = self.validator.validate(
            address, GLOBAL, self.country, self.province, self.locality, None
        )
        assert failures == [
            failure(AddressField.LOCALITY, UNKNOWN),
            failure(AddressField.SUBLOCALITY, UNKNOWN),
        ]

    def test_parent_without_children_is_skipped(self) -> None:
        address = AddressData(country="XX", province="Anything")
        country = CountryMetadata(id="data/XX")
        assert self.validator.validate(address, GLOBAL, country, None, None, None) == []

    def test_missing_parent_is_skipped(self) -> None:
        address = AddressData(country="XX", province="XA", locality="Anything")
        assert self.validator.validate(address, GLOBAL, self.country, None, None, None) == []


class TestPostalCodeFormatValidator:
    validator = PostalCodeFormatValidator()

    country = CountryMetadata(id="data/US", postal_code_pattern=r"(\d{5})(?:[ \-](\d{4}))?")
    province = ProvinceMetadata(id="data/US/CA", postal_code_pattern="9[0-6]")
    locality = LocalityMetadata(id="data/US/CA/XX", postal_code_pattern="940")

    def check(self, postal_code: str | None, *levels) -> list[ValidationFailure]:
        address = AddressData(country="US", postal_code=postal_code)
        return self.validator.validate(address, GLOBAL, self.country, *levels)

    @pytest.mark.parametrize("postal_code", ["94043", "94043-1351", "94043 1351"])
    def test_valid(self, postal_code: str) -> None:
        assert self.check(postal_code, self.province, self.locality, None) == []

    @pytest.mark.parametrize("postal_code", ["9404", "940431", "ABCDE", "94043-"])
    def test_invalid_format(self, postal_code: str) -> None:
        assert self.check(postal_code, None, None, None) == [
            failure(AddressField.POSTAL_CODE, AddressFieldError.INVALID_FORMAT)
        ]

    def test_mismatching_province(self) -> None:
        assert self.check("10001", self.province, None, None) == [
            failure(AddressField.POSTAL_CODE, AddressFieldError.MISMATCHING_VALUE)
        ]

    def test_mismatching_locality_reported_once(self) -> None:
        sublocality = SublocalityMetadata(id="data/US/CA/XX/XY", postal_code_pattern="941")
        assert self.check("95014", self.province, self.locality, sublocality) == [
            failure(AddressField.POSTAL_CODE, AddressFieldError.MISMATCHING_VALUE)
        ]

    def test_invalid_format_skips_prefix_checks(self) -> None:
        assert self.check("1000", self.province, None, None) == [
            failure(AddressField.POSTAL_CODE, AddressFieldError.INVALID_FORMAT)
        ]

    @pytest.mark.parametrize("postal_code", [None, "", "   "])
    def test_missing_postal_code_is_not_checked(self, postal_code: str | None) -> None:
        assert self.check(postal_code, self.province, None, None) == []

    def test_without_country_is_not_checked(self) -> None:
        address = AddressData(postal_code="anything")
        assert self.validator.validate(address, GLOBAL, None, None, None, None) == []

    def test_case_insensitive(self) -> None:
        country = CountryMetadata(
            id="data/GB", postal_code_pattern=r"[A-Z]{1,2}\d[A-Z\d]? ?\d[A-Z]{2}"
        )
        address = AddressData(country="GB", postal_code="sw1a 1aa")
        assert self.validator.validate(address, GLOBAL, country, None, None, None) == []

    def test_invalid_pattern_is_ignored(self) -> None:
        country = CountryMetadata(id="data/XX", postal_code_pattern="(unclosed")
        address = AddressData(country="XX", postal_code="12345")
        assert self.validator.validate(address, GLOBAL, country, None, None, None) == []


class TestCompositeValidator:
    def test_concatenates_in_order(self) -> None:
        first = StaticValidator(failure(AddressField.COUNTRY), failure(AddressField.PROVINCE))
        second = StaticValidator(failure(AddressField.LOCALITY))
        pipeline = ValidatorPipelineBuilder("test").add(first).add(second).build()

        failures = pipeline.validate(AddressData(), GLOBAL)

        assert failures == [
            failure(AddressField.COUNTRY),
            failure(AddressField.PROVINCE),
            failure(AddressField.LOCALITY),
        ]
        assert pipeline.name == "test"

    def test_output_is_isolated_from_validators(self) -> None:
        inner = StaticValidator(failure(AddressField.COUNTRY))
        pipeline = CompositeValidator([inner])

        failures = pipeline.validate(AddressData(), GLOBAL)
        failures.append(failure(AddressField.NAME))

        assert inner.failures == [failure(AddressField.COUNTRY)]

    def test_runs_every_validator(self) -> None:
        validators = [StaticValidator() for _ in range(3)]
        CompositeValidator(validators).validate(AddressData(), GLOBAL)
        assert [v.calls for v in validators] == [1, 1, 1]

    def test_empty_pipeline(self) -> None:
        assert CompositeValidator([]).validate(AddressData(), GLOBAL) == []

    def test_builder_snapshot(self) -> None:
        builder = ValidatorPipelineBuilder().add(StaticValidator())
        pipeline = builder.build()
        builder.add(StaticValidator())
        assert len(pipeline.validators) == 1

    @pytest.mark.parametrize(
        "args",
        [(None, GLOBAL), (AddressData(), None)],
    )
    def test_requires_address_and_global(self, args: tuple) -> None:
        with pytest.raises(RyanDataAddressError) as excinfo:
            CompositeValidator([StaticValidator()]).validate(*args)
        assert excinfo.value.type == "invalid_argument"


class TestDefaultValidators:
    def test_default_order(self) -> None:
        pipeline = create_default_validators()
        assert [v.name for v in pipeline.validators] == list(DEFAULT_VALIDATORS)
        assert DEFAULT_VALIDATORS == ("required", "known_value", "postal_code_format")

    def test_selected_validators(self) -> None:
        pipeline = create_default_validators(["postal_code_format", "required"])
        assert [v.name for v in pipeline.validators] == ["postal_code_format", "required"]

    def test_unknown_validator(self) -> None:
        with pytest.raises(ValueError, match="Unknown validator type"):
            create_default_validators(["spelling"])
