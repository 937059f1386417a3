"""Tests for parameterized query resolution."""

import pytest

from app.core.config import MissingFilterPolicy
from app.core.entities import PATIENTS, PROVIDERS, FilterSpec, InvalidFilterError
from app.services.filter_resolver import FilterResolver


class TestUnfilteredQuery:
    def test_patient_projection(self):
        query = FilterResolver().unfiltered_query(PATIENTS)
        assert query.text == "SELECT patient_id, first_name, last_name, date_of_birth FROM patients"
        assert query.params == {}

    def test_provider_projection_has_no_identifier(self):
        query = FilterResolver().unfiltered_query(PROVIDERS)
        assert query.text == "SELECT first_name, last_name, provider_specialty FROM providers"
        assert "provider_id" not in query.text


class TestFilteredQuery:
    def test_binds_single_parameter(self):
        query = FilterResolver().filtered_query(PATIENTS, "John")
        assert query.text.endswith("WHERE first_name = :first_name")
        assert query.params == {"first_name": "John"}

    def test_provider_filters_on_specialty(self):
        query = FilterResolver().filtered_query(PROVIDERS, "Cardiology")
        assert query.text.endswith("WHERE provider_specialty = :provider_specialty")
        assert query.params == {"provider_specialty": "Cardiology"}

    def test_value_never_reaches_query_text(self):
        hostile = "'; DROP TABLE patients; --"
        query = FilterResolver().filtered_query(PATIENTS, hostile)
        assert hostile not in query.text
        assert "DROP" not in query.text
        assert query.params == {"first_name": hostile}

    def test_absent_value_is_bound_as_null(self):
        query = FilterResolver().filtered_query(PATIENTS, None)
        assert query.params == {"first_name": None}


class TestResolve:
    def test_missing_value_lists_everything_by_default(self):
        resolver = FilterResolver(MissingFilterPolicy.UNFILTERED)
        assert resolver.resolve(PATIENTS, None) == resolver.unfiltered_query(PATIENTS)

    def test_missing_value_with_empty_policy(self):
        resolver = FilterResolver(MissingFilterPolicy.EMPTY)
        assert resolver.resolve(PATIENTS, None) is None

    def test_policy_accepts_plain_string(self):
        assert FilterResolver("empty").missing_filter_policy is MissingFilterPolicy.EMPTY

    def test_empty_string_is_a_value(self):
        query = FilterResolver(MissingFilterPolicy.EMPTY).resolve(PROVIDERS, "")
        assert query.params == {"provider_specialty": ""}


class TestFilterSpec:
    def test_designated_field_is_accepted(self):
        spec = FilterSpec(entity=PATIENTS, field="first_name", value="Jane")
        assert spec.value == "Jane"

    def test_other_field_is_rejected(self):
        with pytest.raises(InvalidFilterError):
            FilterSpec(entity=PATIENTS, field="last_name", value="Doe")

    def test_patient_field_is_rejected_for_providers(self):
        with pytest.raises(InvalidFilterError):
            FilterSpec(entity=PROVIDERS, field="first_name", value="Alice")
