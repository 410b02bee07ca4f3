"""
Entity mapper tests - output shapes and flag normalization
"""

import pytest

from conftest import make_group_row, make_person_columns
from services.mappers import (
    UNIT_BUSINESS_FIELDS,
    UNIT_FLAG_FIELDS,
    UNIT_WRITABLE_FIELDS,
    map_group,
    map_person,
    map_responsible,
    map_unit_detail,
    map_unit_full,
    normalize_flag,
    unit_update_assignments,
    unit_write_values,
)


class TestNormalizeFlag:

    @pytest.mark.parametrize("value", ["true", True])
    def test_true_values(self, value):
        assert normalize_flag(value) is True

    @pytest.mark.parametrize("value", ["false", False, None, 0, 1, "", "TRUE", "yes", "1", [], {}])
    def test_everything_else_is_false(self, value):
        assert normalize_flag(value) is False


class TestReadMappers:

    def test_person_keeps_every_key(self):
        person = map_person({"Person_id": 3, "email": "bob@example.com"})

        assert person == {
            "Person_id": 3,
            "first_name": None,
            "last_name": None,
            "job_title": None,
            "email": "bob@example.com",
            "phone_number": None,
            "role": None,
            "zone_name": None,
        }

    def test_responsible_reads_aliased_zone(self):
        row = {"zone_name": "unit zone", **make_person_columns(5, zone="APAC")}

        assert map_responsible(row)["zone_name"] == "APAC"

    def test_responsible_is_none_without_person_id(self):
        assert map_responsible(make_person_columns(None)) is None

    def test_full_unit_has_every_business_field(self):
        unit = map_unit_full({"unit_id": 1, "unit_name": "Lyon"})

        for field in UNIT_BUSINESS_FIELDS:
            assert field in unit
            assert unit[field] is None
        assert unit["groupe_id"] is None
        assert unit["com_person_id"] is None
        assert unit["responsible"] is None

    def test_unit_detail_adds_group_name(self):
        row = {"unit_id": 1, "unit_name": "Lyon", "groupe_id": 2, "groupe_name": "Acme"}

        detail = map_unit_detail(row)

        assert detail["groupe_name"] == "Acme"
        assert detail["groupe_id"] == 2

    def test_group_units_key_only_when_given(self):
        row = make_group_row(1, "Acme", extra_column="ignored")

        assert map_group(row) == {"groupe_id": 1, "groupe_name": "Acme", "Description": None}
        assert map_group(row, units=[])["units"] == []


class TestUnitWriteValues:

    def test_values_follow_column_order(self):
        values = unit_write_values({"groupe_id": 4, "unit_name": "Lyon", "city": "Lyon"})

        assert len(values) == len(UNIT_WRITABLE_FIELDS)
        by_field = dict(zip(UNIT_WRITABLE_FIELDS, values))
        assert by_field["groupe_id"] == 4
        assert by_field["unit_name"] == "Lyon"
        assert by_field["city"] == "Lyon"
        assert by_field["country"] is None

    def test_flags_are_strict_booleans(self):
        payload = {
            "key_account": "true",
            "copy_billing": True,
            "confidentiality_agreement": "false",
            "quality_agreement": 0,
        }

        by_field = dict(zip(UNIT_WRITABLE_FIELDS, unit_write_values(payload)))

        assert by_field["key_account"] is True
        assert by_field["copy_billing"] is True
        assert by_field["confidentiality_agreement"] is False
        assert by_field["quality_agreement"] is False
        for flag in UNIT_FLAG_FIELDS:
            assert isinstance(by_field[flag], bool)

    def test_blank_strings_become_none_and_zero_is_kept(self):
        by_field = dict(zip(UNIT_WRITABLE_FIELDS, unit_write_values({"website": "  ", "employees": 0})))

        assert by_field["website"] is None
        assert by_field["employees"] == 0

    def test_zero_references_become_none(self):
        by_field = dict(zip(UNIT_WRITABLE_FIELDS, unit_write_values({"groupe_id": 0, "com_person_id": 0})))

        assert by_field["groupe_id"] is None
        assert by_field["com_person_id"] is None


class TestUnitUpdateAssignments:

    def test_only_sent_fields_in_column_order(self):
        assignments = unit_update_assignments({"city": "Lyon", "unit_name": "Renamed", "key_account": "true"})

        assert assignments == [("unit_name", "Renamed"), ("city", "Lyon"), ("key_account", True)]

    def test_null_group_is_skipped(self):
        assert unit_update_assignments({"groupe_id": None, "unit_name": "Renamed"}) == [("unit_name", "Renamed")]
        assert unit_update_assignments({"groupe_id": 0, "unit_name": "Renamed"}) == [("unit_name", "Renamed")]

    def test_sent_null_clears_the_column(self):
        assignments = unit_update_assignments({"unit_name": "Renamed", "com_person_id": None, "website": ""})

        assert assignments == [("unit_name", "Renamed"), ("com_person_id", None), ("website", None)]
