"""Tests for the parse-or-default helpers."""

import datetime
import uuid

import pytest

from coachweek.utils.parsing import (DEFAULT_SETS_CONFIG, parse_iso_date, parse_json, parse_sets_config,
                                     parse_template_id, schedule_mapping, schedule_template_id, )

TEMPLATE_ID = uuid.UUID("3f2b8c1e-9a4d-4e7b-8c2f-1d6e5a4b3c2d")


class TestParseJson:
    def test_decodes_strings(self):
        assert parse_json('{"a": 1}') == {"a": 1}

    def test_passes_decoded_values_through(self):
        value = [{"reps": 5}]
        assert parse_json(value) is value

    @pytest.mark.parametrize("raw", [None, "", "   ", "{not json", b"\xff\xfe"])
    def test_unusable_input_gives_default(self, raw):
        assert parse_json(raw, default="fallback") == "fallback"


class TestParseTemplateId:
    def test_uuid_passes_through(self):
        assert parse_template_id(TEMPLATE_ID) is TEMPLATE_ID

    def test_canonical_string(self):
        assert parse_template_id(str(TEMPLATE_ID)) == TEMPLATE_ID

    def test_trimmed_and_case_insensitive(self):
        assert parse_template_id(f"  {str(TEMPLATE_ID).upper()}\n") == TEMPLATE_ID

    @pytest.mark.parametrize("raw", [
        None, 42, "", "rest", "not-a-uuid",
        "3f2b8c1e9a4d4e7b8c2f1d6e5a4b3c2d",
        "{3f2b8c1e-9a4d-4e7b-8c2f-1d6e5a4b3c2d}",
        "urn:uuid:3f2b8c1e-9a4d-4e7b-8c2f-1d6e5a4b3c2d",
        "3f2b8c1e-9a4d-4e7b-8c2f-1d6e5a4b3c2",
        "3f2b8c1e-9a4d-4e7b-8c2f-1d6e5a4b3c2g",
    ])
    def test_anything_else_is_none(self, raw):
        assert parse_template_id(raw) is None


class TestParseIsoDate:
    def test_date_and_datetime(self):
        assert parse_iso_date(datetime.date(2026, 3, 2)) == datetime.date(2026, 3, 2)
        assert parse_iso_date(datetime.datetime(2026, 3, 2, 23, 59)) == datetime.date(2026, 3, 2)

    @pytest.mark.parametrize("raw", ["2026-03-02", "2026-03-02T10:00:00Z", " 2026-03-02 "])
    def test_iso_strings(self, raw):
        assert parse_iso_date(raw) == datetime.date(2026, 3, 2)

    @pytest.mark.parametrize("raw", [None, "", "yesterday", "2026-13-01", "02/03/2026", 20260302])
    def test_garbage_is_none(self, raw):
        assert parse_iso_date(raw) is None


class TestParseSetsConfig:
    def test_list_of_dicts(self):
        assert parse_sets_config([{"reps": 5}, {"reps": 3}]) == [{"reps": 5}, {"reps": 3}]

    def test_json_string(self):
        assert len(parse_sets_config('[{"reps": 8}, {"reps": 8}]')) == 2

    def test_non_dict_items_are_dropped(self):
        assert parse_sets_config([{"reps": 5}, "junk", 3]) == [{"reps": 5}]

    @pytest.mark.parametrize("raw", [None, "not json", "[]", [], {"reps": 5}, ["a", "b"]])
    def test_unusable_input_gives_three_default_sets(self, raw):
        assert parse_sets_config(raw) == DEFAULT_SETS_CONFIG

    def test_default_is_a_copy(self):
        sets = parse_sets_config(None)
        sets[0]["reps"] = 1
        assert DEFAULT_SETS_CONFIG[0]["reps"] == 10


class TestSchedule:
    def test_mapping_from_dict_and_string(self):
        assert schedule_mapping({"Monday": None}) == {"Monday": None}
        assert schedule_mapping('{"Monday": null}') == {"Monday": None}

    @pytest.mark.parametrize("raw", [None, "", "garbage", "[1, 2]", ["Monday"], 7])
    def test_unusable_schedule_is_empty(self, raw):
        assert schedule_mapping(raw) == {}

    def test_capitalized_key_first(self):
        other = uuid.uuid4()
        schedule = {"Monday": str(TEMPLATE_ID), "monday": str(other)}
        assert schedule_template_id(schedule, "Monday") == TEMPLATE_ID

    def test_lowercase_key_fallback(self):
        assert schedule_template_id({"monday": str(TEMPLATE_ID)}, "Monday") == TEMPLATE_ID

    def test_missing_null_or_malformed_is_none(self):
        schedule = {"Monday": None, "Tuesday": "legs", "Wednesday": ""}
        for day in ("Monday", "Tuesday", "Wednesday", "Thursday"):
            assert schedule_template_id(schedule, day) is None
