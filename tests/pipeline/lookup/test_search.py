"""Tests for the district name search."""

import pytest

from absence_lookup.config import NO_MATCHES_TEXT
from absence_lookup.pipeline.district_data import DistrictRecord, parse_district_csv
from absence_lookup.pipeline.lookup import SearchStatus, find_district, search_districts


@pytest.fixture
def records(sample_csv_text):
    return parse_district_csv(sample_csv_text)


@pytest.mark.parametrize("query", ["", " ", "a", "C", "  z  ", None])
def test_short_queries_are_not_shown(records, query):
    outcome = search_districts(records, query)
    assert outcome.status is SearchStatus.NOT_SHOWN
    assert not outcome.visible
    assert outcome.matches == ()


def test_short_queries_not_shown_even_without_data():
    assert search_districts([], "a").status is SearchStatus.NOT_SHOWN


def test_matches_are_case_insensitive_and_in_data_order(records):
    outcome = search_districts(records, "CEDAR")
    assert outcome.status is SearchStatus.MATCHES
    assert outcome.names == ["Cedar Falls Union", "North Cedar Academy"]


@pytest.mark.parametrize("query", ["ce", "un", "ol", "ar", "  hollow ", "UNIFIED"])
def test_result_is_exactly_the_matching_subset(records, query):
    needle = query.strip().lower()
    expected = [r.clean_name for r in records if needle in r.clean_name.lower()]
    outcome = search_districts(records, query)
    assert outcome.names == expected
    for name in outcome.names:
        assert needle in name.lower()


def test_no_matches_is_distinct_state(records):
    outcome = search_districts(records, "zzz")
    assert outcome.status is SearchStatus.NO_MATCHES
    assert outcome.visible
    assert outcome.display_text == NO_MATCHES_TEXT


def test_empty_dataset_returns_no_matches():
    outcome = search_districts((), "aspen")
    assert outcome.status is SearchStatus.NO_MATCHES
    assert outcome.matches == ()


def test_search_is_deterministic(records):
    assert search_districts(records, "ce") == search_districts(records, "ce")


def test_find_district_exact_name_ignoring_case(records):
    assert find_district(records, "cedar falls union").clean_name == "Cedar Falls Union"
    assert find_district(records, "cedar") is None


def test_records_with_blank_name_never_match():
    blank = DistrictRecord(clean_name="")
    assert search_districts([blank], "  ").status is SearchStatus.NOT_SHOWN
    assert search_districts([blank], "xx").status is SearchStatus.NO_MATCHES
