"""Tests for search form validation and the filter-then-paginate composition."""

import pytest

from propspotter.models import Property, SearchCriteria
from propspotter.search import (
    LOCATION_SUGGESTIONS,
    search_properties,
    suggest_locations,
    validate_search_form,
)


class TestSuggestLocations:
    def test_case_insensitive_substring(self) -> None:
        assert suggest_locations("MAHA") == ["Mumbai, Maharashtra", "Pune, Maharashtra"]

    def test_keeps_list_order(self) -> None:
        assert suggest_locations("gujarat") == ["Ahmedabad, Gujarat", "Surat, Gujarat"]

    def test_matches_state_part(self) -> None:
        assert suggest_locations("ncr") == ["Delhi, NCR"]

    def test_empty_query_shows_nothing(self) -> None:
        assert suggest_locations("") == []

    def test_no_match(self) -> None:
        assert suggest_locations("Atlantis") == []

    def test_every_suggestion_is_a_valid_location(self) -> None:
        for suggestion in LOCATION_SUGGESTIONS:
            assert suggest_locations(suggestion) == [suggestion]


class TestValidateSearchForm:
    def test_location_required(self) -> None:
        assert validate_search_form(SearchCriteria()) == {"location": "Location is required"}

    def test_blank_location_rejected(self) -> None:
        assert "location" in validate_search_form(SearchCriteria(location="   "))

    def test_valid(self, default_search_criteria: SearchCriteria) -> None:
        assert validate_search_form(default_search_criteria) == {}


class TestSearchProperties:
    def test_no_criteria_pages_everything(self, catalogue: list[Property]) -> None:
        page = search_properties(catalogue, None, page=1, items_per_page=2)
        assert [p.id for p in page.items] == [1, 2]
        assert page.meta.total_items == 5
        assert page.meta.total_pages == 3

    def test_filters_then_paginates(self, catalogue: list[Property]) -> None:
        criteria = SearchCriteria(property_type="apartment")
        page = search_properties(catalogue, criteria, page=2, items_per_page=2)
        assert [p.id for p in page.items] == [4]
        assert page.meta.total_items == 3
        assert (page.meta.start_index, page.meta.end_index) == (3, 3)

    def test_stale_page_clamped_to_last(self, catalogue: list[Property]) -> None:
        """A page number from a larger result set lands on the new last page."""
        page = search_properties(
            catalogue, SearchCriteria(location="Mumbai"), page=4, items_per_page=1
        )
        assert page.meta.current_page == 2
        assert [p.id for p in page.items] == [3]

    def test_empty_result(self, catalogue: list[Property]) -> None:
        page = search_properties(catalogue, SearchCriteria(location="Chennai"), page=3)
        assert page.items == []
        assert page.meta.current_page == 1
        assert page.meta.total_pages == 0

    @pytest.mark.parametrize("items_per_page", [0, -1])
    def test_non_positive_page_size(self, catalogue: list[Property], items_per_page: int) -> None:
        page = search_properties(catalogue, None, items_per_page=items_per_page)
        assert page.meta.items_per_page == 1
        assert len(page.items) == 1

    def test_default_page_size(self, catalogue: list[Property]) -> None:
        page = search_properties(catalogue, None)
        assert page.meta.items_per_page == 8
        assert len(page.items) == 5
