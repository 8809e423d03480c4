"""
Tests for domain value objects.
"""

import pytest

from app.domain.value_objects import ReadinessState, SearchCriteria


class TestSearchCriteria:
    """Tests for the SearchCriteria value object."""

    def test_create_empty_criteria(self):
        """Test creating criteria with no restrictions."""
        criteria = SearchCriteria()

        assert criteria.title is None
        assert criteria.min_rating == 0.0
        assert criteria.page_count_low == 0
        assert criteria.page_count_high is None
        assert criteria.is_empty() is True

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"title": "lord"},
            {"min_rating": 4.5},
            {"page_count_low": 100},
            {"page_count_high": 0},
            {"sort_by_rating": True},
            {"sort_by_page_count": True},
        ],
    )
    def test_any_filter_makes_criteria_non_empty(self, kwargs):
        assert SearchCriteria(**kwargs).is_empty() is False

    def test_criteria_is_frozen(self):
        criteria = SearchCriteria()

        with pytest.raises(AttributeError):
            criteria.title = "x"


class TestReadinessState:
    """Tests for the ReadinessState enum."""

    def test_values_are_strings(self):
        assert ReadinessState.READY.value == "ready"
        assert ReadinessState("failed") is ReadinessState.FAILED
