"""
Unit tests for db/pagination.py — PageRequest and Page.

Run from the project root:
    cd backend
    pytest tests/test_pagination.py -v
"""

import pytest

from db.pagination import Page, PageRequest


# ---------------------------------------------------------------------------
# PageRequest
# ---------------------------------------------------------------------------

class TestPageRequest:
    """Zero-based page index + page size."""

    def test_defaults_are_first_page_of_ten(self):
        request = PageRequest()
        assert (request.page_number, request.page_size) == (0, 10)

    def test_offset(self):
        assert PageRequest(3, 25).offset == 75

    def test_negative_page_number_rejected(self):
        with pytest.raises(ValueError):
            PageRequest(-1, 10)

    def test_zero_page_size_rejected(self):
        with pytest.raises(ValueError):
            PageRequest(0, 0)

    def test_navigation_keeps_page_size(self):
        request = PageRequest(2, 5)
        assert request.first() == PageRequest(0, 5)
        assert request.next() == PageRequest(3, 5)
        assert request.previous_or_first() == PageRequest(1, 5)

    def test_previous_of_first_page_is_first_page(self):
        request = PageRequest(0, 5)
        assert request.previous_or_first() == request


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------

class TestPage:
    """Derived navigation predicates."""

    def test_total_pages_rounds_up(self):
        page = Page.of(list(range(10)), PageRequest(0, 10), total_elements=25)
        assert page.total_pages == 3

    def test_empty_collection_has_no_pages(self):
        page = Page.of([], PageRequest(0, 10), total_elements=0)
        assert page.total_pages == 0
        assert not page.has_next
        assert not page.has_previous
        assert page.is_last

    def test_first_of_three_pages(self):
        page = Page.of(list(range(10)), PageRequest(0, 10), total_elements=25)
        assert page.has_next
        assert not page.has_previous
        assert not page.is_last

    def test_middle_page(self):
        page = Page.of(list(range(10)), PageRequest(1, 10), total_elements=25)
        assert page.has_next
        assert page.has_previous

    def test_last_page(self):
        page = Page.of(list(range(5)), PageRequest(2, 10), total_elements=25)
        assert not page.has_next
        assert page.has_previous
        assert page.is_last
        assert len(page) == 5

    def test_exact_multiple_of_page_size(self):
        page = Page.of(list(range(10)), PageRequest(1, 10), total_elements=20)
        assert page.total_pages == 2
        assert page.is_last

    def test_page_past_the_end(self):
        page = Page.of([], PageRequest(7, 10), total_elements=25)
        assert page.has_previous
        assert not page.has_next
