"""
Unit tests for the Page value object.
"""

from taskboard.domain.models.page import Page, PageRequest


class TestPage:

    def test_offset(self):
        assert PageRequest(page=0, size=20).offset == 0
        assert PageRequest(page=3, size=5).offset == 15

    def test_total_pages_rounds_up(self):
        assert Page(content=[], page=0, size=20, total_elements=41).total_pages == 3
        assert Page(content=[], page=0, size=20, total_elements=0).total_pages == 0
