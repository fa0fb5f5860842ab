"""Tests for the demo page builder."""

import pytest

from sim_rating import ValidationError
from sim_rating.demo import DEMO_RATINGS, build_demo_page


class TestBuildDemoPage:
    def test_sections(self):
        page = build_demo_page()
        assert page.startswith("<!DOCTYPE html>")
        for element_id in (
            "vanilla-rating",
            "module-rating",
            "interactive-rating",
            "svg-rating",
            "interactive-output",
            "json-rating",
        ):
            assert f'id="{element_id}"' in page

    def test_renders_embedded(self):
        page = build_demo_page()
        assert "sim-rating-bars" in page
        assert "5-star" in page
        assert "<svg" in page
        assert "rating-change" in page
        assert "User rated: " in page

    def test_title_escaped(self):
        page = build_demo_page(DEMO_RATINGS, title="<Reviews>")
        assert "<title>&lt;Reviews&gt;</title>" in page

    def test_invalid_tally(self):
        with pytest.raises(ValidationError):
            build_demo_page({"oneStar": 1})
