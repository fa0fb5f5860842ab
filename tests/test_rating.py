"""Tests for the public Rating class."""

import json
import logging
from unittest.mock import MagicMock

import pytest

from sim_rating import (
    InvalidOptionError,
    InvalidRatingValueError,
    MissingRatingKeysError,
    Rating,
    RenderFormat,
    ValidationError,
)
from sim_rating.renderers import RendererDefinition, RendererRegistry


def _broken(calculator, config):
    raise RuntimeError("renderer exploded")


class TestConstruction:
    def test_valid(self, sample_ratings):
        rating = Rating(sample_ratings)
        assert isinstance(rating, Rating)
        assert dict(rating.ratings) == sample_ratings

    def test_missing_keys(self):
        with pytest.raises(MissingRatingKeysError) as exc_info:
            Rating({})
        assert "Missing required rating keys" in str(exc_info.value)

    def test_negative_value(self, sample_ratings):
        sample_ratings["oneStar"] = -1
        with pytest.raises(InvalidRatingValueError, match="oneStar"):
            Rating(sample_ratings)

    def test_invalid_option(self, sample_ratings):
        with pytest.raises(InvalidOptionError):
            Rating(sample_ratings, {"showAverage": "sometimes"})
        assert issubclass(InvalidOptionError, ValidationError)

    def test_options_layered_over_defaults(self, sample_ratings):
        rating = Rating(sample_ratings, {"type": "bars", "bar_height": "10px"})
        assert rating.options.type == "bars"
        assert rating.options.bar_height == "10px"
        assert rating.options.color == "#ffc107"

    def test_repr(self, rating):
        assert repr(rating).startswith("Rating(oneStar=10")


class TestQueries:
    def test_queries(self, rating):
        assert rating.get_total() == 125
        assert rating.get_average() == 3.56
        assert rating.get_distribution()["fiveStar"] == 40.0
        assert rating.get_distribution()["oneStar"] == 8.0

    def test_summary(self, rating):
        assert rating.summary().model_dump() == {
            "average": rating.get_average(),
            "total": rating.get_total(),
            "distribution": rating.get_distribution(),
        }


class TestRender:
    def test_default_is_html(self, rating):
        assert rating.render() == rating.render("html")
        assert 'class="sim-rating"' in rating.render()

    @pytest.mark.parametrize("fmt", ["bogus-format", "", "xml"])
    def test_unknown_format_falls_back_to_html(self, rating, fmt):
        assert rating.render(fmt) == rating.render("html")

    def test_case_insensitive(self, rating):
        assert rating.render("SVG") == rating.render("svg")
        assert rating.render(RenderFormat.JSON) == rating.render("json")

    def test_json_round_trip(self, rating):
        data = json.loads(rating.render("json"))
        assert data == {
            "average": rating.get_average(),
            "total": rating.get_total(),
            "distribution": rating.get_distribution(),
        }

    def test_overrides_apply_to_one_call(self, rating):
        bars = rating.render("html", {"type": "bars"})
        assert "sim-rating-bars" in bars
        assert "Average: <strong>3.6</strong> from <strong>125</strong> ratings" in bars
        assert "sim-rating-bars" not in rating.render("html")

    def test_instance_options_used(self, sample_ratings):
        rating = Rating(sample_ratings, {"interactive": True})
        assert "rating-change" in rating.render("html")
        assert "rating-change" not in rating.render("html", {"interactive": False})

    def test_snake_case_tally_renders_the_same(self, sample_ratings):
        snake = Rating(
            {
                "one_star": 10,
                "two_star": 20,
                "three_star": 15,
                "four_star": 30,
                "five_star": 50,
            }
        )
        assert snake.render("json") == Rating(sample_ratings).render("json")

    def test_media_type(self, rating):
        assert rating.media_type("svg") == "image/svg+xml"
        assert rating.media_type("JSON") == "application/json"
        assert rating.media_type("bogus") == "text/html"


class TestRenderFailures:
    """Render errors are logged and become an empty string."""

    def test_bad_override_returns_empty(self, rating, caplog):
        with caplog.at_level(logging.WARNING, logger="sim_rating.rating"):
            result = rating.render("html", {"barPercentagePrecision": -1})
        assert result == ""
        assert "Error rendering rating" in caplog.text

    def test_json_ignores_bad_style_overrides(self, rating, caplog):
        with caplog.at_level(logging.WARNING, logger="sim_rating.rating"):
            result = rating.render("json", {"barPercentagePrecision": -1})
        assert json.loads(result) == rating.summary().model_dump()
        assert "Error rendering rating" not in caplog.text

    def test_none_overrides_use_defaults(self, rating):
        svg = rating.render("svg", {"color": None, "showAverage": None})
        assert 'fill="#ffc107"' in svg
        assert ">3.6 (125 ratings)</text>" in svg

        html = rating.render("html", {"color": None, "size": None})
        assert 'style="font-size: 1em"' in html
        assert 'style="color: #ffc107"' in html

    def test_failing_renderer_uses_injected_diagnostics(self, sample_ratings):
        diagnostics = MagicMock(spec=logging.Logger)
        registry = RendererRegistry(
            (
                RendererDefinition(
                    format=RenderFormat.HTML,
                    renderer_name="Broken",
                    render=_broken,
                ),
            )
        )
        rating = Rating(sample_ratings, diagnostics=diagnostics, registry=registry)

        assert rating.render("html") == ""
        # svg is not registered and falls back to the broken html renderer
        assert rating.render("svg") == ""
        assert diagnostics.warning.call_count == 2
        assert "renderer exploded" in diagnostics.warning.call_args[0][0]
