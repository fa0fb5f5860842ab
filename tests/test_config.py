"""Tests for RenderConfig and RenderFormat."""

import pydantic
import pytest

from sim_rating import RenderConfig, RenderFormat


class TestRenderConfig:
    def test_defaults(self):
        config = RenderConfig()
        assert config.type == "stars"
        assert config.color == "#ffc107"
        assert config.size == "1em"
        assert config.show_average is True
        assert config.show_total is True
        assert config.interactive is False
        assert config.bar_height == "20px"
        assert config.bar_spacing == "8px"
        assert config.bar_border_radius == "4px"
        assert config.bar_show_percentages is True
        assert config.bar_percentage_precision == 1
        assert config.bar_percentage_suffix == "%"
        assert config.show_summary is True

    @pytest.mark.parametrize("key", ["showAverage", "show_average"])
    def test_both_spellings_accepted(self, key):
        assert RenderConfig.from_options({key: False}).show_average is False

    def test_unknown_options_ignored(self):
        config = RenderConfig.from_options({"theme": "dark"})
        assert config == RenderConfig()

    def test_merge_precedence(self):
        base = RenderConfig.from_options({"color": "red", "barHeight": "10px"})
        merged = base.merged({"bar_height": "30px"})
        assert merged.color == "red"
        assert merged.bar_height == "30px"
        assert base.bar_height == "10px"

    def test_merge_without_overrides_returns_same(self):
        base = RenderConfig()
        assert base.merged(None) is base
        assert base.merged({}) is base

    def test_merge_validates(self):
        with pytest.raises(pydantic.ValidationError):
            RenderConfig().merged({"barPercentagePrecision": -1})

    def test_frozen(self):
        config = RenderConfig()
        with pytest.raises(pydantic.ValidationError):
            config.color = "blue"


class TestRenderFormat:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("html", RenderFormat.HTML),
            ("SVG", RenderFormat.SVG),
            ("Json", RenderFormat.JSON),
            ("bogus-format", RenderFormat.HTML),
            (None, RenderFormat.HTML),
            (RenderFormat.SVG, RenderFormat.SVG),
        ],
    )
    def test_parse(self, value, expected):
        assert RenderFormat.parse(value) is expected

    def test_media_types(self):
        assert RenderFormat.HTML.media_type == "text/html"
        assert RenderFormat.SVG.media_type == "image/svg+xml"
        assert RenderFormat.JSON.media_type == "application/json"
