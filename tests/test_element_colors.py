"""Tests for tile colour and contrast helpers."""

import pytest

from periodic_quiz.styling.element_colors import (
    DEFAULT_CATEGORY_COLOR,
    category_color,
    contrast_text_color,
    hex_to_rgb,
    invert_hex,
    perceived_brightness,
    tile_animation_delay,
)


def test_category_color_is_case_insensitive():
    assert category_color("Noble Gas") == "#ec4899"


@pytest.mark.parametrize("category", [None, "", "unknown, probably metalloid", "plasma"])
def test_category_color_default(category):
    assert category_color(category) == DEFAULT_CATEGORY_COLOR


def test_hex_to_rgb():
    assert hex_to_rgb("#ef4444") == (239, 68, 68)
    assert hex_to_rgb("fff") == (255, 255, 255)
    with pytest.raises(ValueError):
        hex_to_rgb("#12345")


def test_invert_hex():
    assert invert_hex("#000000") == "#ffffff"
    assert invert_hex("#f8fafc") == "#070503"


def test_contrast_text_color():
    assert perceived_brightness("#ffffff") == 255
    assert contrast_text_color("#f59e0b") == "#0f172a"
    assert contrast_text_color("#3b82f6") == "#ffffff"


def test_tile_animation_delay_is_capped():
    assert tile_animation_delay(10) == pytest.approx(0.15)
    assert tile_animation_delay(118) == 1.5
