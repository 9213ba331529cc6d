"""Tile colours for element categories and the contrast helpers around them."""

from __future__ import annotations

from periodic_quiz.constants.ui_constants import (
    MAX_TILE_ANIMATION_DELAY_SECONDS,
    TILE_ANIMATION_STEP_SECONDS,
)

DEFAULT_CATEGORY_COLOR = "#94a3b8"
DARK_TEXT_COLOR = "#0f172a"
LIGHT_TEXT_COLOR = "#ffffff"
BRIGHTNESS_THRESHOLD = 128

CATEGORY_COLORS: dict[str, str] = {
    "alkali metal": "#ef4444",
    "alkaline earth metal": "#f59e0b",
    "transition metal": "#f87171",
    "post-transition metal": "#10b981",
    "metalloid": "#3b82f6",
    "diatomic nonmetal": "#8b5cf6",
    "polyatomic nonmetal": "#a855f7",
    "halogen": "#06b6d4",
    "noble gas": "#ec4899",
    "lanthanide": "#fb923c",
    "actinide": "#f472b6",
    "unknown, probably transition metal": DEFAULT_CATEGORY_COLOR,
    "unknown, probably post-transition metal": DEFAULT_CATEGORY_COLOR,
    "unknown, probably metalloid": DEFAULT_CATEGORY_COLOR,
    "unknown, predicted to be noble gas": DEFAULT_CATEGORY_COLOR,
    "unknown, but predicted to be an alkali metal": DEFAULT_CATEGORY_COLOR,
}


def category_color(category: str | None) -> str:
    return CATEGORY_COLORS.get((category or "").strip().lower(), DEFAULT_CATEGORY_COLOR)


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    clean = hex_color.strip().lstrip("#")
    if len(clean) == 3:
        clean = "".join(ch * 2 for ch in clean)
    if len(clean) != 6:
        raise ValueError(f"Not a hex colour: {hex_color!r}")
    value = int(clean, 16)
    return (value >> 16) & 255, (value >> 8) & 255, value & 255


def rgb_to_hex(red: int, green: int, blue: int) -> str:
    return f"#{red:02x}{green:02x}{blue:02x}"


def invert_hex(hex_color: str) -> str:
    """Opposite colour on each channel, used for the dark-mode background."""
    red, green, blue = hex_to_rgb(hex_color)
    return rgb_to_hex(255 - red, 255 - green, 255 - blue)


def perceived_brightness(hex_color: str) -> float:
    red, green, blue = hex_to_rgb(hex_color)
    return (red * 299 + green * 587 + blue * 114) / 1000


def contrast_text_color(background: str) -> str:
    if perceived_brightness(background) > BRIGHTNESS_THRESHOLD:
        return DARK_TEXT_COLOR
    return LIGHT_TEXT_COLOR


def tile_animation_delay(atomic_number: int) -> float:
    """Staggered reveal delay for a tile, capped so the table settles quickly."""
    return min(atomic_number * TILE_ANIMATION_STEP_SECONDS, MAX_TILE_ANIMATION_DELAY_SECONDS)
