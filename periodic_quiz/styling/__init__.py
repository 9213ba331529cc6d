"""Styling module for the periodic table quiz."""

from .color_palette import ColorPalette, Theme
from .element_colors import category_color, contrast_text_color, invert_hex

__all__ = ["ColorPalette", "Theme", "category_color", "contrast_text_color", "invert_hex"]
