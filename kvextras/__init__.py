"""Kivy / KivyMD convenience extensions: dates, keyboard adjusting, markup fonts.

Kivy-dependent pieces live in :mod:`kvextras.keyboard`,
:mod:`kvextras.screens` and :mod:`kvextras.settings` and are imported
explicitly.
"""

from kvextras.keyboard_frame import KeyboardChangeEvent, Rect, adjusted_constant
from kvextras.styled_text import increase_font_size, scale_label_font

__version__ = "0.1.0"

__all__ = [
    "KeyboardChangeEvent",
    "Rect",
    "adjusted_constant",
    "increase_font_size",
    "scale_label_font",
]
