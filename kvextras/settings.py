"""Environment overrides for font scaling and keyboard animation defaults.

Overrides come from environment variables, optionally backed by a JSON
device profile, and must be applied before the values are first read.
"""
import os
import json
import logging
from typing import Tuple, Union

from kivy.metrics import sp

from kvextras.keyboard_frame import CURVE_KEYBOARD, KIVY_TRANSITIONS

# --- Environment flags -----------------------------------------------------
_FONT_SCALE_ENV = os.environ.get("KVEXTRAS_FONT_SCALE")
_DEVICE_PROFILE = os.environ.get("KVEXTRAS_DEVICE_PROFILE")
_KEYBOARD_DURATION_ENV = os.environ.get("KVEXTRAS_KEYBOARD_DURATION")
_KEYBOARD_CURVE_ENV = os.environ.get("KVEXTRAS_KEYBOARD_CURVE")

DEFAULT_KEYBOARD_DURATION = 0.25

_FONT_SCALE = 1.0
_KEYBOARD_DURATION = DEFAULT_KEYBOARD_DURATION
_KEYBOARD_CURVE: Union[int, str] = CURVE_KEYBOARD


def _parse_curve(value) -> Union[int, str]:
    """Curve codes may be given as digits or as a Kivy transition name."""
    text = str(value).strip()
    if text.isdigit():
        return int(text)
    if text in KIVY_TRANSITIONS:
        return text
    logging.warning("Unknown keyboard curve %r, using %d", text, CURVE_KEYBOARD)
    return CURVE_KEYBOARD


def _load_profile() -> dict:
    if not _DEVICE_PROFILE:
        return {}
    try:
        with open(_DEVICE_PROFILE, "r", encoding="utf8") as fh:
            profile = json.load(fh)
    except (OSError, ValueError):
        logging.exception("Could not read device profile %s", _DEVICE_PROFILE)
        return {}
    return profile if isinstance(profile, dict) else {}


def apply_env_overrides() -> None:
    """Apply font-scale and keyboard overrides from the profile and environment."""
    global _FONT_SCALE, _KEYBOARD_DURATION, _KEYBOARD_CURVE
    profile = _load_profile()
    if "fontscale" in profile:
        _FONT_SCALE = float(profile["fontscale"])
    if "keyboard_duration" in profile:
        _KEYBOARD_DURATION = float(profile["keyboard_duration"])
    if "keyboard_curve" in profile:
        _KEYBOARD_CURVE = _parse_curve(profile["keyboard_curve"])
    if _FONT_SCALE_ENV:
        _FONT_SCALE = float(_FONT_SCALE_ENV)
    if _KEYBOARD_DURATION_ENV:
        _KEYBOARD_DURATION = float(_KEYBOARD_DURATION_ENV)
    if _KEYBOARD_CURVE_ENV:
        _KEYBOARD_CURVE = _parse_curve(_KEYBOARD_CURVE_ENV)
    logging.debug(
        "kvextras settings: font scale %.2f, keyboard %.2fs curve %s",
        _FONT_SCALE,
        _KEYBOARD_DURATION,
        _KEYBOARD_CURVE,
    )


def get_font_scale() -> float:
    return _FONT_SCALE


def scaled_sp(value: float) -> float:
    """Return ``sp`` scaled by the active font scale."""
    return sp(value * _FONT_SCALE)


def get_keyboard_animation_defaults() -> Tuple[float, Union[int, str]]:
    """Duration and curve used when the window reports no animation of its own."""
    return _KEYBOARD_DURATION, _KEYBOARD_CURVE


__all__ = [
    "apply_env_overrides",
    "get_font_scale",
    "scaled_sp",
    "get_keyboard_animation_defaults",
    "DEFAULT_KEYBOARD_DURATION",
]
