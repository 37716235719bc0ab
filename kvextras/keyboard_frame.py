"""Keyboard notification payloads and the frame arithmetic behind them.

Nothing here imports Kivy so the payload handling can be tested on its own.
Frames use a top-left origin: ``frame.y`` is the distance from the top of the
window down to the keyboard's top edge.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Mapping, Optional, Union

KEYBOARD_FRAME_END_KEY = "keyboard_frame_end"
KEYBOARD_ANIMATION_DURATION_KEY = "keyboard_animation_duration"
KEYBOARD_ANIMATION_CURVE_KEY = "keyboard_animation_curve"

# Integer curve codes used by mobile input layers mapped to Kivy
# ``AnimationTransition`` names. 7 is the keyboard's own curve.
CURVE_EASE_IN_OUT = 0
CURVE_EASE_IN = 1
CURVE_EASE_OUT = 2
CURVE_LINEAR = 3
CURVE_KEYBOARD = 7

CURVE_TRANSITIONS: Dict[int, str] = {
    CURVE_EASE_IN_OUT: "in_out_quad",
    CURVE_EASE_IN: "in_quad",
    CURVE_EASE_OUT: "out_quad",
    CURVE_LINEAR: "linear",
    CURVE_KEYBOARD: "out_cubic",
}
DEFAULT_TRANSITION = CURVE_TRANSITIONS[CURVE_EASE_IN_OUT]

# Every name ``kivy.animation.AnimationTransition`` provides.
KIVY_TRANSITIONS = frozenset(
    ["linear"]
    + [
        f"{kind}_{family}"
        for family in (
            "quad", "cubic", "quart", "quint", "sine",
            "expo", "circ", "elastic", "back", "bounce",
        )
        for kind in ("in", "out", "in_out")
    ]
)

Curve = Union[int, str]


@dataclass(frozen=True)
class Rect:
    """Position and size of an on-screen rectangle."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def coerce(cls, value: Any) -> Optional["Rect"]:
        """Return ``value`` as a :class:`Rect` or ``None`` if it is not one.

        Accepts a :class:`Rect` or any four-item sequence of numbers.
        """

        if isinstance(value, Rect):
            return value
        if isinstance(value, (str, bytes)):
            return None
        try:
            items = list(value)
        except TypeError:
            return None
        if len(items) != 4 or not all(_is_number(v) for v in items):
            return None
        return cls(*(float(v) for v in items))


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def transition_for_curve(curve: Curve) -> str:
    """Map a curve descriptor to a Kivy transition name.

    Strings are taken to already be transition names. Unknown names and
    integer codes fall back to :data:`DEFAULT_TRANSITION`.
    """

    if isinstance(curve, str):
        return curve if curve in KIVY_TRANSITIONS else DEFAULT_TRANSITION
    return CURVE_TRANSITIONS.get(curve, DEFAULT_TRANSITION)


@dataclass(frozen=True)
class KeyboardChangeEvent:
    """Keyboard frame at animation end plus the animation parameters."""

    frame: Rect
    duration: float
    curve: Curve

    @property
    def transition(self) -> str:
        return transition_for_curve(self.curve)

    @classmethod
    def from_user_info(
        cls, user_info: Optional[Mapping[str, Any]]
    ) -> Optional["KeyboardChangeEvent"]:
        """Build an event from a notification payload.

        Returns ``None`` when the payload is missing or any of the frame,
        duration or curve entries is absent, of the wrong type or not finite.
        A curve name must be a Kivy transition.
        """

        if not user_info:
            return None
        frame = Rect.coerce(user_info.get(KEYBOARD_FRAME_END_KEY))
        if frame is None:
            return None
        duration = user_info.get(KEYBOARD_ANIMATION_DURATION_KEY)
        if not _is_number(duration) or duration < 0:
            return None
        curve = user_info.get(KEYBOARD_ANIMATION_CURVE_KEY)
        if isinstance(curve, bool) or not isinstance(curve, (int, str)):
            return None
        if isinstance(curve, str) and curve not in KIVY_TRANSITIONS:
            return None
        return cls(frame=frame, duration=float(duration), curve=curve)

    def to_user_info(self) -> Dict[str, Any]:
        return {
            KEYBOARD_FRAME_END_KEY: self.frame,
            KEYBOARD_ANIMATION_DURATION_KEY: self.duration,
            KEYBOARD_ANIMATION_CURVE_KEY: self.curve,
        }


def adjusted_constant(window_height: float, event: KeyboardChangeEvent) -> float:
    """Return the bottom inset that keeps content above the keyboard."""
    return window_height - event.frame.y


def make_user_info(
    window_width: float,
    window_height: float,
    keyboard_height: float,
    duration: float,
    curve: Curve,
) -> Dict[str, Any]:
    """Build a payload for a keyboard of ``keyboard_height`` docked at the bottom.

    A zero height places the keyboard just below the window.
    """

    frame = Rect(0.0, window_height - keyboard_height, window_width, keyboard_height)
    return KeyboardChangeEvent(frame=frame, duration=duration, curve=curve).to_user_info()


__all__ = [
    "KEYBOARD_FRAME_END_KEY",
    "KEYBOARD_ANIMATION_DURATION_KEY",
    "KEYBOARD_ANIMATION_CURVE_KEY",
    "CURVE_EASE_IN_OUT",
    "CURVE_EASE_IN",
    "CURVE_EASE_OUT",
    "CURVE_LINEAR",
    "CURVE_KEYBOARD",
    "CURVE_TRANSITIONS",
    "DEFAULT_TRANSITION",
    "KIVY_TRANSITIONS",
    "Rect",
    "KeyboardChangeEvent",
    "transition_for_curve",
    "adjusted_constant",
    "make_user_info",
]
