"""Font-size scaling for Kivy markup text."""

import re

# ``[size=20]``, ``[size=13.5sp]`` and friends.
_SIZE_TAG = re.compile(r"\[size=(\d+(?:\.\d+)?|\.\d+)(px|pt|in|cm|mm|dp|sp)?\]")


def _format_size(value: float) -> str:
    text = repr(round(value, 9))
    return text[:-2] if text.endswith(".0") else text


def increase_font_size(markup: str, multiplier: float) -> str:
    """Return ``markup`` with every ``[size=...]`` tag multiplied by ``multiplier``.

    Units are kept. Runs without a size tag use the label's own
    ``font_size`` and are not touched; see :func:`scale_label_font`.
    """

    if multiplier <= 0:
        raise ValueError("multiplier must be positive")

    def _scale(match):
        size = float(match.group(1)) * multiplier
        return f"[size={_format_size(size)}{match.group(2) or ''}]"

    return _SIZE_TAG.sub(_scale, markup)


def scale_label_font(label, multiplier: float) -> None:
    """Scale ``label.font_size`` and, for markup labels, the size tags in its text."""
    if multiplier <= 0:
        raise ValueError("multiplier must be positive")
    label.font_size = label.font_size * multiplier
    if getattr(label, "markup", False):
        label.text = increase_font_size(label.text, multiplier)
