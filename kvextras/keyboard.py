"""Keep screen content above the on-screen keyboard.

A screen mixes in :class:`KeyboardAdjusting`, owns an
:class:`AdjustableConstraint` whose ``constant`` is its bottom inset, and
calls :meth:`KeyboardAdjusting.register_for_keyboard_notifications` once
while it is being built. :class:`KeyboardNotificationCenter` turns
``Window.keyboard_height`` changes into the two keyboard notifications.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from kivy.animation import Animation
from kivy.event import EventDispatcher
from kivy.properties import NumericProperty

from kvextras.keyboard_frame import KeyboardChangeEvent, adjusted_constant, make_user_info
from kvextras.settings import get_keyboard_animation_defaults


class AdjustableConstraint(EventDispatcher):
    """Numeric layout parameter owned by a screen.

    ``constant`` is the target value. ``layout_constant`` is what widgets
    bind to; it catches up with ``constant`` on each layout pass.
    """

    constant = NumericProperty(0)
    layout_constant = NumericProperty(0)

    def layout_if_needed(self, duration: float = 0, transition: str = "linear") -> None:
        """Move ``layout_constant`` to ``constant``, animated when ``duration`` > 0."""
        Animation.cancel_all(self, "layout_constant")
        if duration <= 0:
            self.layout_constant = self.constant
            return
        Animation(layout_constant=self.constant, d=duration, t=transition).start(self)


class KeyboardNotificationCenter(EventDispatcher):
    """Dispatches keyboard frame-change and hide notifications."""

    __events__ = ("on_keyboard_will_change_frame", "on_keyboard_will_hide")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._window = None
        self._keyboard_height = 0

    def on_keyboard_will_change_frame(self, user_info):
        pass

    def on_keyboard_will_hide(self):
        pass

    def post_frame_change(self, user_info: Optional[Mapping[str, Any]]) -> None:
        self.dispatch("on_keyboard_will_change_frame", user_info)

    def post_hide(self) -> None:
        self.dispatch("on_keyboard_will_hide")

    def bind_window(self, window=None) -> None:
        """Translate ``keyboard_height`` changes of ``window`` into notifications."""
        if window is None:
            from kivy.core.window import Window

            window = Window
        self.unbind_window()
        self._window = window
        self._keyboard_height = window.keyboard_height
        window.bind(keyboard_height=self._on_keyboard_height)

    def unbind_window(self) -> None:
        if self._window is None:
            return
        self._window.unbind(keyboard_height=self._on_keyboard_height)
        self._window = None

    def _on_keyboard_height(self, window, height):
        previous, self._keyboard_height = self._keyboard_height, height
        if height == previous:
            return
        duration, curve = get_keyboard_animation_defaults()
        self.post_frame_change(
            make_user_info(window.width, window.height, height, duration, curve)
        )
        if height <= 0:
            self.post_hide()


_default_center: Optional[KeyboardNotificationCenter] = None


def default_center() -> KeyboardNotificationCenter:
    """Return the process-wide notification center."""
    global _default_center
    if _default_center is None:
        _default_center = KeyboardNotificationCenter()
    return _default_center


class KeyboardAdjusting:
    """Mixin adjusting ``constraint_to_adjust`` as the keyboard moves.

    The host must provide ``get_root_window()`` (every Kivy widget does) and
    a ``constraint_to_adjust`` attribute holding the constraint for the
    bottom of the content that should stay above the keyboard.
    """

    constraint_to_adjust: Optional[AdjustableConstraint] = None
    _keyboard_center: Optional[KeyboardNotificationCenter] = None

    # -- notification callbacks ------------------------------------------
    def keyboard_will_change_frame(self, user_info):
        self.keyboard_will_change(user_info)

    def keyboard_will_hide(self):
        self.keyboard_will_disappear()

    # -- registration ----------------------------------------------------
    def register_for_keyboard_notifications(
        self, center: Optional[KeyboardNotificationCenter] = None
    ) -> None:
        """Observe keyboard notifications; call once while building the view.

        Observers are held weakly so a discarded view stops receiving
        notifications without calling
        :meth:`unregister_keyboard_notifications`.
        """

        if center is None:
            center = default_center()
        self.unregister_keyboard_notifications()
        center.bind(
            on_keyboard_will_change_frame=self._keyboard_frame_notification,
            on_keyboard_will_hide=self._keyboard_hide_notification,
        )
        self._keyboard_center = center

    def unregister_keyboard_notifications(self) -> None:
        center = self._keyboard_center
        if center is None:
            return
        center.unbind(
            on_keyboard_will_change_frame=self._keyboard_frame_notification,
            on_keyboard_will_hide=self._keyboard_hide_notification,
        )
        self._keyboard_center = None

    def _keyboard_frame_notification(self, center, user_info):
        self.keyboard_will_change_frame(user_info)

    def _keyboard_hide_notification(self, center):
        self.keyboard_will_hide()

    # -- adjustments -----------------------------------------------------
    def keyboard_window(self):
        """Window the view is displayed in, or ``None`` when detached."""
        get_root_window = getattr(self, "get_root_window", None)
        return get_root_window() if get_root_window else None

    def keyboard_will_change(
        self,
        user_info: Optional[Mapping[str, Any]],
        constraint: Optional[AdjustableConstraint] = None,
    ) -> None:
        """Set the constraint from the keyboard frame in ``user_info``.

        ``constraint`` replaces ``constraint_to_adjust`` for this call. An
        incomplete payload or a view without a window leaves everything
        untouched.
        """

        event = KeyboardChangeEvent.from_user_info(user_info)
        if event is None:
            logging.debug("Ignoring incomplete keyboard payload: %r", user_info)
            return
        window = self.keyboard_window()
        if window is None:
            logging.debug("Ignoring keyboard change for %r: no window", self)
            return
        target = constraint if constraint is not None else self.constraint_to_adjust
        if target is None:
            return
        target.constant = adjusted_constant(window.height, event)
        self.animate_keyboard_layout(target, event.duration, event.transition)

    def keyboard_will_disappear(
        self, constraint: Optional[AdjustableConstraint] = None
    ) -> None:
        """Reset the constraint to zero; animating is left to the caller."""
        target = constraint if constraint is not None else self.constraint_to_adjust
        if target is not None:
            target.constant = 0

    def animate_keyboard_layout(self, constraint, duration: float, transition: str) -> None:
        constraint.layout_if_needed(duration, transition)


__all__ = [
    "AdjustableConstraint",
    "KeyboardNotificationCenter",
    "KeyboardAdjusting",
    "default_center",
]
