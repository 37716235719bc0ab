from kivy.properties import NumericProperty, ObjectProperty
from kivymd.uix.screen import MDScreen

from kvextras.keyboard import AdjustableConstraint, KeyboardAdjusting
from kvextras.settings import get_keyboard_animation_defaults
from kvextras.keyboard_frame import transition_for_curve


class KeyboardAdjustingScreen(KeyboardAdjusting, MDScreen):
    """Screen whose ``keyboard_inset`` follows the on-screen keyboard.

    Bind the bottom padding (or a spacer height) of the content to
    ``root.keyboard_inset`` in kv.
    """

    constraint_to_adjust = ObjectProperty(None, allownone=True)
    keyboard_inset = NumericProperty(0)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.constraint_to_adjust is None:
            self.constraint_to_adjust = AdjustableConstraint()
        self.constraint_to_adjust.bind(layout_constant=self.setter("keyboard_inset"))
        self.register_for_keyboard_notifications()

    def keyboard_will_hide(self):
        super().keyboard_will_hide()
        duration, curve = get_keyboard_animation_defaults()
        self.constraint_to_adjust.layout_if_needed(duration, transition_for_curve(curve))
