"""Demo app: a note form that stays above the on-screen keyboard."""

from datetime import datetime
import logging
import os
import sys

from kivy.core.window import Window
from kivy.lang import Builder
from kivy.properties import NumericProperty
from kivymd.app import MDApp

from kvextras import dates
from kvextras.keyboard import default_center
from kvextras.screens import KeyboardAdjustingScreen
from kvextras.settings import apply_env_overrides, get_font_scale, scaled_sp
from kvextras.styled_text import increase_font_size

apply_env_overrides()

if os.name == "nt" or sys.platform.startswith("win"):
    Window.size = (280, 280 * (20 / 9))

KV = '''
<NoteScreen>:
    MDBoxLayout:
        orientation: "vertical"
        padding: 0, 0, 0, root.keyboard_inset

        MDTopAppBar:
            title: "Notes"
            elevation: 4

        MDLabel:
            id: stamp
            markup: True
            halign: "center"
            size_hint_y: None
            height: "48dp"

        ScrollView:
            MDTextField:
                id: editor
                hint_text: "Write something"
                size_hint_y: None
                height: self.minimum_height
                multiline: True
                font_size: app.body_font_size

        MDRaisedButton:
            text: "Stamp"
            size_hint: None, None
            size: "120dp", "40dp"
            pos_hint: {"center_x": 0.5}
            on_release: root.stamp()

MDScreenManager:
    NoteScreen:
        name: "note"
'''


class NoteScreen(KeyboardAdjustingScreen):
    def on_kv_post(self, base_widget):
        self.stamp()

    def stamp(self):
        now = datetime.now()
        text = (
            f"[size=16sp][b]{dates.relative_day_and_time_string(now)}[/b][/size]\n"
            f"[size=12sp]{dates.iso8601_date_and_time_string(now)}[/size]"
        )
        self.ids.stamp.text = increase_font_size(text, get_font_scale())


class NotesApp(MDApp):
    body_font_size = NumericProperty(scaled_sp(16))

    def build(self):
        self.theme_cls.primary_palette = "Blue"
        default_center().bind_window(Window)
        logging.info("Keyboard notifications bound to window %s", Window)
        return Builder.load_string(KV)

    def on_stop(self):
        default_center().unbind_window()


if __name__ == "__main__":
    NotesApp().run()
