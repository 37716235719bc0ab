import importlib.util

import pytest

kivymd_available = (
    importlib.util.find_spec("kivy") is not None
    and importlib.util.find_spec("kivymd") is not None
)

if kivymd_available:
    from kivy.app import App

    from kvextras.keyboard import KeyboardNotificationCenter
    from kvextras.keyboard_frame import make_user_info
    from kvextras.screens import KeyboardAdjustingScreen

    class _DummyApp:
        """Minimal stand-in for :class:`~kivymd.app.MDApp` used in tests."""

        theme_cls = object()

    @pytest.fixture(autouse=True)
    def _provide_app(monkeypatch):
        monkeypatch.setattr(App, "get_running_app", lambda: _DummyApp())
        yield

pytestmark = pytest.mark.skipif(not kivymd_available, reason="Kivy and KivyMD are required")


def test_screen_inset_follows_keyboard(window, monkeypatch):
    monkeypatch.setattr(
        "kvextras.screens.get_keyboard_animation_defaults", lambda: (0, 3)
    )
    screen = KeyboardAdjustingScreen()
    center = KeyboardNotificationCenter()
    screen.register_for_keyboard_notifications(center)
    screen.get_root_window = lambda: window

    center.post_frame_change(make_user_info(400, 800, 250, 0, 3))
    assert screen.constraint_to_adjust.constant == 250
    assert screen.keyboard_inset == 250

    center.post_hide()
    assert screen.constraint_to_adjust.constant == 0
    assert screen.keyboard_inset == 0
