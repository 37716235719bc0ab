import os
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

# Prevent opening real windows during tests
os.environ.setdefault("KIVY_WINDOW", "mock")
os.environ.setdefault("KIVY_UNITTEST", "1")
os.environ.setdefault("KIVY_NO_ARGS", "1")
# Headless: let kivy.metrics resolve dp/sp without creating a Window
os.environ.setdefault("KIVY_DPI", "96")
os.environ.setdefault("KIVY_METRICS_DENSITY", "1")



class FakeWindow:
    """Window context exposing only what the keyboard adjuster reads."""

    def __init__(self, width: float = 400, height: float = 800):
        self.width = width
        self.height = height


@pytest.fixture
def window() -> FakeWindow:
    return FakeWindow()
