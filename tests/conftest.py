"""Shared test fixtures for the palettekit test suite.

Provides a session-wide QApplication (offscreen), isolated settings, and
palette/listener helpers.
"""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from palettekit.gui.theme import Color, OverridePalette, PaletteCache, PaletteManager


ORANGE = Color(255, 140, 0)


@pytest.fixture(scope="session")
def qapp():
    """Session-scoped QApplication shared by all tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Point the settings file at a per-test directory."""
    monkeypatch.setenv("PALETTEKIT_CONFIG_DIR", str(tmp_path / "config"))


@pytest.fixture
def ember():
    """A theme that only overrides the accent colour."""
    return OverridePalette({"accent": ORANGE})


@pytest.fixture
def manager():
    """PaletteManager with the built-in catalog."""
    return PaletteManager()


@pytest.fixture
def bare_manager():
    """PaletteManager with an empty catalog."""
    return PaletteManager(register_builtins=False)


@pytest.fixture
def cache(manager):
    c = PaletteCache(manager)
    yield c
    c.close()


class CallRecorder:
    """Listener stand-in that counts its invocations."""

    def __init__(self, name=""):
        self.name = name
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.fixture
def recorder_factory():
    def _make(name=""):
        return CallRecorder(name)
    return _make
