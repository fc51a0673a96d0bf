"""Shared test fixtures for the trajtheme test suite.

Provides a session-wide QApplication, settings isolated in a temporary
directory, and a fresh SchemeManager singleton per test.
"""

import os
import sys

import pytest

# Headless: force Qt offscreen unless the caller chose a platform
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from trajtheme.core import settings
from trajtheme.gui.colorscheme.scheme_manager import SchemeManager


@pytest.fixture(scope="session")
def qapp():
    """Session-scoped QApplication shared by all tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Redirect the settings file so tests never touch ~/.config."""
    settings_dir = tmp_path / "config"
    monkeypatch.setattr(settings, "SETTINGS_DIR", settings_dir)
    monkeypatch.setattr(settings, "SETTINGS_PATH", settings_dir / "settings.json")
    return settings_dir / "settings.json"


@pytest.fixture(autouse=True)
def _reset_scheme_manager():
    SchemeManager._instance = None
    yield
    SchemeManager._instance = None
