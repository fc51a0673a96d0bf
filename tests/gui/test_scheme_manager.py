"""SchemeManager tests: switching, persistence and user schemes."""

import dataclasses

import pytest
from PyQt6.QtGui import QColor, QPalette

from trajtheme.core import settings
from trajtheme.gui.colorscheme import (
    CUSTOM_DARK_SCHEME,
    DEFAULT_SCHEME_ID,
    RED_DARK_SCHEME,
    SCHEMES,
    scheme_to_dict,
)
from trajtheme.gui.colorscheme.scheme_manager import SchemeManager


@pytest.fixture
def manager(qapp):
    return SchemeManager.instance(qapp)


class TestSingleton:
    def test_instance_is_shared(self, qapp):
        assert SchemeManager.instance() is SchemeManager.instance(qapp)


class TestSwitching:
    def test_default_is_custom_dark(self, manager):
        assert manager.current is CUSTOM_DARK_SCHEME
        assert manager.current_id == DEFAULT_SCHEME_ID

    def test_set_scheme_emits_signal(self, manager):
        received = []
        manager.scheme_changed.connect(received.append)
        manager.set_scheme("red_dark")
        assert received == [RED_DARK_SCHEME]
        assert manager.current is RED_DARK_SCHEME

    def test_unknown_id_raises(self, manager):
        with pytest.raises(ValueError, match="Unknown color scheme id: neon"):
            manager.set_scheme("neon")

    def test_applies_application_palette(self, manager, qapp):
        manager.set_scheme("custom_dark")
        palette = qapp.palette()
        assert palette.color(QPalette.ColorRole.Window) == QColor(CUSTOM_DARK_SCHEME.ui_main_bg_color)
        assert palette.color(QPalette.ColorRole.Highlight) == QColor(
            CUSTOM_DARK_SCHEME.trajectory_slider_fg_color
        )

    def test_available_lists_builtins(self, manager):
        assert manager.available() == list(SCHEMES)


class TestPersistence:
    def test_set_scheme_does_not_persist_by_default(self, manager):
        manager.set_scheme("red_dark")
        assert settings.get_setting(settings.SCHEME_KEY) is None

    def test_persisted_scheme_restored(self, qapp):
        SchemeManager.instance(qapp).set_scheme("blue_dark", persist=True)
        SchemeManager._instance = None
        assert SchemeManager.instance(qapp).current_id == "blue_dark"

    def test_unknown_persisted_scheme_falls_back(self, manager):
        settings.set_setting(settings.SCHEME_KEY, "gone")
        assert manager.current_id == DEFAULT_SCHEME_ID

    @pytest.mark.parametrize("stored", [["red_dark"], {"id": "red_dark"}, 7])
    def test_non_string_persisted_scheme_falls_back(self, manager, caplog, stored):
        settings.set_setting(settings.SCHEME_KEY, stored)
        assert manager.current_id == DEFAULT_SCHEME_ID
        assert manager.current is CUSTOM_DARK_SCHEME
        assert "expected a string" in caplog.text


class TestUserSchemes:
    def test_register(self, manager):
        muted = dataclasses.replace(CUSTOM_DARK_SCHEME, axis_hover_opacity=0.5)
        manager.register("muted", muted)
        manager.set_scheme("muted")
        assert manager.current is muted

    def test_register_duplicate_raises(self, manager):
        with pytest.raises(ValueError, match="already registered"):
            manager.register("custom_dark", CUSTOM_DARK_SCHEME)

    def test_register_wrong_type_raises(self, manager):
        with pytest.raises(TypeError):
            manager.register("plain", scheme_to_dict(CUSTOM_DARK_SCHEME))

    def test_register_does_not_touch_builtin_registry(self, manager):
        manager.register("copy", CUSTOM_DARK_SCHEME)
        assert "copy" not in SCHEMES

    def test_load_user_schemes_skips_invalid(self, manager, caplog):
        good = scheme_to_dict(CUSTOM_DARK_SCHEME)
        good["ui_main_bg_color"] = "#000000"
        bad = dict(good, axis_normal_opacity=3.0)
        settings.set_setting(settings.USER_SCHEMES_KEY, {
            "midnight": good,
            "broken": bad,
            "not_a_dict": 7,
        })

        added = manager.load_user_schemes()

        assert added == ["midnight"]
        assert manager.get("midnight").ui_main_bg_color == "#000000"
        assert "broken" in caplog.text
        assert "not_a_dict" in caplog.text

    def test_load_user_schemes_ignores_non_mapping(self, manager):
        settings.set_setting(settings.USER_SCHEMES_KEY, ["nope"])
        assert manager.load_user_schemes() == []
