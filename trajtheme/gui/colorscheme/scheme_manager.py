"""Global color scheme manager for runtime scheme switching."""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from trajtheme.core import settings
from trajtheme.logging import get_logger

from .base import ColorScheme, scheme_from_dict

logger = get_logger(__name__)


class SchemeManager(QObject):
    """Singleton manager that owns the active color scheme."""

    scheme_changed = pyqtSignal(object)
    _instance: Optional["SchemeManager"] = None

    def __init__(self, app: Optional[QApplication] = None):
        super().__init__()
        from . import SCHEMES

        self._app = app or QApplication.instance()
        self._schemes: dict[str, ColorScheme] = dict(SCHEMES)
        self._current: Optional[ColorScheme] = None
        self._current_id: Optional[str] = None

    @classmethod
    def instance(cls, app: Optional[QApplication] = None) -> "SchemeManager":
        if cls._instance is None:
            cls._instance = cls(app)
        elif app is not None:
            cls._instance._app = app
        return cls._instance

    def register(self, scheme_id: str, scheme: ColorScheme) -> None:
        """Add a scheme under a new id."""
        if not isinstance(scheme, ColorScheme):
            raise TypeError(f"Expected ColorScheme, got {type(scheme).__name__}")
        if scheme_id in self._schemes:
            raise ValueError(f"Color scheme id already registered: {scheme_id}")
        self._schemes[scheme_id] = scheme
        logger.debug(f"Registered color scheme '{scheme_id}'")

    def load_user_schemes(self) -> list[str]:
        """Register schemes stored in settings; returns the ids that were added."""
        added = []
        for scheme_id, data in settings.get_user_schemes().items():
            try:
                if not isinstance(data, dict):
                    raise ValueError("expected a mapping of fields")
                self.register(scheme_id, scheme_from_dict(data))
            except (TypeError, ValueError) as exc:
                logger.warning(f"Skipping user color scheme '{scheme_id}': {exc}")
                continue
            added.append(scheme_id)
        return added

    def get(self, scheme_id: str) -> ColorScheme:
        scheme = self._schemes.get(scheme_id)
        if scheme is None:
            raise ValueError(f"Unknown color scheme id: {scheme_id}")
        return scheme

    def set_scheme(self, scheme_id: str, persist: bool = False) -> None:
        scheme = self.get(scheme_id)

        if self._app is None:
            self._app = QApplication.instance()

        if self._app is not None:
            self._apply_palette(self._app, scheme)

        if persist:
            settings.set_scheme_id(scheme_id)

        self._current = scheme
        self._current_id = scheme_id
        logger.info(f"Color scheme set to '{scheme_id}'")
        self.scheme_changed.emit(scheme)

    @staticmethod
    def _apply_palette(app: QApplication, scheme: ColorScheme) -> None:
        palette = QPalette(app.palette())
        palette.setColor(QPalette.ColorRole.Window, QColor(scheme.ui_main_bg_color))
        palette.setColor(QPalette.ColorRole.Button, QColor(scheme.trajectory_slider_bg_color))
        palette.setColor(QPalette.ColorRole.ButtonText, QColor(scheme.trajectory_text_color))
        palette.setColor(QPalette.ColorRole.Highlight, QColor(scheme.trajectory_slider_fg_color))
        app.setPalette(palette)

    def _resolve_initial_id(self) -> str:
        from . import DEFAULT_SCHEME_ID

        stored = settings.get_scheme_id()
        if stored in self._schemes:
            return stored
        if stored is not None:
            logger.warning(f"Stored color scheme '{stored}' is unknown, using '{DEFAULT_SCHEME_ID}'")
        return DEFAULT_SCHEME_ID

    @property
    def current(self) -> ColorScheme:
        if self._current is None:
            self.set_scheme(self._resolve_initial_id())
        return self._current

    @property
    def current_id(self) -> str:
        if self._current_id is None:
            self.set_scheme(self._resolve_initial_id())
        return self._current_id

    def available(self) -> list[str]:
        return list(self._schemes)
