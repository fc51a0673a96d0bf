"""Base color scheme record shared by every trajectory view theme."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class ColorScheme:
    """Immutable set of colors and opacities read by the trajectory renderer.

    Colors are hex strings (``#rrggbb`` or ``#aarrggbb``); opacities are
    floats in [0, 1]. Every scheme supplies every field.
    """

    is_dark: bool

    bot_body_color: str
    bot_wheel_color: str
    bot_direction_color: str

    axis_x_color: str
    axis_y_color: str

    trajectory_path_color: str
    trajectory_turn_color: str
    trajectory_marker_color: str

    axis_normal_opacity: float
    axis_hover_opacity: float

    trajectory_slider_bg_color: str
    trajectory_slider_fg_color: str
    trajectory_text_color: str

    ui_main_bg_color: str

    def __post_init__(self) -> None:
        if not isinstance(self.is_dark, bool):
            raise TypeError(f"is_dark must be a bool, got {type(self.is_dark).__name__}")

        for name in COLOR_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or not QColor(value).isValid():
                raise ValueError(f"{name} is not a valid color: {value!r}")

        for name in OPACITY_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must lie in [0, 1], got {value}")


OPACITY_FIELDS = ('axis_normal_opacity', 'axis_hover_opacity')

COLOR_FIELDS = tuple(
    f.name for f in fields(ColorScheme)
    if f.name != 'is_dark' and f.name not in OPACITY_FIELDS
)


def scheme_to_dict(scheme: ColorScheme) -> dict[str, Any]:
    """Flatten a scheme into a JSON-friendly dict, in field order."""
    return {f.name: getattr(scheme, f.name) for f in fields(ColorScheme)}


def scheme_from_dict(data: dict[str, Any]) -> ColorScheme:
    """Build a scheme from a dict produced by ``scheme_to_dict``.

    Raises:
        ValueError: on missing or unknown keys, or values that fail validation
    """
    expected = {f.name for f in fields(ColorScheme)}
    missing = expected - data.keys()
    if missing:
        raise ValueError(f"Color scheme is missing fields: {', '.join(sorted(missing))}")
    unknown = data.keys() - expected
    if unknown:
        raise ValueError(f"Color scheme has unknown fields: {', '.join(sorted(unknown))}")

    try:
        return ColorScheme(**data)
    except TypeError as exc:
        raise ValueError(str(exc)) from exc
