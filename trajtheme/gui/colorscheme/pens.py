"""pyqtgraph pens and brushes derived from a color scheme."""

from __future__ import annotations

import pyqtgraph as pg
from PyQt6.QtGui import QBrush, QColor, QPen

from .base import ColorScheme

_TRAJECTORY_FIELDS = {
    'path': 'trajectory_path_color',
    'turn': 'trajectory_turn_color',
    'marker': 'trajectory_marker_color',
}

_BOT_FIELDS = {
    'wheel': 'bot_wheel_color',
    'direction': 'bot_direction_color',
}

# Axis name -> pyqtgraph PlotItem axis
_PLOT_AXES = {'x': 'bottom', 'y': 'left'}


def qcolor(value: str, opacity: float = 1.0) -> QColor:
    """Convert a scheme color to a QColor with the given opacity as alpha."""
    if not 0.0 <= opacity <= 1.0:
        raise ValueError(f"Opacity must lie in [0, 1], got {opacity}")
    color = QColor(value)
    if not color.isValid():
        raise ValueError(f"Invalid color: {value!r}")
    color.setAlphaF(color.alphaF() * opacity)
    return color


def axis_pen(scheme: ColorScheme, axis: str = 'x', hovered: bool = False, width: float = 1) -> QPen:
    if axis not in _PLOT_AXES:
        raise ValueError(f"Unknown axis: {axis}")
    value = scheme.axis_x_color if axis == 'x' else scheme.axis_y_color
    opacity = scheme.axis_hover_opacity if hovered else scheme.axis_normal_opacity
    return pg.mkPen(color=qcolor(value, opacity), width=width)


def trajectory_pen(scheme: ColorScheme, kind: str = 'path', width: float = 1.5) -> QPen:
    try:
        field = _TRAJECTORY_FIELDS[kind]
    except KeyError:
        raise ValueError(f"Unknown trajectory element: {kind}") from None
    return pg.mkPen(color=qcolor(getattr(scheme, field)), width=width)


def bot_pen(scheme: ColorScheme, part: str, width: float = 2) -> QPen:
    try:
        field = _BOT_FIELDS[part]
    except KeyError:
        raise ValueError(f"Unknown bot part: {part}") from None
    return pg.mkPen(color=qcolor(getattr(scheme, field)), width=width)


def bot_brush(scheme: ColorScheme) -> QBrush:
    return pg.mkBrush(qcolor(scheme.bot_body_color))


def apply_plot_scheme(plot_widget: pg.PlotWidget, scheme: ColorScheme) -> None:
    """Restyle a PlotWidget's background and axes for ``scheme``."""
    plot_widget.setBackground(scheme.ui_main_bg_color)
    plot_item = plot_widget.getPlotItem()
    for axis, name in _PLOT_AXES.items():
        plot_item.getAxis(name).setPen(axis_pen(scheme, axis))
