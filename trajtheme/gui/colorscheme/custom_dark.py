"""Custom dark scheme: indigo robot, blue/pink/orange trajectories on a dark background."""

from trajtheme.core.palette import palette_color

from .base import ColorScheme


CUSTOM_DARK_SCHEME = ColorScheme(
    is_dark=True,

    bot_body_color=palette_color('INDIGO_600'),
    bot_wheel_color=palette_color('INDIGO_900'),
    bot_direction_color=palette_color('INDIGO_900'),

    axis_x_color=palette_color('GRAY_300'),
    axis_y_color=palette_color('GRAY_300'),

    trajectory_path_color=palette_color('BLUE_500'),
    trajectory_turn_color=palette_color('PINK_600'),
    trajectory_marker_color=palette_color('ORANGE_600'),

    axis_normal_opacity=0.2,
    axis_hover_opacity=0.8,

    trajectory_slider_bg_color=palette_color('GRAY_100'),
    trajectory_slider_fg_color=palette_color('RED_600'),
    trajectory_text_color=palette_color('GRAY_900'),

    ui_main_bg_color=palette_color('GRAY_800'),
)
