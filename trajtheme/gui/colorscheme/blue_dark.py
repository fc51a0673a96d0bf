"""Blue alliance dark scheme."""

from trajtheme.core.palette import palette_color

from .base import ColorScheme


BLUE_DARK_SCHEME = ColorScheme(
    is_dark=True,
    bot_body_color=palette_color('BLUE_600'),
    bot_wheel_color=palette_color('BLUE_900'),
    bot_direction_color=palette_color('BLUE_900'),
    axis_x_color=palette_color('GRAY_100'),
    axis_y_color=palette_color('GRAY_100'),
    trajectory_path_color=palette_color('YELLOW_400'),
    trajectory_turn_color=palette_color('PURPLE_400'),
    trajectory_marker_color=palette_color('GREEN_400'),
    axis_normal_opacity=0.2,
    axis_hover_opacity=0.8,
    trajectory_slider_bg_color=palette_color('GRAY_100'),
    trajectory_slider_fg_color=palette_color('BLUE_600'),
    trajectory_text_color=palette_color('GRAY_900'),
    ui_main_bg_color=palette_color('GRAY_800'),
)
