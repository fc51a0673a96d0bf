"""Trajectory view color schemes."""

from .base import ColorScheme, COLOR_FIELDS, OPACITY_FIELDS, scheme_from_dict, scheme_to_dict
from .blue_dark import BLUE_DARK_SCHEME
from .custom_dark import CUSTOM_DARK_SCHEME
from .default_light import DEFAULT_LIGHT_SCHEME
from .red_dark import RED_DARK_SCHEME

SCHEMES: dict[str, ColorScheme] = {
	'default_light': DEFAULT_LIGHT_SCHEME,
	'red_dark': RED_DARK_SCHEME,
	'blue_dark': BLUE_DARK_SCHEME,
	'custom_dark': CUSTOM_DARK_SCHEME,
}

DEFAULT_SCHEME_ID = 'custom_dark'

__all__ = [
	"ColorScheme",
	"COLOR_FIELDS",
	"OPACITY_FIELDS",
	"SCHEMES",
	"DEFAULT_SCHEME_ID",
	"scheme_from_dict",
	"scheme_to_dict",
	"BLUE_DARK_SCHEME",
	"CUSTOM_DARK_SCHEME",
	"DEFAULT_LIGHT_SCHEME",
	"RED_DARK_SCHEME",
]
