"""Smoke tests that verify the installed package exposes all expected modules."""

import importlib


def test_all_subpackages_importable():
    """Every trajtheme module must be importable."""
    modules = [
        "trajtheme.logging",
        "trajtheme.core.palette",
        "trajtheme.core.settings",
        "trajtheme.gui.colorscheme",
        "trajtheme.gui.colorscheme.pens",
        "trajtheme.gui.colorscheme.scheme_manager",
        "trajtheme.__main__",
    ]
    for name in modules:
        importlib.import_module(name)
