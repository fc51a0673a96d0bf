"""
trajtheme entry point.

Usage:
    python -m trajtheme --list
    python -m trajtheme --show custom_dark
    python -m trajtheme --set-default red_dark
    python -m trajtheme --loglevel DEBUG --list
"""

import sys
import json
import argparse

from .logging import DEFAULT_LOG_FILE, setup_logging


def main(argv=None):
    """Main entry point for trajtheme."""
    parser = argparse.ArgumentParser(
        description="trajtheme - Color schemes for the trajectory visualizer"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available color schemes (the active one is marked with *)"
    )
    parser.add_argument(
        "--show",
        metavar="ID",
        help="Print the fields of a color scheme as JSON"
    )
    parser.add_argument(
        "--set-default",
        metavar="ID",
        help="Persist the color scheme used at startup"
    )
    parser.add_argument(
        "-l", "--loglevel",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help=f"Set logging level (default: WARNING). DEBUG writes to {DEFAULT_LOG_FILE}"
    )
    parser.add_argument(
        "--logfile",
        default=DEFAULT_LOG_FILE,
        help=f"Log file path (default: {DEFAULT_LOG_FILE})"
    )
    parser.add_argument(
        "--log-console",
        action="store_true",
        help="Also log to console (stderr)"
    )

    args = parser.parse_args(argv)

    setup_logging(
        level=args.loglevel,
        log_file=args.logfile,
        console=args.log_console
    )

    # Import here to avoid loading Qt for --help
    from .gui.colorscheme import scheme_to_dict
    from .gui.colorscheme.scheme_manager import SchemeManager

    manager = SchemeManager.instance()
    manager.load_user_schemes()

    # Resolve every requested id before persisting anything
    try:
        shown = manager.get(args.show) if args.show else None
        if args.set_default:
            manager.get(args.set_default)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 2

    if args.set_default:
        manager.set_scheme(args.set_default, persist=True)
        print(f"Default color scheme: {args.set_default}")

    if shown is not None:
        print(json.dumps(scheme_to_dict(shown), indent=2))

    if args.list or not (args.show or args.set_default):
        active = manager.current_id
        for scheme_id in manager.available():
            marker = "*" if scheme_id == active else " "
            print(f"{marker} {scheme_id}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
