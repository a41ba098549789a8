"""
palettekit entry point.

Usage:
    python -m palettekit --list
    python -m palettekit --show Amethyst
    python -m palettekit --palette "Soft Pink" --export /tmp/textures
    python -m palettekit --palette "Kintsugi Jade" --save
"""

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from .logging import DEFAULT_LOG_FILE, setup_logging


def _print_list(manager, out) -> None:
    for name in manager.names:
        marker = "*" if name == manager.active_name else " "
        print(f"{marker} {name}", file=out)


def _print_palette(manager, name: str, out) -> bool:
    from .gui.theme import FIELD_NAMES, resolve

    overrides = manager.get_overrides(name)
    if overrides is None:
        print(f"Unknown palette: {name}", file=sys.stderr)
        return False

    resolved = resolve(overrides, manager.default_table)
    width = max(len(n) for n in FIELD_NAMES)
    for field_id, color in resolved.items():
        flag = "  (override)" if field_id in overrides else ""
        print(f"{FIELD_NAMES[field_id]:<{width}}  {color.hex()}{flag}", file=out)
    return True


def _export(resources, directory: str, out) -> bool:
    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)
    ok = True
    for name in resources.names():
        path = target / f"{name}.png"
        if resources.get(name).save(str(path), "PNG"):
            print(f"wrote {path}", file=out)
        else:
            print(f"failed to write {path}", file=sys.stderr)
            ok = False
    return ok


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for palettekit."""
    parser = argparse.ArgumentParser(
        description="palettekit - resolve named colour palettes and build palette-derived bitmaps"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List registered palettes in registration order (* marks the active one)"
    )
    parser.add_argument(
        "--show",
        metavar="NAME",
        help="Print every resolved field of palette NAME"
    )
    parser.add_argument(
        "--palette",
        metavar="NAME",
        help="Palette to activate (default: the saved 'palette' setting, then Default)"
    )
    parser.add_argument(
        "--export",
        metavar="DIR",
        help="Write every palette-derived bitmap as PNG into DIR"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Remember --palette as the palette to activate next time"
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
    if args.save and not args.palette:
        parser.error("--save requires --palette")

    setup_logging(
        level=args.loglevel,
        log_file=args.logfile,
        console=args.log_console
    )

    # Headless by default; bitmaps are rendered off screen
    if not os.environ.get("DISPLAY") and not os.environ.get("WAYLAND_DISPLAY"):
        os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

    from PyQt6.QtGui import QGuiApplication
    _app = QGuiApplication.instance() or QGuiApplication(sys.argv[:1])

    from .gui.theme_stack import create_theme_stack
    stack = create_theme_stack(args.palette)
    out = sys.stdout

    try:
        if args.palette and stack.manager.active_name != args.palette:
            print(f"Unknown palette: {args.palette}", file=sys.stderr)
            return 2

        if args.save:
            from .core.settings import set_setting
            set_setting("palette", args.palette)

        if args.list:
            _print_list(stack.manager, out)

        if args.show and not _print_palette(stack.manager, args.show, out):
            return 2

        if args.export and not _export(stack.resources, args.export, out):
            return 1

        if not (args.list or args.show or args.export or args.save):
            parser.print_help(out)
    finally:
        stack.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
