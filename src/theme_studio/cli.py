"""Command-line interface for Theme Studio."""

import argparse
import sys

from theme_studio.config import get_settings
from theme_studio.design_system import generate_theme_css, get_default_theme
from theme_studio.domain.colors import ColorToken
from theme_studio.domain.value_objects import ThemeMode
from theme_studio.logging_config import configure_logging
from theme_studio.services.color_input import parse_color
from theme_studio.services.contrast import check_contrast
from theme_studio.services.style_target import InMemoryStyleTarget
from theme_studio.services.token_sync import TokenSyncEngine


def _mode(args: argparse.Namespace) -> ThemeMode:
    mode = getattr(args, "mode", None)
    return ThemeMode(mode) if mode else get_settings().default_mode


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    settings = get_settings()
    print(f"{settings.app_name} v{settings.app_version}")
    return 0


def cmd_css(args: argparse.Namespace) -> int:
    """Print the default theme as a stylesheet."""
    css = generate_theme_css(
        get_default_theme(),
        include_light=not args.dark_only,
        include_dark=not args.light_only,
    )
    print(css, end="")
    return 0


def cmd_properties(args: argparse.Namespace) -> int:
    """Apply the default theme to a fresh target and list what was written."""
    mode = _mode(args)
    target = InMemoryStyleTarget()
    engine = TokenSyncEngine(target)
    engine.set_mode(mode)
    properties = engine.apply_theme(get_default_theme(), mode)

    for name, value in properties.items():
        print(f"{name}: {value}")
    print(f"\n{len(properties)} properties ({mode.value} mode)")
    return 0


def cmd_contrast(args: argparse.Namespace) -> int:
    """Grade every catalogue pair; exit 1 when any pair fails normal text."""
    mode = _mode(args)
    results = check_contrast(get_default_theme().colors_for(mode))

    print(f"{'Pair':<18} {'Ratio':>6}  {'Normal':<6}  {'Large':<6}")
    for result in results:
        print(
            f"{result.name:<18} {result.ratio:>6.2f}  "
            f"{result.grade.value:<6}  {result.large_text_grade.value:<6}"
        )

    failures = [result for result in results if not result.passes]
    if failures:
        print(f"\n{len(failures)} of {len(results)} pairs fail ({mode.value} mode)")
        return 1
    print(f"\nAll {len(results)} pairs pass ({mode.value} mode)")
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    """Show a color in every supported notation."""
    oklch = parse_color(args.color)
    if oklch is None:
        print(f"Error: Unrecognized color: {args.color}")
        return 1

    token = ColorToken("input", oklch)
    print(f"OKLCH: {token.oklch_string}")
    print(f"Hex:   {token.hex}")
    print(f"RGB:   rgb({token.rgb.r}, {token.rgb.g}, {token.rgb.b})")
    print(f"HSV:   hsv({token.hsv.h}, {token.hsv.s}%, {token.hsv.v}%)")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="theme-studio",
        description="Theme Studio - OKLCH design tokens, contrast checks and CSS export",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    # css command
    css_parser = subparsers.add_parser("css", help="Export the default theme as CSS")
    css_scope = css_parser.add_mutually_exclusive_group()
    css_scope.add_argument(
        "--light-only",
        action="store_true",
        help="Only emit the :root block",
    )
    css_scope.add_argument(
        "--dark-only",
        action="store_true",
        help="Only emit the .dark block",
    )
    css_parser.set_defaults(func=cmd_css)

    # properties command
    properties_parser = subparsers.add_parser(
        "properties", help="List the style properties written for the default theme"
    )
    properties_parser.add_argument(
        "--mode",
        "-m",
        choices=[mode.value for mode in ThemeMode],
        default=None,
        help="Color mode (default: from settings)",
    )
    properties_parser.set_defaults(func=cmd_properties)

    # contrast command
    contrast_parser = subparsers.add_parser(
        "contrast", help="Check WCAG contrast of the default theme"
    )
    contrast_parser.add_argument(
        "--mode",
        "-m",
        choices=[mode.value for mode in ThemeMode],
        default=None,
        help="Color mode (default: from settings)",
    )
    contrast_parser.set_defaults(func=cmd_contrast)

    # convert command
    convert_parser = subparsers.add_parser(
        "convert", help="Convert a hex, rgb(), hsl() or oklch() color"
    )
    convert_parser.add_argument("color", help="Color text, e.g. '#3b82f6'")
    convert_parser.set_defaults(func=cmd_convert)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging()

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
