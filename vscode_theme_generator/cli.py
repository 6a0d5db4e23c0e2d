import argparse
import sys
from pathlib import Path

from .config import DEFAULT_BACKGROUND_LEVELS, MAX_BACKGROUND_LEVELS, MIN_BACKGROUND_LEVELS, Limits
from .errors import ThemeError
from .export import export_theme, generate_readability_report
from .logger import enable_console, get_logger
from .palette import extend_palette, map_roles, parse_theme_file
from .vscode import assemble_theme

logger = get_logger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a VS Code color theme from a terminal color scheme file"
    )
    parser.add_argument(
        "--in",
        dest="input",
        metavar="PATH",
        required=True,
        help="Theme text file (key = value lines)",
    )
    parser.add_argument(
        "--out",
        metavar="PATH",
        default=None,
        help="Output JSON file (default: <input name>.json next to the input)",
    )
    parser.add_argument(
        "--name",
        help="Theme name (default: 'name' in the file, otherwise derived from the filename)",
    )
    parser.add_argument(
        "--levels",
        type=int,
        default=DEFAULT_BACKGROUND_LEVELS,
        help=f"Background hierarchy levels ({MIN_BACKGROUND_LEVELS}-{MAX_BACKGROUND_LEVELS})",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Also write a readability report next to the theme",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log fallback decisions",
    )

    args = parser.parse_args(argv)
    enable_console("DEBUG" if args.verbose else "WARNING")

    try:
        return _run(args)
    except ThemeError as exc:
        logger.debug(f"Details: {exc.details}")
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1


def _run(args):
    input_path = Path(args.input)
    output_path = Path(args.out) if args.out else input_path.with_suffix(".json")

    print(f"Reading: {input_path}")

    parsed = parse_theme_file(input_path, Limits.from_env())
    if parsed.colors.is_empty():
        logger.warning(f"No colors found in {input_path}, using defaults")
    roles = map_roles(parsed.colors, parsed.meta)
    palette = extend_palette(roles, levels=args.levels)
    theme = assemble_theme(
        palette,
        name=args.name,
        meta=parsed.meta,
        source=str(input_path),
        warnings=parsed.warnings,
    )

    print(f"Detected theme type: {theme.type}")
    if theme.warnings:
        print(f"Skipped {len(theme.warnings)} invalid line(s)")

    written = [export_theme(theme, output_path)]

    if args.report:
        report, issues = generate_readability_report(palette)
        print("\n" + report)
        report_path = output_path.with_name(f"{output_path.stem}-readability.txt")
        report_path.write_text(report + "\n", encoding="utf-8")
        written.append(report_path)

    print("\n" + "=" * 60)
    print("Exported:")
    for path in written:
        print(f"  - {path}")
    print(f"\nTheme: {theme.name} ({len(theme.colors)} colors, {len(theme.token_colors)} token rules)")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
