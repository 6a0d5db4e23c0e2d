from ..color import contrast_ratio, hex_to_hsl
from ..palette.roles import ANSI_ROLE_NAMES as _ANSI_NAMES

MIN_TEXT_CONTRAST = 4.5  # Editor text against the canvas and raised levels
MIN_DIM_CONTRAST = 3.0  # Comments and inactive text
MIN_TERMINAL_CONTRAST = 3.0  # Terminal colors 1-15
MIN_ACCENT_CONTRAST = 3.0


def _describe(label, hex_color):
    h, s, l = hex_to_hsl(hex_color)
    return f"{label:<18}{hex_color} (L: {l * 100:.1f}%, S: {s * 100:.1f}%)"


def generate_readability_report(palette):
    """Generate a detailed readability report for inspection.

    Every checked color is compared against the editor canvas and the most
    elevated background level; the weaker of the two ratios must meet the
    category minimum.

    Returns:
        (report text, list of (name, hex, achieved, required) failures)
    """
    bg = palette.background
    bg_top = palette.backgrounds[-1]

    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Theme: {palette.kind.upper()}")
    report.append(_describe("Background:", bg))
    report.append(_describe("Background Top:", bg_top))
    report.append(_describe("UI Background:", palette.ui_background))
    report.append("")

    ansi = dict(zip(_ANSI_NAMES, palette.ansi))
    categories = [
        ("FOREGROUND", [("foreground", palette.foreground), ("chrome_foreground", palette.chrome_foreground)], MIN_TEXT_CONTRAST),
        ("DIM", [("dim", palette.dim)], MIN_DIM_CONTRAST),
        ("ACCENT", [("accent", palette.accent), ("cursor", palette.cursor)], MIN_ACCENT_CONTRAST),
        ("TERMINAL BASE", [(name, ansi[name]) for name in _ANSI_NAMES[1:8]], MIN_TERMINAL_CONTRAST),
        ("TERMINAL BRIGHT", [(name, ansi[name]) for name in _ANSI_NAMES[8:]], MIN_TERMINAL_CONTRAST),
    ]

    issues = []

    for cat_name, colors, min_contrast in categories:
        report.append(f"\n{cat_name} (min: {min_contrast}:1)")
        report.append("-" * 50)
        for key, hex_color in colors:
            cr_bg = contrast_ratio(hex_color, bg)
            cr_bg_top = contrast_ratio(hex_color, bg_top)
            min_cr = min(cr_bg, cr_bg_top)

            status = "✓" if min_cr >= min_contrast else "✗ FAIL"
            if min_cr < min_contrast:
                issues.append((key, hex_color, min_cr, min_contrast))

            report.append(f"  {key:18} {hex_color}  vs bg: {cr_bg:4.1f}:1  vs bg_top: {cr_bg_top:4.1f}:1  {status}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for key, hex_val, achieved, required in issues:
            report.append(f"  - {key}: {hex_val} has {achieved:.1f}:1, needs {required}:1")
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues
