"""
WCAG Contrast Ratio Checker

Verifies foreground/background color pairs against WCAG 2.1 AA
(4.5:1 for normal text, 3:1 for large text). Decorative pairs are
reported but never fail the check.
"""

import logging
from typing import Iterable

from ..models import HEX_COLOR_PATTERN, ColorPair, ContrastReport, ContrastResult, UsageClass


logger = logging.getLogger(__name__)

REQUIRED_RATIOS: dict[str, float] = {
    "normal": 4.5,
    "large": 3.0,
    "decorative": 0.0,
}


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """
    Convert hex color to RGB tuple.

    Args:
        hex_color: Color as #RRGGBB or RRGGBB (case-insensitive)

    Returns:
        (r, g, b) with each channel in 0-255

    Raises:
        ValueError: If the string is not a 6-digit hex color
    """
    match = HEX_COLOR_PATTERN.match(hex_color.strip())
    if not match:
        raise ValueError(f"Expected a 6-digit hex color, got {hex_color!r}")
    r, g, b = (int(part, 16) for part in match.groups())
    return r, g, b


def _linearize(channel: int) -> float:
    c = channel / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: tuple[int, int, int]) -> float:
    """Calculate WCAG relative luminance from 0-255 RGB channels"""
    r, g, b = rgb
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(color1: str, color2: str) -> float:
    """
    Calculate WCAG contrast ratio between two colors.

    Formula: (L1 + 0.05) / (L2 + 0.05)
    where L1 is the relative luminance of the lighter color

    The result is not rounded. Argument order does not matter.

    Args:
        color1: First color (hex format: #RRGGBB)
        color2: Second color (hex format: #RRGGBB)

    Returns:
        Contrast ratio (1-21, where 21 is maximum contrast)

    Example:
        ratio = contrast_ratio("#000000", "#FFFFFF")
        assert abs(ratio - 21.0) < 1e-9  # Black on white = maximum contrast
    """
    l1 = relative_luminance(hex_to_rgb(color1))
    l2 = relative_luminance(hex_to_rgb(color2))

    lighter = max(l1, l2)
    darker = min(l1, l2)

    return (lighter + 0.05) / (darker + 0.05)


def required_ratio(usage: UsageClass) -> float:
    """Minimum contrast ratio for a usage class (0 for decorative)"""
    return REQUIRED_RATIOS[usage]


def check_pair(pair: ColorPair) -> ContrastResult:
    """
    Compute the contrast ratio for one pair and classify it.

    A decorative pair always passes, whatever its ratio.
    """
    ratio = contrast_ratio(pair.fg, pair.bg)
    required = required_ratio(pair.usage)
    passed = pair.usage == "decorative" or ratio >= required

    logger.debug("%s: %.2f:1 (required %s:1)", pair.label, ratio, required)

    return ContrastResult(pair=pair, ratio=ratio, required=required, passed=passed)


def verify(pairs: Iterable[ColorPair]) -> ContrastReport:
    """
    Check every color pair and combine the verdicts.

    Args:
        pairs: Color pairs to check, usually defaults.COLOR_PAIRS

    Returns:
        ContrastReport with one result per pair, in input order, and an
        overall verdict that is True only if every non-decorative pair passes

    Example:
        report = verify(COLOR_PAIRS)
        for result in report.failures:
            print(f"{result.pair.label}: {result.ratio:.2f}:1")
    """
    results = [check_pair(pair) for pair in pairs]
    passed = all(r.passed for r in results if r.pair.usage != "decorative")

    return ContrastReport(results=results, passed=passed)
