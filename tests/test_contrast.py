"""Unit tests for the WCAG contrast checker."""

import pytest

from site_audit.checks.contrast import (
    check_pair,
    contrast_ratio,
    hex_to_rgb,
    relative_luminance,
    required_ratio,
    verify,
)
from site_audit.defaults import COLOR_PAIRS
from site_audit.models import ColorPair


@pytest.mark.unit
def test_hex_to_rgb_accepts_hash_and_case():
    """Leading # is optional and hex digits are case-insensitive."""
    assert hex_to_rgb("#111827") == (17, 24, 39)
    assert hex_to_rgb("FFFFFF") == (255, 255, 255)
    assert hex_to_rgb("#aBcDeF") == (171, 205, 239)


@pytest.mark.unit
@pytest.mark.parametrize("bad", ["#fff", "#1234567", "zzzzzz", "", "#12 456"])
def test_hex_to_rgb_rejects_malformed(bad):
    """Anything but six hex digits is an error."""
    with pytest.raises(ValueError):
        hex_to_rgb(bad)


@pytest.mark.unit
def test_relative_luminance_extremes():
    """Black has luminance 0, white has luminance 1."""
    assert relative_luminance((0, 0, 0)) == 0.0
    assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)


@pytest.mark.unit
def test_relative_luminance_low_channel_uses_linear_segment():
    """Channels at or below 0.03928 are divided by 12.92."""
    # 10/255 = 0.0392 <= 0.03928
    expected = 0.7152 * (10 / 255) / 12.92
    assert relative_luminance((0, 10, 0)) == pytest.approx(expected)


@pytest.mark.unit
def test_black_on_white_is_maximum():
    """Black on white is the canonical 21:1."""
    assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0, abs=1e-2)


@pytest.mark.unit
@pytest.mark.parametrize("color", ["#000000", "#ffffff", "#3b82f6", "#6d28d9", "#f0fdf4"])
def test_same_color_ratio_is_exactly_one(color):
    """Identical colors have no contrast at all."""
    assert contrast_ratio(color, color) == 1.0


@pytest.mark.unit
@pytest.mark.parametrize("pair", COLOR_PAIRS, ids=lambda p: p.label)
def test_ratio_is_symmetric(pair):
    """Swapping foreground and background gives the same ratio."""
    assert contrast_ratio(pair.fg, pair.bg) == contrast_ratio(pair.bg, pair.fg)


@pytest.mark.unit
def test_gray_900_on_white_passes_normal():
    """Body text color clears the 4.5:1 threshold."""
    ratio = contrast_ratio("#111827", "#ffffff")
    assert ratio >= 4.5
    assert ratio == pytest.approx(17.74, abs=0.05)


@pytest.mark.unit
def test_required_ratios():
    assert required_ratio("normal") == 4.5
    assert required_ratio("large") == 3.0
    assert required_ratio("decorative") == 0.0


@pytest.mark.unit
def test_large_text_uses_lower_threshold():
    """White on blue-500 fails as body text but passes as large text."""
    normal = check_pair(ColorPair(label="btn", fg="#ffffff", bg="#3b82f6", usage="normal"))
    large = check_pair(ColorPair(label="btn", fg="#ffffff", bg="#3b82f6", usage="large"))

    assert 3.0 <= normal.ratio < 4.5
    assert not normal.passed
    assert large.passed
    assert large.ratio == normal.ratio


@pytest.mark.unit
def test_decorative_always_passes():
    """Decorative pairs pass even with no contrast."""
    result = check_pair(ColorPair(label="dot", fg="#10b981", bg="#10b981", usage="decorative"))

    assert result.ratio == 1.0
    assert result.required == 0.0
    assert result.passed


@pytest.mark.unit
def test_verify_keeps_input_order():
    pairs = [
        ColorPair(label="first", fg="#000000", bg="#ffffff"),
        ColorPair(label="second", fg="#777777", bg="#ffffff"),
        ColorPair(label="third", fg="#111827", bg="#f9fafb", usage="large"),
    ]
    report = verify(pairs)

    assert [r.pair.label for r in report.results] == ["first", "second", "third"]


@pytest.mark.unit
def test_verify_fails_when_any_text_pair_fails():
    """#777777 on white is just under 4.5:1."""
    report = verify([
        ColorPair(label="ok", fg="#000000", bg="#ffffff"),
        ColorPair(label="too light", fg="#777777", bg="#ffffff"),
    ])

    assert not report.passed
    assert [r.pair.label for r in report.failures] == ["too light"]


@pytest.mark.unit
def test_verify_ignores_decorative_in_overall_verdict():
    report = verify([
        ColorPair(label="ok", fg="#000000", bg="#ffffff"),
        ColorPair(label="ornament", fg="#eeeeee", bg="#ffffff", usage="decorative"),
    ])

    assert report.passed
    assert report.failures == []


@pytest.mark.unit
def test_verify_empty_list_passes():
    report = verify([])
    assert report.results == []
    assert report.passed


@pytest.mark.unit
def test_palette_has_fourteen_pairs_and_passes():
    """The shipped palette meets WCAG 2.1 AA."""
    report = verify(COLOR_PAIRS)

    assert len(report.results) == 14
    assert report.passed
    assert sum(1 for r in report.results if r.pair.usage == "decorative") == 1


@pytest.mark.unit
def test_verify_is_idempotent():
    """Same input, same output."""
    assert verify(COLOR_PAIRS) == verify(COLOR_PAIRS)


@pytest.mark.unit
def test_verify_accepts_generator():
    report = verify(p for p in COLOR_PAIRS[:3])
    assert len(report.results) == 3
