"""Tests for HSL manipulation and alpha blending."""

import math

import pytest

from palette_cli.theme_engine import Color, blend, hsl_to_rgb, rgb_to_hsl


def color(hex_value):
    return Color.parse_hex(hex_value)


def assert_close(actual, expected, tolerance=1):
    assert abs(actual.r - expected.r) <= tolerance, f"{actual} != {expected}"
    assert abs(actual.g - expected.g) <= tolerance, f"{actual} != {expected}"
    assert abs(actual.b - expected.b) <= tolerance, f"{actual} != {expected}"


class TestHslConversion:
    """Test RGB <-> HSL conversion."""

    @pytest.mark.parametrize("hex_value", ["#000000", "#FFFFFF", "#808080", "#FF4500"])
    def test_lighten_zero_roundtrip(self, hex_value):
        """Test lighten(0) reproduces the color within one channel unit."""
        c = color(hex_value)
        assert_close(c.lighten(0.0), c)

    def test_achromatic_hue_and_saturation_are_zero(self):
        """Test grays convert with hue 0 and saturation 0."""
        hue, saturation, lightness = rgb_to_hsl(color("#808080"))
        assert hue == 0.0
        assert saturation == 0.0
        assert lightness == pytest.approx(128 / 255.0)

    def test_primary_hues(self):
        """Test hue degrees of the primaries."""
        assert rgb_to_hsl(color("#FF0000"))[0] == pytest.approx(0.0)
        assert rgb_to_hsl(color("#00FF00"))[0] == pytest.approx(120.0)
        assert rgb_to_hsl(color("#0000FF"))[0] == pytest.approx(240.0)

    def test_hsl_to_rgb(self):
        """Test building a color from HSL components."""
        assert hsl_to_rgb(0.0, 1.0, 0.5) == color("#FF0000")
        assert hsl_to_rgb(0.0, 0.0, 0.5) == color("#808080")


class TestLightenDarken:
    """Test lightness adjustment."""

    def test_lighten_black_to_mid_gray(self):
        """Test lightening black by 0.5."""
        assert_close(color("#000000").lighten(0.5), color("#808080"))

    def test_lighten_white_clamps(self):
        """Test lightness is clamped at 1."""
        assert color("#FFFFFF").lighten(0.5) == color("#FFFFFF")

    def test_lighten_increases_luminance(self):
        """Test lighten makes a color brighter."""
        original = color("#808080")
        assert original.lighten(0.1).relative_luminance() > original.relative_luminance()

    def test_darken_white_to_mid_gray(self):
        """Test darkening white by 0.5."""
        assert_close(color("#FFFFFF").darken(0.5), color("#808080"))

    def test_darken_black_clamps(self):
        """Test lightness is clamped at 0."""
        assert color("#000000").darken(0.5) == color("#000000")

    def test_darken_decreases_luminance(self):
        """Test darken makes a color dimmer."""
        original = color("#808080")
        assert original.darken(0.1).relative_luminance() < original.relative_luminance()


class TestSaturation:
    """Test saturation adjustment."""

    def test_saturating_gray_leans_red(self):
        """Test saturating an achromatic gray tints it toward hue 0."""
        result = color("#808080").saturate(0.5)
        assert result.r > result.g
        assert result.r > result.b

    def test_saturate_increases_vividness(self):
        """Test a muted color becomes more vivid."""
        muted = color("#996666")
        vivid = muted.saturate(0.3)
        assert vivid.r > muted.r or vivid.g < muted.g or vivid.b < muted.b

    def test_full_desaturation_is_gray(self):
        """Test desaturate(1.0) produces equal channels."""
        result = color("#FF0000").desaturate(1.0)
        assert abs(result.r - result.g) <= 1
        assert abs(result.g - result.b) <= 1


class TestHueRotation:
    """Test hue rotation."""

    def test_red_180_is_cyan(self):
        """Test rotating red halfway around the wheel."""
        assert_close(color("#FF0000").rotate_hue(180.0), color("#00FFFF"))

    def test_zero_and_full_turn_are_identity(self):
        """Test rotating by 0 and 360 degrees."""
        c = color("#FF4500")
        assert_close(c.rotate_hue(0.0), c)
        assert_close(c.rotate_hue(360.0), c)

    def test_negative_rotation_wraps(self):
        """Test -90 degrees equals 270 degrees."""
        c = color("#FF0000")
        assert_close(c.rotate_hue(-90.0), c.rotate_hue(270.0))

    def test_large_rotation_wraps(self):
        """Test rotation beyond a full turn."""
        c = color("#FF4500")
        assert_close(c.rotate_hue(720.0 + 45.0), c.rotate_hue(45.0))


class TestNonFiniteGuards:
    """Test NaN and infinite arguments leave colors unchanged."""

    @pytest.mark.parametrize("amount", [math.nan, math.inf, -math.inf])
    def test_adjustments_return_input(self, amount):
        """Test every HSL operation ignores non-finite input."""
        c = color("#996666")
        assert c.lighten(amount) == c
        assert c.darken(amount) == c
        assert c.saturate(amount) == c
        assert c.desaturate(amount) == c
        assert c.rotate_hue(amount) == c

    @pytest.mark.parametrize("alpha", [math.nan, math.inf, -math.inf])
    def test_blend_returns_background(self, alpha):
        """Test non-finite alpha returns the background."""
        fg, bg = color("#FF0000"), color("#0000FF")
        assert blend(fg, bg, alpha) == bg


class TestBlend:
    """Test alpha blending."""

    def setup_method(self):
        self.fg = color("#FF0000")
        self.bg = color("#0000FF")

    def test_alpha_zero_is_background(self):
        """Test alpha 0 returns the background."""
        assert blend(self.fg, self.bg, 0.0) == self.bg

    def test_alpha_one_is_foreground(self):
        """Test alpha 1 returns the foreground."""
        assert blend(self.fg, self.bg, 1.0) == self.fg

    def test_half_alpha(self):
        """Test 50% blend of red over blue."""
        assert blend(self.fg, self.bg, 0.5) == Color(r=128, g=0, b=128)

    def test_alpha_is_clamped(self):
        """Test alpha outside [0, 1] clamps to the nearest boundary."""
        assert blend(self.fg, self.bg, -0.5) == blend(self.fg, self.bg, 0.0)
        assert blend(self.fg, self.bg, 1.5) == blend(self.fg, self.bg, 1.0)

    def test_method_delegates(self):
        """Test Color.blend matches the module function."""
        assert self.fg.blend(self.bg, 0.25) == blend(self.fg, self.bg, 0.25)
