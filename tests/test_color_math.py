"""
Color, brightness and mix tests
"""

import pytest

from hexharmony import BLACK, WHITE, Color, get_brightness, mix
from hexharmony.core import conversions as conv
from hexharmony.shared.logger import log


class TestColor:

    @pytest.mark.parametrize("hex_code, expected", [
        ("#FF8800", (255, 136, 0)),
        ("ff8800", (255, 136, 0)),
        ("F80", (255, 136, 0)),
        ("A", (170, 170, 170)),
        ("AB", (171, 171, 171)),
    ])
    def test_from_hex(self, hex_code, expected):
        assert Color.from_hex(hex_code).rgb == expected

    @pytest.mark.parametrize("hex_code", ["", "GGGGGG", "#12345", None])
    def test_from_hex_invalid(self, hex_code):
        with pytest.raises(ValueError):
            Color.from_hex(hex_code)

    def test_hex_and_str(self):
        assert Color(255, 136, 0).hex == "FF8800"
        assert str(Color(255, 136, 0)) == "#FF8800"
        assert str(Color(255, 136, 0, 0.5)) == "rgba(255, 136, 0, 0.5)"

    def test_from_rgb_rounds_and_clamps(self):
        assert Color.from_rgb(300.0, -4.0, 127.6, 1.5) == Color(255, 0, 128, 1.0)


class TestBrightness:

    def test_reference_points(self):
        assert get_brightness(WHITE) == 100
        assert get_brightness(BLACK) == 0

    @pytest.mark.parametrize("hex_code, expected", [
        ("FF0000", 29.9),
        ("00FF00", 58.7),
        ("0000FF", 11.4),
    ])
    def test_primaries(self, hex_code, expected):
        assert get_brightness(Color.from_hex(hex_code)) == pytest.approx(expected)


class TestMix:

    def test_weight_is_share_of_first_color(self):
        assert mix(WHITE, BLACK, 24) == Color(61, 61, 61)
        assert mix(BLACK, WHITE, 24) == Color(194, 194, 194)

    def test_endpoints(self, red, cyan):
        assert mix(red, cyan, 100) == red
        assert mix(red, cyan, 0) == cyan

    def test_default_is_even_mix(self):
        assert mix(WHITE, BLACK) == Color(128, 128, 128)

    def test_weight_is_clamped(self, red, cyan):
        assert mix(red, cyan, 150) == red
        assert mix(red, cyan, -20) == cyan

    def test_alpha_weighting(self):
        opaque = Color(255, 0, 0, 1.0)
        clear = Color(0, 0, 255, 0.0)
        result = mix(opaque, clear, 50)
        # the opaque color dominates the channels
        assert result.rgb == (255, 0, 0)
        assert result.alpha == pytest.approx(0.5)


class TestConversions:

    @pytest.mark.parametrize("rgb", [(255, 0, 0), (51, 102, 204), (128, 128, 128)])
    def test_hsl_round_trip(self, rgb):
        h, s, l = conv.rgb_to_hsl(*rgb)
        assert conv.rgb_to_hex(*conv.hsl_to_rgb(h, s, l)) == conv.rgb_to_hex(*rgb)

    def test_rgb_to_hex_clamps(self):
        assert conv.rgb_to_hex(300, -1, 15.4) == "FF000F"

    @pytest.mark.parametrize("hue, expected", [
        (0, (255.0, 0.0, 0.0)),
        (60, (255.0, 255.0, 0.0)),
        (180, (0.0, 255.0, 255.0)),
        (300, (255.0, 0.0, 255.0)),
        (-60, (255.0, 0.0, 255.0)),
        (720, (255.0, 0.0, 0.0)),
    ])
    def test_hsl_to_rgb_sectors(self, hue, expected):
        assert conv.hsl_to_rgb(hue, 1.0, 0.5) == pytest.approx(expected)

    def test_hsl_to_rgb_is_unrounded(self):
        assert conv.hsl_to_rgb(0, 0.0, 0.5) == (127.5, 127.5, 127.5)

    def test_rgb_to_hsl_achromatic(self):
        assert conv.rgb_to_hsl(0, 0, 0) == (0.0, 0.0, 0.0)
        assert conv.rgb_to_hsl(255, 255, 255) == (0.0, 0.0, 1.0)


class TestLogger:

    def test_info_goes_to_stdout(self, capsys):
        log("info", "registered 'warm'")
        captured = capsys.readouterr()
        assert "[info]" in captured.out
        assert "registered 'warm'" in captured.out
        assert captured.err == ""

    @pytest.mark.parametrize("level", ["warning", "error", "custom"])
    def test_other_levels_go_to_stderr(self, capsys, level):
        log(level.upper(), "something happened")
        captured = capsys.readouterr()
        assert f"[{level}]" in captured.err
        assert captured.out == ""
