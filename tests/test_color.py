"""Tests for rgb()/rgba() formatting."""

from types import SimpleNamespace

from rcu.core.color import Color, color_to_string, to_multiple_int


class TestColorToString:
    def test_normalized_rgba(self) -> None:
        assert color_to_string(Color(1, 0, 0, 1), 255) == "rgba(255,0,0,255)"

    def test_integer_rgb(self) -> None:
        assert color_to_string(Color(10, 20, 30)) == "rgb(10,20,30)"

    def test_dict_input(self) -> None:
        assert color_to_string({"r": 0.5, "g": 0.5, "b": 0.5}, 255) == "rgb(128,128,128)"
        assert color_to_string({"r": 1, "g": 2, "b": 3, "a": 4}) == "rgba(1,2,3,4)"

    def test_attribute_input(self) -> None:
        assert color_to_string(SimpleNamespace(r=1, g=2, b=3)) == "rgb(1,2,3)"

    def test_zero_alpha_is_still_rgba(self) -> None:
        """Alpha present (even 0) means rgba."""
        assert color_to_string(Color(1, 2, 3, 0)) == "rgba(1,2,3,0)"

    def test_alpha_uses_same_multiple(self) -> None:
        assert color_to_string(Color(0, 0, 0, 0.5), 255) == "rgba(0,0,0,128)"


class TestToMultipleInt:
    def test_ceil(self) -> None:
        assert to_multiple_int(1.2) == 2
        assert to_multiple_int(2) == 2
        assert to_multiple_int(0.5, 255) == 128

    def test_color_to_dict(self) -> None:
        assert Color(1, 2, 3).to_dict() == {"r": 1, "g": 2, "b": 3}
        assert Color(1, 2, 3, 4).to_dict() == {"r": 1, "g": 2, "b": 3, "a": 4}


class TestMalformedChannels:
    def test_none_channel_is_zero(self) -> None:
        assert color_to_string({"r": None, "g": 0, "b": 0}) == "rgb(0,0,0)"
        assert color_to_string(Color(1, 2, 3, None)) == "rgb(1,2,3)"

    def test_non_finite_channels(self) -> None:
        assert color_to_string(Color(float("nan"), 0, 0)) == "rgb(NaN,0,0)"
        assert color_to_string(Color(float("inf"), 0, 0, 1), 255) == "rgba(Infinity,0,0,255)"

    def test_string_channels_are_parsed(self) -> None:
        assert to_multiple_int("0.5", 255) == 128
        assert to_multiple_int("abc", 255) == 0
        assert to_multiple_int(None) == 0
