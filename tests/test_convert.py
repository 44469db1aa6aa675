import math

import pytest

from color_scale.convert import (
    Color,
    InvalidColor,
    display_hex,
    format_number,
    from_polar,
    mix,
    parse,
    perceptual_distance,
    to_polar,
)


def channels(hex_):
    return [int(hex_[i : i + 2], 16) for i in (1, 3, 5)]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("#6366f1", "#6366f1"),
        ("6366F1", "#6366f1"),
        ("  #ABCDEF ", "#abcdef"),
        ("#fff", "#ffffff"),
        ("0a3", "#00aa33"),
    ],
)
def test_parse_normalizes(text, expected):
    assert parse(text) == expected


@pytest.mark.parametrize(
    "text", ["not-a-color", "", "#", "#12345", "#1234567", "red", "##fff", "#ggg", None]
)
def test_parse_rejects(text):
    with pytest.raises(InvalidColor):
        parse(text)


def test_invalid_color_is_value_error():
    with pytest.raises(ValueError):
        parse("rgb(0, 0, 0)")


def test_display_hex_uppercase():
    assert display_hex("6366f1") == "#6366F1"


def test_to_polar_known_value():
    l, c, h = to_polar("#6366f1")
    assert l == pytest.approx(0.585, abs=0.002)
    assert c == pytest.approx(0.204, abs=0.002)
    assert h == pytest.approx(277.1, abs=0.5)


@pytest.mark.parametrize("hex_", ["#000000", "#ffffff", "#808080", "#333333"])
def test_achromatic_hue_is_nan(hex_):
    l, c, h = to_polar(hex_)
    assert math.isnan(h)
    assert c < 1e-3
    assert 0.0 <= l <= 1.0 + 1e-9


@pytest.mark.parametrize(
    "hex_",
    ["#6366f1", "#f59e0b", "#000000", "#ffffff", "#123456", "#ff0000", "#00ff7f", "#7f7f7f"],
)
def test_round_trip_within_quantization(hex_):
    out = from_polar(*to_polar(hex_))
    assert all(abs(x - y) <= 1 for x, y in zip(channels(out), channels(hex_)))


def test_mix_endpoints():
    assert mix("#ffffff", "#6366f1", 0.0) == "#ffffff"
    assert mix("#ffffff", "#6366f1", 1.0) == "#6366f1"


def test_mix_weight_is_clamped():
    assert mix("#000000", "#6366f1", -0.5) == "#000000"
    assert mix("#000000", "#6366f1", 3.0) == "#6366f1"


def test_mix_rejects_bad_input():
    with pytest.raises(InvalidColor):
        mix("#000000", "nope", 0.5)


def test_mix_takes_shorter_hue_arc():
    a = Color("lch-d65", [55, 40, 350]).convert("srgb").to_string(hex=True)
    b = Color("lch-d65", [55, 40, 10]).convert("srgb").to_string(hex=True)
    h = Color(mix(a, b, 0.5)).convert("lch-d65")["h"] % 360.0
    assert h < 10.0 or h > 350.0


def test_mix_is_deterministic():
    assert mix("#ffffff", "#14b8a6", 0.4) == mix("#ffffff", "#14b8a6", 0.4)


def test_distance_properties():
    assert perceptual_distance("#fff", "#FFFFFF") == 0.0
    ab = perceptual_distance("#6366f1", "#f59e0b")
    assert ab > 0.0
    assert ab == pytest.approx(perceptual_distance("#f59e0b", "#6366f1"))
    # black and white are ~100 apart in Lab
    assert perceptual_distance("#000000", "#ffffff") == pytest.approx(100.0, abs=0.1)


@pytest.mark.parametrize(
    "value,expected",
    [
        (0.58541, "0.585"),
        (277.1149, "277.115"),
        (float("nan"), "0.000"),
        (-1e-12, "0.000"),
        (0.0, "0.000"),
        (1.0, "1.000"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected
