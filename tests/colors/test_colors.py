from ..samples import samples_rgb_hsv, samples_rgb_hex
from chromaslice.colors import RgbColor, HsvColor, HexColor, ColorBase, get_color_class, format_to_class
from chromaslice.exceptions import OutOfRangeError, MalformedHexError
from chromaslice.types import ColorFormat
import pytest


def test_class_conversion_rgb_to_hsv():
    for rgb, hsv_expected in samples_rgb_hsv.items():
        hsv = RgbColor(rgb).convert("hsv")
        assert isinstance(hsv, HsvColor)
        assert hsv == hsv_expected

        back = hsv.convert(ColorFormat.RGB)
        assert isinstance(back, RgbColor)
        assert back == rgb


def test_class_conversion_hex():
    for rgb, code in samples_rgb_hex.items():
        color = RgbColor(rgb)
        assert color.to_hex() == code
        assert HexColor(code).to_rgb() == color
        assert HexColor(color).code == code


def test_construct_from_other_color():
    red = RgbColor((255, 0, 0))
    assert HsvColor(red).channels == (0.0, 100.0, 100.0)
    assert HexColor(red).code == "#FF0000"
    assert RgbColor(HexColor("00ff80")) == (0, 255, 128)
    assert RgbColor(HsvColor((240, 100, 100))) == RgbColor((0, 0, 255))


def test_channel_properties():
    rgb = RgbColor((1, 2, 3))
    assert (rgb.red, rgb.green, rgb.blue) == (1, 2, 3)
    assert rgb.argb == 0xFF010203

    hsv = HsvColor((200, 50, 25))
    assert (hsv.hue, hsv.saturation, hsv.value) == (200.0, 50.0, 25.0)
    assert hsv.sextant == 3

    assert HexColor("#abcdef").digits == "ABCDEF"
    assert str(HexColor("abcdef")) == "#ABCDEF"


def test_channel_types():
    assert all(isinstance(c, int) for c in RgbColor((1.0, 2.0, 3.0)))
    assert all(isinstance(c, float) for c in HsvColor((1, 2, 3)))


def test_hsv_keeps_360():
    hsv = HsvColor((360, 100, 100))
    assert hsv.hue == 360.0
    assert hsv.sextant == 0
    assert hsv.to_rgb() == (255, 0, 0)


def test_immutable():
    color = RgbColor((1, 2, 3))
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)
    with pytest.raises(AttributeError):
        color.red = 4
    with pytest.raises(AttributeError):
        color.anything = 1


def test_out_of_range_is_not_clamped():
    with pytest.raises(OutOfRangeError):
        RgbColor((256, 0, 0))
    with pytest.raises(OutOfRangeError):
        RgbColor((0, 0, 255.5))
    with pytest.raises(OutOfRangeError):
        HsvColor((361, 0, 0))
    with pytest.raises(OutOfRangeError):
        HsvColor((0, 0, 101))


def test_wrong_channel_count():
    with pytest.raises(ValueError):
        RgbColor((1, 2))
    with pytest.raises(ValueError):
        HsvColor((1, 2, 3, 4))


def test_hex_validation():
    with pytest.raises(MalformedHexError):
        HexColor("#GG0000")
    with pytest.raises(TypeError):
        HexColor(0xFF0000)


def test_equality_and_hash():
    assert RgbColor((1, 2, 3)) == RgbColor((1, 2, 3))
    assert RgbColor((1, 2, 3)) != RgbColor((1, 2, 4))
    assert hash(RgbColor((1, 2, 3))) == hash(RgbColor((1, 2, 3)))
    assert HexColor("ff0000") == "#FF0000"
    assert HexColor("ff0000") == "FF0000"
    assert HexColor("ff0000") != "not a color"
    # same color, different representations
    assert RgbColor((255, 0, 0)) != HsvColor((0, 100, 100))
    assert len({HexColor("ff0000"), HexColor("#FF0000")}) == 1


def test_sequence_protocol():
    color = HsvColor((10, 20, 30))
    assert len(color) == 3
    assert color[0] == 10.0
    assert list(color) == [10.0, 20.0, 30.0]
    assert len(HexColor("#000000")) == 1
    assert list(HexColor("#000000")) == ["#000000"]


def test_registry():
    assert set(format_to_class) == {ColorFormat.RGB, ColorFormat.HSV, ColorFormat.HEX}
    assert get_color_class("rgb") is RgbColor
    assert get_color_class(ColorFormat.HEX) is HexColor
    assert issubclass(get_color_class("hsv"), ColorBase)
    with pytest.raises(ValueError):
        get_color_class("hsl")


def test_repr():
    assert repr(RgbColor((1, 2, 3))) == "RgbColor((1, 2, 3))"
