from chromaslice.gradients import GradientRasterizer, RasterState, unpack_argb, render_slice
from chromaslice.conversions import rgb_to_hsv
from chromaslice.colors import HsvColor, RgbColor
from chromaslice.config import DEFAULT_WIDTH, DEFAULT_HEIGHT
from chromaslice.exceptions import InvalidDimensionError, OutOfRangeError
import logging
import numpy as np
import pytest


def pixel(buffer, width, x, y):
    return tuple(int(c) for c in unpack_argb(buffer)[y * width + x])


def test_buffer_shape():
    rasterizer = GradientRasterizer(width=10, height=10)
    buffer = rasterizer.slice_of(0)

    assert buffer.shape == (100,)
    assert buffer.dtype == np.uint32


def test_non_square_buffer_shape():
    rasterizer = GradientRasterizer(width=7, height=3)
    assert len(rasterizer.buffer) == 21


def test_corners():
    buffer = GradientRasterizer(width=10, height=10).slice_of(0)

    # bottom-left: no saturation, lowest value
    bottom_left = pixel(buffer, 10, 0, 9)
    assert bottom_left == (26, 26, 26)
    _, s, v = rgb_to_hsv(*bottom_left)
    assert s == 0.0
    assert abs(v - 10) < 1

    # top-right: 90% saturation, full value, red
    top_right = pixel(buffer, 10, 9, 0)
    assert top_right == (255, 26, 26)
    h, s, v = rgb_to_hsv(*top_right)
    assert h == 0.0
    assert abs(s - 90) < 1
    assert v == 100.0

    # top-left is white, bottom-right is a dark red
    assert pixel(buffer, 10, 0, 0) == (255, 255, 255)
    r, g, b = pixel(buffer, 10, 9, 9)
    assert r > g == b


def test_value_grows_upwards_and_saturation_rightwards():
    rasterizer = GradientRasterizer(width=8, height=8, hue=200)
    hsv = [[rgb_to_hsv(*pixel(rasterizer.buffer, 8, x, y)) for x in range(8)] for y in range(8)]

    for y in range(7):
        assert hsv[y][3][2] > hsv[y + 1][3][2]
    for x in range(7):
        assert hsv[2][x][1] < hsv[2][x + 1][1]


def test_every_pixel_is_opaque():
    buffer = GradientRasterizer(width=16, height=9, hue=275.5).buffer
    assert np.all(buffer >> np.uint32(24) == 0xFF)


def test_slice_of_hue():
    rasterizer = GradientRasterizer(width=10, height=10)
    assert pixel(rasterizer.slice_of(120), 10, 9, 0) == (26, 255, 26)
    assert rasterizer.hue == 120.0
    assert pixel(rasterizer.slice_of(), 10, 9, 0) == (26, 255, 26)


def test_hue_360_matches_hue_0():
    assert np.array_equal(render_slice(12, 6, 360), render_slice(12, 6, 0))


def test_spectrum():
    rasterizer = GradientRasterizer(width=4, height=2)
    spectrum = rasterizer.spectrum()

    assert spectrum.shape == (4,)
    assert [tuple(int(c) for c in rgb) for rgb in unpack_argb(spectrum)] == [
        (255, 0, 0),
        (128, 255, 0),
        (0, 255, 255),
        (128, 0, 255),
    ]


def test_spectrum_follows_saturation_and_value():
    rasterizer = GradientRasterizer(width=4, height=2, saturation=0, value=50)
    assert np.all(unpack_argb(rasterizer.spectrum()) == 128)

    rasterizer.value = 0
    assert np.all(unpack_argb(rasterizer.spectrum()) == 0)


def test_spectrum_with_other_width():
    rasterizer = GradientRasterizer(width=10, height=10)
    assert rasterizer.spectrum(width=4).shape == (4,)
    assert rasterizer.spectrum().shape == (10,)
    with pytest.raises(InvalidDimensionError):
        rasterizer.spectrum(width=0)


def test_dirty_until_read():
    rasterizer = GradientRasterizer(width=4, height=4)
    assert rasterizer.is_dirty
    assert rasterizer._state is RasterState.DIRTY

    first = rasterizer.buffer
    assert not rasterizer.is_dirty
    assert rasterizer.buffer is first

    rasterizer.hue = 90
    assert rasterizer.is_dirty
    second = rasterizer.buffer
    assert second is not first
    assert not np.array_equal(first, second)


def test_every_mutator_marks_dirty():
    rasterizer = GradientRasterizer(width=4, height=4)
    mutations = [
        lambda: rasterizer.set_width(5),
        lambda: rasterizer.set_height(6),
        lambda: rasterizer.set_hue(10),
        lambda: rasterizer.set_saturation(50),
        lambda: rasterizer.set_value(50),
        lambda: rasterizer.resize(3, 2),
    ]
    for mutate in mutations:
        rasterizer.regenerate()
        assert not rasterizer.is_dirty
        mutate()
        assert rasterizer.is_dirty

    assert len(rasterizer.buffer) == 6


def test_resize_regenerates_whole_buffer():
    rasterizer = GradientRasterizer(width=10, height=10)
    rasterizer.buffer
    rasterizer.width = 3
    rasterizer.height = 4
    assert len(rasterizer.buffer) == 12
    assert np.array_equal(rasterizer.buffer, render_slice(3, 4, 0))


def test_invalid_dimensions():
    for bad in (0, -1, 2.5, True, "10", None):
        with pytest.raises(InvalidDimensionError):
            GradientRasterizer(width=bad)
        with pytest.raises(InvalidDimensionError):
            GradientRasterizer(height=bad)

    rasterizer = GradientRasterizer(width=4, height=4)
    rasterizer.buffer
    with pytest.raises(InvalidDimensionError):
        rasterizer.width = 0
    with pytest.raises(InvalidDimensionError):
        rasterizer.resize(8, -2)
    assert (rasterizer.width, rasterizer.height) == (4, 4)
    assert not rasterizer.is_dirty


def test_numpy_integer_dimensions():
    rasterizer = GradientRasterizer(width=np.int64(3), height=np.int32(2))
    assert len(rasterizer.buffer) == 6
    assert type(rasterizer.width) is int


def test_invalid_hsv():
    with pytest.raises(OutOfRangeError):
        GradientRasterizer(hue=361)
    with pytest.raises(OutOfRangeError):
        GradientRasterizer(saturation=-1)

    rasterizer = GradientRasterizer(width=4, height=4, hue=30)
    with pytest.raises(OutOfRangeError):
        rasterizer.hue = -5
    with pytest.raises(OutOfRangeError):
        rasterizer.value = 100.5
    with pytest.raises(OutOfRangeError):
        rasterizer.slice_of(400)
    assert rasterizer.hue == 30.0


def test_defaults():
    rasterizer = GradientRasterizer()
    assert (rasterizer.width, rasterizer.height) == (DEFAULT_WIDTH, DEFAULT_HEIGHT)
    assert (rasterizer.hue, rasterizer.saturation, rasterizer.value) == (0.0, 100.0, 100.0)


def test_color_at():
    rasterizer = GradientRasterizer(width=10, height=10)
    color = rasterizer.color_at(9, 0)
    assert isinstance(color, HsvColor)
    assert color.hue == 0.0
    assert abs(color.saturation - 90) < 1e-9
    assert color.value == 100.0

    assert rasterizer.color_at(10, 10) == (0.0, 100.0, 0.0)
    with pytest.raises(OutOfRangeError):
        rasterizer.color_at(11, 0)
    with pytest.raises(OutOfRangeError):
        rasterizer.color_at(0, -1)


def test_rgb_at_matches_buffer():
    rasterizer = GradientRasterizer(width=7, height=5, hue=200)
    rgb = unpack_argb(rasterizer.buffer)
    for y in range(5):
        for x in range(7):
            color = rasterizer.rgb_at(x, y)
            assert isinstance(color, RgbColor)
            assert color == tuple(int(c) for c in rgb[y * 7 + x])
            assert rasterizer.pixel_at(x, y) == 0xFF000000 | color.red << 16 | color.green << 8 | color.blue


def test_pixel_at_bounds():
    rasterizer = GradientRasterizer(width=10, height=10)
    assert rasterizer.pixel_at(9, 0) == 0xFFFF1A1A
    with pytest.raises(IndexError):
        rasterizer.pixel_at(10, 0)
    with pytest.raises(IndexError):
        rasterizer.pixel_at(0, -1)


def test_position_of():
    rasterizer = GradientRasterizer(width=10, height=10)
    x, y = rasterizer.position_of(90, 100)
    assert abs(x - 9) < 1e-9
    assert y == 0.0
    assert rasterizer.position_of(0, 0) == (0.0, 10.0)

    # pointer placement and color lookup agree
    x, y = rasterizer.position_of(35, 60)
    color = rasterizer.color_at(x, y)
    assert abs(color.saturation - 35) < 1e-9
    assert abs(color.value - 60) < 1e-9

    with pytest.raises(OutOfRangeError):
        rasterizer.position_of(101, 0)


def test_regeneration_is_logged(caplog):
    rasterizer = GradientRasterizer(width=3, height=2, hue=45)
    with caplog.at_level(logging.DEBUG, logger="chromaslice.gradients.rasterizer"):
        rasterizer.buffer
        rasterizer.buffer
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["Rasterizing 3x2 slice at hue 45.0"]


def test_repr():
    assert repr(GradientRasterizer(width=2, height=3)) == (
        "GradientRasterizer(width=2, height=3, hue=0.0, saturation=100.0, value=100.0)"
    )


def test_cached_buffers_are_read_only():
    rasterizer = GradientRasterizer(width=10, height=10)
    buffer = rasterizer.buffer
    assert rasterizer.pixel_at(0, 0) == 0xFFFFFFFF
    with pytest.raises(ValueError):
        buffer[:] = 0
    assert rasterizer.pixel_at(0, 0) == 0xFFFFFFFF
    with pytest.raises(ValueError):
        rasterizer.spectrum()[0] = 0
    assert int(rasterizer.spectrum()[0]) == 0xFFFF0000


def test_pixel_at_rejects_non_integers():
    rasterizer = GradientRasterizer(width=10, height=10)
    with pytest.raises(TypeError):
        rasterizer.pixel_at(1.5, 0)
    with pytest.raises(TypeError):
        rasterizer.pixel_at(0, 2.0)
    with pytest.raises(TypeError):
        rasterizer.pixel_at(True, 0)
    assert rasterizer.pixel_at(np.int64(9), 0) == 0xFFFF1A1A
