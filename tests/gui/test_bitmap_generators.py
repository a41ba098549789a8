import numpy as np
import pytest
from PyQt6.QtGui import QImage

from palettekit.gui.bitmap_generators import (
    DEFAULT_GENERATORS,
    array_to_image,
    image_to_array,
    make_dot_marker,
    make_drop_shadow,
    make_outlined_square,
    make_ring_marker,
    make_rounded_panel,
    make_solid,
)
from palettekit.gui.theme.color import Color

WINE = Color(145, 47, 64)
TRANSLUCENT_WINE = Color(145, 47, 64, 65)


@pytest.fixture(autouse=True)
def _app(qapp):
    yield


@pytest.mark.parametrize("kind", sorted(DEFAULT_GENERATORS))
@pytest.mark.parametrize("size", [(1, 1), (45, 45), (110, 400)])
def test_every_generator_honours_size(kind, size):
    image = DEFAULT_GENERATORS[kind](size, WINE)

    assert isinstance(image, QImage)
    assert not image.isNull()
    assert (image.width(), image.height()) == size


def test_array_image_conversion_keeps_pixels():
    arr = np.arange(3 * 5 * 4, dtype=np.uint8).reshape(3, 5, 4)
    image = array_to_image(arr)

    assert (image.width(), image.height()) == (5, 3)
    np.testing.assert_array_equal(image_to_array(image), arr)


def test_solid_fills_every_pixel():
    pixels = image_to_array(make_solid((3, 2), TRANSLUCENT_WINE))

    assert pixels.shape == (2, 3, 4)
    assert (pixels == [145, 47, 64, 65]).all()


def test_solid_transparent():
    pixels = image_to_array(make_solid((1, 1), Color(0, 0, 0, 0)))
    assert tuple(pixels[0, 0]) == (0, 0, 0, 0)


class TestDotMarker:
    def test_centre_is_covered_and_brightened(self):
        pixels = image_to_array(make_dot_marker((45, 45), TRANSLUCENT_WINE))
        centre = pixels[22, 22]

        assert centre[3] == TRANSLUCENT_WINE.a
        assert centre[0] > WINE.r
        assert centre[1] > WINE.g

    def test_corners_are_empty(self):
        pixels = image_to_array(make_dot_marker((45, 45), WINE))
        for y, x in [(0, 0), (0, 44), (44, 0), (44, 44)]:
            assert pixels[y, x, 3] == 0


class TestRingMarker:
    def test_centre_is_hollow(self):
        pixels = image_to_array(make_ring_marker((102, 102), WINE))
        assert pixels[51, 51, 3] == 0

    def test_band_is_opaque(self):
        pixels = image_to_array(make_ring_marker((102, 102), WINE))
        # ~0.45 of the extent to the right of centre
        assert pixels[51, 96, 3] == 255
        assert int(pixels[51, 96, 0]) == pytest.approx(WINE.r, abs=2)

    def test_corners_are_empty(self):
        pixels = image_to_array(make_ring_marker((102, 102), WINE))
        assert pixels[0, 0, 3] == 0


class TestOutlinedSquare:
    def test_border_band_and_hollow_centre(self):
        pixels = image_to_array(make_outlined_square((100, 100), WINE))

        for y, x in [(0, 0), (50, 5), (5, 50), (99, 50), (50, 94)]:
            assert tuple(pixels[y, x]) == (145, 47, 64, 255)
        for y, x in [(50, 50), (50, 6), (6, 50), (93, 50)]:
            assert pixels[y, x, 3] == 0

    def test_thin_square_has_one_pixel_border(self):
        pixels = image_to_array(make_outlined_square((8, 8), WINE))
        assert pixels[0, 4, 3] == 255
        assert pixels[1, 4, 3] == 0


class TestRoundedPanel:
    def test_centre_is_flat_colour(self):
        pixels = image_to_array(make_rounded_panel((100, 400), WINE))
        assert tuple(pixels[200, 50]) == (145, 47, 64, 255)

    def test_corner_is_rounded_off(self):
        pixels = image_to_array(make_rounded_panel((100, 400), WINE))
        assert pixels[0, 0, 3] == 0
        assert pixels[0, 50, 3] > 0


class TestDropShadow:
    def test_centre_carries_colour_alpha(self):
        shadow = Color(0, 0, 0, 140)
        pixels = image_to_array(make_drop_shadow((110, 400), shadow))
        assert pixels[200, 55, 3] == 140

    def test_shadow_is_shifted_down(self):
        pixels = image_to_array(make_drop_shadow((110, 400), Color(0, 0, 0, 255)))
        assert pixels[0, 55, 3] < pixels[399, 55, 3]

    def test_smaller_rect_leaves_margin(self):
        pixels = image_to_array(
            make_drop_shadow((110, 400), Color(0, 0, 0, 255), rect_size=(50, 300), blur=4.0)
        )
        assert pixels[200, 0, 3] == 0
        assert pixels[200, 55, 3] == 255
