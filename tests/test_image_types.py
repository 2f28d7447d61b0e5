from unittest import TestCase
import math
from image_types import ImageSize, PixelIndex


class ImageSizeTests(TestCase):
    def test_default(self):
        s = ImageSize()
        assert s.width == 0 and s.height == 0
        self.assertEqual(s.half_width(), 0.0)
        self.assertEqual(s.half_height(), 0.0)

    def test_construct(self):
        s = ImageSize(1920, 1080)
        assert s.width == 1920 and s.height == 1080
        self.assertEqual(s, ImageSize(width=1920, height=1080))

    def test_half_width_and_height(self):
        s = ImageSize(1920, 1080)
        assert s.half_width() == 960.0
        assert s.half_height() == 540.0
        self.assertEqual(ImageSize(5, 3).half_width(), 2.5)
        self.assertEqual(ImageSize(5, 3).half_height(), 1.5)

    def test_immutable(self):
        s = ImageSize(640, 480)
        with self.assertRaises(AttributeError):
            s.width = 10


class PixelIndexTests(TestCase):
    def test_normalized(self):
        size = ImageSize(640, 480)
        self.assertEqual(PixelIndex(0).normalized(size), -1.0)
        self.assertEqual(PixelIndex(320).normalized(size), 0.0)
        self.assertEqual(PixelIndex(640).normalized(size), 1.0)
        self.assertEqual(PixelIndex(480).normalized(size), 0.5)

    def test_normalized_zero_width(self):
        size = ImageSize(0, 480)
        assert math.isinf(PixelIndex(5).normalized(size))
        assert math.isnan(PixelIndex(0).normalized(size))

    def test_value_semantics(self):
        self.assertEqual(PixelIndex(3), PixelIndex(3))
        self.assertEqual(PixelIndex(3).value, 3)
        with self.assertRaises(AttributeError):
            PixelIndex(3).value = 4
