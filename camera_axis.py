from angles import Degrees
from image_types import ImageSize, PixelIndex
from pixel_math import (
    pixel_tan_from_fov,
    tan_2_pixel_by_fov,
    pixel_2_tan_from_fov,
    pixel_tan_by_pixel_2_tan,
    pixel_tan_by_pixel_2_tan_clipped,
    tan_2_pixel_by_pixel_2_tan,
)
from projection_errors import check_image_size, check_fov

# structure sensor, 320x240 depth/ir frames
DEFAULT_IMAGE_SIZE = ImageSize(320, 240)
DEFAULT_HORIZONTAL_FOV = Degrees(58)
DEFAULT_VERTICAL_FOV = Degrees(45)
# ignore the middle 5% either side of center
DEFAULT_CLIPPING_THRESHOLD = 0.05


def _pixel(p):
    if isinstance(p, PixelIndex):
        return p
    return PixelIndex(p)


class CameraAxis:
    """
    one axis of a camera with a fixed image size and field of view.

    checks its inputs once up front, then hands out conversions with
    pixel_2_tan already worked out. for the vertical axis pass the image
    height as the width of image_size, or use CameraAxis.vertical().
    """
    def __init__(self, image_size=DEFAULT_IMAGE_SIZE,
                 fov=DEFAULT_HORIZONTAL_FOV,
                 clipping_threshold=DEFAULT_CLIPPING_THRESHOLD):
        self.image_size = check_image_size(image_size)
        self.fov = check_fov(fov)
        self.clipping_threshold = clipping_threshold
        self.pixel_2_tan = pixel_2_tan_from_fov(image_size, fov)

    @classmethod
    def horizontal(cls, image_size=DEFAULT_IMAGE_SIZE,
                   fov=DEFAULT_HORIZONTAL_FOV, **kwargs):
        return cls(image_size, fov, **kwargs)

    @classmethod
    def vertical(cls, image_size=DEFAULT_IMAGE_SIZE,
                 fov=DEFAULT_VERTICAL_FOV, **kwargs):
        # measure along the height
        size = ImageSize(image_size.height, image_size.width)
        return cls(size, fov, **kwargs)

    def angle_of(self, pixel):
        return pixel_tan_from_fov(_pixel(pixel), self.image_size, self.fov)

    def pixel_of(self, tan):
        return tan_2_pixel_by_fov(tan, self.image_size, self.fov)

    def tan_of(self, pixel):
        return pixel_tan_by_pixel_2_tan(
            _pixel(pixel), self.image_size, self.pixel_2_tan)

    def clipped_tan_of(self, pixel):
        return pixel_tan_by_pixel_2_tan_clipped(
            _pixel(pixel), self.image_size, self.pixel_2_tan,
            self.clipping_threshold)

    def pixel_of_tan(self, tan, round_back=True):
        return tan_2_pixel_by_pixel_2_tan(
            tan, self.image_size, self.pixel_2_tan, round_back)

    def __repr__(self):
        return "CameraAxis(%r, %r, clipping_threshold=%r)" % (
            self.image_size, self.fov, self.clipping_threshold)
