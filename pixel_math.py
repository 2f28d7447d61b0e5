# pixel <-> angle conversions along one image axis.
#
# a pinhole camera samples the image plane linearly in tan(angle), not in
# angle: pixel i of an N pixel wide image with field of view fov sits at
#
#   tan(theta) = (i / (N/2) - 1) * tan(fov/2)
#
# the fov functions evaluate that directly. the pixel_2_tan functions take
# the per-pixel factor tan(fov/2) / (N/2) precomputed, which saves the trig
# calls when the camera doesn't change between calls.
import math

import numpy

from angles import Angle, Radians
from image_types import PixelIndex
from projection_errors import DegenerateImage, check_pixel


def _round_half_away(x):
    # C-style round(), python's round() goes to even on .5
    if not math.isfinite(x):
        return x
    a = abs(x)
    r = math.floor(a)
    if a - r >= 0.5:
        r += 1
    return math.copysign(r, x)


def _to_pixel(x):
    return PixelIndex(int(check_pixel(x)))


def _div(a, b):
    # ieee division: x / 0 is +-inf, 0 / 0 is nan
    with numpy.errstate(divide='ignore', invalid='ignore'):
        return float(numpy.float64(a) / numpy.float64(b))


def _tan_value(t):
    if isinstance(t, Angle):
        return t.radians
    return float(t)


def pixel_tan_from_fov(pixel, image_size, fov):
    norm = pixel.normalized(image_size)
    half_fov_tan = (fov / 2.0).tan()
    return Radians(math.atan(norm * half_fov_tan))


def tan_2_pixel_by_fov(pixel_tan, image_size, fov):
    t = _tan_value(pixel_tan)
    half_fov_tan = (fov / 2.0).tan()
    hw = image_size.half_width()
    norm = _div(t, half_fov_tan)
    return _to_pixel(_round_half_away(norm * hw + hw))


def pixel_2_tan_from_fov(image_size, fov):
    """
    tangent per pixel for fov spread over image_size.width.
    with this factor the linear functions give the same tangent as
    pixel_tan_from_fov.
    """
    if image_size.width <= 0:
        raise DegenerateImage("no pixel_2_tan for a zero-width image")
    return (fov / 2.0).tan() / image_size.half_width()


def pixel_tan_by_pixel_2_tan(pixel, image_size, pixel_2_tan):
    return (pixel.value - image_size.half_width()) * pixel_2_tan


def _linear_pixel(angle_tan, image_size, pixel_2_tan):
    t = _tan_value(angle_tan)
    return _div(t, pixel_2_tan) + image_size.half_width()


def angle_tan_to_pixel(angle_tan, image_size, pixel_2_tan):
    return _to_pixel(
        _round_half_away(_linear_pixel(angle_tan, image_size, pixel_2_tan)))


def pixel_tan_by_pixel_2_tan_clipped(pixel, image_size, pixel_2_tan,
                                     clipping_threshold):
    """
    like pixel_tan_by_pixel_2_tan, but anything closer to the center than
    clipping_threshold * half width comes back as exactly 0.0.
    clipping_threshold is a fraction: 0.05 ignores the middle 5% either side.
    """
    hw = image_size.half_width()
    diff = abs(pixel.value - hw)
    if diff < clipping_threshold * hw:
        return 0.0
    return (pixel.value - hw) * pixel_2_tan


def tan_2_pixel_by_pixel_2_tan(pixel_tan, image_size, pixel_2_tan, round_back):
    # unlike angle_tan_to_pixel, round_back=False truncates toward zero
    pixel_v = _linear_pixel(pixel_tan, image_size, pixel_2_tan)
    if round_back:
        return _to_pixel(_round_half_away(pixel_v))
    if math.isfinite(pixel_v):
        pixel_v = float(math.trunc(pixel_v))
    return _to_pixel(pixel_v)
