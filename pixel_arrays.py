import numpy

from projection_errors import RangeOverflow

tan_table_cache = {}


def _as_float_array(values):
    return numpy.asarray(values, dtype='float64')


def _round_half_away(xs):
    a = numpy.abs(xs)
    f = numpy.floor(a)
    return numpy.copysign(f + (a - f >= 0.5), xs)


def fov_tan_table(image_size, fov):
    """
    tangent of the look angle for every pixel column 0..width (inclusive),
    for a camera with the given horizontal field of view.
    the table is cached per (width, fov) and is read-only.
    """
    key = (image_size.width, fov.radians)
    if key not in tan_table_cache:
        ix = numpy.arange(image_size.width + 1, dtype='float64')
        table = pixel_tans_from_fov(ix, image_size, fov)
        table.flags.writeable = False
        tan_table_cache[key] = table
    return tan_table_cache[key]


def pixel_tans_from_fov(pixels, image_size, fov):
    hw = image_size.half_width()
    half_fov_tan = (fov / 2.0).tan()
    with numpy.errstate(divide='ignore', invalid='ignore'):
        norm = _as_float_array(pixels) / hw - 1.0
    # tan(atan(x)) == x, so skip the round trip through the angle
    return norm * half_fov_tan


def pixel_tans_by_pixel_2_tan(pixels, image_size, pixel_2_tan,
                              clipping_threshold=None):
    hw = image_size.half_width()
    offsets = _as_float_array(pixels) - hw
    tans = offsets * pixel_2_tan
    if clipping_threshold is not None:
        tans = numpy.where(
            numpy.abs(offsets) < clipping_threshold * hw, 0.0, tans)
    return tans


def tans_2_pixels_by_pixel_2_tan(tans, image_size, pixel_2_tan,
                                 round_back=True):
    with numpy.errstate(divide='ignore', invalid='ignore'):
        pixel_v = _as_float_array(tans) / pixel_2_tan + image_size.half_width()
        if round_back:
            pixel_v = _round_half_away(pixel_v)
        else:
            pixel_v = numpy.trunc(pixel_v)
        # anything past 2**64 won't fit the uint64 cast
        bad = ~numpy.isfinite(pixel_v) | (pixel_v < 0) | (pixel_v >= 2.0 ** 64)
    if bad.any():
        raise RangeOverflow(
            "%d pixel(s) out of range, first at index %d" % (
                bad.sum(), numpy.flatnonzero(bad)[0]))
    return pixel_v.astype('uint64')
