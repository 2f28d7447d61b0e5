import math


class ProjectionError(ValueError):
    pass


class DegenerateImage(ProjectionError):
    """
    image has no width or no height, so there is no center to measure from
    """


class DomainViolation(ProjectionError):
    """
    field of view outside (0, pi): tan(fov / 2) blows up or flips sign
    """


class RangeOverflow(ProjectionError):
    """
    computed pixel is negative or not a finite number
    """


def check_image_size(size):
    if size.width <= 0 or size.height <= 0:
        raise DegenerateImage(
            "image size must be positive, got %dx%d" % (size.width, size.height))
    return size


def check_fov(fov):
    fov_rad = fov.radians
    if not (0.0 < fov_rad < math.pi):
        raise DomainViolation(
            "field of view must be in (0, pi) radians, got %r" % (fov,))
    return fov


def check_pixel(value):
    # value is the continuous pixel coordinate, before it becomes an int
    if not math.isfinite(value) or value < 0:
        raise RangeOverflow("pixel %r is out of range" % (value,))
    return value
