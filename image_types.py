from collections import namedtuple

import numpy


class ImageSize(namedtuple('ImageSize', ['width', 'height'])):
    """
    width and height of an image, in pixels
    """
    __slots__ = ()

    def __new__(cls, width=0, height=0):
        return super().__new__(cls, width, height)

    def half_width(self):
        return self.width / 2.0

    def half_height(self):
        return self.height / 2.0


class PixelIndex(namedtuple('PixelIndex', ['value'])):
    """
    a pixel coordinate along one axis of an image
    """
    __slots__ = ()

    def normalized(self, size):
        """
        map the pixel into [-1, 1] across the width of size.
        0 is the left edge, size.width the right edge.
        a zero-width size gives inf or nan, same as ieee division would.
        """
        with numpy.errstate(divide='ignore', invalid='ignore'):
            norm = numpy.float64(self.value) / numpy.float64(size.half_width())
        return float(norm) - 1.0
