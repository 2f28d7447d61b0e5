#!/usr/bin/python

import argparse
import time

import numpy

from angles import Degrees
from image_types import ImageSize, PixelIndex
from pixel_math import (
    pixel_tan_from_fov,
    pixel_2_tan_from_fov,
    pixel_tan_by_pixel_2_tan,
    pixel_tan_by_pixel_2_tan_clipped,
)
from pixel_arrays import pixel_tans_from_fov, pixel_tans_by_pixel_2_tan


def measure_time(func, iterations=100):
    """
    mean seconds per call of func over iterations calls
    """
    start = time.perf_counter()
    for i in range(iterations):
        func()
    return (time.perf_counter() - start) / iterations


def setup_options_parser():
    parser = argparse.ArgumentParser(
        description='time the fov and pixel_2_tan projection models.')
    parser.add_argument(
        '--width', type=int, default=640,
        help='image width in pixels')
    parser.add_argument(
        '--fov', type=float, default=58.0,
        help='horizontal field of view in degrees')
    parser.add_argument(
        '--iterations', type=int, default=100,
        help='how many times to run each model')
    parser.add_argument(
        '--clip', type=float, default=0.05,
        help='dead zone, as a fraction of half the width')
    return parser


def main(argv=None):
    parser = setup_options_parser()
    args = parser.parse_args(argv)
    if args.width <= 0:
        parser.error("--width must be a positive number of pixels")
    size = ImageSize(args.width, 0)
    fov = Degrees(args.fov)
    pixel_2_tan = pixel_2_tan_from_fov(size, fov)
    row = [PixelIndex(i) for i in range(args.width + 1)]
    ixs = numpy.arange(args.width + 1)

    def fov_row():
        for p in row:
            pixel_tan_from_fov(p, size, fov).tan()

    def linear_row():
        for p in row:
            pixel_tan_by_pixel_2_tan(p, size, pixel_2_tan)

    def clipped_row():
        for p in row:
            pixel_tan_by_pixel_2_tan_clipped(p, size, pixel_2_tan, args.clip)

    timings = [
        ('fov', fov_row),
        ('pixel_2_tan', linear_row),
        ('pixel_2_tan clipped', clipped_row),
        ('fov (numpy)', lambda: pixel_tans_from_fov(ixs, size, fov)),
        ('pixel_2_tan (numpy)',
         lambda: pixel_tans_by_pixel_2_tan(ixs, size, pixel_2_tan, args.clip)),
    ]
    print("%d pixels, fov %s, pixel_2_tan %.6g" % (
        len(row), fov, pixel_2_tan))
    for name, func in timings:
        secs = measure_time(func, args.iterations)
        print("%-22s %.3e s/row  %.3e s/pixel" % (name, secs, secs / len(row)))
    return 0


if __name__ == '__main__':
    main()
