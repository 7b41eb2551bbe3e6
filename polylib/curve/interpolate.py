import math

import numpy

from . import geometry

def resample_evenly(points, segment_length):
    """Sample points spaced evenly by arc length along a polyline.

    The polyline is divided into num_segments = round(length / segment_length)
    pieces of equal length, and the point at the start of each piece is
    returned. So the first point of the polyline is included and the last is
    not.

    Parameters:
    points: (n, 2) polyline, free of consecutive duplicates.
    segment_length: desired spacing between samples, in the units of the
        polyline coordinates.

    Returns a flat array [x0, y0, x1, y1, ...] of the sampled coordinates. The
    array is empty if the polyline has fewer than two points or is too short
    to be divided into at least two pieces.

    Example:
        resample_evenly([(0, 0), (10, 0)], 5) # array([0., 0., 5., 0.])
    """
    if not (segment_length > 0 and math.isfinite(segment_length)):
        raise ValueError('segment_length must be a positive number, not {}'.format(segment_length))
    points = numpy.asarray(points, dtype=float)
    if len(points) < 2:
        return numpy.zeros(0)
    distances = geometry.cumulative_distances(points)
    line_length = distances[-1]
    segment_count = line_length / segment_length
    if not math.isfinite(segment_count):
        raise ValueError('segment_length {} is too small for a polyline of length {}'.format(segment_length, line_length))
    num_segments = _round_half_away(segment_count)
    if num_segments < 2:
        return numpy.zeros(0)
    targets = numpy.arange(num_segments) / num_segments * line_length
    return geometry.interpolate_along(points, distances, targets).reshape(-1)

def _round_half_away(x):
    # x >= 0; halves round up, not to even
    n = math.floor(x)
    return n + 1 if x - n >= 0.5 else n
