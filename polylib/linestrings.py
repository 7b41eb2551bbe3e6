# This code is licensed under the MIT License (see LICENSE file for details)

from concurrent import futures
import functools
import logging

import numpy

from .curve import geometry
from .curve import interpolate
from .curve import split
from .curve.tolerances import DEFAULT_TOLERANCES

logger = logging.getLogger(__name__)

def as_points(coords):
    """Convert raw coordinates into an array of 2d points.

    Parameters:
        coords: array-like of shape (n, d) with d >= 2. Only the first two
            columns (x and y) are used; any further columns (z, m, ...) are
            ignored. An input with no rows gives an array of shape (0, 2).

    Returns: array of shape (n, 2)

    Raises ValueError if coords with any rows are ragged, or are not a 2D
        array of at least two columns."""
    try:
        coords = numpy.asarray(coords, dtype=float)
    except ValueError as e:
        raise ValueError('invalid input shape: coordinate rows must all have the same length ({})'.format(e)) from e
    if (coords.ndim == 1 and coords.size == 0) or (coords.ndim == 2 and coords.shape[0] == 0):
        return numpy.empty((0, 2))
    if coords.ndim != 2 or coords.shape[1] < 2:
        raise ValueError('invalid input shape {}: expected (n, 2) or wider coordinates'.format(coords.shape))
    return coords[:, :2].copy()

def as_polyline(coords, tolerances=DEFAULT_TOLERANCES):
    """Convert raw coordinates to a polyline with consecutive duplicate points
    removed. See as_points() for the accepted input shapes."""
    return geometry.filter_dup_points(as_points(coords), tolerances)

def split_linestring(coords, split_points, tolerance=0.01, tolerances=DEFAULT_TOLERANCES):
    """Split one linestring at the given split points.

    Parameters:
        coords: raw (n, 2) coordinates of the linestring.
        split_points: raw (m, 2) coordinates of candidate split points, or None.
        tolerance: maximum distance between a split point and the linestring
            for that point to be used.
        tolerances: Tolerances instance.

    Returns: list of (k, 2) arrays. The list is empty if the linestring has
        fewer than two distinct points, and holds only the (de-duplicated)
        input linestring if there are no split points.
    """
    points = as_polyline(coords, tolerances)
    if len(points) < 2:
        logger.debug('skipping degenerate linestring with %d distinct points', len(points))
        return []
    split_points = numpy.empty((0, 2)) if split_points is None else as_points(split_points)
    if len(split_points) == 0:
        return [points]
    return split.split_polyline(points, split_points, tolerance, tolerances)

def split_linestrings(linestrings, split_points, tolerance=0.01, num_threads=None, tolerances=DEFAULT_TOLERANCES):
    """Split each of a collection of linestrings at its own set of split points.

    Parameters:
        linestrings: list of raw (n, 2) coordinate arrays.
        split_points: list of raw (m, 2) split point arrays; split_points[i]
            applies to linestrings[i]. If this list is shorter than the list
            of linestrings, the remaining linestrings are not split.
        tolerance: maximum distance between a split point and its linestring.
        num_threads: if not None, process linestrings in parallel with a
            pool of this many threads.
        tolerances: Tolerances instance.

    Returns: list with one entry per input linestring, in input order, each
        entry being the list of pieces from split_linestring().
    """
    split_points = list(split_points)
    split_points += [None] * (len(linestrings) - len(split_points))
    work = functools.partial(split_linestring, tolerance=tolerance, tolerances=tolerances)
    results = _map(work, linestrings, split_points, num_threads=num_threads)
    logger.debug('split %d linestrings into %d pieces', len(results), sum(map(len, results)))
    return results

def sample_linestring(coords, segment_length, tolerances=DEFAULT_TOLERANCES):
    """Sample evenly-spaced points along one linestring.

    Returns an array of shape (k, 2); see interpolate.resample_evenly() for
    which points are produced. Degenerate linestrings give shape (0, 2)."""
    points = as_polyline(coords, tolerances)
    return interpolate.resample_evenly(points, segment_length).reshape(-1, 2)

def sample_linestrings(linestrings, segment_length, num_threads=None, tolerances=DEFAULT_TOLERANCES):
    """Sample evenly-spaced points along each of a collection of linestrings.

    Returns: list with one (k, 2) array per input linestring, in input order.
    """
    work = functools.partial(sample_linestring, segment_length=segment_length, tolerances=tolerances)
    results = _map(work, linestrings, num_threads=num_threads)
    logger.debug('sampled %d points from %d linestrings', sum(map(len, results)), len(results))
    return results

def _map(function, *iterables, num_threads=None):
    if num_threads is None:
        return list(map(function, *iterables))
    with futures.ThreadPoolExecutor(num_threads) as threadpool:
        # map() yields results in submission order, and re-raises any error
        return list(threadpool.map(function, *iterables))
