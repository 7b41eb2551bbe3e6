import collections

import numpy

from .tolerances import DEFAULT_TOLERANCES

SegmentProjection = collections.namedtuple('SegmentProjection', ('t', 'point', 'distance'))
Projection = collections.namedtuple('Projection', ('position', 'point', 'distance'))

def distance(a, b):
    """Return the Euclidean distance between two 2d points."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return float(numpy.sqrt(dx*dx + dy*dy))

def segment_lengths(points):
    """Return the length of each of the n-1 line segments of an (n, 2) polyline."""
    points = numpy.asarray(points, dtype=float)
    if len(points) < 2:
        return numpy.zeros(0)
    return numpy.sqrt(((points[1:] - points[:-1])**2).sum(axis=1))

def cumulative_distances(points):
    """Return cumulative arc lengths along a polyline.

    Parameters:
    points: array of shape (n,2) consisting of n points in 2 dimensions

    The returned array has one entry per vertex, starting at 0. Polylines of
    zero or one points give an array of that many zeros."""
    points = numpy.asarray(points, dtype=float)
    if len(points) < 2:
        return numpy.zeros(len(points))
    return numpy.concatenate([[0], numpy.add.accumulate(segment_lengths(points))])

def filter_dup_points(points, tolerances=DEFAULT_TOLERANCES):
    """Return a polyline with no consecutive duplicate or near-duplicate points.

    A point is dropped when it differs from the last retained point by no more
    than tolerances.duplicate in both x and y. The first point is always kept."""
    points = numpy.asarray(points, dtype=float)
    if len(points) == 0:
        return numpy.empty((0, 2))
    eps = tolerances.duplicate
    points_out = [points[0]]
    for point in points[1:]:
        if (numpy.absolute(points_out[-1] - point) > eps).any():
            points_out.append(point)
    return numpy.array(points_out)

def project_point_to_segment(a, b, p):
    """Find the point on line segment a-b nearest to point p.

    Returns a SegmentProjection (t, point, distance), where t in [0, 1] is the
    parametric position of the nearest point along the segment. Degenerate
    (zero-length) segments project everything onto a."""
    a = numpy.asarray(a, dtype=float)
    b = numpy.asarray(b, dtype=float)
    t, = _segment_fractions(p, a[numpy.newaxis], b[numpy.newaxis])
    if t == 1:
        point = b.copy()
    else:
        point = a + t*(b - a)
    return SegmentProjection(float(t), point, distance(p, point))

def closest_point_to_line_segments(point, lines_start, lines_end):
    """Given a point and a set of line segments (specified by starting
    and ending points), return the point on each line segment that is closest to the
    given point, and the parametric position along each line of that point."""
    fractional_positions = _segment_fractions(point, lines_start, lines_end)
    closest_points = lines_start + fractional_positions[:,numpy.newaxis]*(lines_end - lines_start)
    # clamped endpoints are returned exactly, not as a + 1*(b-a)
    at_end = fractional_positions == 1
    closest_points[at_end] = lines_end[at_end]
    return closest_points, fractional_positions

def _segment_fractions(point, lines_start, lines_end):
    v = lines_end - lines_start
    w = numpy.asarray(point, dtype=float) - lines_start
    c1 = (v*w).sum(axis=1)
    c2 = (v*v).sum(axis=1)
    fractional_positions = numpy.zeros(len(v))
    nondegenerate = c2 > 0
    fractional_positions[nondegenerate] = c1[nondegenerate] / c2[nondegenerate]
    return fractional_positions.clip(0, 1)

def project_point_onto_polyline(points, point, distances=None):
    """Return the point along a polyline nearest the given point.

    Parameters:
    points: (n, 2) polyline, free of consecutive duplicates.
    point: the 2d point to project.
    distances: cumulative distances along the polyline (as from
        cumulative_distances()); computed if not provided.

    Returns a Projection (position, point, distance): the arc-length position
    of the nearest point, its coordinates, and its distance from the input
    point. If several segments are equally near, the first one wins.

    An empty polyline projects the point onto itself at position 0; a
    single-point polyline projects everything onto that point."""
    points = numpy.asarray(points, dtype=float)
    point = numpy.asarray(point, dtype=float)[:2]
    if len(points) == 0:
        return Projection(0.0, point.copy(), 0.0)
    if len(points) == 1:
        return Projection(0.0, points[0].copy(), distance(points[0], point))
    if distances is None:
        distances = cumulative_distances(points)
    closest_points, fractions = closest_point_to_line_segments(point, points[:-1], points[1:])
    point_distances = numpy.sqrt(((point - closest_points)**2).sum(axis=1))
    i = point_distances.argmin()
    lengths = segment_lengths(points[i:i+2])
    position = distances[i] + fractions[i]*lengths[0]
    return Projection(float(position), closest_points[i], float(point_distances[i]))

def interpolate_along(points, distances, targets):
    """Return the coordinates at the given arc-length positions along a polyline.

    Parameters:
    points: (n, 2) polyline.
    distances: cumulative distances along the polyline.
    targets: array of arc-length positions.

    Returns an array of shape (len(targets), 2). Targets at or before 0 give
    the first vertex, and targets at or past the total length give the last
    vertex; nothing is extrapolated. An empty polyline yields the origin."""
    points = numpy.asarray(points, dtype=float)
    distances = numpy.asarray(distances, dtype=float)
    targets = numpy.asarray(targets, dtype=float).reshape(-1)
    if len(points) == 0:
        return numpy.zeros((len(targets), 2))
    if len(points) == 1:
        return numpy.repeat(points, len(targets), axis=0)
    # segment i satisfies distances[i] <= target < distances[i+1]
    i = (numpy.searchsorted(distances, targets, side='right') - 1).clip(0, len(points) - 2)
    starts = distances[i]
    spans = distances[i+1] - starts
    before_start = targets <= 0
    past_end = ~before_start & (targets >= distances[-1])
    interior = ~(before_start | past_end) & (spans > 0)
    t = numpy.zeros(len(targets))
    t[interior] = (targets[interior] - starts[interior]) / spans[interior]
    out = points[i] + t[:,numpy.newaxis]*(points[i+1] - points[i])
    out[past_end] = points[-1]
    out[before_start] = points[0]
    return out

def point_at_arc_length(points, distances, target):
    """Return the point at the given arc-length position along a polyline,
    clamped to the polyline's endpoints. See interpolate_along()."""
    return interpolate_along(points, distances, [target])[0]
