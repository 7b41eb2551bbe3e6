import numpy

from . import geometry
from .tolerances import DEFAULT_TOLERANCES

def resolve_cuts(points, distances, split_points, tolerance=0.01, tolerances=DEFAULT_TOLERANCES):
    """Find the arc-length positions at which to cut a polyline.

    Each split point is projected onto the polyline; points within 'tolerance'
    of the polyline give a cut at their projected position, and points further
    away are ignored.

    Parameters:
    points: (n, 2) polyline, free of consecutive duplicates.
    distances: cumulative distances along the polyline.
    split_points: array of shape (m, 2) of candidate split points.
    tolerance: maximum distance from the polyline for a split point to be used.
    tolerances: Tolerances instance.

    Returns a sorted array of cut positions which always begins with 0 and ends
    with the total length of the polyline. Positions closer together than
    tolerances.unique are merged, and cuts at (or within tolerances.duplicate
    of) either end of the polyline are dropped."""
    total_length = distances[-1] if len(distances) else 0.0
    positions = []
    for split_point in split_points:
        position, closest, dist = geometry.project_point_onto_polyline(points, split_point, distances)
        if dist <= tolerance:
            positions.append(min(max(position, 0.0), total_length))
    positions.sort()

    unique_positions = []
    for position in positions:
        if not unique_positions or abs(unique_positions[-1] - position) > tolerances.unique:
            unique_positions.append(position)

    eps = tolerances.duplicate
    interior = [p for p in unique_positions if eps < p < total_length - eps]
    return numpy.array([0.0] + interior + [total_length])

def build_segments(points, distances, cuts, tolerances=DEFAULT_TOLERANCES):
    """Split a polyline into pieces between consecutive cut positions.

    Each piece runs from the point at one cut position to the point at the next,
    and passes through every original vertex in between (the vertices are
    copied, not re-interpolated). Pieces that collapse to a single point after
    duplicate removal are dropped.

    Parameters:
    points: (n, 2) polyline, free of consecutive duplicates.
    distances: cumulative distances along the polyline.
    cuts: sorted cut positions, normally starting at 0 and ending at the total
        length (as returned by resolve_cuts()).
    tolerances: Tolerances instance.

    Returns a list of polylines, each an array of shape (m, 2) with m >= 2."""
    points = numpy.asarray(points, dtype=float)
    distances = numpy.asarray(distances, dtype=float)
    eps = tolerances.duplicate
    interior_distances = distances[1:-1]
    interior_points = points[1:-1]
    segments = []
    for d0, d1 in zip(cuts[:-1], cuts[1:]):
        if d1 - d0 <= eps:
            continue
        start, end = geometry.interpolate_along(points, distances, [d0, d1])
        between = (d0 + eps < interior_distances) & (interior_distances < d1 + eps)
        segment = numpy.concatenate([[start], interior_points[between], [end]])
        segment = geometry.filter_dup_points(segment, tolerances)
        if len(segment) >= 2:
            segments.append(segment)
    return segments

def split_polyline(points, split_points, tolerance=0.01, tolerances=DEFAULT_TOLERANCES):
    """Split a polyline at the positions nearest to the given split points.

    Convenience wrapper for resolve_cuts() and build_segments(). If no split
    point is within 'tolerance' of the polyline, a single piece equal to the
    whole polyline is returned."""
    points = numpy.asarray(points, dtype=float)
    distances = geometry.cumulative_distances(points)
    cuts = resolve_cuts(points, distances, split_points, tolerance, tolerances)
    return build_segments(points, distances, cuts, tolerances)
