import collections

Tolerances = collections.namedtuple('Tolerances', ('duplicate', 'unique'))
Tolerances.__doc__ = """Numerical tolerances for polyline processing.

    duplicate: coordinate-wise threshold below which consecutive points are
        considered duplicates; also the minimum length of a non-empty span
        between cut positions.
    unique: threshold below which two cut positions are considered the same."""

DEFAULT_TOLERANCES = Tolerances(duplicate=1e-12, unique=1e-9)
