'''
Curve
-----
Functions for computations over plane curves, approximated as series of points (polylines).
 - curve.geometry: basic algorithms for polyline curves: arc lengths, projection of points onto polylines, and interpolation at arc-length positions.
 - curve.split: find cut positions along a polyline from nearby points, and split the polyline at those positions.
 - curve.interpolate: resample polylines to evenly-spaced points.
 - curve.tolerances: the numerical tolerances used throughout.
'''
