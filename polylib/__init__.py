'''
# polylib

Python modules for splitting and resampling polylines (piecewise-linear
plane curves), such as the centerlines of a network of paths or channels.

Curve
-----
Functions for computations over plane curves, approximated as series of points (polylines).
 - curve.geometry: arc lengths, projection of points onto polylines, and interpolation at arc-length positions.
 - curve.split: find cut positions along a polyline from nearby points, and split the polyline into pieces.
 - curve.interpolate: resample polylines to evenly-spaced points.
 - curve.tolerances: the numerical tolerances used throughout.

Linestrings
-----------
 - linestrings: convert raw coordinate arrays to polylines, and split or
   resample whole collections of linestrings, optionally in parallel.

Graph
-----
 - graph: shortest-path distances over a weighted network, with the branch
   factor accumulated along each path.
'''
