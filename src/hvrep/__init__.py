"""hvrep: representative points from two-objective Pareto fronts.

Given a piecewise-linear approximation of a Pareto front and a reference
point, hvrep emits points one at a time, each maximizing the hypervolume
gained over the points emitted before it.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
