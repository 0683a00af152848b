"""Tableau simplex engine for blend-optimizer."""

from .simplex import SimplexSolver, simplex_solve
from .utils import analyze_failure

__all__ = ["SimplexSolver", "simplex_solve", "analyze_failure"]
