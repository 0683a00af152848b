"""Blend Optimizer: production blending plans via a tableau simplex solver."""

from .schemas import (
    BlendPlan,
    InputShapeError,
    LPInstance,
    LPSolution,
    ProblemInput,
    SolveOptions,
)
from .lp import SimplexSolver, simplex_solve, analyze_failure
from .blending import formulate_lp, decode_solution, load_problem

__all__ = [
    "BlendPlan",
    "InputShapeError",
    "LPInstance",
    "LPSolution",
    "ProblemInput",
    "SolveOptions",
    "SimplexSolver",
    "simplex_solve",
    "analyze_failure",
    "formulate_lp",
    "decode_solution",
    "load_problem",
]
