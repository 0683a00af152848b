"""Blending (production planning) problem: formulation, interchange format and reporting."""

from .formulation import formulate_lp, var_index, split_index
from .io import load_problem, save_problem, parse_problem, dump_problem
from .report import decode_solution, render_latex_report

__all__ = [
    "formulate_lp",
    "var_index",
    "split_index",
    "load_problem",
    "save_problem",
    "parse_problem",
    "dump_problem",
    "decode_solution",
    "render_latex_report",
]
