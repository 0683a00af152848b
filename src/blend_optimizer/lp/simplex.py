import logging

import numpy as np
from typing import List, Optional, Sequence

from .utils import build_initial_tableau
from ..schemas import LPInstance, SolveOptions, LPSolution

logger = logging.getLogger(__name__)


class UnboundedError(Exception):
    """No row limits the entering column."""


class SimplexSolver:
    """
    Tableau simplex for  max/min c.x  s.t.  A x <= b, x >= 0.

    Starts from the all-slack basis (one slack per row), so the start is only
    feasible when b >= 0. A negative right-hand side is accepted; the final
    basis is checked for feasibility before a result is reported optimal.
    """

    def __init__(self, opts: Optional[SolveOptions] = None) -> None:
        self.opts = opts or SolveOptions()
        self.tableau = np.zeros((0, 0))
        self.basic_variables: List[int] = []
        self.iterations = 0
        self.maximize = True

    @property
    def num_rows(self) -> int:
        return self.tableau.shape[0] - 1

    @property
    def num_variables(self) -> int:
        return self.tableau.shape[1] - 1 - self.num_rows

    def solve(
        self,
        c: Sequence[float],
        A: Sequence[Sequence[float]],
        b: Sequence[float],
        maximize: bool = True,
    ) -> LPSolution:
        self.create_initial_tableau(c, A, b, maximize)
        if self.has_infeasible_basis():
            logger.warning(
                "Initial slack basis is infeasible (%d negative right-hand sides).",
                int(np.sum(self.tableau[:-1, -1] < -self.opts.tol)),
            )

        while not self.is_optimal():
            if self.iterations >= self.opts.max_iters:
                logger.info("Simplex stopped after %d iterations without optimum.", self.iterations)
                return _failure(
                    "iteration_limit",
                    self.iterations,
                    f"Hit iteration limit ({self.opts.max_iters}).",
                )

            entering = self.find_entering_variable()
            try:
                leaving = self.find_leaving_variable(entering)
            except UnboundedError:
                if self.has_infeasible_basis():
                    logger.info(
                        "Column %d has no limiting row while the basis is still infeasible.",
                        entering,
                    )
                    return _failure(
                        "infeasible",
                        self.iterations,
                        "Slack start was infeasible (negative right-hand side) and was never "
                        "restored before the ratio test found no limiting row.",
                    )
                logger.info("Column %d is unbounded at iteration %d.", entering, self.iterations)
                return _failure("unbounded", self.iterations, "Unbounded.")

            logger.debug(
                "Pivot %d: column %d enters, row %d leaves (basic %d).",
                self.iterations,
                entering,
                leaving,
                self.basic_variables[leaving],
            )
            self.pivot(leaving, entering)
            self.iterations += 1

        if self.has_infeasible_basis():
            logger.info("Optimal reduced costs reached with an infeasible basis.")
            return _failure(
                "infeasible",
                self.iterations,
                "Slack start was infeasible (negative right-hand side) and pivoting "
                "did not restore feasibility.",
            )

        solution = self.get_solution()
        logger.info(
            "Simplex optimal after %d iterations, objective %.6g.",
            self.iterations,
            solution.objective_value,
        )
        return solution

    def create_initial_tableau(
        self,
        c: Sequence[float],
        A: Sequence[Sequence[float]],
        b: Sequence[float],
        maximize: bool = True,
    ) -> None:
        self.tableau, self.basic_variables = build_initial_tableau(c, A, b, maximize)
        self.maximize = maximize
        self.iterations = 0

    def has_infeasible_basis(self) -> bool:
        return bool(np.any(self.tableau[:-1, -1] < -self.opts.tol))

    def is_optimal(self) -> bool:
        return bool(np.all(self.tableau[-1, :-1] >= -self.opts.tol))

    def find_entering_variable(self) -> int:
        """Column with the most negative reduced cost; -1 if none is negative."""
        objective_row = self.tableau[-1, :-1]
        negative = np.flatnonzero(objective_row < -self.opts.tol)
        if negative.size == 0:
            return -1
        if self.opts.pivot_rule == "bland":
            return int(negative[0])
        # argmin returns the first occurrence on ties
        return int(np.argmin(objective_row))

    def find_leaving_variable(self, entering: int) -> int:
        column = self.tableau[:-1, entering]
        rhs = self.tableau[:-1, -1]
        tol = self.opts.tol

        best_row = -1
        best_ratio = np.inf
        for row in range(self.num_rows):
            if column[row] <= tol:
                continue
            ratio = rhs[row] / column[row]
            if ratio < best_ratio:
                best_ratio, best_row = ratio, row
            elif (
                self.opts.pivot_rule == "bland"
                and ratio == best_ratio
                and self.basic_variables[row] < self.basic_variables[best_row]
            ):
                best_row = row

        if best_row == -1:
            raise UnboundedError(f"Column {entering} has no positive entry.")
        return best_row

    def pivot(self, pivot_row: int, pivot_col: int) -> None:
        tableau = self.tableau
        tableau[pivot_row] /= tableau[pivot_row, pivot_col]
        for row in range(tableau.shape[0]):
            if row != pivot_row:
                tableau[row] -= tableau[row, pivot_col] * tableau[pivot_row]
        self.basic_variables[pivot_row] = pivot_col

    def get_solution(self) -> LPSolution:
        n = self.num_variables
        values = [0.0] * n
        for row, var in enumerate(self.basic_variables):
            if var < n:
                values[var] = float(self.tableau[row, -1])

        objective = float(self.tableau[-1, -1])
        if not self.maximize:
            objective = -objective

        return LPSolution(
            status="optimal",
            objective_value=objective,
            variables=values,
            iterations=self.iterations,
            message="",
        )


def simplex_solve(
    instance: LPInstance, opts: Optional[SolveOptions] = None, maximize: bool = True
) -> LPSolution:
    """Solve an LPInstance with a fresh SimplexSolver."""
    solver = SimplexSolver(opts)
    return solver.solve(instance.c, instance.A, instance.b, maximize=maximize)


def _failure(status: str, iterations: int, message: str) -> LPSolution:
    return LPSolution(
        status=status,
        objective_value=None,
        variables=None,
        iterations=iterations,
        message=message,
    )
