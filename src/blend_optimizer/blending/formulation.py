import logging
from typing import List, Tuple

from ..schemas import LPInstance, ProblemInput

logger = logging.getLogger(__name__)


def var_index(s: int, j: int, n: int) -> int:
    """Flat index of x[s, j], the amount of component j blended into product s."""
    return s * n + j


def split_index(k: int, n: int) -> Tuple[int, int]:
    """Inverse of var_index: flat index -> (product s, component j)."""
    return divmod(k, n)


def formulate_lp(problem: ProblemInput) -> LPInstance:
    """
    Translate a blending problem into  max c.x  s.t.  A x <= b, x >= 0.

    Objective coefficients are per-unit margins (product price - component cost).
    Rows come in pairs, in this order:
      - per product and characteristic: blended quality >= lower, <= upper
      - per component: total use <= supply + stock, >= supply + stock - park volume
      - per product: output <= planned - stock + park volume, >= planned - stock
    Lower limits are written as negated <= rows and floored at zero.
    """

    n, m, l = problem.n, problem.m, problem.l
    num_vars = n * m

    products = [problem.product(s) for s in range(m)]
    components = [problem.component(j) for j in range(n)]

    c: List[float] = []
    for prod in products:
        for comp in components:
            c.append(prod.unit_price - comp.unit_cost)

    rows: List[List[float]] = []
    rhs: List[float] = []
    labels: List[str] = []

    def add_row(coeffs: dict, bound: float, label: str) -> None:
        row = [0.0] * num_vars
        for idx, value in coeffs.items():
            row[idx] = value
        rows.append(row)
        rhs.append(bound)
        labels.append(label)

    for s in range(m):
        for i in range(l):
            lower = problem.lower_bounds[s][i]
            upper = problem.upper_bounds[s][i]
            add_row(
                {var_index(s, j, n): lower - problem.component_quality[j][i] for j in range(n)},
                0.0,
                f"quality_lower[s={s},i={i}]",
            )
            add_row(
                {var_index(s, j, n): problem.component_quality[j][i] - upper for j in range(n)},
                0.0,
                f"quality_upper[s={s},i={i}]",
            )

    for j, comp in enumerate(components):
        available = comp.supply + comp.stock
        add_row({var_index(s, j, n): 1.0 for s in range(m)}, available, f"component_upper[j={j}]")
        add_row(
            {var_index(s, j, n): -1.0 for s in range(m)},
            -max(available - comp.park_volume, 0.0),
            f"component_lower[j={j}]",
        )

    for s, prod in enumerate(products):
        add_row(
            {var_index(s, j, n): 1.0 for j in range(n)},
            prod.planned_supply - prod.stock + prod.park_volume,
            f"product_upper[s={s}]",
        )
        add_row(
            {var_index(s, j, n): -1.0 for j in range(n)},
            -max(prod.planned_supply - prod.stock, 0.0),
            f"product_lower[s={s}]",
        )

    logger.debug(
        "Formulated blend LP: %d components, %d products, %d characteristics -> %d vars, %d rows.",
        n,
        m,
        l,
        num_vars,
        len(rows),
    )
    return LPInstance(c=c, A=rows, b=rhs, row_labels=labels)
