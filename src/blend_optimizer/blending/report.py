from datetime import date
from typing import List, Optional

from .formulation import var_index
from ..schemas import BlendPlan, LPSolution, ProblemInput


def decode_solution(problem: ProblemInput, solution: LPSolution) -> BlendPlan:
    """Turn a flat LP solution into a component x product allocation plan."""

    if not solution.success or solution.variables is None:
        raise ValueError(f"Cannot decode a {solution.status} solution: {solution.message}")
    n, m = problem.n, problem.m
    if len(solution.variables) != n * m:
        raise ValueError(
            f"Solution has {len(solution.variables)} variables, expected {n * m}."
        )

    x = solution.variables
    allocation = [[x[var_index(s, j, n)] for s in range(m)] for j in range(n)]
    product_output = [sum(allocation[j][s] for j in range(n)) for s in range(m)]
    component_usage = [sum(row) for row in allocation]

    return BlendPlan(
        allocation=allocation,
        product_output=product_output,
        component_usage=component_usage,
        profit=float(solution.objective_value or 0.0),
    )


def _tabular(header: List[str], body: List[List[str]]) -> str:
    columns = "|" + "c|" * len(header)
    lines = [f"\\begin{{tabular}}{{{columns}}}", "\\hline", " & ".join(header) + " \\\\", "\\hline"]
    lines.extend(" & ".join(row) + " \\\\" for row in body)
    lines.extend(["\\hline", "\\end{tabular}"])
    return "\n".join(lines)


def _fmt(value: float) -> str:
    return f"{value:g}"


def _labelled(label: str, matrix: List[List[float]]) -> List[List[str]]:
    return [[f"{label} {idx + 1}"] + [_fmt(v) for v in row] for idx, row in enumerate(matrix)]


def render_latex_report(
    problem: ProblemInput, plan: Optional[BlendPlan] = None, today: Optional[date] = None
) -> str:
    """
    LaTeX report of the inputs and, when a plan is given, the optimal allocation
    (3 decimals), product output and maximum profit (2 decimals).
    """

    today = today or date.today()
    characteristics = [f"Characteristic {i + 1}" for i in range(problem.l)]

    parts = [
        "\\documentclass{article}",
        "\\usepackage[utf8]{inputenc}",
        "\\usepackage{geometry}",
        "\\geometry{a4paper, margin=1in}",
        "\\usepackage{booktabs}",
        "\\usepackage{amsmath}",
        "",
        "\\title{Production blending report}",
        "\\author{}",
        f"\\date{{{today.isoformat()}}}",
        "",
        "\\begin{document}",
        "\\maketitle",
        "",
        "\\section{Parameters}",
        "\\begin{itemize}",
        f"    \\item Components (n): {problem.n}",
        f"    \\item Products (m): {problem.m}",
        f"    \\item Characteristics (l): {problem.l}",
        "\\end{itemize}",
        "",
        "\\section{Input data}",
        "\\subsection{Quality lower bounds}",
        _tabular(["Product"] + characteristics, _labelled("Product", problem.lower_bounds)),
        "\\subsection{Quality upper bounds}",
        _tabular(["Product"] + characteristics, _labelled("Product", problem.upper_bounds)),
        "\\subsection{Component quality}",
        _tabular(["Component"] + characteristics, _labelled("Component", problem.component_quality)),
        "\\subsection{Product constraints}",
        _tabular(
            ["Product", "Planned supply", "Park volume", "Stock", "Price"],
            _labelled("Product", problem.product_constraints),
        ),
        "\\subsection{Component constraints}",
        _tabular(
            ["Component", "Supply", "Park volume", "Stock", "Unit cost"],
            _labelled("Component", problem.component_constraints),
        ),
    ]

    if plan is not None:
        products = [f"Product {s + 1}" for s in range(problem.m)]
        allocation_rows = [
            [f"Component {j + 1}"] + [f"{value:.3f}" for value in row]
            for j, row in enumerate(plan.allocation)
        ]
        parts.extend(
            [
                "",
                "\\section{Optimisation results}",
                "\\subsection{Component use per product}",
                _tabular(["Component / Product"] + products, allocation_rows),
                "\\subsection{Product output}",
                _tabular(products, [[f"{value:.3f}" for value in plan.product_output]]),
                "\\subsection{Maximum profit}",
                f"\\textbf{{{plan.profit:.2f}}}",
            ]
        )

    parts.extend(["", "\\end{document}", ""])
    return "\n".join(parts)
