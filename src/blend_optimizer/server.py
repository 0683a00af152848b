from __future__ import annotations

import logging
import os

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from .schemas import LPInstance, ProblemInput, SolveOptions
from .lp.simplex import simplex_solve
from .lp.utils import analyze_failure
from .blending.formulation import formulate_lp
from .blending.report import decode_solution, render_latex_report

app = FastMCP("Blend Optimizer")


@app.tool()
def solve_blend_problem(problem: ProblemInput, options: SolveOptions | None = None) -> dict:
    """
    Find the profit-maximising blend of components into products.

    Returns:
        Dictionary containing:
        - 'solution': the raw LP solution (flat variables x[s*n + j])
        - 'plan': component x product allocation, product output and profit,
          or None when no optimum was found
    """
    opts = options or SolveOptions()
    solution = simplex_solve(formulate_lp(problem), opts)
    plan = decode_solution(problem, solution) if solution.success else None
    return {
        "solution": solution.model_dump(),
        "plan": plan.model_dump() if plan else None,
    }


@app.tool()
def formulate_blend_problem(problem: ProblemInput) -> dict:
    """Return the canonical LP (c, A, b and row labels) for a blending problem."""
    return formulate_lp(problem).model_dump()


@app.tool()
def solve_linear_program(
    instance: LPInstance, maximize: bool = True, options: SolveOptions | None = None
) -> dict:
    """Solve  max/min c.x  s.t.  A x <= b, x >= 0  with the tableau simplex."""
    opts = options or SolveOptions()
    return simplex_solve(instance, opts, maximize=maximize).model_dump()


@app.tool()
def diagnose_blend_problem(problem: ProblemInput) -> dict:
    """Return heuristic diagnostics (constraint rows blocking a solution)."""
    return analyze_failure(formulate_lp(problem))


@app.tool()
def render_blend_report(problem: ProblemInput, options: SolveOptions | None = None) -> dict:
    """Solve the blending problem and render a LaTeX report of inputs and results."""
    opts = options or SolveOptions()
    solution = simplex_solve(formulate_lp(problem), opts)
    plan = decode_solution(problem, solution) if solution.success else None
    return {
        "status": solution.status,
        "latex": render_latex_report(problem, plan),
    }


def configure_http(port: int, path: str = "/mcp") -> None:
    """Point the app at 0.0.0.0:<port><path> for web-based MCP clients."""
    app.settings.host = "0.0.0.0"
    app.settings.port = port
    app.settings.streamable_http_path = path
    app.settings.transport_security = TransportSecuritySettings(
        enable_dns_rebinding_protection=False,
        allowed_hosts=["*"],
        allowed_origins=["*"],
    )


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "stdio":
        app.run(transport="stdio")
        return

    configure_http(int(os.environ.get("PORT", "8081")))
    app.run(transport="streamable-http")


if __name__ == "__main__":
    main()
