from pathlib import Path

import pytest

from blend_optimizer.blending.io import load_problem
from blend_optimizer.schemas import LPInstance, SolveOptions
from blend_optimizer.server import (
    diagnose_blend_problem,
    formulate_blend_problem,
    render_blend_report,
    solve_blend_problem,
    solve_linear_program,
)

EXAMPLES = Path(__file__).parent.parent / "examples"


def test_solve_blend_problem_returns_plan():
    problem = load_problem(EXAMPLES / "single_component.json")
    result = solve_blend_problem(problem)

    assert result["solution"]["status"] == "optimal"
    assert result["plan"]["allocation"] == [[pytest.approx(10.0)]]
    assert result["plan"]["profit"] == pytest.approx(50.0)


def test_solve_blend_problem_respects_options():
    problem = load_problem(EXAMPLES / "gasoline_blend.json")
    result = solve_blend_problem(problem, SolveOptions(max_iters=0))

    assert result["solution"]["status"] == "iteration_limit"
    assert result["plan"] is None


def test_formulate_blend_problem_dumps_lp():
    problem = load_problem(EXAMPLES / "single_component.json")
    result = formulate_blend_problem(problem)

    assert result["c"] == [5.0]
    assert result["b"] == [20.0, 0.0, 10.0, -10.0]
    assert len(result["row_labels"]) == 4


def test_solve_linear_program_minimises():
    instance = LPInstance(c=[-1.0, -1.0], A=[[1.0, 1.0], [1.0, 0.0]], b=[4.0, 3.0])
    result = solve_linear_program(instance, maximize=False)

    assert result["status"] == "optimal"
    assert result["objective_value"] == pytest.approx(-4.0)


def test_diagnose_and_report_tools():
    problem = load_problem(EXAMPLES / "gasoline_blend.json")

    assert diagnose_blend_problem(problem)["status"] == "optimal"
    report = render_blend_report(problem)
    assert report["status"] == "optimal"
    assert "Optimisation results" in report["latex"]


def test_configure_http_sets_port_and_path():
    from blend_optimizer.server import app, configure_http

    configure_http(9090, "/blend")

    assert app.settings.port == 9090
    assert app.settings.streamable_http_path == "/blend"
    assert app.settings.host == "0.0.0.0"
