#!/usr/bin/env python3
import time
from pathlib import Path

from blend_optimizer.blending.formulation import formulate_lp
from blend_optimizer.blending.io import load_problem
from blend_optimizer.lp.simplex import simplex_solve
from blend_optimizer.schemas import SolveOptions
from scripts.generate_instances import generate_random_problem

EXAMPLES = Path(__file__).resolve().parent.parent / "examples"


def main() -> None:
    opts = SolveOptions()
    cases = [(f"examples/{path.name}", load_problem(path)) for path in sorted(EXAMPLES.glob("*.json"))]
    for seed in range(3):
        cases.append((f"random-{seed}", generate_random_problem(4, 3, 2, seed)))

    print("name,status,objective,iterations,time_ms")
    for name, problem in cases:
        start = time.perf_counter()
        solution = simplex_solve(formulate_lp(problem), opts)
        elapsed_ms = (time.perf_counter() - start) * 1000
        print(
            f"{name},{solution.status},{solution.objective_value},{solution.iterations},{elapsed_ms:.2f}"
        )


if __name__ == "__main__":
    main()
