#!/usr/bin/env python3
import argparse
import json
import random
from pathlib import Path
from typing import List, Optional

from blend_optimizer.schemas import ProblemInput


def generate_random_problem(
    n: int, m: int, l: int, seed: Optional[int] = None
) -> ProblemInput:
    """
    Random blending instance whose minimum-use and minimum-output floors are all
    zero, so the slack start is feasible and x = 0 is always a valid plan.
    """
    rng = random.Random(seed)

    component_quality = [[rng.uniform(80.0, 100.0) for _ in range(l)] for _ in range(n)]
    lower_bounds: List[List[float]] = []
    upper_bounds: List[List[float]] = []
    for _ in range(m):
        lows, highs = [], []
        for i in range(l):
            column = [component_quality[j][i] for j in range(n)]
            lo = rng.uniform(min(column), max(column))
            lows.append(lo)
            highs.append(rng.uniform(lo, max(column) + 2.0))
        lower_bounds.append(lows)
        upper_bounds.append(highs)

    component_constraints = []
    for _ in range(n):
        supply = rng.uniform(10.0, 50.0)
        stock = rng.uniform(0.0, 10.0)
        park = supply + stock + rng.uniform(0.0, 20.0)
        component_constraints.append([supply, park, stock, rng.uniform(10.0, 40.0)])

    product_constraints = []
    for _ in range(m):
        planned = rng.uniform(10.0, 40.0)
        stock = planned + rng.uniform(0.0, 5.0)
        park = rng.uniform(20.0, 60.0)
        product_constraints.append([planned, park, stock, rng.uniform(30.0, 80.0)])

    return ProblemInput(
        n=n,
        m=m,
        l=l,
        lower_bounds=lower_bounds,
        upper_bounds=upper_bounds,
        component_quality=component_quality,
        product_constraints=product_constraints,
        component_constraints=component_constraints,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random feasible blending instances.")
    parser.add_argument("--components", type=int, default=3, help="Number of components (n)")
    parser.add_argument("--products", type=int, default=2, help="Number of products (m)")
    parser.add_argument("--characteristics", type=int, default=2, help="Number of characteristics (l)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of instances")
    parser.add_argument("--out", type=Path, default=None, help="Optional output file")
    args = parser.parse_args()

    instances = [
        generate_random_problem(
            args.components, args.products, args.characteristics, (args.seed or 0) + idx
        )
        for idx in range(args.count)
    ]
    payload = [instance.model_dump(by_alias=True) for instance in instances]

    if args.out:
        Path(args.out).write_text(json.dumps(payload, indent=2))
    else:
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
