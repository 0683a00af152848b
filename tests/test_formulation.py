import json
from pathlib import Path

import pytest

from blend_optimizer.schemas import InputShapeError, ProblemInput
from blend_optimizer.blending.formulation import formulate_lp, var_index, split_index
from blend_optimizer.blending.io import load_problem


def load_example(name: str) -> ProblemInput:
    return load_problem(Path(__file__).parent.parent.joinpath("examples", name))


def make_problem() -> ProblemInput:
    # 2 components, 2 products, 1 characteristic
    return ProblemInput(
        n=2,
        m=2,
        l=1,
        lower_bounds=[[1.0], [3.0]],
        upper_bounds=[[2.0], [4.0]],
        component_quality=[[0.5], [5.0]],
        product_constraints=[[10.0, 5.0, 2.0, 100.0], [4.0, 1.0, 6.0, 80.0]],
        component_constraints=[[20.0, 15.0, 3.0, 30.0], [8.0, 50.0, 1.0, 60.0]],
    )


def test_var_index_round_trips():
    n = 3
    seen = set()
    for s in range(4):
        for j in range(n):
            k = var_index(s, j, n)
            assert split_index(k, n) == (s, j)
            seen.add(k)
    assert seen == set(range(12))


def test_objective_is_margin_per_pair():
    lp = formulate_lp(make_problem())
    # x[0,0], x[0,1], x[1,0], x[1,1]
    assert lp.c == [70.0, 40.0, 50.0, 20.0]


def test_row_order_and_coefficients():
    lp = formulate_lp(make_problem())

    assert lp.row_labels == [
        "quality_lower[s=0,i=0]",
        "quality_upper[s=0,i=0]",
        "quality_lower[s=1,i=0]",
        "quality_upper[s=1,i=0]",
        "component_upper[j=0]",
        "component_lower[j=0]",
        "component_upper[j=1]",
        "component_lower[j=1]",
        "product_upper[s=0]",
        "product_lower[s=0]",
        "product_upper[s=1]",
        "product_lower[s=1]",
    ]
    assert len(lp.A) == 2 * 2 * 1 + 2 * 2 + 2 * 2

    assert lp.A[0] == [0.5, -4.0, 0.0, 0.0]
    assert lp.A[1] == [-1.5, 3.0, 0.0, 0.0]
    assert lp.A[2] == [0.0, 0.0, 2.5, -2.0]
    assert lp.A[3] == [0.0, 0.0, -3.5, 1.0]
    assert lp.b[:4] == [0.0, 0.0, 0.0, 0.0]

    assert lp.A[4] == [1.0, 0.0, 1.0, 0.0]
    assert lp.A[5] == [-1.0, 0.0, -1.0, 0.0]
    assert lp.A[6] == [0.0, 1.0, 0.0, 1.0]
    assert lp.A[8] == [1.0, 1.0, 0.0, 0.0]
    assert lp.A[11] == [0.0, 0.0, -1.0, -1.0]


def test_right_hand_sides_and_zero_floors():
    lp = formulate_lp(make_problem())

    # component 0: supply + stock = 23, park 15 -> must use at least 8
    assert lp.b[4] == 23.0
    assert lp.b[5] == -8.0
    # component 1: 9 available, park 50 -> no minimum
    assert lp.b[6] == 9.0
    assert lp.b[7] == 0.0
    # product 0: planned 10 - stock 2 + park 5; floor planned - stock
    assert lp.b[8] == 13.0
    assert lp.b[9] == -8.0
    # product 1: stock exceeds the plan -> no minimum output
    assert lp.b[10] == -1.0
    assert lp.b[11] == 0.0


def test_formulation_is_deterministic():
    problem = load_example("gasoline_blend.json")
    assert formulate_lp(problem) == formulate_lp(problem)


def test_example_without_characteristics():
    lp = formulate_lp(load_example("single_component.json"))

    assert lp.c == [5.0]
    assert lp.A == [[1.0], [-1.0], [1.0], [-1.0]]
    assert lp.b == [20.0, 0.0, 10.0, -10.0]


@pytest.mark.parametrize(
    "field, value",
    [
        ("lowerBounds", [[1.0]]),
        ("upperBounds", [[1.0], [2.0, 3.0]]),
        ("componentQuality", [[0.5]]),
        ("productConstraints", [[1.0, 2.0, 3.0], [1.0, 2.0, 3.0, 4.0]]),
        ("componentConstraints", [[1.0, 2.0, 3.0, 4.0]]),
    ],
)
def test_shape_mismatch_fails_fast(field, value):
    data = make_problem().model_dump(by_alias=True)
    data[field] = value

    with pytest.raises(ValueError) as excinfo:
        ProblemInput.model_validate(data)
    assert field in str(excinfo.value)


def test_dimensions_must_be_positive():
    data = json.loads(Path(__file__).parent.parent.joinpath("examples", "single_component.json").read_text())
    data["n"] = 0
    data["componentQuality"] = []
    data["componentConstraints"] = []

    with pytest.raises(ValueError):
        ProblemInput.model_validate(data)


def test_input_shape_error_is_a_value_error():
    assert issubclass(InputShapeError, ValueError)
