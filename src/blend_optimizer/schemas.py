from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Literal, List, Optional

PivotRule = Literal["dantzig", "bland"]
Status = Literal["optimal", "unbounded", "iteration_limit", "infeasible"]

# Column layout of the commercial constraint rows.
PRODUCT_FIELDS = ("planned_supply", "park_volume", "stock", "unit_price")
COMPONENT_FIELDS = ("supply", "park_volume", "stock", "unit_cost")


class InputShapeError(ValueError):
    """Declared dimensions do not match the supplied matrices."""


def _check_matrix(name: str, matrix: List[List[float]], rows: int, cols: int) -> None:
    if len(matrix) != rows:
        raise InputShapeError(f"{name} must have {rows} rows, got {len(matrix)}.")
    for idx, row in enumerate(matrix):
        if len(row) != cols:
            raise InputShapeError(
                f"{name} row {idx} must have {cols} entries, got {len(row)}."
            )


class ProductTerms(BaseModel):
    planned_supply: float
    park_volume: float
    stock: float
    unit_price: float


class ComponentTerms(BaseModel):
    supply: float
    park_volume: float
    stock: float
    unit_cost: float


class ProblemInput(BaseModel):
    """
    Blending problem with n components, m products and l quality characteristics.
    Field aliases are the interchange-format keys.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    n: int
    m: int
    l: int
    lower_bounds: List[List[float]] = Field(alias="lowerBounds")
    upper_bounds: List[List[float]] = Field(alias="upperBounds")
    component_quality: List[List[float]] = Field(alias="componentQuality")
    product_constraints: List[List[float]] = Field(alias="productConstraints")
    component_constraints: List[List[float]] = Field(alias="componentConstraints")

    @model_validator(mode="after")
    def _check_shapes(self) -> "ProblemInput":
        if self.n < 1:
            raise InputShapeError(f"n must be at least 1, got {self.n}.")
        if self.m < 1:
            raise InputShapeError(f"m must be at least 1, got {self.m}.")
        if self.l < 0:
            raise InputShapeError(f"l must be non-negative, got {self.l}.")
        _check_matrix("lowerBounds", self.lower_bounds, self.m, self.l)
        _check_matrix("upperBounds", self.upper_bounds, self.m, self.l)
        _check_matrix("componentQuality", self.component_quality, self.n, self.l)
        _check_matrix("productConstraints", self.product_constraints, self.m, len(PRODUCT_FIELDS))
        _check_matrix(
            "componentConstraints", self.component_constraints, self.n, len(COMPONENT_FIELDS)
        )
        return self

    def product(self, s: int) -> ProductTerms:
        return ProductTerms(**dict(zip(PRODUCT_FIELDS, self.product_constraints[s])))

    def component(self, j: int) -> ComponentTerms:
        return ComponentTerms(**dict(zip(COMPONENT_FIELDS, self.component_constraints[j])))


class LPInstance(BaseModel):
    """maximize/minimize c.x subject to A x <= b, x >= 0."""

    model_config = ConfigDict(frozen=True)

    c: List[float]
    A: List[List[float]]
    b: List[float]
    row_labels: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_shapes(self) -> "LPInstance":
        if len(self.A) != len(self.b):
            raise InputShapeError(f"A has {len(self.A)} rows but b has {len(self.b)} entries.")
        for idx, row in enumerate(self.A):
            if len(row) != len(self.c):
                raise InputShapeError(
                    f"A row {idx} has {len(row)} entries, expected {len(self.c)}."
                )
        if self.row_labels and len(self.row_labels) != len(self.b):
            raise InputShapeError("row_labels must name every constraint row.")
        return self

    def label(self, row: int) -> str:
        return self.row_labels[row] if self.row_labels else f"row_{row}"


class SolveOptions(BaseModel):
    max_iters: int = 1000
    tol: float = 1e-9
    pivot_rule: PivotRule = "dantzig"


class LPSolution(BaseModel):
    status: Status
    objective_value: Optional[float]
    variables: List[float] | None
    iterations: int
    message: str = ""

    @property
    def success(self) -> bool:
        return self.status == "optimal"


class BlendPlan(BaseModel):
    allocation: List[List[float]]
    product_output: List[float]
    component_usage: List[float]
    profit: float
