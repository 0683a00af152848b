import json
from pathlib import Path
from typing import Any, Dict, Union

from ..schemas import ProblemInput

PathLike = Union[str, Path]

REQUIRED_FIELDS = (
    "n",
    "m",
    "l",
    "lowerBounds",
    "upperBounds",
    "componentQuality",
    "productConstraints",
    "componentConstraints",
)


def problem_from_dict(data: Dict[str, Any]) -> ProblemInput:
    missing = [key for key in REQUIRED_FIELDS if key not in data]
    if missing:
        raise ValueError(
            "Invalid problem file, missing fields: "
            + ", ".join(missing)
            + ". Expected: "
            + ", ".join(REQUIRED_FIELDS)
            + "."
        )
    return ProblemInput.model_validate(data)


def parse_problem(text: str) -> ProblemInput:
    return problem_from_dict(json.loads(text))


def dump_problem(problem: ProblemInput) -> str:
    return json.dumps(problem.model_dump(by_alias=True), indent=2)


def load_problem(path: PathLike) -> ProblemInput:
    return parse_problem(Path(path).read_text(encoding="utf-8"))


def save_problem(problem: ProblemInput, path: PathLike) -> Path:
    target = Path(path)
    target.write_text(dump_problem(problem), encoding="utf-8")
    return target
