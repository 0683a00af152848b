import numpy as np
from typing import Dict, List, Any, Optional, Sequence, Tuple

from ..schemas import LPInstance, SolveOptions


def build_initial_tableau(
    c: Sequence[float],
    A: Sequence[Sequence[float]],
    b: Sequence[float],
    maximize: bool = True,
) -> Tuple[np.ndarray, List[int]]:
    """
    Build the (m+1) x (n+m+1) tableau [A | I | b] with the objective row last.
    The objective row holds -c for maximisation and c for minimisation.
    Return the tableau and the initial (all-slack) basis.
    """

    c_vec = np.asarray(c, dtype=float)
    n = c_vec.shape[0]
    m = len(b)
    A_mat = np.asarray(A, dtype=float).reshape(m, n)

    tableau = np.zeros((m + 1, n + m + 1), dtype=float)
    tableau[:m, :n] = A_mat
    tableau[:m, n : n + m] = np.eye(m)
    tableau[:m, -1] = np.asarray(b, dtype=float)
    tableau[m, :n] = -c_vec if maximize else c_vec

    basis = [n + i for i in range(m)]
    return tableau, basis


def analyze_failure(instance: LPInstance, opts: Optional[SolveOptions] = None) -> Dict[str, Any]:
    """Very small IIS-style heuristic: drop each constraint row and re-solve."""

    from .simplex import simplex_solve  # local import to avoid cycle

    opts = opts or SolveOptions()
    solution = simplex_solve(instance, opts)
    if solution.success:
        return {
            "status": solution.status,
            "message": "Problem solves to optimality.",
            "conflicting_constraints": [],
            "suggestions": [],
        }

    conflicts: List[str] = []
    for idx in range(len(instance.b)):
        relaxed = LPInstance(
            c=instance.c,
            A=instance.A[:idx] + instance.A[idx + 1 :],
            b=instance.b[:idx] + instance.b[idx + 1 :],
            row_labels=(
                instance.row_labels[:idx] + instance.row_labels[idx + 1 :]
                if instance.row_labels
                else []
            ),
        )
        if simplex_solve(relaxed, opts).success:
            conflicts.append(instance.label(idx))

    suggestions = []
    if solution.status == "unbounded":
        suggestions.append("Add an upper limit on the variables with positive margin.")
    elif conflicts:
        suggestions.append("Relax or inspect the conflicting constraints above.")
    else:
        suggestions.append("Consider relaxing bounds or checking for contradictory requirements.")

    return {
        "status": solution.status,
        "message": solution.message,
        "conflicting_constraints": conflicts,
        "suggestions": suggestions,
    }
