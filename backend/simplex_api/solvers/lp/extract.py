from __future__ import annotations

from typing import Any, Dict, Mapping

from simplex_api.core.errors import InfeasibleProblem
from simplex_api.domain.schema import Solution
from simplex_api.solvers.lp.build import variable_name

INFEASIBLE_MESSAGE = "The problem has no feasible solution (infeasible)."
UNBOUNDED_MESSAGE = "The problem has an unbounded solution (unbounded)."


def from_engine_response(raw: Mapping[str, Any], variable_count: int) -> Solution:
    """
    Interpret the engine's raw result object.

    The engine's ``bounded`` flag is read as "is unbounded":
    ``is_bounded = not raw["bounded"]``.
    """
    if not raw.get("feasible"):
        raise InfeasibleProblem(INFEASIBLE_MESSAGE)

    is_bounded = not raw.get("bounded")
    if not is_bounded:
        return Solution(is_feasible=True, is_bounded=False)

    variable_values: Dict[str, float] = {}
    for i in range(variable_count):
        name = variable_name(i)
        variable_values[name] = raw.get(name) or 0.0

    return Solution(
        is_feasible=True,
        is_bounded=True,
        objective_value=raw.get("result"),
        variable_values=variable_values,
    )
