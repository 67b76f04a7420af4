from __future__ import annotations

from simplex_api.core.errors import UnboundedProblem
from simplex_api.domain.schema import LPModel, Solution
from simplex_api.solvers.lp.build import to_engine_request
from simplex_api.solvers.lp.engine import solve_request
from simplex_api.solvers.lp.extract import UNBOUNDED_MESSAGE, from_engine_response


def solve_local(model: LPModel) -> Solution:
    raw = solve_request(to_engine_request(model))
    solution = from_engine_response(raw, model.num_variables)
    if not solution.is_bounded:
        raise UnboundedProblem(UNBOUNDED_MESSAGE)
    return solution
