import logging

from fastapi import APIRouter

from simplex_api.core.errors import (
    EngineError,
    InfeasibleProblem,
    UnboundedProblem,
)
from simplex_api.domain.schema import LPModel, SolveResult, SolveStatus
from simplex_api.solvers.lp.solver import solve_local

logger = logging.getLogger(__name__)

router = APIRouter(tags=["solve"])


@router.post("/solve", response_model=SolveResult)
def solve(model: LPModel) -> SolveResult:
    try:
        solution = solve_local(model)
    except InfeasibleProblem as exc:
        return SolveResult(status=SolveStatus.INFEASIBLE, message=str(exc))
    except UnboundedProblem as exc:
        return SolveResult(status=SolveStatus.UNBOUNDED, message=str(exc))
    except EngineError as exc:
        logger.warning("solve.engine_error", extra={"reason": str(exc)})
        return SolveResult(status=SolveStatus.ERROR, message=str(exc))

    return SolveResult(status=SolveStatus.OPTIMAL, solution=solution)
