import logging
from typing import Dict

from fastapi import APIRouter, Depends

from simplex_api.core.config import get_settings
from simplex_api.core.errors import BackendError, UnsupportedDimension
from simplex_api.domain.builder import REMOTE_VARIABLE_COUNT
from simplex_api.domain.schema import (
    LPModel,
    RemoteSolveResult,
    ServerStatus,
    SolveStatus,
)
from simplex_api.solvers.remote.adapter import to_remote_request
from simplex_api.solvers.remote.client import RemoteSolverClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/remote", tags=["remote"])


def get_remote_client() -> RemoteSolverClient:
    settings = get_settings()
    return RemoteSolverClient(
        settings.REMOTE_SOLVER_URL, timeout=settings.REMOTE_SOLVER_TIMEOUT
    )


@router.get("/status", response_model=ServerStatus)
def status(client: RemoteSolverClient = Depends(get_remote_client)) -> ServerStatus:
    return ServerStatus(online=client.is_online())


@router.post("/solve", response_model=RemoteSolveResult)
def solve_remote(
    model: LPModel, client: RemoteSolverClient = Depends(get_remote_client)
) -> RemoteSolveResult:
    if model.num_variables != REMOTE_VARIABLE_COUNT:
        raise UnsupportedDimension(
            f"The remote solver only supports {REMOTE_VARIABLE_COUNT} variables "
            f"(got {model.num_variables})."
        )

    try:
        solution = client.solve(to_remote_request(model))
    except BackendError as exc:
        return RemoteSolveResult(status=SolveStatus.ERROR, message=str(exc))

    return RemoteSolveResult(status=SolveStatus.OPTIMAL, solution=solution)


@router.get("/examples", response_model=Dict[str, LPModel])
def examples(
    client: RemoteSolverClient = Depends(get_remote_client),
) -> Dict[str, LPModel]:
    return client.examples()
