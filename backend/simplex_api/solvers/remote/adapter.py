from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from simplex_api.core.errors import BackendError, DomainError, EngineUnreachable
from simplex_api.domain.schema import (
    Constraint,
    LPModel,
    Operator,
    RemoteExample,
    RemoteSolution,
    RemoteSolveRequest,
)

logger = logging.getLogger(__name__)

GENERIC_BACKEND_ERROR = "The solver service reported an error."


def to_remote_request(model: LPModel) -> RemoteSolveRequest:
    """
    Flatten a model for the remote service.

    The service only knows "<=" rows; operators are not sent.
    """
    non_le = [i for i, c in enumerate(model.constraints) if c.operator != Operator.LE]
    if non_le:
        logger.warning("remote.request.non_le_operator", extra={"constraints": non_le})

    return RemoteSolveRequest(
        objective=list(model.objective),
        constraints=[list(c.coeffs) for c in model.constraints],
        bounds=[c.rhs for c in model.constraints],
        type=model.type,
    )


def from_remote_response(raw: Mapping[str, Any]) -> RemoteSolution:
    if not raw.get("success"):
        raise BackendError(raw.get("error") or GENERIC_BACKEND_ERROR)

    try:
        return RemoteSolution.model_validate(raw)
    except ValidationError as exc:
        raise EngineUnreachable(
            f"The solver service returned an unexpected payload: {exc.error_count()} error(s)."
        ) from exc


def model_from_example(example: Mapping[str, Any]) -> LPModel:
    """Build a "<=" model from a remote example {type, objective, constraints, bounds}."""
    try:
        ex = RemoteExample.model_validate(example)
    except ValidationError as exc:
        raise DomainError(f"Malformed example: {exc.error_count()} error(s).") from exc

    if len(ex.constraints) != len(ex.bounds):
        raise DomainError(
            f"Example has {len(ex.constraints)} constraints but {len(ex.bounds)} bounds."
        )

    try:
        return LPModel(
            type=ex.type,
            objective=tuple(ex.objective),
            constraints=tuple(
                Constraint(coeffs=tuple(row), operator=Operator.LE, rhs=rhs)
                for row, rhs in zip(ex.constraints, ex.bounds)
            ),
        )
    except ValidationError as exc:
        raise DomainError(f"Malformed example: {exc.error_count()} error(s).") from exc
