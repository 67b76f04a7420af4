"""
Form state transitions.

The caller (a front end or API client) owns its SessionState value and
threads it through these functions: each takes the current state and returns
a new one. Nothing is mutated in place and the package keeps no state of its
own.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

from simplex_api.core.errors import DomainError
from simplex_api.domain.builder import generate
from simplex_api.domain.schema import LPModel, RemoteSolution, Solution, Variant


class SessionState(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    num_variables: int = 2
    num_constraints: int = 2
    variant: Variant = Variant.LOCAL

    model: Optional[LPModel] = None
    solution: Optional[Union[Solution, RemoteSolution]] = None
    error: Optional[str] = None
    server_online: bool = False


def generate_model(
    state: SessionState,
    variables: Any,
    constraints: Any,
    variant: Optional[Variant] = None,
) -> SessionState:
    variant = variant or state.variant
    try:
        model = generate(variables, constraints, variant)
    except DomainError as exc:
        # Previous model stays on screen, only the message changes
        return state.model_copy(update={"error": str(exc)})

    return state.model_copy(
        update={
            "num_variables": model.num_variables,
            "num_constraints": model.num_constraints,
            "variant": variant,
            "model": model,
            "solution": None,
            "error": None,
        }
    )


def edit_model(state: SessionState, model: LPModel) -> SessionState:
    return state.model_copy(update={"model": model, "solution": None})


def load_model(state: SessionState, model: LPModel) -> SessionState:
    """Install a ready-made model (e.g. a remote example) as a fresh start."""
    return state.model_copy(
        update={
            "num_variables": model.num_variables,
            "num_constraints": model.num_constraints,
            "model": model,
            "solution": None,
            "error": None,
        }
    )


def reset(state: SessionState) -> SessionState:
    return SessionState(variant=state.variant, server_online=state.server_online)


def record_solution(
    state: SessionState, solution: Union[Solution, RemoteSolution]
) -> SessionState:
    return state.model_copy(update={"solution": solution, "error": None})


def record_error(state: SessionState, exc: Exception) -> SessionState:
    return state.model_copy(update={"solution": None, "error": str(exc)})


def set_server_status(state: SessionState, online: bool) -> SessionState:
    return state.model_copy(update={"server_online": bool(online)})
