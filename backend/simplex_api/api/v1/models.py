from fastapi import APIRouter

from simplex_api.domain.builder import (
    generate,
    set_constraint_field,
    set_objective_coefficient,
    set_objective_type,
)
from simplex_api.domain.schema import (
    ConstraintEdit,
    GenerateModelRequest,
    LPModel,
    ObjectiveEdit,
    TypeEdit,
)

router = APIRouter(prefix="/models", tags=["models"])


@router.post("", response_model=LPModel)
def create_model(req: GenerateModelRequest) -> LPModel:
    return generate(req.variables, req.constraints, req.variant)


@router.patch("/objective", response_model=LPModel)
def edit_objective(req: ObjectiveEdit) -> LPModel:
    return set_objective_coefficient(req.model, req.index, req.value)


@router.patch("/constraint", response_model=LPModel)
def edit_constraint(req: ConstraintEdit) -> LPModel:
    return set_constraint_field(
        req.model, req.constraint_index, req.field, req.value, req.coeff_index
    )


@router.patch("/type", response_model=LPModel)
def edit_type(req: TypeEdit) -> LPModel:
    return set_objective_type(req.model, req.type)
