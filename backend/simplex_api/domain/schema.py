from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OptimizationType(str, Enum):
    MAXIMIZE = "maximize"
    MINIMIZE = "minimize"


class Operator(str, Enum):
    LE = "<="
    GE = ">="
    EQ = "="


class ConstraintField(str, Enum):
    COEFFS = "coeffs"
    OPERATOR = "operator"
    RHS = "rhs"


class Variant(str, Enum):
    LOCAL = "local"  # in-process LP engine, any number of variables
    REMOTE = "remote"  # remote solver service, two variables (graphing)


class SolveStatus(str, Enum):
    OPTIMAL = "optimal"
    INFEASIBLE = "infeasible"
    UNBOUNDED = "unbounded"
    ERROR = "error"


class StrictBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class FrozenModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class Constraint(FrozenModel):
    coeffs: Tuple[float, ...]
    operator: Operator = Operator.LE
    rhs: float = 0.0


class LPModel(FrozenModel):
    type: OptimizationType = OptimizationType.MAXIMIZE
    objective: Tuple[float, ...] = Field(min_length=1)
    constraints: Tuple[Constraint, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_coeffs_match_objective(self) -> "LPModel":
        n = len(self.objective)
        for i, c in enumerate(self.constraints):
            if len(c.coeffs) != n:
                raise ValueError(
                    f"Constraint {i} has {len(c.coeffs)} coefficients, "
                    f"objective has {n}."
                )
        return self

    @property
    def num_variables(self) -> int:
        return len(self.objective)

    @property
    def num_constraints(self) -> int:
        return len(self.constraints)


class Solution(StrictBaseModel):
    is_feasible: bool
    is_bounded: bool
    # Only set when feasible and bounded
    objective_value: Optional[float] = None
    variable_values: Dict[str, float] = Field(default_factory=dict)


class SolveResult(StrictBaseModel):
    status: SolveStatus
    solution: Optional[Solution] = None
    message: Optional[str] = None


# ----------------------------
# Remote solver service payloads
# ----------------------------


class RemoteSolveRequest(StrictBaseModel):
    objective: List[float]
    constraints: List[List[float]]
    bounds: List[float]
    type: OptimizationType


class LenientBaseModel(BaseModel):
    # Payloads owned by the remote service; unknown keys are ignored.
    model_config = ConfigDict(extra="ignore")


class RemotePoint(LenientBaseModel):
    x1: float
    x2: float
    objective_value: float


class RemoteSolution(LenientBaseModel):
    optimal_point: RemotePoint
    vertices: List[RemotePoint] = Field(default_factory=list)
    graph: Optional[str] = None  # base64 image, passed through as-is


class RemoteExample(LenientBaseModel):
    type: OptimizationType = OptimizationType.MAXIMIZE
    objective: List[float]
    constraints: List[List[float]]
    bounds: List[float]


class RemoteSolveResult(StrictBaseModel):
    status: SolveStatus
    solution: Optional[RemoteSolution] = None
    message: Optional[str] = None


class ServerStatus(StrictBaseModel):
    online: bool


# ----------------------------
# Model Builder request bodies
# ----------------------------

RawValue = Optional[Union[float, str]]


class GenerateModelRequest(StrictBaseModel):
    # Raw form input; generate() decides what counts as a valid dimension
    variables: Union[int, float, str]
    constraints: Union[int, float, str]
    variant: Variant = Variant.LOCAL


class ObjectiveEdit(StrictBaseModel):
    model: LPModel
    index: int
    value: RawValue = None


class ConstraintEdit(StrictBaseModel):
    model: LPModel
    constraint_index: int
    field: ConstraintField
    value: RawValue = None
    coeff_index: Optional[int] = None


class TypeEdit(StrictBaseModel):
    model: LPModel
    type: OptimizationType
