from __future__ import annotations

import logging
import math
import numbers
import re
from typing import Any, Optional

from simplex_api.core.errors import DomainError, InvalidDimension, UnsupportedDimension
from simplex_api.domain.schema import (
    Constraint,
    ConstraintField,
    LPModel,
    Operator,
    OptimizationType,
    Variant,
)

logger = logging.getLogger(__name__)

# Number of variables the remote service can graph.
REMOTE_VARIABLE_COUNT = 2

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_number(raw: Any) -> float:
    """
    Lenient read of a live-typed numeric field.

    Takes the leading numeric prefix of strings ("3.5abc" -> 3.5) and falls
    back to 0.0 for anything unparseable, NaN or infinite. Never raises.
    """
    if isinstance(raw, bool):
        return 0.0
    if isinstance(raw, numbers.Real):
        value = float(raw)
    elif isinstance(raw, str):
        m = _LEADING_NUMBER.match(raw)
        if m is None:
            return 0.0
        value = float(m.group(0))
    else:
        return 0.0

    return value if math.isfinite(value) else 0.0


def _parse_count(raw: Any) -> Optional[int]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, numbers.Integral):
        return int(raw)
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None


def generate(
    variable_count: Any, constraint_count: Any, variant: Variant = Variant.LOCAL
) -> LPModel:
    """Build a zero-filled model of the requested size."""
    variant = Variant(variant)
    n_vars = _parse_count(variable_count)
    n_cons = _parse_count(constraint_count)

    if n_vars is None or n_cons is None or n_vars < 1 or n_cons < 1:
        raise InvalidDimension(
            "The number of variables and constraints must be at least 1."
        )

    if variant == Variant.REMOTE and n_vars != REMOTE_VARIABLE_COUNT:
        raise UnsupportedDimension(
            f"The remote solver only supports {REMOTE_VARIABLE_COUNT} variables "
            f"(got {n_vars})."
        )

    logger.debug(
        "model.generate",
        extra={"variables": n_vars, "constraints": n_cons, "variant": variant.value},
    )
    return LPModel(
        type=OptimizationType.MAXIMIZE,
        objective=tuple(0.0 for _ in range(n_vars)),
        # Fresh tuple per constraint
        constraints=tuple(
            Constraint(coeffs=tuple(0.0 for _ in range(n_vars)))
            for _ in range(n_cons)
        ),
    )


def set_objective_type(model: LPModel, opt_type: OptimizationType) -> LPModel:
    return model.model_copy(update={"type": OptimizationType(opt_type)})


def set_objective_coefficient(model: LPModel, index: int, raw_value: Any) -> LPModel:
    _check_index(index, model.num_variables, "Objective coefficient")

    objective = list(model.objective)
    objective[index] = parse_number(raw_value)
    return model.model_copy(update={"objective": tuple(objective)})


def set_constraint_field(
    model: LPModel,
    constraint_index: int,
    field: ConstraintField,
    raw_value: Any,
    coeff_index: Optional[int] = None,
) -> LPModel:
    """
    Replace one field of one constraint.

    Sibling constraints are carried over unchanged (same objects).
    """
    _check_index(constraint_index, model.num_constraints, "Constraint")
    try:
        field = ConstraintField(field)
    except ValueError:
        raise DomainError(f"Unknown constraint field '{field}'.") from None

    target = model.constraints[constraint_index]

    if field == ConstraintField.COEFFS:
        if coeff_index is None:
            raise DomainError("Editing 'coeffs' requires coeff_index.")
        _check_index(coeff_index, len(target.coeffs), "Constraint coefficient")
        coeffs = list(target.coeffs)
        coeffs[coeff_index] = parse_number(raw_value)
        updated = target.model_copy(update={"coeffs": tuple(coeffs)})
    elif field == ConstraintField.RHS:
        updated = target.model_copy(update={"rhs": parse_number(raw_value)})
    else:
        try:
            op = Operator(raw_value)
        except ValueError:
            raise DomainError(
                f"Unknown operator '{raw_value}'. "
                f"Use one of: {[o.value for o in Operator]}"
            ) from None
        updated = target.model_copy(update={"operator": op})

    constraints = list(model.constraints)
    constraints[constraint_index] = updated
    return model.model_copy(update={"constraints": tuple(constraints)})


def _check_index(index: int, size: int, what: str) -> None:
    if isinstance(index, bool) or not isinstance(index, int):
        raise DomainError(f"{what} index must be an integer, got {index!r}.")
    if not 0 <= index < size:
        raise DomainError(f"{what} index {index} out of range (0..{size - 1}).")
