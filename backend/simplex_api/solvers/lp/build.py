from __future__ import annotations

from typing import Any, Dict

from simplex_api.domain.schema import LPModel, Operator

# Key under which every variable carries its objective coefficient.
OBJECTIVE_KEY = "z"

# Operator -> bound descriptor understood by the engine
BOUND_KEYS: Dict[Operator, str] = {
    Operator.LE: "max",
    Operator.GE: "min",
    Operator.EQ: "equal",
}

EngineRequest = Dict[str, Any]


def variable_name(i: int) -> str:
    """0-based index -> x1, x2, ..."""
    return f"x{i + 1}"


def constraint_name(j: int) -> str:
    return f"c{j}"


def to_engine_request(model: LPModel) -> EngineRequest:
    """
    Translate a model into the engine's sparse request shape:

        {
          "optimize": "z",
          "opType": "maximize",
          "variables": {"x1": {"z": 3, "c0": 1, ...}, ...},
          "constraints": {"c0": {"max": 4}, ...},
        }
    """
    variables: Dict[str, Dict[str, float]] = {}
    constraints: Dict[str, Dict[str, float]] = {}

    # Objective pass creates every variable entry
    for i, coeff in enumerate(model.objective):
        variables[variable_name(i)] = {OBJECTIVE_KEY: coeff}

    for j, c in enumerate(model.constraints):
        name = constraint_name(j)
        constraints[name] = {BOUND_KEYS[c.operator]: c.rhs}

        for i, coeff in enumerate(c.coeffs):
            entry = variables.get(variable_name(i))
            if entry is not None:
                entry[name] = coeff

    return {
        "optimize": OBJECTIVE_KEY,
        "opType": model.type.value,
        "constraints": constraints,
        "variables": variables,
    }
