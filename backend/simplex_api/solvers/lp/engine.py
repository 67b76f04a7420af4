from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from ortools.linear_solver import pywraplp

from simplex_api.core.errors import DomainError, EngineError
from simplex_api.solvers.lp.build import EngineRequest

logger = logging.getLogger(__name__)

# Values below this are reported as absent (sparse result object).
_ZERO_EPS = 1e-9


@dataclass
class EngineBuild:
    solver: pywraplp.Solver
    optimize: str
    maximize: bool
    variables: Dict[str, pywraplp.Variable]  # name -> var (x >= 0)
    constraints: Dict[str, pywraplp.Constraint]  # name -> row


def build_engine_lp(request: EngineRequest) -> EngineBuild:
    s = pywraplp.Solver.CreateSolver("GLOP")  # Continuous LP
    if s is None:
        raise RuntimeError("Failed to create OR-Tools GLOP solver.")

    optimize = request.get("optimize")
    op_type = request.get("opType")
    if op_type not in ("maximize", "minimize"):
        raise DomainError(f"Unknown opType '{op_type}'.")

    inf = s.infinity()

    variables: Dict[str, pywraplp.Variable] = {
        name: s.NumVar(0.0, inf, name) for name in request.get("variables", {})
    }

    # Rows: {"max": ub} / {"min": lb} / {"equal": v}; max+min together is a range
    constraints: Dict[str, pywraplp.Constraint] = {}
    for name, bound in request.get("constraints", {}).items():
        lb, ub = -inf, inf
        if "equal" in bound:
            lb = ub = float(bound["equal"])
        if "min" in bound:
            lb = float(bound["min"])
        if "max" in bound:
            ub = float(bound["max"])
        constraints[name] = s.Constraint(lb, ub, name)

    objective = s.Objective()
    for var_name, attrs in request.get("variables", {}).items():
        var = variables[var_name]
        for key, coeff in attrs.items():
            if key == optimize:
                objective.SetCoefficient(var, float(coeff))
            elif key in constraints:
                constraints[key].SetCoefficient(var, float(coeff))

    maximize = op_type == "maximize"
    if maximize:
        objective.SetMaximization()
    else:
        objective.SetMinimization()

    return EngineBuild(
        solver=s,
        optimize=optimize,
        maximize=maximize,
        variables=variables,
        constraints=constraints,
    )


def run_engine(built: EngineBuild) -> Dict[str, Any]:
    """
    Solve and report in the engine's raw result shape.

    The ``bounded`` key flags an unbounded objective; it is False for a
    finite optimum.
    """
    s = built.solver

    # With presolve on, GLOP reports unbounded models as INFEASIBLE
    params = pywraplp.MPSolverParameters()
    params.SetIntegerParam(params.PRESOLVE, params.PRESOLVE_OFF)
    status_code = s.Solve(params)

    if status_code in (pywraplp.Solver.OPTIMAL, pywraplp.Solver.FEASIBLE):
        raw: Dict[str, Any] = {
            "feasible": True,
            "bounded": False,
            "result": s.Objective().Value(),
        }
        for name, var in built.variables.items():
            value = var.solution_value()
            if abs(value) > _ZERO_EPS:
                raw[name] = value
        return raw

    if status_code == pywraplp.Solver.INFEASIBLE:
        return {"feasible": False, "bounded": False, "result": 0}

    if status_code == pywraplp.Solver.UNBOUNDED:
        return {
            "feasible": True,
            "bounded": True,
            "result": float("inf") if built.maximize else float("-inf"),
        }

    logger.warning("engine.solve.abnormal", extra={"status_code": status_code})
    raise EngineError(_status_message(status_code))


def solve_request(request: EngineRequest) -> Dict[str, Any]:
    return run_engine(build_engine_lp(request))


def _status_message(status_code: int) -> str:
    if status_code == pywraplp.Solver.MODEL_INVALID:
        return "The engine rejected the request (non-finite coefficient or bound)."
    if status_code == pywraplp.Solver.NOT_SOLVED:
        return "The engine stopped before reaching an answer."
    if status_code == pywraplp.Solver.ABNORMAL:
        return "The engine failed while solving the model."
    return f"The engine returned an unrecognised status ({status_code})."
