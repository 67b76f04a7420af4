from typing import Any, Dict

from simplex_api.domain.schema import Constraint, LPModel

JsonPayload = Dict[str, Any]


class ModelScenarioFactory:
    """Model-first factory.

    - Scenario methods return LPModel objects.
    - Use to_json(model) when you need the HTTP payload.
    """

    @staticmethod
    def to_json(model: LPModel) -> JsonPayload:
        return model.model_dump(mode="json")

    # ----------------------------
    # Valid scenarios
    # ----------------------------

    @staticmethod
    def wyndor() -> LPModel:
        """max 3x1 + 5x2; optimum z=36 at (2, 6)."""
        return LPModel(
            type="maximize",
            objective=(3, 5),
            constraints=(
                Constraint(coeffs=(1, 0), operator="<=", rhs=4),
                Constraint(coeffs=(0, 2), operator="<=", rhs=12),
                Constraint(coeffs=(3, 2), operator="<=", rhs=18),
            ),
        )

    @staticmethod
    def diet_minimize() -> LPModel:
        """min 2x1 + 3x2 s.t. x1 + x2 >= 4, x1 <= 3; optimum z=9 at (3, 1)."""
        return LPModel(
            type="minimize",
            objective=(2, 3),
            constraints=(
                Constraint(coeffs=(1, 1), operator=">=", rhs=4),
                Constraint(coeffs=(1, 0), operator="<=", rhs=3),
            ),
        )

    @staticmethod
    def three_vars_with_equality() -> LPModel:
        """max x1 + 2x2 + 3x3 s.t. x1 + x2 + x3 = 10, x3 <= 4; optimum z=24 at (0, 6, 4)."""
        return LPModel(
            type="maximize",
            objective=(1, 2, 3),
            constraints=(
                Constraint(coeffs=(1, 1, 1), operator="=", rhs=10),
                Constraint(coeffs=(0, 0, 1), operator="<=", rhs=4),
            ),
        )

    # ----------------------------
    # Degenerate scenarios
    # ----------------------------

    @staticmethod
    def infeasible() -> LPModel:
        """x1 + x2 <= 1 and x1 + x2 >= 3 cannot both hold."""
        return LPModel(
            type="maximize",
            objective=(1, 1),
            constraints=(
                Constraint(coeffs=(1, 1), operator="<=", rhs=1),
                Constraint(coeffs=(1, 1), operator=">=", rhs=3),
            ),
        )

    @staticmethod
    def unbounded() -> LPModel:
        """max x1 + x2 with only x1 - x2 <= 1."""
        return LPModel(
            type="maximize",
            objective=(1, 1),
            constraints=(Constraint(coeffs=(1, -1), operator="<=", rhs=1),),
        )

    # ----------------------------
    # Remote service payloads
    # ----------------------------

    @staticmethod
    def remote_success() -> JsonPayload:
        return {
            "success": True,
            "optimal_point": {"x1": 2.0, "x2": 6.0, "objective_value": 36.0},
            "vertices": [
                {"x1": 0.0, "x2": 0.0, "objective_value": 0.0},
                {"x1": 4.0, "x2": 0.0, "objective_value": 12.0},
                {"x1": 4.0, "x2": 3.0, "objective_value": 27.0},
                {"x1": 2.0, "x2": 6.0, "objective_value": 36.0},
                {"x1": 0.0, "x2": 6.0, "objective_value": 30.0},
            ],
            "graph": "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk",
        }

    @staticmethod
    def remote_examples() -> JsonPayload:
        return {
            "success": True,
            "examples": {
                "wyndor": {
                    "type": "maximize",
                    "objective": [3, 5],
                    "constraints": [[1, 0], [0, 2], [3, 2]],
                    "bounds": [4, 12, 18],
                },
                "diet": {
                    "type": "minimize",
                    "objective": [2, 3],
                    "constraints": [[-1, -1]],
                    "bounds": [-4],
                },
            },
        }
