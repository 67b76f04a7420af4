import pytest
from pydantic import ValidationError

from simplex_api.domain.schema import (
    Constraint,
    LPModel,
    Operator,
    OptimizationType,
    RemoteSolution,
    Solution,
)
from tests.model_factory import ModelScenarioFactory


class TestSchema:
    def test_constraint_defaults(self):
        c = Constraint(coeffs=(1, 2))
        assert c.coeffs == (1.0, 2.0)
        assert c.operator == Operator.LE
        assert c.rhs == 0.0

    def test_constraint_invalid_operator(self):
        with pytest.raises(ValidationError):
            Constraint(coeffs=(1,), operator="<")

    def test_model_valid(self):
        model = ModelScenarioFactory.wyndor()
        assert model.type == OptimizationType.MAXIMIZE
        assert model.num_variables == 2
        assert model.num_constraints == 3

    def test_model_default_type_is_maximize(self):
        model = LPModel(objective=(1,), constraints=(Constraint(coeffs=(1,)),))
        assert model.type == OptimizationType.MAXIMIZE

    def test_model_coeff_length_mismatch(self):
        with pytest.raises(ValidationError, match="Constraint 1 has 1 coefficients"):
            LPModel(
                objective=(1, 2),
                constraints=(
                    Constraint(coeffs=(1, 1)),
                    Constraint(coeffs=(1,)),
                ),
            )

    def test_model_requires_variables_and_constraints(self):
        with pytest.raises(ValidationError):
            LPModel(objective=(), constraints=(Constraint(coeffs=()),))

        with pytest.raises(ValidationError):
            LPModel(objective=(1,), constraints=())

    def test_model_is_frozen(self):
        model = ModelScenarioFactory.wyndor()
        with pytest.raises(ValidationError):
            model.type = OptimizationType.MINIMIZE

    def test_model_forbids_extra_fields(self):
        with pytest.raises(ValidationError):
            LPModel(
                objective=(1,),
                constraints=(Constraint(coeffs=(1,)),),
                name="extra",
            )

    def test_model_json_round_shape(self):
        data = ModelScenarioFactory.to_json(ModelScenarioFactory.wyndor())
        assert data["type"] == "maximize"
        assert data["objective"] == [3.0, 5.0]
        assert data["constraints"][2] == {
            "coeffs": [3.0, 2.0],
            "operator": "<=",
            "rhs": 18.0,
        }

    def test_solution_defaults(self):
        sol = Solution(is_feasible=True, is_bounded=False)
        assert sol.objective_value is None
        assert sol.variable_values == {}

    def test_remote_solution_ignores_unknown_keys(self):
        sol = RemoteSolution.model_validate(ModelScenarioFactory.remote_success())
        assert sol.optimal_point.objective_value == 36.0
        assert len(sol.vertices) == 5
        assert sol.graph.startswith("iVBOR")

    def test_remote_solution_optional_parts(self):
        sol = RemoteSolution.model_validate(
            {"optimal_point": {"x1": 1, "x2": 2, "objective_value": 3}}
        )
        assert sol.vertices == []
        assert sol.graph is None
