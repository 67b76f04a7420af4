from simplex_api.domain.builder import generate, set_constraint_field
from simplex_api.domain.schema import ConstraintField
from simplex_api.solvers.lp.build import (
    OBJECTIVE_KEY,
    constraint_name,
    to_engine_request,
    variable_name,
)
from tests.model_factory import ModelScenarioFactory


def _non_zero(entries):
    return {k: v for k, v in entries.items() if v != 0}


class TestBuild:
    def test_names(self):
        assert variable_name(0) == "x1"
        assert variable_name(9) == "x10"
        assert constraint_name(0) == "c0"
        assert OBJECTIVE_KEY == "z"

    def test_wyndor_request(self):
        req = to_engine_request(ModelScenarioFactory.wyndor())

        assert req["optimize"] == "z"
        assert req["opType"] == "maximize"
        assert req["constraints"] == {
            "c0": {"max": 4.0},
            "c1": {"max": 12.0},
            "c2": {"max": 18.0},
        }
        assert _non_zero(req["variables"]["x1"]) == {"z": 3.0, "c0": 1.0, "c2": 3.0}
        assert _non_zero(req["variables"]["x2"]) == {"z": 5.0, "c1": 2.0, "c2": 2.0}

    def test_zero_coefficients_are_recorded(self):
        req = to_engine_request(ModelScenarioFactory.wyndor())

        assert req["variables"]["x1"] == {"z": 3.0, "c0": 1.0, "c1": 0.0, "c2": 3.0}
        assert req["variables"]["x2"] == {"z": 5.0, "c0": 0.0, "c1": 2.0, "c2": 2.0}

    def test_operator_mapping(self):
        req = to_engine_request(ModelScenarioFactory.diet_minimize())
        assert req["opType"] == "minimize"
        assert req["constraints"] == {"c0": {"min": 4.0}, "c1": {"max": 3.0}}

        req = to_engine_request(ModelScenarioFactory.three_vars_with_equality())
        assert req["constraints"]["c0"] == {"equal": 10.0}
        assert set(req["variables"]) == {"x1", "x2", "x3"}

    def test_request_reflects_edits(self):
        model = generate(2, 2)
        model = set_constraint_field(model, 1, ConstraintField.OPERATOR, ">=")
        model = set_constraint_field(model, 1, ConstraintField.RHS, "5")

        req = to_engine_request(model)
        assert req["constraints"] == {"c0": {"max": 0.0}, "c1": {"min": 5.0}}
        assert req["variables"]["x1"] == {"z": 0.0, "c0": 0.0, "c1": 0.0}

    def test_request_is_fresh_each_call(self):
        model = ModelScenarioFactory.wyndor()
        first = to_engine_request(model)
        first["variables"]["x1"]["z"] = 99

        assert to_engine_request(model)["variables"]["x1"]["z"] == 3.0
