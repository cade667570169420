"""Tests for validation constraints on demo scenario models."""

import pytest
from pydantic import ValidationError

from weather_station.demo.domain.scenario import (
    DemoScenario,
    MeasureStep,
    RegisterStep,
    RemoveStep,
)
from weather_station.demo.domain.scenarios import (
    BASIC_SCENARIO,
    BUILTIN_SCENARIOS,
    FULL_SCENARIO,
)


def _measure() -> dict[str, object]:
    return {"action": "measure", "temperature": 20.0, "humidity": 50.0}


class TestStepDiscrimination:
    """Pydantic selects the step subtype from the `action` field."""

    def test_measure_action_builds_measure_step(self) -> None:
        scenario = DemoScenario.model_validate(
            {"name": "s", "displays": ["temperature"], "steps": [_measure()]}
        )
        assert isinstance(scenario.steps[0], MeasureStep)

    def test_register_action_builds_register_step(self) -> None:
        scenario = DemoScenario.model_validate(
            {
                "name": "s",
                "displays": ["temperature"],
                "steps": [{"action": "register", "display": "humidity"}],
            }
        )
        assert isinstance(scenario.steps[0], RegisterStep)

    def test_remove_action_builds_remove_step(self) -> None:
        scenario = DemoScenario.model_validate(
            {
                "name": "s",
                "displays": ["temperature"],
                "steps": [{"action": "remove", "display": "temperature"}],
            }
        )
        assert isinstance(scenario.steps[0], RemoveStep)

    def test_unknown_action_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            DemoScenario.model_validate(
                {
                    "name": "s",
                    "displays": ["temperature"],
                    "steps": [{"action": "explode"}],
                }
            )

    def test_measure_pressure_is_optional(self) -> None:
        step = MeasureStep(action="measure", temperature=1.0, humidity=2.0)
        assert step.pressure is None


class TestDemoScenarioConstraints:
    """DemoScenario rejects empty names, display lists and step lists."""

    def test_empty_name_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            DemoScenario.model_validate(
                {"name": "", "displays": ["temperature"], "steps": [_measure()]}
            )

    def test_no_displays_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            DemoScenario.model_validate(
                {"name": "s", "displays": [], "steps": [_measure()]}
            )

    def test_no_steps_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            DemoScenario.model_validate(
                {"name": "s", "displays": ["temperature"], "steps": []}
            )

    def test_unknown_display_kind_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            DemoScenario.model_validate(
                {"name": "s", "displays": ["barometer"], "steps": [_measure()]}
            )


class TestBuiltinScenarios:
    """The built-in scenarios reproduce the classic weather station walkthrough."""

    def test_builtins_are_registered_by_name(self) -> None:
        assert BUILTIN_SCENARIOS == {"full": FULL_SCENARIO, "basic": BASIC_SCENARIO}

    def test_full_scenario_starts_with_both_displays(self) -> None:
        assert FULL_SCENARIO.displays == ["temperature", "humidity"]

    def test_full_scenario_removes_temperature_before_last_update(self) -> None:
        actions = [step.action for step in FULL_SCENARIO.steps]
        assert actions == ["measure", "measure", "measure", "remove", "measure"]

    def test_full_scenario_third_update_omits_pressure(self) -> None:
        third = FULL_SCENARIO.steps[2]
        assert isinstance(third, MeasureStep)
        assert third.pressure is None

    def test_basic_scenario_has_single_display_and_update(self) -> None:
        assert BASIC_SCENARIO.displays == ["temperature"]
        assert len(BASIC_SCENARIO.steps) == 1
