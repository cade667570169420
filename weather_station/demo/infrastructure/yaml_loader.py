"""YAML scenario loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from weather_station.core.errors import WeatherStationError
from weather_station.demo.domain.observer import ScenarioObserver
from weather_station.demo.domain.scenario import DemoScenario, RegisterStep, RemoveStep
from weather_station.demo.infrastructure.errors import (
    ScenarioLoadError,
    ScenarioValidationError,
)


class YamlScenarioLoader:
    """Loads, validates, and returns a DemoScenario from a YAML file."""

    def __init__(self, observer: ScenarioObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> DemoScenario:
        """
        Load and validate a DemoScenario from a YAML file.

        Raises:
            ScenarioLoadError: if the file does not exist or cannot be read.
            ScenarioValidationError: if the file is not UTF-8 or valid YAML, violates the
                schema, or removes a display before it is created (all such
                references are collected before raising).
        """
        try:
            raw = _parse_yaml(path=path)
            scenario = _build_scenario(raw=raw)
            _check_display_references(scenario=scenario)
        except WeatherStationError as exc:
            self._observer.scenario_loading_failed(path=str(path), reason=str(exc))
            raise

        self._observer.scenario_loaded(
            name=scenario.name,
            path=str(path),
            total_steps=len(scenario.steps),
        )
        return scenario


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ScenarioLoadError(path=path) from exc
    except OSError as exc:
        raise ScenarioLoadError(path=path, reason=exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ScenarioValidationError(f"invalid YAML: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ScenarioValidationError(f"invalid YAML: {exc}") from exc


def _build_scenario(raw: Any) -> DemoScenario:
    if not isinstance(raw, dict):
        raise ScenarioValidationError("top-level value must be a mapping")
    try:
        return DemoScenario.model_validate(raw)
    except ValidationError as exc:
        raise ScenarioValidationError(str(exc)) from exc


def _check_display_references(scenario: DemoScenario) -> None:
    """Raise ScenarioValidationError if any step removes a display never created."""
    created = set(scenario.displays)
    unknown: list[str] = []
    for index, step in enumerate(scenario.steps):
        if isinstance(step, RegisterStep):
            created.add(step.display)
        elif isinstance(step, RemoveStep) and step.display not in created:
            unknown.append(
                f"step {index} removes display '{step.display}' before it is created"
            )

    if unknown:
        raise ScenarioValidationError("; ".join(unknown))
