"""Error types raised while loading and running demo scenarios."""

from pathlib import Path

from weather_station.core.errors import WeatherStationError


class ScenarioError(WeatherStationError):
    """Raised when a scenario step cannot be carried out."""

    def __init__(self, scenario: str, reason: str) -> None:
        super().__init__(f"Failed to run scenario '{scenario}': {reason}")


class ScenarioLoadError(WeatherStationError):
    """Raised when the scenario file cannot be opened or read."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        super().__init__(f"Failed to load scenario: {reason}: {path}")



class ScenarioValidationError(WeatherStationError):
    """Raised when the scenario file is not valid YAML or violates the schema."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate scenario: {reason}")
