"""ObserverDemo — drives a weather station and its displays through a scenario."""

from weather_station.demo.domain.observer import DemoObserver
from weather_station.demo.domain.report import DemoReport
from weather_station.demo.domain.scenario import (
    DemoScenario,
    MeasureStep,
    RegisterStep,
    RemoveStep,
)
from weather_station.demo.infrastructure.errors import ScenarioError
from weather_station.display.domain.humidity import HumidityDisplay
from weather_station.display.domain.observer import DisplayObserver
from weather_station.display.domain.temperature import TemperatureDisplay
from weather_station.display.infrastructure.registry import Display, create_display
from weather_station.weather.application.station import WeatherStation
from weather_station.weather.domain.observer import WeatherStationObserver


class ObserverDemo:
    """Runs a DemoScenario step by step and reports the final display state.

    Each run builds a fresh station and fresh displays; a display kind is
    instantiated at most once per run, so re-registering a kind subscribes the
    same instance again.
    """

    def __init__(
        self,
        station_events: WeatherStationObserver,
        display_observer: DisplayObserver,
        observer: DemoObserver,
    ) -> None:
        self._station_events = station_events
        self._display_observer = display_observer
        self._observer = observer

    def run(self, scenario: DemoScenario) -> DemoReport:
        """Execute every step of scenario in order and return a DemoReport.

        Raises:
            ScenarioError: if a step removes a display that was never created.
        """
        self._observer.demo_started(name=scenario.name, total_steps=len(scenario.steps))

        station = WeatherStation(events=self._station_events)
        displays: dict[str, Display] = {}
        for kind in scenario.displays:
            station.register_observer(self._display_for(kind=kind, displays=displays))

        notifications = 0
        for index, step in enumerate(scenario.steps):
            self._observer.demo_step(index=index, action=step.action, label=step.label)
            if isinstance(step, MeasureStep):
                station.set_measurements(
                    temperature=step.temperature,
                    humidity=step.humidity,
                    pressure=step.pressure,
                )
                notifications += 1
            elif isinstance(step, RegisterStep):
                station.register_observer(
                    self._display_for(kind=step.display, displays=displays)
                )
            elif isinstance(step, RemoveStep):
                display = displays.get(step.display)
                if display is None:
                    raise ScenarioError(
                        scenario=scenario.name,
                        reason=(
                            f"step {index} removes display '{step.display}'"
                            " before it is created"
                        ),
                    )
                station.remove_observer(display)

        report = DemoReport(
            scenario_name=scenario.name,
            registered_observers=len(station.observers),
            notifications=notifications,
            last_temperature=_last_temperature(displays=displays),
            last_humidity=_last_humidity(displays=displays),
        )
        self._observer.demo_completed(
            name=scenario.name,
            registered_observers=report.registered_observers,
            notifications=report.notifications,
        )
        return report

    def _display_for(self, kind: str, displays: dict[str, Display]) -> Display:
        if kind not in displays:
            displays[kind] = create_display(kind=kind, observer=self._display_observer)
        return displays[kind]


def _last_temperature(displays: dict[str, Display]) -> float | None:
    display = displays.get(TemperatureDisplay.kind)
    if isinstance(display, TemperatureDisplay):
        return display.current_temperature
    return None


def _last_humidity(displays: dict[str, Display]) -> float | None:
    display = displays.get(HumidityDisplay.kind)
    if isinstance(display, HumidityDisplay):
        return display.current_humidity
    return None
