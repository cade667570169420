"""TemperatureDisplay — caches and renders the latest temperature reading."""

from weather_station.display.domain.observer import DisplayObserver
from weather_station.weather.domain.weather_data import WeatherData


class TemperatureDisplay:
    """Shows the most recent temperature in degrees Celsius.

    Satisfies the WeatherObserver protocol structurally.
    """

    kind = "temperature"

    def __init__(self, observer: DisplayObserver) -> None:
        self._observer = observer
        self._current_temperature = 0.0
        self._observer.display_created(display=self.kind)

    @property
    def current_temperature(self) -> float:
        return self._current_temperature

    def update(self, weather_data: WeatherData | None) -> None:
        if weather_data is None:
            self._observer.display_no_data(display=self.kind)
            return

        self._current_temperature = weather_data.temperature
        self._render()

    def _render(self) -> None:
        self._observer.display_rendered(
            display=self.kind,
            reading=f"{self._current_temperature:.1f} °C",
        )
