"""HumidityDisplay — caches and renders the latest relative humidity reading."""

from weather_station.display.domain.observer import DisplayObserver
from weather_station.weather.domain.weather_data import WeatherData


class HumidityDisplay:
    """Shows the most recent relative humidity as a percentage.

    Satisfies the WeatherObserver protocol structurally.
    """

    kind = "humidity"

    def __init__(self, observer: DisplayObserver) -> None:
        self._observer = observer
        self._current_humidity = 0.0
        self._observer.display_created(display=self.kind)

    @property
    def current_humidity(self) -> float:
        return self._current_humidity

    def update(self, weather_data: WeatherData | None) -> None:
        if weather_data is None:
            self._observer.display_no_data(display=self.kind)
            return

        self._current_humidity = weather_data.humidity
        self._render()

    def _render(self) -> None:
        self._observer.display_rendered(
            display=self.kind,
            reading=f"{self._current_humidity:.1f} %",
        )
