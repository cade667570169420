"""WeatherStation — the Subject that pushes measurements to its observers."""

from weather_station.weather.domain.observer import (
    WeatherObserver,
    WeatherStationObserver,
)
from weather_station.weather.domain.weather_data import WeatherData


def _name_of(observer: WeatherObserver) -> str:
    return type(observer).__name__


class WeatherStation:
    """Holds the latest measurements and an ordered list of observers.

    Observers are notified synchronously in registration order. Registering the
    same observer twice means it is notified twice per change; removal drops
    only the first matching entry.

    ``events`` receives the station's own domain events (used for logging) and
    is unrelated to the observers that subscribe to measurements.

    Satisfies the Subject protocol structurally.
    """

    def __init__(self, events: WeatherStationObserver) -> None:
        self._events = events
        self._observers: list[WeatherObserver] = []
        self._temperature = 0.0
        self._humidity = 0.0
        self._pressure = 0.0
        self._events.station_created()

    @property
    def observers(self) -> tuple[WeatherObserver, ...]:
        return tuple(self._observers)

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def humidity(self) -> float:
        return self._humidity

    @property
    def pressure(self) -> float:
        return self._pressure

    @property
    def weather_data(self) -> WeatherData:
        return WeatherData(
            temperature=self._temperature,
            humidity=self._humidity,
            pressure=self._pressure,
        )

    def register_observer(self, observer: WeatherObserver) -> None:
        self._observers.append(observer)
        self._events.observer_registered(
            observer_name=_name_of(observer),
            total_observers=len(self._observers),
        )

    def remove_observer(self, observer: WeatherObserver) -> None:
        """Remove the first registration of observer; unknown observers are a no-op."""
        for index, registered in enumerate(self._observers):
            if registered is observer:
                del self._observers[index]
                self._events.observer_removed(
                    observer_name=_name_of(observer),
                    total_observers=len(self._observers),
                )
                return

        self._events.observer_not_registered(observer_name=_name_of(observer))

    def notify_observers(self) -> None:
        """Push one snapshot to every observer registered when the call began."""
        snapshot = self.weather_data
        for observer in list(self._observers):
            observer.update(snapshot)

    def set_measurements(
        self,
        temperature: float,
        humidity: float,
        pressure: float | None = None,
    ) -> None:
        """Store new readings and notify observers.

        When pressure is omitted the previously stored pressure is kept.
        """
        self._temperature = temperature
        self._humidity = humidity
        if pressure is not None:
            self._pressure = pressure
        self.measurements_changed()

    def measurements_changed(self) -> None:
        self._events.measurements_changed(
            temperature=self._temperature,
            humidity=self._humidity,
            pressure=self._pressure,
            total_observers=len(self._observers),
        )
        self.notify_observers()
