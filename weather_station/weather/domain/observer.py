"""Observer ports for the weather domain."""

from typing import Protocol

from weather_station.weather.domain.weather_data import WeatherData


class WeatherObserver(Protocol):
    """Listener that receives every measurement change pushed by a Subject.

    A None snapshot must be tolerated: implementations log it and return.
    """

    def update(self, weather_data: WeatherData | None) -> None: ...


class WeatherStationObserver(Protocol):
    """Domain events emitted by the weather station itself."""

    def station_created(self) -> None: ...

    def observer_registered(self, observer_name: str, total_observers: int) -> None: ...

    def observer_removed(self, observer_name: str, total_observers: int) -> None: ...

    def observer_not_registered(self, observer_name: str) -> None: ...

    def measurements_changed(
        self,
        temperature: float,
        humidity: float,
        pressure: float,
        total_observers: int,
    ) -> None: ...
