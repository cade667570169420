"""Subject Protocol — structural interface for anything observers can subscribe to."""

from typing import Protocol

from weather_station.weather.domain.observer import WeatherObserver


class Subject(Protocol):
    def register_observer(self, observer: WeatherObserver) -> None: ...

    def remove_observer(self, observer: WeatherObserver) -> None: ...

    def notify_observers(self) -> None: ...
