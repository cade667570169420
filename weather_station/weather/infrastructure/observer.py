"""Structlog implementation of the WeatherStationObserver port."""

import structlog


class StructlogWeatherStationObserver:
    """Delegates weather station domain events to structlog.

    Satisfies the WeatherStationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def station_created(self) -> None:
        self._log.info("station.created")

    def observer_registered(self, observer_name: str, total_observers: int) -> None:
        self._log.info(
            "station.observer_registered",
            observer=observer_name,
            total_observers=total_observers,
        )

    def observer_removed(self, observer_name: str, total_observers: int) -> None:
        self._log.info(
            "station.observer_removed",
            observer=observer_name,
            total_observers=total_observers,
        )

    def observer_not_registered(self, observer_name: str) -> None:
        self._log.warning("station.observer_not_registered", observer=observer_name)

    def measurements_changed(
        self,
        temperature: float,
        humidity: float,
        pressure: float,
        total_observers: int,
    ) -> None:
        self._log.info(
            "station.measurements_changed",
            temperature=temperature,
            humidity=humidity,
            pressure=pressure,
            total_observers=total_observers,
        )
