"""Display registry — maps a display kind name to its implementation."""

from typing import TypeAlias

from weather_station.display.domain.humidity import HumidityDisplay
from weather_station.display.domain.observer import DisplayObserver
from weather_station.display.domain.temperature import TemperatureDisplay
from weather_station.display.infrastructure.errors import UnknownDisplayError

Display: TypeAlias = TemperatureDisplay | HumidityDisplay

_DISPLAYS: dict[str, type[TemperatureDisplay] | type[HumidityDisplay]] = {
    TemperatureDisplay.kind: TemperatureDisplay,
    HumidityDisplay.kind: HumidityDisplay,
}


def supported_kinds() -> list[str]:
    return sorted(_DISPLAYS)


def create_display(kind: str, observer: DisplayObserver) -> Display:
    """Return a new display of the given kind.

    Raises:
        UnknownDisplayError: if kind is not a known display kind.
    """
    display_class = _DISPLAYS.get(kind)
    if display_class is None:
        raise UnknownDisplayError(kind=kind, known=supported_kinds())
    return display_class(observer=observer)
