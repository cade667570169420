"""CompositeDisplayObserver — fans out all events to a list of observers."""

from weather_station.display.domain.observer import DisplayObserver


class CompositeDisplayObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from DisplayObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[DisplayObserver]) -> None:
        self._observers = observers

    def display_created(self, display: str) -> None:
        for obs in self._observers:
            obs.display_created(display=display)

    def display_rendered(self, display: str, reading: str) -> None:
        for obs in self._observers:
            obs.display_rendered(display=display, reading=reading)

    def display_no_data(self, display: str) -> None:
        for obs in self._observers:
            obs.display_no_data(display=display)
