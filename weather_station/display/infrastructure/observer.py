"""Structlog implementation of the DisplayObserver port."""

import structlog


class StructlogDisplayObserver:
    """Delegates display domain events to structlog.

    Satisfies the DisplayObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def display_created(self, display: str) -> None:
        self._log.debug("display.created", display=display)

    def display_rendered(self, display: str, reading: str) -> None:
        self._log.info("display.rendered", display=display, reading=reading)

    def display_no_data(self, display: str) -> None:
        self._log.warning(
            "display.no_data",
            display=display,
            message="Received null weather data; keeping previous reading",
        )
