"""DemoReport — final statistics of a completed demo run."""

from pydantic import BaseModel, Field


class DemoReport(BaseModel, frozen=True):
    """Immutable summary returned when a scenario finishes.

    ``last_temperature`` and ``last_humidity`` are the values cached by the
    corresponding display, or None when the scenario never created it. A
    removed display keeps the last value it received.
    """

    scenario_name: str = Field(min_length=1)
    registered_observers: int = Field(ge=0)
    notifications: int = Field(ge=0)
    last_temperature: float | None = None
    last_humidity: float | None = None
