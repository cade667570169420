"""Error types raised by display infrastructure."""

from weather_station.core.errors import WeatherStationError


class UnknownDisplayError(WeatherStationError):
    """Raised when a display is requested by a kind that has no implementation."""

    def __init__(self, kind: str, known: list[str]) -> None:
        self.kind = kind
        self.known = known
        super().__init__(
            f"Failed to create display: unknown display kind '{kind}'"
            f" (known: {', '.join(known)})"
        )
