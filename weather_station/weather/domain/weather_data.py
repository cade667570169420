"""WeatherData value object — one snapshot of the station's measurements."""

from pydantic import BaseModel


class WeatherData(BaseModel, frozen=True):
    """Immutable snapshot pushed to every observer on each measurement change."""

    temperature: float
    humidity: float
    pressure: float
