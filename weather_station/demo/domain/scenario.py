"""Demo scenario models — discriminated union of steps on the `action` field."""

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, Field

DisplayKind: TypeAlias = Literal["temperature", "humidity"]


class MeasureStep(BaseModel, frozen=True):
    """Push a new set of readings; omitting pressure keeps the previous value."""

    action: Literal["measure"]
    label: str | None = None
    temperature: float
    humidity: float
    pressure: float | None = None


class RegisterStep(BaseModel, frozen=True):
    """Subscribe a display to the station, creating it on first use."""

    action: Literal["register"]
    label: str | None = None
    display: DisplayKind


class RemoveStep(BaseModel, frozen=True):
    """Unsubscribe a display that was created earlier in the scenario."""

    action: Literal["remove"]
    label: str | None = None
    display: DisplayKind


Step: TypeAlias = Annotated[
    MeasureStep | RegisterStep | RemoveStep,
    Field(discriminator="action"),
]


class DemoScenario(BaseModel, frozen=True):
    """An ordered script for the demo driver.

    ``displays`` are created and registered in order before the first step runs.
    """

    name: str = Field(min_length=1)
    displays: list[DisplayKind] = Field(min_length=1)
    steps: list[Step] = Field(min_length=1)
