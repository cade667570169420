"""Built-in demo scenarios."""

from weather_station.demo.domain.scenario import (
    DemoScenario,
    MeasureStep,
    RemoveStep,
)

FULL_SCENARIO = DemoScenario(
    name="full",
    displays=["temperature", "humidity"],
    steps=[
        MeasureStep(
            action="measure",
            label="First weather update",
            temperature=25.5,
            humidity=65.0,
            pressure=1013.2,
        ),
        MeasureStep(
            action="measure",
            label="Second weather update",
            temperature=22.1,
            humidity=78.5,
            pressure=1009.8,
        ),
        MeasureStep(
            action="measure",
            label="Third weather update (pressure unchanged)",
            temperature=28.7,
            humidity=45.2,
        ),
        RemoveStep(
            action="remove",
            label="Removing temperature display",
            display="temperature",
        ),
        MeasureStep(
            action="measure",
            label="Fourth weather update (humidity only)",
            temperature=18.3,
            humidity=82.1,
            pressure=1015.6,
        ),
    ],
)

BASIC_SCENARIO = DemoScenario(
    name="basic",
    displays=["temperature"],
    steps=[
        MeasureStep(action="measure", temperature=20.0, humidity=50.0),
    ],
)

BUILTIN_SCENARIOS: dict[str, DemoScenario] = {
    FULL_SCENARIO.name: FULL_SCENARIO,
    BASIC_SCENARIO.name: BASIC_SCENARIO,
}
