"""CLI entrypoint for weather-station — typer app with `demo` and `export-scenario`."""

import sys
from pathlib import Path

import structlog
import typer
import yaml

from weather_station.core.errors import WeatherStationError
from weather_station.demo.application.runner import ObserverDemo
from weather_station.demo.domain.report import DemoReport
from weather_station.demo.domain.scenario import DemoScenario
from weather_station.demo.domain.scenarios import (
    BASIC_SCENARIO,
    BUILTIN_SCENARIOS,
    FULL_SCENARIO,
)
from weather_station.demo.infrastructure.observer import (
    StructlogDemoObserver,
    StructlogScenarioObserver,
)
from weather_station.demo.infrastructure.yaml_loader import YamlScenarioLoader
from weather_station.display.domain.observer import DisplayObserver
from weather_station.display.infrastructure.composite_observer import (
    CompositeDisplayObserver,
)
from weather_station.display.infrastructure.console_observer import (
    RichDisplayObserver,
)
from weather_station.display.infrastructure.observer import StructlogDisplayObserver
from weather_station.weather.infrastructure.observer import (
    StructlogWeatherStationObserver,
)

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def _resolve_scenario(basic: bool, scenario_path: Path | None) -> DemoScenario:
    if scenario_path is not None:
        loader = YamlScenarioLoader(observer=StructlogScenarioObserver())
        return loader.load(path=scenario_path)
    if basic:
        return BASIC_SCENARIO
    return FULL_SCENARIO


# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_WHITE = "\033[97m"


def _rule(width: int = 48, color: str = _DIM) -> None:
    typer.echo(f"{color}{'─' * width}{_RESET}")


def _format_reading(value: float | None, unit: str) -> str:
    if value is None:
        return "n/a"
    return f"{value:.1f} {unit}"


def _print_summary(report: DemoReport) -> None:
    """Print the final statistics block to stdout."""
    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  weather-station  ·  {report.scenario_name}{_RESET}")
    _rule(color=_CYAN)

    rows: list[tuple[str, str]] = [
        ("Registered observers", str(report.registered_observers)),
        ("Notifications", str(report.notifications)),
        ("Last temperature", _format_reading(report.last_temperature, "°C")),
        ("Last humidity", _format_reading(report.last_humidity, "%")),
    ]
    label_w = max(len(label) for label, _ in rows)
    for label, value in rows:
        typer.echo(f"  {_DIM}{label:<{label_w}}{_RESET}  {_WHITE}{value}{_RESET}")
    _rule(color=_CYAN)


@app.command()
def demo(
    basic: bool = typer.Option(
        False,
        "--basic",
        help="Run the minimal single-display demo",
    ),
    scenario_path: Path | None = typer.Option(
        None,
        "--scenario",
        "-s",
        help="Path to a scenario YAML file",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Run the Observer pattern demo against a simulated weather station."""
    if basic and scenario_path is not None:
        typer.echo("Failed to start demo: --basic and --scenario are mutually exclusive")
        raise typer.Exit(code=1)

    _configure_structlog(log_format=log_format)

    try:
        scenario = _resolve_scenario(basic=basic, scenario_path=scenario_path)

        display_observers: list[DisplayObserver] = [StructlogDisplayObserver()]
        if log_format != "json":
            display_observers.append(RichDisplayObserver())

        runner = ObserverDemo(
            station_events=StructlogWeatherStationObserver(),
            display_observer=CompositeDisplayObserver(observers=display_observers),
            observer=StructlogDemoObserver(),
        )
        report = runner.run(scenario=scenario)

        _print_summary(report=report)

    except KeyboardInterrupt:
        typer.echo("Demo interrupted.")
        sys.exit(1)
    except WeatherStationError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


@app.command("export-scenario")
def export_scenario(
    name: str = typer.Argument(..., help="Name of a built-in scenario"),
) -> None:
    """Print a built-in scenario as YAML, ready to edit and pass to `demo --scenario`."""
    scenario = BUILTIN_SCENARIOS.get(name)
    if scenario is None:
        known = ", ".join(sorted(BUILTIN_SCENARIOS))
        typer.echo(
            f"Failed to export scenario: unknown built-in scenario '{name}'"
            f" (known: {known})"
        )
        raise typer.Exit(code=1)

    data = scenario.model_dump(mode="json", exclude_none=True)
    typer.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), nl=False)


if __name__ == "__main__":
    app()
