"""Tests for RichDisplayObserver."""

import io

from rich.console import Console

from weather_station.display.infrastructure.console_observer import (
    RichDisplayObserver,
)


def _make_observer() -> tuple[RichDisplayObserver, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, color_system=None, width=80)
    return RichDisplayObserver(console=console), buffer


class TestRichDisplayObserver:
    """Readings are printed one per line; creation is silent."""

    def test_rendered_reading_is_printed_with_label(self) -> None:
        observer, buffer = _make_observer()

        observer.display_rendered(display="temperature", reading="25.5 °C")

        output = buffer.getvalue()
        assert "Temperature" in output
        assert "25.5 °C" in output

    def test_each_reading_on_its_own_line(self) -> None:
        observer, buffer = _make_observer()

        observer.display_rendered(display="temperature", reading="25.5 °C")
        observer.display_rendered(display="humidity", reading="65.0 %")

        lines = buffer.getvalue().splitlines()
        assert len(lines) == 2
        assert "65.0 %" in lines[1]

    def test_unknown_display_kind_is_still_printed(self) -> None:
        observer, buffer = _make_observer()

        observer.display_rendered(display="wind", reading="12.0 km/h")

        assert "12.0 km/h" in buffer.getvalue()

    def test_no_data_is_printed(self) -> None:
        observer, buffer = _make_observer()

        observer.display_no_data(display="humidity")

        assert "no data" in buffer.getvalue()

    def test_display_created_prints_nothing(self) -> None:
        observer, buffer = _make_observer()

        observer.display_created(display="temperature")

        assert buffer.getvalue() == ""

    def test_markup_in_display_name_is_printed_literally(self) -> None:
        observer, buffer = _make_observer()

        observer.display_rendered(display="[bold]wind", reading="12.0 [km/h]")

        output = buffer.getvalue()
        assert "[bold]wind" in output.lower()
        assert "12.0 [km/h]" in output

    def test_markup_in_no_data_display_name_is_printed_literally(self) -> None:
        observer, buffer = _make_observer()

        observer.display_no_data(display="[red]gust")

        assert "[red]gust" in buffer.getvalue().lower()
