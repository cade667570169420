"""Observer port for the display domain — defines events in domain language."""

from typing import Protocol


class DisplayObserver(Protocol):
    def display_created(self, display: str) -> None: ...

    def display_rendered(self, display: str, reading: str) -> None: ...

    def display_no_data(self, display: str) -> None: ...
