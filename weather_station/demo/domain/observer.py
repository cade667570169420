"""Observer ports for the demo domain — defines events in domain language."""

from typing import Protocol


class DemoObserver(Protocol):
    def demo_started(self, name: str, total_steps: int) -> None: ...

    def demo_step(self, index: int, action: str, label: str | None) -> None: ...

    def demo_completed(
        self, name: str, registered_observers: int, notifications: int
    ) -> None: ...


class ScenarioObserver(Protocol):
    def scenario_loaded(self, name: str, path: str, total_steps: int) -> None: ...

    def scenario_loading_failed(self, path: str, reason: str) -> None: ...
