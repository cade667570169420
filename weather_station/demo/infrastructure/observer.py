"""Structlog implementations of the DemoObserver and ScenarioObserver ports."""

import structlog


class StructlogDemoObserver:
    """Delegates demo domain events to structlog.

    Satisfies the DemoObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def demo_started(self, name: str, total_steps: int) -> None:
        self._log.info("demo.started", scenario=name, total_steps=total_steps)

    def demo_step(self, index: int, action: str, label: str | None) -> None:
        if label is None:
            self._log.info("demo.step", index=index, action=action)
        else:
            self._log.info("demo.step", index=index, action=action, label=label)

    def demo_completed(
        self, name: str, registered_observers: int, notifications: int
    ) -> None:
        self._log.info(
            "demo.completed",
            scenario=name,
            registered_observers=registered_observers,
            notifications=notifications,
        )


class StructlogScenarioObserver:
    """Delegates scenario loading events to structlog.

    Satisfies the ScenarioObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scenario_loaded(self, name: str, path: str, total_steps: int) -> None:
        self._log.info(
            "scenario.loaded", scenario=name, path=path, total_steps=total_steps
        )

    def scenario_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("scenario.loading_failed", path=path, reason=reason)
