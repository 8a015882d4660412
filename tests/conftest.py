from __future__ import annotations

import pytest


class _Handle:
    def __init__(self, when: float, callback) -> None:  # noqa: ANN001
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Fake clock: timers fire only when the test advances time."""

    def __init__(self) -> None:
        self.now = 0.0
        self.handles: list[_Handle] = []

    def call_later(self, delay: float, callback) -> _Handle:  # noqa: ANN001
        handle = _Handle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    def live(self) -> list[_Handle]:
        return [h for h in self.handles if not h.cancelled]

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for handle in list(self.handles):
            if not handle.cancelled and handle.when <= self.now:
                handle.cancelled = True
                handle.callback()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()
