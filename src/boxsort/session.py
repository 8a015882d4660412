from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .buffer import TextBuffer
from .config import ReorderConfig, SettingsStore
from .models import PassResult
from .reorder import run_reorder_pass
from .trigger import DebouncedTrigger, Scheduler

_logger = logging.getLogger(__name__)


class ReorderSession:
    """Host-side wiring: toggle notifications in, debounced reorder passes out.

    ``active_buffer`` returns the buffer to act on, or None when no document is
    open; the pass is then skipped.
    """

    def __init__(
        self,
        *,
        store: SettingsStore,
        scheduler: Scheduler,
        active_buffer: Callable[[], TextBuffer | None],
    ) -> None:
        self.store = store
        self._active_buffer = active_buffer
        self.last_result: PassResult | None = None
        self.trigger = DebouncedTrigger(
            scheduler=scheduler,
            on_fire=self.reorder_now,
            settings=lambda: self.store.settings,
        )

    @property
    def settings(self) -> ReorderConfig:
        return self.store.settings

    def on_checkbox_toggled(self) -> None:
        self.trigger.notify_toggled()

    def reorder_now(self) -> PassResult | None:
        buffer = self._active_buffer()
        if buffer is None:
            _logger.debug("No active buffer; reorder pass skipped")
            return None
        self.last_result = run_reorder_pass(buffer)
        return self.last_result

    def update_settings(self, **changes: Any) -> ReorderConfig:
        return self.store.update(**changes)

    def close(self) -> None:
        self.trigger.cancel()
