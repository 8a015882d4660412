"""boxsort - keep Markdown checkbox groups ordered: open items first, done items last."""

from .buffer import FileBuffer, LineBuffer, TextBuffer
from .config import ReorderConfig, SettingsStore, load_config
from .reorder import run_reorder_pass
from .session import ReorderSession
from .trigger import DebouncedTrigger

__all__ = [
    "DebouncedTrigger",
    "FileBuffer",
    "LineBuffer",
    "ReorderConfig",
    "ReorderSession",
    "SettingsStore",
    "TextBuffer",
    "load_config",
    "run_reorder_pass",
]
