from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckboxItem:
    """One checkbox line of a text buffer.

    ``line_index`` is the zero-based row inside the snapshot the item was read from.
    """

    line_index: int
    text: str
    is_checked: bool
    indent_width: int


# Non-empty run of items with contiguous line indices.
Group = tuple[CheckboxItem, ...]


@dataclass(frozen=True)
class LinePatch:
    """Replacement of rows ``[start_line, end_line_exclusive)`` with ``text``."""

    start_line: int
    end_line_exclusive: int
    text: str

    @property
    def line_count(self) -> int:
        return self.text.count("\n")


@dataclass(frozen=True)
class PassResult:
    groups_found: int
    patches: tuple[LinePatch, ...] = ()

    @property
    def modified(self) -> bool:
        return bool(self.patches)
