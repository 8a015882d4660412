from __future__ import annotations

import re

from .models import CheckboxItem

# Lowercase "x" only; "- [X] foo" is plain text.
_CHECKBOX_RE = re.compile(r"^(\s*)-\s*\[([ x])\]\s*(.*)$")


def match_line(line: str, line_index: int = 0) -> CheckboxItem | None:
    """Classify one line; return the checkbox item it encodes or None for a boundary line."""
    m = _CHECKBOX_RE.match(line)
    if m is None:
        return None
    return CheckboxItem(
        line_index=line_index,
        text=m.group(3),
        is_checked=m.group(2) == "x",
        indent_width=len(m.group(1)),
    )


def render_item(item: CheckboxItem) -> str:
    mark = "x" if item.is_checked else " "
    return f"{' ' * item.indent_width}- [{mark}] {item.text}"
