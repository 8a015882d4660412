from __future__ import annotations

from collections.abc import Iterable

from .matcher import match_line
from .models import CheckboxItem, Group


def segment_groups(lines: Iterable[str]) -> list[Group]:
    """Split lines into maximal contiguous runs of checkbox lines.

    Non-checkbox lines close the current run and are not kept. Groups come out in
    the order their first line appears.
    """
    groups: list[Group] = []
    current: list[CheckboxItem] = []

    for idx, line in enumerate(lines):
        item = match_line(line, idx)
        if item is not None:
            current.append(item)
            continue
        if current:
            groups.append(tuple(current))
            current = []

    if current:
        groups.append(tuple(current))
    return groups
