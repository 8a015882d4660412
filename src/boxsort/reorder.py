from __future__ import annotations

import logging

from .buffer import TextBuffer
from .grouping import segment_groups
from .matcher import render_item
from .models import Group, LinePatch, PassResult

_logger = logging.getLogger(__name__)


def reorder_group(group: Group) -> Group:
    """Stable partition: unchecked items first, then checked, each in original order.

    Items are carried over untouched, indentation included.
    """
    unchecked = [item for item in group if not item.is_checked]
    checked = [item for item in group if item.is_checked]
    return tuple(unchecked + checked)


def group_changed(original: Group, reordered: Group) -> bool:
    # indent_width is not compared.
    if len(original) != len(reordered):
        return True
    for before, after in zip(original, reordered):
        if before.text != after.text or before.is_checked != after.is_checked:
            return True
    return False


def render_group(group: Group) -> str:
    return "\n".join(render_item(item) for item in group) + "\n"


def build_patch(group: Group, reordered: Group, line_offset: int = 0) -> LinePatch:
    start_line = group[0].line_index + line_offset
    end_line_inclusive = group[-1].line_index + line_offset
    return LinePatch(
        start_line=start_line,
        end_line_exclusive=end_line_inclusive + 1,
        text=render_group(reordered),
    )


def apply_patch(buffer: TextBuffer, group: Group, reordered: Group, line_offset: int = 0) -> LinePatch:
    patch = build_patch(group, reordered, line_offset)
    buffer.replace_line_range(patch.start_line, patch.end_line_exclusive, patch.text)
    return patch


def run_reorder_pass(buffer: TextBuffer) -> PassResult:
    """Reorder every checkbox group of ``buffer`` in place.

    Groups are computed from one snapshot and patched in order. ``line_offset``
    carries the row-count drift of earlier patches so later indices stay valid;
    reordering keeps row counts, so it stays at zero today.
    """
    lines = buffer.get_all_lines()
    groups = segment_groups(lines)

    patches: list[LinePatch] = []
    line_offset = 0
    for group in groups:
        reordered = reorder_group(group)
        if not group_changed(group, reordered):
            continue
        patch = apply_patch(buffer, group, reordered, line_offset)
        patches.append(patch)
        line_offset += patch.line_count - len(group)
        _logger.debug(
            f"Reordered group at lines {group[0].line_index}-{group[-1].line_index} ({len(group)} items)"
        )

    if patches:
        _logger.info(f"Reorder pass: {len(patches)} of {len(groups)} checkbox groups rewritten")
    else:
        _logger.debug(f"Reorder pass: {len(groups)} checkbox groups, nothing to rewrite")
    return PassResult(groups_found=len(groups), patches=tuple(patches))
