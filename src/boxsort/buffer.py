from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

_logger = logging.getLogger(__name__)


class TextBuffer(Protocol):
    """Line-addressed text surface the reorder pass reads from and writes to."""

    def get_all_lines(self) -> list[str]: ...

    def replace_line_range(self, start_line: int, end_line_exclusive: int, new_text: str) -> None: ...


def _detect_newline(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


class LineBuffer:
    """In-memory buffer holding text as a list of lines split on ``\\n``.

    A trailing newline shows up as a final empty line, the same way an editor
    reports it. CRLF text is held without the carriage returns and gets them
    back from ``to_text``.
    """

    def __init__(self, lines: list[str] | None = None, newline: str = "\n") -> None:
        self._lines: list[str] = list(lines) if lines else [""]
        self.newline = newline
        self.writes = 0

    @classmethod
    def from_text(cls, text: str) -> LineBuffer:
        newline = _detect_newline(text)
        return cls(text.split(newline), newline=newline)

    def to_text(self) -> str:
        return self.newline.join(self._lines)

    def get_all_lines(self) -> list[str]:
        return list(self._lines)

    def replace_line_range(self, start_line: int, end_line_exclusive: int, new_text: str) -> None:
        if start_line < 0 or end_line_exclusive < start_line:
            raise ValueError(f"Invalid line range: [{start_line}, {end_line_exclusive})")
        new_lines = new_text.split("\n")
        # Text ending in a terminator replaces whole rows: drop the empty tail.
        if new_text.endswith("\n"):
            new_lines.pop()
        self._lines[start_line:end_line_exclusive] = new_lines
        if not self._lines:
            self._lines = [""]
        self.writes += 1


class FileBuffer(LineBuffer):
    """LineBuffer loaded from a UTF-8 file; ``save`` writes it back."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        # Bytes, so line endings reach _detect_newline untranslated.
        text = self.path.read_bytes().decode("utf-8")
        newline = _detect_newline(text)
        super().__init__(text.split(newline), newline=newline)

    def save(self, path: str | Path | None = None) -> Path:
        out_path = Path(path) if path is not None else self.path
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(self.to_text().encode("utf-8"))
        _logger.debug(f"Buffer written: {out_path}")
        return out_path
