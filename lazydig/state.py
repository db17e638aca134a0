"""Session state shared by the screen areas and key handlers.

One ``Session`` is created at startup and handed explicitly to every
component that needs it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .records import Record

MODE_NORMAL = "normal"
MODE_FIND = "find"

PANE_COMMITS = "commits"
PANE_DIFF = "diff"


@dataclass
class Session:
    repo_dir: Path
    records: list[Record]
    mode: str = MODE_NORMAL
    active_pane: str = PANE_COMMITS
    find_buffer: list[str] = field(default_factory=list)
    find_message: str = ""

    @property
    def find_query(self) -> str:
        return "".join(self.find_buffer)

    def enter_find_mode(self) -> None:
        self.mode = MODE_FIND
        self.find_message = ""

    def leave_find_mode(self) -> None:
        """Drop the query and return to normal mode."""
        self.find_buffer.clear()
        self.find_message = ""
        self.mode = MODE_NORMAL

    def append_find_char(self, ch: str) -> None:
        self.find_buffer.append(ch)
        self.find_message = ""

    def delete_find_char(self) -> None:
        if self.find_buffer:
            self.find_buffer.pop()
        self.find_message = ""
